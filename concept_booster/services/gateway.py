from __future__ import annotations

import logging
import time

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from concept_booster.core.config import settings
from concept_booster.core.errors import ConfigurationError, GatewayError, QuotaExhausted, RateLimited
from concept_booster.services.prompts import Prompt

logger = logging.getLogger(__name__)


class GatewayInvoker:
    """Single-shot chat completion against the configured AI gateway.

    Automatic retries are disabled on the SDK client: a 429 or a dropped
    connection is reported to the caller on the first attempt.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.ai_gateway_api_key
        self.base_url = base_url or settings.ai_gateway_base_url
        self.model = model or settings.ai_model
        self._http_client = http_client
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        if not self.api_key:
            raise ConfigurationError()
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                max_retries=0,
                timeout=settings.ai_timeout_seconds,
                http_client=self._http_client,
            )
        return self._client

    async def complete(self, prompt: Prompt) -> str:
        client = self._get_client()
        start = time.perf_counter()
        try:
            response = await client.chat.completions.create(model=self.model, messages=prompt.messages())
        except APIStatusError as exc:
            if exc.status_code == 429:
                raise RateLimited() from exc
            if exc.status_code == 402:
                raise QuotaExhausted() from exc
            logger.error("AI gateway error: %s %s", exc.status_code, exc.response.text)
            raise GatewayError() from exc
        except APIConnectionError as exc:
            logger.error("AI gateway unreachable: %s", exc)
            raise GatewayError() from exc

        elapsed = int((time.perf_counter() - start) * 1000)
        logger.info("AI gateway response in %sms", elapsed)
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


gateway = GatewayInvoker()
