from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from concept_booster.core.errors import MalformedResponse
from concept_booster.schemas.tutor import LanguageMode, RequestParams
from concept_booster.services.gateway import GatewayInvoker
from concept_booster.services.prompts import Prompt

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class ResponseContract(Generic[ResultT]):
    """Describes one request type: how to prompt, how to parse, how to degrade."""

    name: str
    build_prompt: Callable[[RequestParams], Prompt]
    parse: Callable[[str], ResultT]
    fallback: Callable[[str, LanguageMode], ResultT] | None = None
    failure_message: str | None = None


class ContractPipeline:
    def __init__(self, gateway: GatewayInvoker) -> None:
        self.gateway = gateway

    async def run(self, contract: ResponseContract[ResultT], params: RequestParams) -> ResultT:
        prompt = contract.build_prompt(params)
        raw = await self.gateway.complete(prompt)
        try:
            return contract.parse(raw)
        except MalformedResponse as exc:
            if contract.fallback is None:
                logger.warning("%s: unparseable AI response, no fallback", contract.name)
                raise MalformedResponse(contract.failure_message) from exc
            logger.warning("%s: unparseable AI response, using fallback", contract.name)
            return contract.fallback(raw, params.language_mode)
