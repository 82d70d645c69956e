from __future__ import annotations

import httpx

from concept_booster.core.errors import (
    GatewayError,
    InvalidRequest,
    QuotaExhausted,
    RateLimited,
    TooManyRequests,
    TutorError,
)
from concept_booster.schemas.tutor import LanguageMode, QuizSet, TopicLesson, TutorResponse

_STATUS_ERRORS: dict[int, type[TutorError]] = {
    429: RateLimited,
    402: QuotaExhausted,
    422: InvalidRequest,
}


class TutorApiClient:
    """Async HTTP client for the three tutor endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000/api/v1",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 60,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, body: dict) -> dict:
        try:
            response = await self._client.post(f"{self.base_url}{path}", json=body)
        except httpx.HTTPError as exc:
            raise GatewayError(str(exc) or None) from exc

        if response.is_success:
            return response.json()

        try:
            message = response.json().get("error")
        except ValueError:
            message = None
        error_cls = _STATUS_ERRORS.get(response.status_code, GatewayError)
        if response.status_code == TooManyRequests.status_code and message == TooManyRequests.default_message:
            error_cls = TooManyRequests
        raise error_cls(message)

    async def ask_doubt(
        self,
        question: str,
        language: LanguageMode = LanguageMode.ENGLISH,
        image_description: str | None = None,
    ) -> TutorResponse:
        body = {"question": question, "language": language.value}
        if image_description:
            body["imageDescription"] = image_description
        return TutorResponse.model_validate(await self._post("/doubt-answer", body))

    async def teach_topic(self, topic: str, language: LanguageMode = LanguageMode.ENGLISH) -> TopicLesson:
        payload = await self._post("/topic-lesson", {"topic": topic, "language": language.value})
        return TopicLesson.model_validate(payload)

    async def generate_quiz(
        self,
        topic: str,
        count: int = 5,
        language: LanguageMode = LanguageMode.ENGLISH,
    ) -> QuizSet:
        payload = await self._post("/quiz-generate", {"topic": topic, "count": count, "language": language.value})
        return QuizSet.model_validate(payload)
