from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from concept_booster.client.api import TutorApiClient
from concept_booster.core.errors import InvalidRequest, QuotaExhausted, RateLimited, TooManyRequests, TutorError
from concept_booster.core.messages import toast
from concept_booster.schemas.tutor import LanguageMode, QuizQuestion, QuizSet
from concept_booster.services.progress_service import ProgressService
from concept_booster.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


class FeatureAdapter(Generic[ResultT]):
    """Per-feature request state: loading guard, latest result, toast message.

    Every submission takes a ticket from a monotonically increasing sequence.
    A completed call only touches state if its ticket is still the latest, so
    a late reply never overwrites a newer request or a reset.
    """

    def __init__(
        self,
        request: Callable[..., Awaitable[ResultT]],
        language: LanguageMode = LanguageMode.ENGLISH,
        on_success: Callable[[str, ResultT], Awaitable[None]] | None = None,
        failure_toast: str = "generic",
    ) -> None:
        self._request = request
        self.language = language
        self._on_success = on_success
        self.failure_toast = failure_toast

        self.input_text = ""
        self.loading = False
        self.result: ResultT | None = None
        self.error_message: str | None = None
        self._sequence = 0

    @property
    def sequence(self) -> int:
        return self._sequence

    def _toast_for(self, exc: TutorError) -> str:
        if isinstance(exc, TooManyRequests):
            return toast("too_many_requests", self.language)
        if isinstance(exc, InvalidRequest):
            return toast("invalid_request", self.language)
        if isinstance(exc, RateLimited):
            return toast("rate_limited", self.language)
        if isinstance(exc, QuotaExhausted):
            return toast("quota_exhausted", self.language)
        return toast(self.failure_toast, self.language)

    async def submit(self, text: str, **extra) -> bool:
        if self.loading:
            return False
        if not text.strip() and not any(extra.values()):
            return False

        self._sequence += 1
        ticket = self._sequence
        self.input_text = text
        self.loading = True
        self.error_message = None

        try:
            result = await self._request(text, **extra)
        except TutorError as exc:
            if ticket == self._sequence:
                self.error_message = self._toast_for(exc)
            else:
                logger.debug("Discarding stale failure for ticket %s", ticket)
            return False
        finally:
            if ticket == self._sequence:
                self.loading = False

        if ticket != self._sequence:
            logger.debug("Discarding stale result for ticket %s", ticket)
            return False

        self.result = result
        if self._on_success:
            await self._on_success(text, result)
        return True

    def reset(self) -> None:
        self._sequence += 1
        self.input_text = ""
        self.loading = False
        self.result = None
        self.error_message = None


def doubt_adapter(
    api: TutorApiClient,
    progress: ProgressService,
    student_id: str,
    language: LanguageMode = LanguageMode.ENGLISH,
) -> FeatureAdapter:
    async def request(text: str, image_description: str | None = None):
        return await api.ask_doubt(text, language, image_description)

    async def record(text: str, _result) -> None:
        await progress.record_doubt(student_id, text)

    return FeatureAdapter(request, language=language, on_success=record)


def lesson_adapter(
    api: TutorApiClient,
    progress: ProgressService,
    student_id: str,
    language: LanguageMode = LanguageMode.ENGLISH,
) -> FeatureAdapter:
    async def request(text: str):
        return await api.teach_topic(text, language)

    async def record(text: str, _result) -> None:
        await progress.record_topic(student_id, text)

    return FeatureAdapter(request, language=language, on_success=record)


def quiz_adapter(
    api: TutorApiClient,
    language: LanguageMode = LanguageMode.ENGLISH,
    count: int = 5,
) -> FeatureAdapter:
    async def request(text: str):
        return await api.generate_quiz(text, count, language)

    return FeatureAdapter(request, language=language, failure_toast="quiz_failed")


class QuizSession:
    """Walks a delivered quiz. Scoring uses the delivered length, not the requested count."""

    def __init__(self, quiz: QuizSet, progress: ProgressService, student_id: str) -> None:
        self.questions = list(quiz.questions)
        self.progress = progress
        self.student_id = student_id
        self.current = 0
        self.selected: int | None = None
        self.correct = 0
        self.wrong = 0
        self.finished = not self.questions

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def question(self) -> QuizQuestion | None:
        if self.finished:
            return None
        return self.questions[self.current]

    async def answer(self, index: int) -> bool | None:
        if self.finished or self.selected is not None:
            return None
        self.selected = index
        is_correct = index == self.questions[self.current].correct_index
        if is_correct:
            self.correct += 1
        else:
            self.wrong += 1
        await self.progress.record_answer(self.student_id, is_correct)
        return is_correct

    def next(self) -> None:
        if self.current < self.total - 1:
            self.current += 1
            self.selected = None
        else:
            self.finished = True

    def restart(self) -> None:
        self.current = 0
        self.selected = None
        self.correct = 0
        self.wrong = 0
        self.finished = not self.questions

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return round_half_up(self.correct / self.total * 100)
