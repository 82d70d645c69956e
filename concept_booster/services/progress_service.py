from __future__ import annotations

from concept_booster.core.config import settings
from concept_booster.core.store import ProgressStore, store
from concept_booster.schemas.progress import StudentProgress
from concept_booster.utils.rounding import round_half_up


def mastery_level(progress: StudentProgress) -> int:
    return min(100, round_half_up((len(progress.topics_searched) * 10 + progress.correct_answers * 5) / 1.5))


class ProgressService:
    def __init__(self, backend: ProgressStore | None = None) -> None:
        self.store = backend or store

    def _key(self, student_id: str) -> str:
        return f"{settings.progress_key_prefix}{student_id}"

    async def load(self, student_id: str) -> StudentProgress:
        raw = await self.store.get(self._key(student_id))
        if not raw:
            return StudentProgress()
        return StudentProgress.model_validate(raw)

    async def save(self, student_id: str, progress: StudentProgress) -> StudentProgress:
        final = progress.model_copy(update={"mastery_level": mastery_level(progress)})
        await self.store.set(self._key(student_id), final.model_dump(by_alias=True))
        return final

    async def record_doubt(self, student_id: str, question: str) -> StudentProgress:
        progress = await self.load(student_id)
        topics = list(progress.topics_searched)
        cleaned = question.strip()
        if cleaned and cleaned not in topics:
            topics.append(cleaned)
        return await self.save(
            student_id,
            progress.model_copy(
                update={"topics_searched": topics, "questions_asked": progress.questions_asked + 1}
            ),
        )

    async def record_topic(self, student_id: str, topic: str) -> StudentProgress:
        progress = await self.load(student_id)
        topics = list(progress.topics_searched)
        cleaned = topic.strip()
        if cleaned and cleaned not in topics:
            topics.append(cleaned)
        return await self.save(student_id, progress.model_copy(update={"topics_searched": topics}))

    async def record_answer(self, student_id: str, correct: bool) -> StudentProgress:
        progress = await self.load(student_id)
        update = (
            {"correct_answers": progress.correct_answers + 1}
            if correct
            else {"wrong_answers": progress.wrong_answers + 1}
        )
        return await self.save(student_id, progress.model_copy(update=update))


progress_service = ProgressService()
