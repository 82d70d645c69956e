from __future__ import annotations

from concept_booster.core.config import settings
from concept_booster.schemas.tutor import (
    DoubtRequest,
    QuizRequest,
    QuizSet,
    RequestParams,
    TopicLesson,
    TopicRequest,
    TutorResponse,
)
from concept_booster.services.contract import ContractPipeline, ResponseContract
from concept_booster.services.extraction import parse_quiz, parse_shape
from concept_booster.services.fallbacks import doubt_fallback, lesson_fallback
from concept_booster.services.gateway import GatewayInvoker, gateway
from concept_booster.services.prompts import build_doubt_prompt, build_lesson_prompt, build_quiz_prompt

DOUBT_CONTRACT: ResponseContract[TutorResponse] = ResponseContract(
    name="ask-doubt",
    build_prompt=build_doubt_prompt,
    parse=lambda raw: parse_shape(raw, TutorResponse),
    fallback=doubt_fallback,
)

LESSON_CONTRACT: ResponseContract[TopicLesson] = ResponseContract(
    name="learn-topic",
    build_prompt=build_lesson_prompt,
    parse=lambda raw: parse_shape(raw, TopicLesson),
    fallback=lesson_fallback,
)

QUIZ_CONTRACT: ResponseContract[QuizSet] = ResponseContract(
    name="generate-questions",
    build_prompt=build_quiz_prompt,
    parse=parse_quiz,
    failure_message="Could not generate questions",
)


class TutorService:
    def __init__(self, invoker: GatewayInvoker | None = None) -> None:
        self.pipeline = ContractPipeline(invoker or gateway)

    async def ask_doubt(self, payload: DoubtRequest) -> TutorResponse:
        params = RequestParams(
            language_mode=payload.language,
            topic_or_question=payload.question,
            image_description=payload.image_description,
        )
        return await self.pipeline.run(DOUBT_CONTRACT, params)

    async def teach_topic(self, payload: TopicRequest) -> TopicLesson:
        params = RequestParams(language_mode=payload.language, topic_or_question=payload.topic)
        return await self.pipeline.run(LESSON_CONTRACT, params)

    async def generate_quiz(self, payload: QuizRequest) -> QuizSet:
        params = RequestParams(
            language_mode=payload.language,
            topic_or_question=payload.topic,
            count=payload.count or settings.default_quiz_count,
        )
        return await self.pipeline.run(QUIZ_CONTRACT, params)


tutor_service = TutorService()
