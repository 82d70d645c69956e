from __future__ import annotations

from fastapi import APIRouter

from concept_booster.schemas.tutor import DoubtRequest, QuizRequest, QuizSet, TopicLesson, TopicRequest, TutorResponse
from concept_booster.services.tutor_service import tutor_service

router = APIRouter(tags=["tutor"])


@router.post("/doubt-answer", response_model=TutorResponse)
async def doubt_answer(payload: DoubtRequest):
    return await tutor_service.ask_doubt(payload)


@router.post("/topic-lesson", response_model=TopicLesson)
async def topic_lesson(payload: TopicRequest):
    return await tutor_service.teach_topic(payload)


@router.post("/quiz-generate", response_model=QuizSet)
async def quiz_generate(payload: QuizRequest):
    return await tutor_service.generate_quiz(payload)
