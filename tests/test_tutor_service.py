"""
Tests for the contract pipeline via TutorService: degrade for doubts/lessons, fail for quizzes.
"""

import asyncio
import json

import pytest
from conftest import FakeGateway

from concept_booster.core.errors import MalformedResponse, RateLimited
from concept_booster.schemas.tutor import DoubtRequest, LanguageMode, QuizRequest, TopicRequest
from concept_booster.services.tutor_service import TutorService

DOUBT = {"explanation": "...", "steps": ["a", "b"], "example": "e", "tip": "t"}


def _service(fake: FakeGateway) -> TutorService:
    return TutorService(fake.invoker())


def test_fenced_doubt_answer_is_returned_unchanged():
    fake = FakeGateway(content="```json\n" + json.dumps(DOUBT) + "\n```")
    result = asyncio.run(_service(fake).ask_doubt(DoubtRequest(question="What is fraction?", language="english")))
    assert result.model_dump() == DOUBT
    assert fake.user_message == "What is fraction?"


def test_plain_text_doubt_degrades_to_fallback():
    fake = FakeGateway(content="Sorry, I cannot help")
    result = asyncio.run(_service(fake).ask_doubt(DoubtRequest(question="What is fraction?")))
    assert result.explanation == "Sorry, I cannot help"
    assert len(result.steps) == 1


def test_plain_text_lesson_degrades_to_fallback():
    fake = FakeGateway(content="Sorry, I cannot help")
    result = asyncio.run(_service(fake).teach_topic(TopicRequest(topic="Fractions", language="hinglish")))
    assert result.definition == "Sorry, I cannot help"
    assert result.practice[0].question == "Tumne kya seekha?"


def test_plain_text_quiz_fails_loudly():
    fake = FakeGateway(content="Sorry, I cannot help")
    with pytest.raises(MalformedResponse) as excinfo:
        asyncio.run(_service(fake).generate_quiz(QuizRequest(topic="Fractions")))
    assert excinfo.value.message == "Could not generate questions"


def test_quiz_under_delivery_is_tolerated():
    questions = [
        {"q": f"Q{i}", "options": ["a", "b", "c", "d"], "correct": i % 4, "explanation": "because"}
        for i in range(4)
    ]
    fake = FakeGateway(content=json.dumps(questions))
    quiz = asyncio.run(_service(fake).generate_quiz(QuizRequest(topic="Fractions", count=5)))
    assert len(quiz.questions) == 4
    assert "Generate exactly 5 multiple choice questions" in fake.system_prompt


def test_gateway_failures_are_not_absorbed_by_fallback():
    fake = FakeGateway(status_code=429)
    with pytest.raises(RateLimited):
        asyncio.run(_service(fake).ask_doubt(DoubtRequest(question="What is fraction?")))
    assert len(fake.requests) == 1


def test_language_reaches_the_prompt():
    fake = FakeGateway(content=json.dumps(DOUBT))
    asyncio.run(_service(fake).ask_doubt(DoubtRequest(question="भिन्न क्या है?", language=LanguageMode.HINDI)))
    assert "Devanagari" in fake.system_prompt
