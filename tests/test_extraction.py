"""
Tests for services/extraction.py: fenced and bare JSON, shape validation, quiz tolerance.
"""

import json

import pytest

from concept_booster.core.errors import MalformedResponse
from concept_booster.schemas.tutor import TopicLesson, TutorResponse
from concept_booster.services.extraction import extract_json, parse_quiz, parse_shape

DOUBT = {"explanation": "...", "steps": ["a", "b"], "example": "e", "tip": "t"}


def _question(q="1/2 + 1/4 = ?", correct=1, options=None):
    return {
        "q": q,
        "options": options or ["1/2", "3/4", "2/6", "1/4"],
        "correct": correct,
        "explanation": "1/2 = 2/4, so 2/4 + 1/4 = 3/4",
    }


def test_fenced_json_with_surrounding_prose():
    raw = "Sure! Here you go:\n```json\n" + json.dumps(DOUBT) + "\n```\nHope that helps."
    assert extract_json(raw) == DOUBT


def test_fenced_block_without_language_tag():
    raw = "```\n" + json.dumps(DOUBT) + "\n```"
    assert extract_json(raw) == DOUBT


def test_bare_json():
    assert extract_json("  " + json.dumps(DOUBT) + "\n") == DOUBT


@pytest.mark.parametrize("raw", ["Sorry, I cannot help", "", None, "```json\nnot json\n```", "{broken"])
def test_unparseable_text_fails(raw):
    with pytest.raises(MalformedResponse):
        extract_json(raw)


def test_parse_shape_returns_the_exact_object():
    raw = "```json\n" + json.dumps(DOUBT) + "\n```"
    result = parse_shape(raw, TutorResponse)
    assert result.model_dump() == DOUBT


def test_parse_shape_rejects_missing_fields():
    with pytest.raises(MalformedResponse):
        parse_shape(json.dumps({"explanation": "only this"}), TutorResponse)


def test_parse_shape_rejects_empty_steps():
    with pytest.raises(MalformedResponse):
        parse_shape(json.dumps({**DOUBT, "steps": []}), TutorResponse)


def test_parse_shape_rejects_arrays():
    with pytest.raises(MalformedResponse):
        parse_shape(json.dumps([DOUBT]), TutorResponse)


def test_lesson_practice_keeps_wire_names():
    lesson = {
        "definition": "d",
        "steps": ["s"],
        "mistakes": ["m"],
        "practice": [{"q": "What is 2+2?", "a": "4"}],
    }
    result = parse_shape(json.dumps(lesson), TopicLesson)
    assert result.practice[0].question == "What is 2+2?"
    assert result.model_dump(by_alias=True) == lesson


def test_lesson_without_practice_is_malformed():
    lesson = {"definition": "d", "steps": ["s"], "mistakes": [], "practice": []}
    with pytest.raises(MalformedResponse):
        parse_shape(json.dumps(lesson), TopicLesson)


def test_quiz_from_bare_array():
    quiz = parse_quiz(json.dumps([_question(), _question(q="5 x 5 = ?", correct=2)]))
    assert len(quiz.questions) == 2
    assert quiz.questions[1].correct_index == 2


def test_quiz_from_questions_object_in_fence():
    raw = "```json\n" + json.dumps({"questions": [_question()]}) + "\n```"
    assert parse_quiz(raw).questions[0].question_text == "1/2 + 1/4 = ?"


def test_quiz_drops_invalid_questions():
    raw = json.dumps([_question(), _question(correct=4), _question(options=["a", "b"])])
    quiz = parse_quiz(raw)
    assert len(quiz.questions) == 1


def test_quiz_with_no_valid_questions_fails():
    with pytest.raises(MalformedResponse):
        parse_quiz(json.dumps([_question(correct=7)]))


def test_quiz_plain_text_fails():
    with pytest.raises(MalformedResponse):
        parse_quiz("Sorry, I cannot help")
