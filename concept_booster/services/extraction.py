from __future__ import annotations

import json
import logging
import re
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from concept_booster.core.errors import MalformedResponse
from concept_booster.schemas.tutor import QuizQuestion, QuizSet

logger = logging.getLogger(__name__)

FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_json(raw: str | None):
    if not raw:
        raise MalformedResponse()
    match = FENCED_BLOCK.search(raw)
    candidate = match.group(1) if match else raw
    try:
        return json.loads(candidate.strip())
    except json.JSONDecodeError as exc:
        raise MalformedResponse() from exc


def parse_shape(raw: str | None, model: type[ModelT]) -> ModelT:
    payload = extract_json(raw)
    if not isinstance(payload, dict):
        raise MalformedResponse()
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponse() from exc


def parse_quiz(raw: str | None) -> QuizSet:
    payload = extract_json(raw)
    if isinstance(payload, dict):
        payload = payload.get("questions")
    if not isinstance(payload, list):
        raise MalformedResponse()

    questions = []
    for index, item in enumerate(payload):
        try:
            questions.append(QuizQuestion.model_validate(item))
        except ValidationError:
            logger.warning("Dropping malformed quiz question at position %s", index)

    if not questions:
        raise MalformedResponse()
    return QuizSet(questions=questions)
