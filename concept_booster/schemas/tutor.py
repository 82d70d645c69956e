from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from concept_booster.core.config import settings


class LanguageMode(str, Enum):
    HINDI = "hindi"
    HINGLISH = "hinglish"
    ENGLISH = "english"

    @classmethod
    def coerce(cls, value) -> LanguageMode:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.ENGLISH


class _LanguageAware(BaseModel):
    language: LanguageMode = LanguageMode.ENGLISH

    @field_validator("language", mode="before")
    @classmethod
    def _coerce_language(cls, value):
        return LanguageMode.coerce(value)


class DoubtRequest(_LanguageAware):
    question: str = ""
    image_description: str | None = Field(default=None, alias="imageDescription")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _require_question_or_image(self) -> DoubtRequest:
        if not self.question.strip() and not (self.image_description or "").strip():
            raise ValueError("question or imageDescription is required")
        return self


class TopicRequest(_LanguageAware):
    topic: str = Field(min_length=1, max_length=200)

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("topic must not be blank")
        return value.strip()


class QuizRequest(TopicRequest):
    count: int | None = Field(default=None, ge=1, le=settings.max_quiz_count)


class RequestParams(BaseModel):
    """Feature-neutral input for prompt construction."""

    language_mode: LanguageMode = LanguageMode.ENGLISH
    topic_or_question: str
    count: int | None = None
    image_description: str | None = None

    model_config = ConfigDict(frozen=True)


class TutorResponse(BaseModel):
    explanation: str
    steps: list[str] = Field(min_length=1)
    example: str
    tip: str

    model_config = ConfigDict(frozen=True)


class PracticeItem(BaseModel):
    question: str = Field(alias="q")
    answer: str = Field(alias="a")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TopicLesson(BaseModel):
    definition: str
    steps: list[str] = Field(min_length=1)
    mistakes: list[str]
    practice: list[PracticeItem] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)


class QuizQuestion(BaseModel):
    question_text: str = Field(alias="q")
    options: list[str] = Field(min_length=4, max_length=4)
    correct_index: int = Field(alias="correct", ge=0, le=3)
    explanation: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class QuizSet(BaseModel):
    questions: list[QuizQuestion]

    model_config = ConfigDict(frozen=True)
