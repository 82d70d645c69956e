from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from concept_booster.utils.rounding import round_half_up


class StudentProgress(BaseModel):
    topics_searched: list[str] = Field(default_factory=list, alias="topicsSearched")
    questions_asked: int = Field(default=0, ge=0, alias="questionsAsked")
    correct_answers: int = Field(default=0, ge=0, alias="correctAnswers")
    wrong_answers: int = Field(default=0, ge=0, alias="wrongAnswers")
    weak_topics: list[str] = Field(default_factory=list, alias="weakTopics")
    mastery_level: int = Field(default=0, ge=0, le=100, alias="masteryLevel")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def accuracy(self) -> int:
        attempted = self.correct_answers + self.wrong_answers
        if attempted == 0:
            return 0
        return round_half_up(self.correct_answers / attempted * 100)
