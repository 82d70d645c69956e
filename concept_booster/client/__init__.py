from __future__ import annotations

from concept_booster.client.adapter import FeatureAdapter, QuizSession, doubt_adapter, lesson_adapter, quiz_adapter
from concept_booster.client.api import TutorApiClient

__all__ = ["FeatureAdapter", "QuizSession", "TutorApiClient", "doubt_adapter", "lesson_adapter", "quiz_adapter"]
