from __future__ import annotations

from concept_booster.api.v1.endpoints import progress, tutor

__all__ = ["progress", "tutor"]
