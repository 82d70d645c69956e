from __future__ import annotations

from fastapi import APIRouter

from concept_booster.api.v1.endpoints import progress, tutor

api_router = APIRouter()
api_router.include_router(tutor.router)
api_router.include_router(progress.router)
