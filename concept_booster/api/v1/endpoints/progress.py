from __future__ import annotations

from fastapi import APIRouter, Path

from concept_booster.schemas.progress import StudentProgress
from concept_booster.services.progress_service import progress_service

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/{student_id}", response_model=StudentProgress)
async def get_progress(student_id: str = Path(min_length=1, max_length=64)):
    return await progress_service.load(student_id)


@router.put("/{student_id}", response_model=StudentProgress)
async def put_progress(payload: StudentProgress, student_id: str = Path(min_length=1, max_length=64)):
    return await progress_service.save(student_id, payload)
