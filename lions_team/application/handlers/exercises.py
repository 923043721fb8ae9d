from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Response, status

from lions_team.application.schemas import (
    ExerciseCreate,
    ExerciseOut,
    ExerciseUpdateBody,
    entity_dict,
)

from .dependencies import StorageDep
from .errors import not_found

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


@router.get("", response_model=list[ExerciseOut])
async def list_exercises(storage: StorageDep, category: Optional[str] = None) -> list[ExerciseOut]:
    if category:
        exercises = await storage.exercises.list_by_category(category)
    else:
        exercises = await storage.exercises.list_all()
    return [ExerciseOut.model_validate(entity_dict(exercise)) for exercise in exercises]


@router.post("", response_model=ExerciseOut, status_code=status.HTTP_201_CREATED)
async def create_exercise(payload: ExerciseCreate, storage: StorageDep) -> ExerciseOut:
    exercise = await storage.exercises.create(payload.to_domain())
    return ExerciseOut.model_validate(entity_dict(exercise))


@router.put("/{exercise_id}", response_model=ExerciseOut)
async def update_exercise(
    exercise_id: str, payload: ExerciseUpdateBody, storage: StorageDep
) -> ExerciseOut:
    exercise = await storage.exercises.update(exercise_id, payload.to_update())
    if exercise is None:
        raise not_found("Exercise")
    return ExerciseOut.model_validate(entity_dict(exercise))


@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_exercise(exercise_id: str, storage: StorageDep) -> Response:
    if not await storage.exercises.delete(exercise_id):
        raise not_found("Exercise")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
