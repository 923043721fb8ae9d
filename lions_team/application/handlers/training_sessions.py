from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from lions_team.application.schemas import (
    TrainingSessionCreate,
    TrainingSessionOut,
    entity_dict,
)

from .dependencies import StorageDep
from .errors import bad_request

router = APIRouter(prefix="/api/training-sessions", tags=["training-sessions"])


@router.get("", response_model=list[TrainingSessionOut])
async def list_training_sessions(
    storage: StorageDep, athlete_id: Optional[str] = Query(default=None, alias="athleteId")
) -> list[TrainingSessionOut]:
    if not athlete_id:
        raise bad_request("athleteId is required")
    sessions = await storage.training_sessions.list_by_athlete(athlete_id)
    return [TrainingSessionOut.model_validate(entity_dict(session)) for session in sessions]


@router.post("", response_model=TrainingSessionOut, status_code=status.HTTP_201_CREATED)
async def create_training_session(
    payload: TrainingSessionCreate, storage: StorageDep
) -> TrainingSessionOut:
    session = await storage.training_sessions.create(payload.to_domain())
    return TrainingSessionOut.model_validate(entity_dict(session))
