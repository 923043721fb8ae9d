"""Athlete profile endpoints.

Listings attach the owning user to every athlete with one lookup each; the
storage layer itself has no join operation.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from lions_team.application.ports.storage import Storage
from lions_team.application.schemas import (
    AthleteCreate,
    AthleteOut,
    AthleteUpdateBody,
    AthleteWithUserOut,
    entity_dict,
)
from lions_team.domain.models import Athlete

from .dependencies import StorageDep
from .errors import not_found

router = APIRouter(prefix="/api/athletes", tags=["athletes"])


async def with_user(storage: Storage, athlete: Athlete) -> AthleteWithUserOut:
    """Attach the owning user, or ``None`` when the reference is dangling."""

    user = await storage.users.get(athlete.user_id)
    payload = entity_dict(athlete)
    payload["user"] = entity_dict(user) if user is not None else None
    return AthleteWithUserOut.model_validate(payload)


@router.get("", response_model=list[AthleteWithUserOut])
async def list_athletes(storage: StorageDep) -> list[AthleteWithUserOut]:
    athletes = await storage.athletes.list_all()
    return [await with_user(storage, athlete) for athlete in athletes]


@router.get("/{athlete_id}", response_model=AthleteWithUserOut)
async def get_athlete(athlete_id: str, storage: StorageDep) -> AthleteWithUserOut:
    athlete = await storage.athletes.get(athlete_id)
    if athlete is None:
        raise not_found("Athlete")
    return await with_user(storage, athlete)


@router.post("", response_model=AthleteOut, status_code=status.HTTP_201_CREATED)
async def create_athlete(payload: AthleteCreate, storage: StorageDep) -> AthleteOut:
    athlete = await storage.athletes.create(payload.to_domain())
    return AthleteOut.model_validate(entity_dict(athlete))


@router.put("/{athlete_id}", response_model=AthleteOut)
async def update_athlete(
    athlete_id: str, payload: AthleteUpdateBody, storage: StorageDep
) -> AthleteOut:
    athlete = await storage.athletes.update(athlete_id, payload.to_update())
    if athlete is None:
        raise not_found("Athlete")
    return AthleteOut.model_validate(entity_dict(athlete))


@router.delete("/{athlete_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_athlete(athlete_id: str, storage: StorageDep) -> Response:
    if not await storage.athletes.delete(athlete_id):
        raise not_found("Athlete")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
