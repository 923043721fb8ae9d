"""Best-of-the-week endpoints.

The current pick is the one whose ``week_start`` is exactly the start of the
running week; clients are expected to send ``start_of_week`` values.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from lions_team.application.schemas import (
    BestOfWeekCreate,
    BestOfWeekOut,
    BestOfWeekWithAthleteOut,
    entity_dict,
)

from .athletes import with_user
from .dependencies import StorageDep

router = APIRouter(prefix="/api/best-of-week", tags=["best-of-week"])


@router.get("", response_model=BestOfWeekWithAthleteOut)
async def get_current_best_of_week(storage: StorageDep) -> BestOfWeekWithAthleteOut:
    best = await storage.best_of_week.get_current()
    if best is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No best of week set")

    athlete = await storage.athletes.get(best.athlete_id)
    payload = entity_dict(best)
    payload["athlete"] = (
        (await with_user(storage, athlete)).model_dump() if athlete is not None else None
    )
    return BestOfWeekWithAthleteOut.model_validate(payload)


@router.post("", response_model=BestOfWeekOut, status_code=status.HTTP_201_CREATED)
async def set_best_of_week(payload: BestOfWeekCreate, storage: StorageDep) -> BestOfWeekOut:
    best = await storage.best_of_week.set(payload.to_domain())
    return BestOfWeekOut.model_validate(entity_dict(best))
