from __future__ import annotations

from fastapi import APIRouter

from lions_team.application.schemas import HealthOut
from utils.meta import APP_VERSION

from .dependencies import StorageDep

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthOut)
async def health(storage: StorageDep) -> HealthOut:
    """Report the active backend and how many records each listing holds."""

    counts = {
        "athletes": len(await storage.athletes.list_all()),
        "exercises": len(await storage.exercises.list_all()),
        "events": len(await storage.events.list_all()),
        "gallery": len(await storage.gallery.list_all()),
        "liveStreams": len(await storage.live_streams.list_all()),
    }
    return HealthOut(status="ok", backend=storage.name, version=APP_VERSION, counts=counts)
