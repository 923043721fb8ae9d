from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Response, status

from lions_team.application.schemas import (
    LiveStreamCreate,
    LiveStreamOut,
    LiveStreamUpdateBody,
    entity_dict,
)

from .dependencies import StorageDep
from .errors import not_found

router = APIRouter(prefix="/api/live-streams", tags=["live-streams"])


@router.get("", response_model=list[LiveStreamOut])
async def list_live_streams(storage: StorageDep, active: Optional[str] = None) -> list[LiveStreamOut]:
    if active == "true":
        streams = await storage.live_streams.list_active()
    else:
        streams = await storage.live_streams.list_all()
    return [LiveStreamOut.model_validate(entity_dict(stream)) for stream in streams]


@router.post("", response_model=LiveStreamOut, status_code=status.HTTP_201_CREATED)
async def create_live_stream(payload: LiveStreamCreate, storage: StorageDep) -> LiveStreamOut:
    stream = await storage.live_streams.create(payload.to_domain())
    return LiveStreamOut.model_validate(entity_dict(stream))


@router.put("/{stream_id}", response_model=LiveStreamOut)
async def update_live_stream(
    stream_id: str, payload: LiveStreamUpdateBody, storage: StorageDep
) -> LiveStreamOut:
    stream = await storage.live_streams.update(stream_id, payload.to_update())
    if stream is None:
        raise not_found("Live stream")
    return LiveStreamOut.model_validate(entity_dict(stream))


@router.delete("/{stream_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_live_stream(stream_id: str, storage: StorageDep) -> Response:
    if not await storage.live_streams.delete(stream_id):
        raise not_found("Live stream")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
