from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Response, status

from lions_team.application.schemas import EventCreate, EventOut, EventUpdateBody, entity_dict

from .dependencies import StorageDep
from .errors import not_found

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[EventOut])
async def list_events(storage: StorageDep, upcoming: Optional[str] = None) -> list[EventOut]:
    # Only the literal "true" selects upcoming events.
    if upcoming == "true":
        events = await storage.events.list_upcoming()
    else:
        events = await storage.events.list_all()
    return [EventOut.model_validate(entity_dict(event)) for event in events]


@router.post("", response_model=EventOut, status_code=status.HTTP_201_CREATED)
async def create_event(payload: EventCreate, storage: StorageDep) -> EventOut:
    event = await storage.events.create(payload.to_domain())
    return EventOut.model_validate(entity_dict(event))


@router.put("/{event_id}", response_model=EventOut)
async def update_event(event_id: str, payload: EventUpdateBody, storage: StorageDep) -> EventOut:
    event = await storage.events.update(event_id, payload.to_update())
    if event is None:
        raise not_found("Event")
    return EventOut.model_validate(entity_dict(event))


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_event(event_id: str, storage: StorageDep) -> Response:
    if not await storage.events.delete(event_id):
        raise not_found("Event")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
