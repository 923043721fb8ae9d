"""HTTP route layer translating requests into storage calls."""

from __future__ import annotations

from fastapi import APIRouter

from . import (
    athletes,
    auth,
    best_of_week,
    events,
    exercises,
    gallery,
    health,
    live_streams,
    training_sessions,
    users,
)
from .dependencies import StorageDep, get_storage
from .errors import register_exception_handlers

__all__ = ["StorageDep", "api_router", "get_storage", "register_exception_handlers"]

api_router = APIRouter()
for _module in (
    auth,
    users,
    athletes,
    exercises,
    training_sessions,
    events,
    gallery,
    best_of_week,
    live_streams,
    health,
):
    api_router.include_router(_module.router)
