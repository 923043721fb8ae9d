"""Ports define the contracts between application layer and adapters."""

from .repositories import (
    AthletesRepo,
    BestOfWeekRepo,
    EventsRepo,
    ExercisesRepo,
    GalleryRepo,
    LiveStreamsRepo,
    TrainingSessionsRepo,
    UsersRepo,
)
from .storage import Storage

__all__ = [
    "AthletesRepo",
    "BestOfWeekRepo",
    "EventsRepo",
    "ExercisesRepo",
    "GalleryRepo",
    "LiveStreamsRepo",
    "Storage",
    "TrainingSessionsRepo",
    "UsersRepo",
]
