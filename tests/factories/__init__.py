"""Factories for domain create inputs used in tests."""

from .clock import FIXED_NOW, FrozenClock
from .domain import (
    NewAthleteFactory,
    NewBestOfWeekFactory,
    NewEventFactory,
    NewExerciseFactory,
    NewGalleryItemFactory,
    NewLiveStreamFactory,
    NewTrainingSessionFactory,
    NewUserFactory,
)

__all__ = [
    "FIXED_NOW",
    "FrozenClock",
    "NewAthleteFactory",
    "NewBestOfWeekFactory",
    "NewEventFactory",
    "NewExerciseFactory",
    "NewGalleryItemFactory",
    "NewLiveStreamFactory",
    "NewTrainingSessionFactory",
    "NewUserFactory",
]
