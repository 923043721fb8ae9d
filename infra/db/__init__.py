"""SQLAlchemy models and session utilities for relational storage."""

from .models import (
    AthleteRecord,
    Base,
    BestOfWeekRecord,
    EventRecord,
    ExerciseRecord,
    GalleryItemRecord,
    LiveStreamRecord,
    TrainingSessionRecord,
    UserRecord,
)
from .session import async_session_factory, create_engine, create_schema

__all__ = [
    "Base",
    "create_engine",
    "create_schema",
    "async_session_factory",
    "AthleteRecord",
    "BestOfWeekRecord",
    "EventRecord",
    "ExerciseRecord",
    "GalleryItemRecord",
    "LiveStreamRecord",
    "TrainingSessionRecord",
    "UserRecord",
]
