"""Domain data transfer objects used across the team hub."""

from .entities import (
    DEFAULT_ALBUM,
    DEFAULT_PERFORMANCE,
    Achievements,
    Athlete,
    BestOfWeek,
    Event,
    EventType,
    Exercise,
    ExerciseCategory,
    ExerciseMetrics,
    GalleryItem,
    LiveStream,
    MediaType,
    Role,
    SessionResults,
    StreamCategory,
    TrainingSession,
    User,
)
from .inputs import (
    AthleteUpdate,
    EventUpdate,
    ExerciseUpdate,
    LiveStreamUpdate,
    NewAthlete,
    NewBestOfWeek,
    NewEvent,
    NewExercise,
    NewGalleryItem,
    NewLiveStream,
    NewTrainingSession,
    NewUser,
    TrainingSessionUpdate,
    UserUpdate,
)

__all__ = [
    "DEFAULT_ALBUM",
    "DEFAULT_PERFORMANCE",
    "Achievements",
    "Athlete",
    "AthleteUpdate",
    "BestOfWeek",
    "Event",
    "EventType",
    "EventUpdate",
    "Exercise",
    "ExerciseCategory",
    "ExerciseMetrics",
    "ExerciseUpdate",
    "GalleryItem",
    "LiveStream",
    "LiveStreamUpdate",
    "MediaType",
    "NewAthlete",
    "NewBestOfWeek",
    "NewEvent",
    "NewExercise",
    "NewGalleryItem",
    "NewLiveStream",
    "NewTrainingSession",
    "NewUser",
    "Role",
    "SessionResults",
    "StreamCategory",
    "TrainingSession",
    "TrainingSessionUpdate",
    "User",
    "UserUpdate",
]
