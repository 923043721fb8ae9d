"""Domain entities shared between use-cases and adapters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Access role attached to every user account."""

    ATHLETE = "athlete"
    ADMIN = "admin"


class ExerciseCategory(str, Enum):
    BASKETBALL = "basketball"
    AEROBIC = "aerobic"
    STRENGTH = "strength"


class EventType(str, Enum):
    TRAINING = "training"
    GAME = "game"
    MEETING = "meeting"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class StreamCategory(str, Enum):
    NBB = "nbb"
    NBA = "nba"


DEFAULT_ALBUM = "general"
DEFAULT_PERFORMANCE = "0"


@dataclass(slots=True, frozen=True)
class ExerciseMetrics:
    """Sparse target metrics describing an exercise."""

    repetitions: Optional[int] = None
    duration: Optional[float] = None
    distance: Optional[float] = None
    accuracy: Optional[float] = None
    difficulty: Optional[str] = None


@dataclass(slots=True, frozen=True)
class SessionResults:
    """Outcome recorded for a single training session."""

    repetitions: Optional[int] = None
    duration: Optional[float] = None
    distance: Optional[float] = None
    accuracy: Optional[float] = None
    completed: bool = False


@dataclass(slots=True, frozen=True)
class Achievements:
    """Highlights justifying a best-of-the-week pick."""

    shooting: Optional[str] = None
    rebounds: Optional[str] = None
    assists: Optional[str] = None
    description: Optional[str] = None


@dataclass(slots=True, frozen=True)
class User:
    """Account able to sign in to the team hub."""

    id: str
    username: str
    email: str
    password: str
    role: Role
    full_name: str
    profile_picture: Optional[str]
    position: Optional[str]
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Athlete:
    """Performance profile owned by exactly one user."""

    id: str
    user_id: str
    height: Optional[str]
    weight: Optional[str]
    sleep_hours: Optional[str]
    overall_performance: Optional[str]
    last_training: Optional[datetime]


@dataclass(slots=True, frozen=True)
class Exercise:
    """Training drill published by a staff member."""

    id: str
    name: str
    description: Optional[str]
    category: ExerciseCategory
    video_url: Optional[str]
    metrics: Optional[ExerciseMetrics]
    created_by: str


@dataclass(slots=True, frozen=True)
class TrainingSession:
    """A completed exercise attempt by an athlete."""

    id: str
    athlete_id: str
    exercise_id: str
    results: Optional[SessionResults]
    completed_at: datetime


@dataclass(slots=True, frozen=True)
class Event:
    """Calendar entry (training, game or meeting)."""

    id: str
    title: str
    description: Optional[str]
    event_type: EventType
    start_date: datetime
    end_date: Optional[datetime]
    mandatory: bool
    created_by: str


@dataclass(slots=True, frozen=True)
class GalleryItem:
    """Picture or video published in the team gallery."""

    id: str
    title: str
    description: Optional[str]
    media_type: MediaType
    url: str
    album: str
    uploaded_by: str
    uploaded_at: datetime


@dataclass(slots=True, frozen=True)
class BestOfWeek:
    """Featured athlete for the week starting at ``week_start``."""

    id: str
    athlete_id: str
    week_start: datetime
    achievements: Optional[Achievements]
    set_by: str


@dataclass(slots=True, frozen=True)
class LiveStream:
    """Announcement of a live or scheduled video broadcast."""

    id: str
    title: str
    description: Optional[str]
    youtube_url: str
    is_active: bool
    scheduled_for: Optional[datetime]
    category: StreamCategory
    created_by: str
