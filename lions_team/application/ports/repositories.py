"""Repository contracts for accessing persistent data.

Point lookups return ``None`` for unknown identifiers, ``update`` returns
``None`` and ``delete`` returns ``False`` when nothing matches. Collection
lookups return finite sequences without any ordering guarantee.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from lions_team.domain.models import (
    Athlete,
    AthleteUpdate,
    BestOfWeek,
    Event,
    EventUpdate,
    Exercise,
    ExerciseUpdate,
    GalleryItem,
    LiveStream,
    LiveStreamUpdate,
    NewAthlete,
    NewBestOfWeek,
    NewEvent,
    NewExercise,
    NewGalleryItem,
    NewLiveStream,
    NewTrainingSession,
    NewUser,
    TrainingSession,
    TrainingSessionUpdate,
    User,
    UserUpdate,
)


class UsersRepo(Protocol):
    """Provides access to user accounts."""

    async def get(self, user_id: str) -> Optional[User]:
        """Fetch a user by identifier."""

    async def get_by_username(self, username: str) -> Optional[User]:
        """Return the first user with exactly this username."""

    async def get_by_email(self, email: str) -> Optional[User]:
        """Return the first user with exactly this email."""

    async def create(self, user: NewUser) -> User:
        """Persist a new account and return the stored record."""

    async def update(self, user_id: str, updates: UserUpdate) -> Optional[User]:
        """Merge ``updates`` onto the stored user."""


class AthletesRepo(Protocol):
    """Provides access to athlete performance profiles."""

    async def get(self, athlete_id: str) -> Optional[Athlete]:
        """Fetch an athlete by identifier."""

    async def get_by_user_id(self, user_id: str) -> Optional[Athlete]:
        """Return the profile owned by the given user."""

    async def list_all(self) -> Sequence[Athlete]:
        """Return every athlete profile."""

    async def create(self, athlete: NewAthlete) -> Athlete:
        """Persist a new profile and return the stored record."""

    async def update(self, athlete_id: str, updates: AthleteUpdate) -> Optional[Athlete]:
        """Merge ``updates`` onto the stored profile."""

    async def delete(self, athlete_id: str) -> bool:
        """Remove the profile, reporting whether it existed."""


class ExercisesRepo(Protocol):
    """Provides access to the exercise library."""

    async def get(self, exercise_id: str) -> Optional[Exercise]:
        """Fetch an exercise by identifier."""

    async def list_all(self) -> Sequence[Exercise]:
        """Return every exercise."""

    async def list_by_category(self, category: str) -> Sequence[Exercise]:
        """Return exercises whose category matches exactly."""

    async def create(self, exercise: NewExercise) -> Exercise:
        """Persist a new exercise."""

    async def update(self, exercise_id: str, updates: ExerciseUpdate) -> Optional[Exercise]:
        """Merge ``updates`` onto the stored exercise."""

    async def delete(self, exercise_id: str) -> bool:
        """Remove the exercise, reporting whether it existed."""


class TrainingSessionsRepo(Protocol):
    """Stores completed exercise attempts."""

    async def get(self, session_id: str) -> Optional[TrainingSession]:
        """Fetch a training session by identifier."""

    async def list_by_athlete(self, athlete_id: str) -> Sequence[TrainingSession]:
        """Return sessions recorded for the athlete."""

    async def create(self, session: NewTrainingSession) -> TrainingSession:
        """Persist a session stamping its completion time."""

    async def update(
        self, session_id: str, updates: TrainingSessionUpdate
    ) -> Optional[TrainingSession]:
        """Merge ``updates`` onto the stored session."""


class EventsRepo(Protocol):
    """Provides access to the team calendar."""

    async def get(self, event_id: str) -> Optional[Event]:
        """Fetch an event by identifier."""

    async def list_all(self) -> Sequence[Event]:
        """Return every event."""

    async def list_upcoming(self) -> Sequence[Event]:
        """Return events starting strictly after the current time."""

    async def create(self, event: NewEvent) -> Event:
        """Persist a new event."""

    async def update(self, event_id: str, updates: EventUpdate) -> Optional[Event]:
        """Merge ``updates`` onto the stored event."""

    async def delete(self, event_id: str) -> bool:
        """Remove the event, reporting whether it existed."""


class GalleryRepo(Protocol):
    """Provides access to gallery media."""

    async def get(self, item_id: str) -> Optional[GalleryItem]:
        """Fetch a gallery item by identifier."""

    async def list_all(self) -> Sequence[GalleryItem]:
        """Return every gallery item."""

    async def list_by_album(self, album: str) -> Sequence[GalleryItem]:
        """Return items whose album matches exactly."""

    async def create(self, item: NewGalleryItem) -> GalleryItem:
        """Persist a new item stamping its upload time."""

    async def delete(self, item_id: str) -> bool:
        """Remove the item, reporting whether it existed."""


class BestOfWeekRepo(Protocol):
    """Stores weekly highlight picks."""

    async def get_current(self) -> Optional[BestOfWeek]:
        """Return a pick whose ``week_start`` equals the current week boundary."""

    async def set(self, pick: NewBestOfWeek) -> BestOfWeek:
        """Add a new pick; earlier picks are kept."""


class LiveStreamsRepo(Protocol):
    """Provides access to live-stream announcements."""

    async def get(self, stream_id: str) -> Optional[LiveStream]:
        """Fetch a live stream by identifier."""

    async def list_all(self) -> Sequence[LiveStream]:
        """Return every live stream."""

    async def list_active(self) -> Sequence[LiveStream]:
        """Return streams flagged as active."""

    async def create(self, stream: NewLiveStream) -> LiveStream:
        """Persist a new live stream."""

    async def update(self, stream_id: str, updates: LiveStreamUpdate) -> Optional[LiveStream]:
        """Merge ``updates`` onto the stored stream."""

    async def delete(self, stream_id: str) -> bool:
        """Remove the stream, reporting whether it existed."""
