"""Storage abstraction combining repositories behind a single backend."""

from __future__ import annotations

from typing import Protocol

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


class Storage(Protocol):
    """Provides access to persistence backends grouped under a single facade."""

    #: Short backend identifier reported by the health endpoint.
    name: str

    @property
    def users(self) -> UsersRepo:
        """Return repository managing user accounts."""

    @property
    def athletes(self) -> AthletesRepo:
        """Return repository managing athlete profiles."""

    @property
    def exercises(self) -> ExercisesRepo:
        """Return repository managing the exercise library."""

    @property
    def training_sessions(self) -> TrainingSessionsRepo:
        """Return repository managing training sessions."""

    @property
    def events(self) -> EventsRepo:
        """Return repository managing calendar events."""

    @property
    def gallery(self) -> GalleryRepo:
        """Return repository managing gallery media."""

    @property
    def best_of_week(self) -> BestOfWeekRepo:
        """Return repository managing weekly highlights."""

    @property
    def live_streams(self) -> LiveStreamsRepo:
        """Return repository managing live-stream announcements."""

    async def init(self) -> None:
        """Initialise underlying connections or schemas if needed."""

    async def close(self) -> None:
        """Release any allocated resources (connections, pools, caches)."""
