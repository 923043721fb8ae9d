"""Domain factories for Lions team hub tests."""

from __future__ import annotations

import datetime as dt

import factory

from lions_team.domain.models import (
    Achievements,
    EventType,
    ExerciseCategory,
    ExerciseMetrics,
    MediaType,
    NewAthlete,
    NewBestOfWeek,
    NewEvent,
    NewExercise,
    NewGalleryItem,
    NewLiveStream,
    NewTrainingSession,
    NewUser,
    Role,
    SessionResults,
    StreamCategory,
)


class NewUserFactory(factory.Factory):
    """Factory building :class:`~lions_team.domain.models.NewUser` inputs."""

    username = factory.Sequence(lambda n: f"player{n:03d}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@lions.com")
    password = "secret123"
    full_name = factory.Faker("name")
    role = Role.ATHLETE
    position = "Armador"

    class Meta:
        model = NewUser


class NewAthleteFactory(factory.Factory):
    user_id = factory.Sequence(lambda n: f"user-{n:04d}")
    height = "1.90m"
    weight = "85kg"
    sleep_hours = "8"
    overall_performance = "70.00"

    class Meta:
        model = NewAthlete


class NewExerciseFactory(factory.Factory):
    name = factory.Sequence(lambda n: f"Drill {n}")
    category = ExerciseCategory.BASKETBALL
    created_by = "coach-001"
    description = factory.Faker("sentence")
    metrics = factory.LazyFunction(
        lambda: ExerciseMetrics(repetitions=20, accuracy=75.0, difficulty="medium")
    )

    class Meta:
        model = NewExercise


class NewTrainingSessionFactory(factory.Factory):
    athlete_id = "athlete-001"
    exercise_id = factory.Sequence(lambda n: f"exercise-{n:03d}")
    results = factory.LazyFunction(lambda: SessionResults(repetitions=18, completed=True))

    class Meta:
        model = NewTrainingSession


class NewEventFactory(factory.Factory):
    title = factory.Sequence(lambda n: f"Treino {n}")
    event_type = EventType.TRAINING
    start_date = factory.LazyFunction(
        lambda: dt.datetime(2024, 6, 10, 19, 0, tzinfo=dt.timezone.utc)
    )
    created_by = "coach-001"

    class Meta:
        model = NewEvent


class NewGalleryItemFactory(factory.Factory):
    title = factory.Sequence(lambda n: f"Photo {n}")
    media_type = MediaType.IMAGE
    url = factory.Sequence(lambda n: f"https://cdn.lions.com/{n}.jpg")
    uploaded_by = "coach-001"

    class Meta:
        model = NewGalleryItem


class NewBestOfWeekFactory(factory.Factory):
    athlete_id = "athlete-001"
    week_start = factory.LazyFunction(
        lambda: dt.datetime(2024, 6, 2, tzinfo=dt.timezone.utc)
    )
    set_by = "coach-001"
    achievements = factory.LazyFunction(
        lambda: Achievements(shooting="62%", rebounds="11", assists="7")
    )

    class Meta:
        model = NewBestOfWeek


class NewLiveStreamFactory(factory.Factory):
    title = factory.Sequence(lambda n: f"Jogo {n}")
    youtube_url = factory.Sequence(lambda n: f"https://youtube.com/watch?v=lions{n}")
    created_by = "coach-001"
    category = StreamCategory.NBB

    class Meta:
        model = NewLiveStream
