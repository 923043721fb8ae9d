"""Fixture accounts loaded into a fresh storage backend."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from lions_team.domain.factories import ensure_utc, new_id
from lions_team.domain.models import Athlete, Role, User


@dataclass(slots=True, frozen=True)
class SeedData:
    """Records making the hub usable without a first-run setup step."""

    admin: User
    athlete_user: User
    athlete: Athlete

    @property
    def users(self) -> tuple[User, User]:
        return self.admin, self.athlete_user


def build_seed_data(now: datetime) -> SeedData:
    """Return the default administrator and sample athlete with fresh ids."""

    now = ensure_utc(now)
    admin = User(
        id=new_id(),
        username="admin",
        email="admin@lions.com",
        password="admin123",
        role=Role.ADMIN,
        full_name="Administrador Lions",
        profile_picture=None,
        position=None,
        created_at=now,
    )
    athlete_user = User(
        id=new_id(),
        username="joao",
        email="joao@lions.com",
        password="athlete123",
        role=Role.ATHLETE,
        full_name="João Silva",
        profile_picture=None,
        position="Ala",
        created_at=now,
    )
    athlete = Athlete(
        id=new_id(),
        user_id=athlete_user.id,
        height="1.85m",
        weight="78kg",
        sleep_hours="7.5",
        overall_performance="85.50",
        last_training=now,
    )
    return SeedData(admin=admin, athlete_user=athlete_user, athlete=athlete)
