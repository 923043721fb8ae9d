"""Deterministic clock for storage tests."""

from __future__ import annotations

from datetime import datetime, timezone

# Wednesday; the surrounding week starts on Sunday 2024-06-02.
FIXED_NOW = datetime(2024, 6, 5, 15, 30, 12, 500, tzinfo=timezone.utc)


class FrozenClock:
    """Callable clock returning a settable instant."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now
