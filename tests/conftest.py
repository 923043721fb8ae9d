from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lions_team.infrastructure.storage import MemoryStorage
from tests.factories.clock import FIXED_NOW, FrozenClock

os.environ.setdefault("STORAGE_BACKEND", "memory")


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FIXED_NOW)


@pytest.fixture
def memory_storage(clock: FrozenClock) -> MemoryStorage:
    """Empty in-memory storage driven by the frozen clock."""

    return MemoryStorage(seed=False, clock=clock)


@pytest.fixture
def seeded_storage(clock: FrozenClock) -> MemoryStorage:
    """In-memory storage holding the fixture accounts."""

    return MemoryStorage(seed=True, clock=clock)

