"""Pytest configuration and fixtures for planner tests."""

from datetime import date, datetime, timezone

import pytest

from nsplanner.core.config import get_settings
from nsplanner.models import Distance, Race, RaceType, TrainingBlock, UserInput
from nsplanner.services.plan_generator import create_training_plan
from nsplanner.services.storage import InMemoryStore, PlanStore, SqlKeyValueStore


# -------------------------------------------------------------------------
# Input Fixtures
# -------------------------------------------------------------------------


@pytest.fixture
def ten_k_input() -> UserInput:
    """10K runner with a 37:00 10K, training every day."""
    return UserInput(
        target_distance=Distance.TEN_K,
        time_10k="37:00",
        training_days=7,
    )


@pytest.fixture
def five_k_input() -> UserInput:
    return UserInput(
        target_distance=Distance.HALF_MARATHON,
        time_5k="20:00",
        training_days=5,
    )


@pytest.fixture
def ten_k_block(ten_k_input: UserInput) -> TrainingBlock:
    return create_training_plan(ten_k_input)


@pytest.fixture
def priority_race() -> Race:
    return Race(
        id="race-a",
        name="City 10K",
        race_date=date(2026, 11, 15),
        type=RaceType.A,
        distance=Distance.TEN_K,
    )


@pytest.fixture
def tune_up_race() -> Race:
    return Race(
        id="race-b",
        name="Parkrun",
        race_date=date(2026, 11, 1),
        type=RaceType.B,
        distance=Distance.FIVE_K,
    )


# -------------------------------------------------------------------------
# Storage Fixtures
# -------------------------------------------------------------------------


class FixedClock:
    """Clock returning a settable time."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 10, 1, 7, 30, tzinfo=timezone.utc))


@pytest.fixture(params=["memory", "sqlite"])
def key_value_store(request):
    """Each backend the plan store runs on."""
    if request.param == "memory":
        return InMemoryStore()
    return SqlKeyValueStore.from_url("sqlite://")


@pytest.fixture
def plan_store(key_value_store, clock: FixedClock) -> PlanStore:
    return PlanStore(key_value_store, clock=clock)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
