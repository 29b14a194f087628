"""Service layer for the Norwegian Singles planner.

Services hold the pace and plan calculations plus the snapshot store.
"""

from nsplanner.services.paces import calculate_paces, calculate_paces_from_10k
from nsplanner.services.plan_generator import (
    InvalidTimeFormatError,
    MissingRaceTimeError,
    PlanInputError,
    create_training_plan,
)
from nsplanner.services.storage import InMemoryStore, PlanStore, SqlKeyValueStore, get_plan_store
from nsplanner.services.tapering import apply_race_tapering

__all__ = [
    "calculate_paces",
    "calculate_paces_from_10k",
    "create_training_plan",
    "PlanInputError",
    "MissingRaceTimeError",
    "InvalidTimeFormatError",
    "apply_race_tapering",
    "InMemoryStore",
    "SqlKeyValueStore",
    "PlanStore",
    "get_plan_store",
]
