"""Plan models for the Norwegian Singles planner."""

from nsplanner.models.common import Distance, IntervalType, RaceType, SessionType, Unit
from nsplanner.models.plan import (
    IntervalSession,
    RepRange,
    SessionPaces,
    TrainingBlock,
    TrainingSession,
    WeekPlan,
)
from nsplanner.models.race import Race
from nsplanner.models.schemas import (
    IntervalPaces,
    PaceRange,
    Paces,
    ParsedTime,
    RaceEquivalent,
    VDOTResult,
)
from nsplanner.models.user import SNAPSHOT_VERSION, UserData, UserInput

__all__ = [
    # Enums
    "Distance",
    "IntervalType",
    "RaceType",
    "SessionType",
    "Unit",
    # Calculation results
    "ParsedTime",
    "VDOTResult",
    "RaceEquivalent",
    "PaceRange",
    "IntervalPaces",
    "Paces",
    # Plan
    "RepRange",
    "IntervalSession",
    "SessionPaces",
    "TrainingSession",
    "WeekPlan",
    "TrainingBlock",
    # Race
    "Race",
    # User
    "UserInput",
    "UserData",
    "SNAPSHOT_VERSION",
]
