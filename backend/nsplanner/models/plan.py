"""Training plan models.

A ``TrainingBlock`` holds six ``WeekPlan`` entries, each with exactly
seven ``TrainingSession`` days ordered Monday to Sunday.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nsplanner.models.common import IntervalType, SessionType
from nsplanner.models.race import Race
from nsplanner.models.schemas import PaceRange, Paces


class RepRange(BaseModel):
    """Repetition count range for an interval session."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)


class IntervalSession(BaseModel):
    """Sub-threshold interval prescription."""

    model_config = ConfigDict(frozen=True)

    type: IntervalType
    reps: RepRange
    duration: str  # e.g. "3–4'"
    pace_range: PaceRange
    recovery: int  # seconds


class SessionPaces(BaseModel):
    """Target pace for a session, seconds per km."""

    model_config = ConfigDict(frozen=True)

    target: int
    range: Optional[PaceRange] = None


class TrainingSession(BaseModel):
    """One day's prescription."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(..., ge=1, le=7)  # Monday = 1
    type: SessionType
    title: str
    description: str
    duration: Optional[int] = None  # minutes
    intervals: Optional[IntervalSession] = None
    paces: Optional[SessionPaces] = None
    race: Optional[Race] = None


class WeekPlan(BaseModel):
    """Week within a training block."""

    model_config = ConfigDict(frozen=True)

    week_number: int = Field(..., ge=1, le=6)
    is_test_week: bool
    is_recovery_week: bool
    sessions: list[TrainingSession]
    total_volume: Optional[int] = None  # km, rough estimate

    def session_types(self) -> list[SessionType]:
        return [session.type for session in self.sessions]


class TrainingBlock(BaseModel):
    """Six-week training cycle produced by one plan generation call."""

    model_config = ConfigDict(frozen=True)

    block_number: int = Field(..., ge=1)
    weeks: list[WeekPlan]
    vdot: float
    paces: Paces

    def week(self, week_number: int) -> WeekPlan:
        return self.weeks[week_number - 1]
