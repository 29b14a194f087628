"""Shared enumerations for plan models."""

from enum import Enum
from typing import Literal

from nsplanner.core.constants import DISTANCE_METERS, KM_PER_MILE

Unit = Literal["km", "mile"]


class Distance(str, Enum):
    """Target race distance."""

    FIVE_K = "5K"
    TEN_K = "10K"
    HALF_MARATHON = "21K"
    MARATHON = "42K"

    @property
    def meters(self) -> float:
        return DISTANCE_METERS[self.value]

    @property
    def kilometers(self) -> float:
        return self.meters / 1000


class SessionType(str, Enum):
    """Kind of prescription for a single day."""

    EASY = "easy"
    THRESHOLD = "threshold"
    LONG = "long"
    TEST = "test"
    REST = "rest"
    RACE = "race"


class IntervalType(str, Enum):
    """Norwegian Singles sub-threshold interval length."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class RaceType(str, Enum):
    """Race priority tier. A races get a longer taper than B races."""

    A = "A"
    B = "B"


def unit_label(unit: Unit) -> str:
    """Short label used after a pace, e.g. ``4:10/km``."""
    return "km" if unit == "km" else "mi"


def unit_factor(unit: Unit) -> float:
    """Multiplier that converts a seconds/km figure into the given unit."""
    return KM_PER_MILE if unit == "mile" else 1.0
