"""Training pace derivation for Norwegian Singles.

Paces are pure functions of VDOT (or of a 10K time for the practical
threshold rule):

- Threshold: roughly one-hour race effort
- Easy: 38% slower than threshold
- Sub-threshold intervals: 15K, half marathon and ~30K race paces

Scalar paces are rounded to the nearest second, interval band edges are
floored.
"""

import math
from dataclasses import dataclass

from nsplanner.core.constants import (
    EASY_SLOWDOWN_FROM_THRESHOLD,
    EASY_VDOT_FACTOR,
    EASY_VDOT_OFFSET,
    INTERVAL_RECOVERY_SECONDS,
    THRESHOLD_DISTANCE_METERS,
    THRESHOLD_SLOWDOWN_FROM_10K,
    THRESHOLD_VDOT_FACTOR,
    THRESHOLD_VDOT_OFFSET,
)
from nsplanner.models.common import Distance, IntervalType, Unit
from nsplanner.models.schemas import IntervalPaces, PaceRange, Paces
from nsplanner.services.time_codec import format_pace
from nsplanner.services.vdot import calculate_time_from_vdot, calculate_vdot


@dataclass(frozen=True)
class IntervalTemplate:
    """Fixed Norwegian Singles interval structure."""

    rep_min: int
    rep_max: int
    work: str  # "3–4'" by time, "1K" by distance
    pace_description: str
    recovery: int = INTERVAL_RECOVERY_SECONDS


NS_INTERVALS_BY_TIME: dict[IntervalType, IntervalTemplate] = {
    IntervalType.SHORT: IntervalTemplate(8, 12, "3–4'", "15K pace"),
    IntervalType.MEDIUM: IntervalTemplate(4, 6, "6–8'", "HM pace"),
    IntervalType.LONG: IntervalTemplate(3, 3, "10–12'", "~30K pace"),
}

NS_INTERVALS_BY_DISTANCE: dict[IntervalType, IntervalTemplate] = {
    IntervalType.SHORT: IntervalTemplate(8, 12, "1K", "15K pace"),
    IntervalType.MEDIUM: IntervalTemplate(4, 6, "2K", "HM pace"),
    IntervalType.LONG: IntervalTemplate(3, 3, "3K", "~30K pace"),
}


def calculate_threshold_pace(vdot: float) -> float:
    """Calculate threshold pace (seconds/km) from VDOT.

    Threshold intensity sits around 88% of VDOT. The pace is taken from
    a synthetic 15K "hour effort" solved at the adjusted VDOT.
    """
    threshold_vdot = vdot * THRESHOLD_VDOT_FACTOR + THRESHOLD_VDOT_OFFSET
    threshold_time = calculate_time_from_vdot(threshold_vdot, THRESHOLD_DISTANCE_METERS)
    return threshold_time / (THRESHOLD_DISTANCE_METERS / 1000)


def calculate_threshold_pace_from_10k(time_10k_seconds: float) -> float:
    """Threshold pace as 5% slower than 10K race pace."""
    pace_10k = time_10k_seconds / 10
    return pace_10k * THRESHOLD_SLOWDOWN_FROM_10K


def calculate_easy_pace(vdot: float) -> float:
    """Easy pace (seconds/km) from VDOT via an adjusted marathon effort.

    Alternative to ``calculate_easy_pace_from_threshold``; not used by
    the plan pipeline.
    """
    easy_vdot = vdot * EASY_VDOT_FACTOR + EASY_VDOT_OFFSET
    marathon = Distance.MARATHON
    return calculate_time_from_vdot(easy_vdot, marathon.meters) / marathon.kilometers


def calculate_easy_pace_from_threshold(threshold_pace: float) -> float:
    """Easy pace as 38% slower than threshold."""
    return threshold_pace * EASY_SLOWDOWN_FROM_THRESHOLD


def _race_pace(vdot: float, distance_meters: float) -> float:
    return calculate_time_from_vdot(vdot, distance_meters) / (distance_meters / 1000)


def calculate_ns_interval_paces(vdot: float) -> IntervalPaces:
    """Calculate Norwegian Singles interval pace bands.

    Short (3-4'): 15K pace
    Medium (6-8'): half marathon pace
    Long (10-12'): ~30K pace
    """
    pace_15k = _race_pace(vdot, 15000)
    pace_hm = _race_pace(vdot, Distance.HALF_MARATHON.meters)
    pace_30k = _race_pace(vdot, 30000)

    return IntervalPaces(
        short=PaceRange(min=math.floor(pace_15k - 3), max=math.floor(pace_15k + 4)),
        medium=PaceRange(min=math.floor(pace_hm - 3), max=math.floor(pace_hm + 4)),
        long=PaceRange(min=math.floor(pace_30k - 3), max=math.floor(pace_30k + 5)),
    )


def calculate_paces(vdot: float) -> Paces:
    """Calculate all training paces from VDOT."""
    threshold = calculate_threshold_pace(vdot)
    easy = calculate_easy_pace_from_threshold(threshold)

    return Paces(
        threshold=round(threshold),
        easy=round(easy),
        intervals=calculate_ns_interval_paces(vdot),
    )


def calculate_paces_from_10k(time_10k_seconds: float) -> Paces:
    """Calculate paces from a 10K race time.

    Threshold and easy come from the 10K pace rule; interval bands come
    from the VDOT of the same race.
    """
    threshold = calculate_threshold_pace_from_10k(time_10k_seconds)
    easy = calculate_easy_pace_from_threshold(threshold)
    vdot = calculate_vdot(Distance.TEN_K.meters, time_10k_seconds)

    return Paces(
        threshold=round(threshold),
        easy=round(easy),
        intervals=calculate_ns_interval_paces(vdot),
    )


def format_pace_range(pace_range: PaceRange, unit: Unit = "km") -> str:
    return f"{format_pace(pace_range.min, unit)}–{format_pace(pace_range.max, unit)}"


def get_formatted_paces(paces: Paces, unit: Unit = "km") -> dict:
    """Get formatted pace strings for display."""
    return {
        "threshold": format_pace(paces.threshold, unit),
        "easy": format_pace(paces.easy, unit),
        "intervals": {
            interval_type.value: format_pace_range(paces.intervals.for_type(interval_type), unit)
            for interval_type in IntervalType
        },
    }
