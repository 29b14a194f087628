"""VDOT calculation service based on Jack Daniels' Running Formula.

This module computes VDOT from a race result and inverts it to predict
race times at other distances. VDOT is the common currency: every
distance prediction shares the same single fitness scalar.
"""

import logging
import math
from typing import Optional

from nsplanner.core.constants import (
    VDOT_SEARCH_MAX_SECONDS,
    VDOT_SEARCH_MIN_SECONDS,
    VDOT_SEARCH_TOLERANCE,
)
from nsplanner.models.common import Distance
from nsplanner.models.schemas import RaceEquivalent, VDOTResult
from nsplanner.services.time_codec import format_time, parse_time

logger = logging.getLogger(__name__)


def calculate_vdot(distance_meters: float, time_seconds: float) -> float:
    """Calculate VDOT from a race result.

    Based on Jack Daniels' formulas from "Daniels' Running Formula".

    Args:
        distance_meters: Race distance in meters.
        time_seconds: Race time in seconds.

    Returns:
        VDOT rounded to one decimal (typically between 30-85).
    """
    time_minutes = time_seconds / 60.0
    velocity = distance_meters / time_minutes  # meters per minute

    # Oxygen cost of running at this velocity
    vo2 = -4.60 + 0.182258 * velocity + 0.000104 * (velocity**2)

    # Fraction of VO2max sustainable for this duration
    pct_vo2max = (
        0.8
        + 0.1894393 * math.exp(-0.012778 * time_minutes)
        + 0.2989558 * math.exp(-0.1932605 * time_minutes)
    )

    return round(vo2 / pct_vo2max, 1)


def calculate_time_from_vdot(vdot: float, distance_meters: float) -> int:
    """Calculate expected race time for a given VDOT and distance.

    Binary search over 1 minute to 6 hours. VDOT falls strictly as time
    grows for a fixed distance, so ``low`` always runs faster than the
    target and ``high`` slower.

    Args:
        vdot: VDOT value.
        distance_meters: Target distance in meters.

    Returns:
        Expected time in whole seconds.
    """
    low = VDOT_SEARCH_MIN_SECONDS
    high = VDOT_SEARCH_MAX_SECONDS
    iterations = 0

    while high - low > 1:
        iterations += 1
        mid = (low + high) // 2
        calculated_vdot = calculate_vdot(distance_meters, mid)

        if abs(calculated_vdot - vdot) < VDOT_SEARCH_TOLERANCE:
            logger.debug(
                "VDOT %.1f over %.1fm solved at %ss after %d iterations",
                vdot, distance_meters, mid, iterations,
            )
            return mid

        if calculated_vdot > vdot:
            # Too fast, need a longer time
            low = mid
        else:
            high = mid

    return round((low + high) / 2)


def parse_race_seconds(time_text: Optional[str]) -> Optional[int]:
    """Parse a race time into seconds, or None if it cannot be used.

    A zero time parses as a clock value but has no VDOT.
    """
    parsed = parse_time(time_text)
    if parsed is None or parsed.total_seconds <= 0:
        return None
    return parsed.total_seconds


def get_vdot_from_race(distance: Distance, time_text: str) -> Optional[VDOTResult]:
    """Get VDOT from a race result string, or None if it is not a usable time."""
    time_seconds = parse_race_seconds(time_text)
    if time_seconds is None:
        return None

    return VDOTResult(
        vdot=calculate_vdot(distance.meters, time_seconds),
        distance=distance,
        time=time_seconds,
    )


def estimate_race_time(vdot: float, distance: Distance) -> int:
    """Estimate race time in seconds for a distance given VDOT."""
    return calculate_time_from_vdot(vdot, distance.meters)


def _estimate_between(source: Distance, target: Distance, time_text: str) -> Optional[str]:
    time_seconds = parse_race_seconds(time_text)
    if time_seconds is None:
        return None

    vdot = calculate_vdot(source.meters, time_seconds)
    return format_time(calculate_time_from_vdot(vdot, target.meters))


def estimate_5k_from_10k(time_10k: str) -> Optional[str]:
    """Estimate a 5K time string from a 10K time string."""
    return _estimate_between(Distance.TEN_K, Distance.FIVE_K, time_10k)


def estimate_10k_from_5k(time_5k: str) -> Optional[str]:
    """Estimate a 10K time string from a 5K time string."""
    return _estimate_between(Distance.FIVE_K, Distance.TEN_K, time_5k)


def get_race_equivalents(vdot: float) -> list[RaceEquivalent]:
    """Calculate equivalent race times for standard distances.

    Args:
        vdot: VDOT value.

    Returns:
        List of RaceEquivalent, shortest distance first.
    """
    equivalents = []
    for distance in Distance:
        time_seconds = estimate_race_time(vdot, distance)
        equivalents.append(
            RaceEquivalent(
                distance=distance,
                time_seconds=time_seconds,
                time_formatted=format_time(time_seconds),
            )
        )
    return equivalents
