"""Race time and pace string conversion.

Parsing never raises: malformed input yields ``None`` so callers can
treat it as "cannot compute".
"""

from typing import Optional

from nsplanner.models.common import Unit, unit_factor
from nsplanner.models.schemas import ParsedTime


def parse_time(text: Optional[str]) -> Optional[ParsedTime]:
    """Parse a "mm:ss" or "h:mm:ss" string.

    Args:
        text: Time string as typed by the runner.

    Returns:
        ParsedTime, or None when the string has the wrong number of parts,
        a part that is not plain ASCII digits (an optional sign and
        surrounding spaces allowed), a negative part, or minutes/seconds
        of 60 or more. "0:00" parses; callers that divide by the time
        reject a zero total themselves.
    """
    if not text:
        return None

    raw_parts = [part.strip() for part in text.split(":")]
    # int() alone would accept "1_0" and non-ASCII digits
    if not all(part.isascii() and part.lstrip("+-").isdigit() for part in raw_parts):
        return None

    try:
        parts = [int(part) for part in raw_parts]
    except ValueError:
        return None

    if len(parts) == 2:
        hours = 0
        minutes, seconds = parts
    elif len(parts) == 3:
        hours, minutes, seconds = parts
    else:
        return None

    if hours < 0 or minutes < 0 or seconds < 0:
        return None
    if minutes >= 60 or seconds >= 60:
        return None

    return ParsedTime(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        total_seconds=hours * 3600 + minutes * 60 + seconds,
    )


def format_time(total_seconds: float) -> str:
    """Format seconds as H:MM:SS or M:SS string."""
    total = round(total_seconds)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_pace(seconds_per_km: float, unit: Unit = "km") -> str:
    """Format pace as M:SS string, converted to min/mile when asked."""
    pace = round(seconds_per_km * unit_factor(unit))
    minutes, seconds = divmod(pace, 60)
    return f"{minutes}:{seconds:02d}"
