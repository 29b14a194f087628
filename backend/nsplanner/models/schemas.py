"""Value objects produced by the calculation services."""

from pydantic import BaseModel, ConfigDict, Field

from nsplanner.models.common import Distance, IntervalType


class ParsedTime(BaseModel):
    """A race time split into its clock parts.

    Only built by ``time_codec.parse_time``, which enforces the ranges.
    """

    model_config = ConfigDict(frozen=True)

    hours: int = Field(..., ge=0)
    minutes: int = Field(..., ge=0, lt=60)
    seconds: int = Field(..., ge=0, lt=60)
    total_seconds: int = Field(..., ge=0)


class VDOTResult(BaseModel):
    """VDOT derived from one race performance."""

    model_config = ConfigDict(frozen=True)

    vdot: float
    distance: Distance
    time: int  # seconds


class RaceEquivalent(BaseModel):
    """Predicted race time at a given VDOT."""

    model_config = ConfigDict(frozen=True)

    distance: Distance
    time_seconds: int
    time_formatted: str


class PaceRange(BaseModel):
    """Pace window in seconds per kilometer. ``min`` is the faster edge."""

    model_config = ConfigDict(frozen=True)

    min: int
    max: int

    @property
    def midpoint(self) -> int:
        return round((self.min + self.max) / 2)


class IntervalPaces(BaseModel):
    """Pace bands for the three Norwegian Singles interval lengths."""

    model_config = ConfigDict(frozen=True)

    short: PaceRange
    medium: PaceRange
    long: PaceRange

    def for_type(self, interval_type: IntervalType) -> PaceRange:
        bands = {
            IntervalType.SHORT: self.short,
            IntervalType.MEDIUM: self.medium,
            IntervalType.LONG: self.long,
        }
        return bands[IntervalType(interval_type)]


class Paces(BaseModel):
    """Training paces in seconds per kilometer."""

    model_config = ConfigDict(frozen=True)

    threshold: int
    easy: int
    intervals: IntervalPaces
