"""Training plan generator.

Generates 6-week Norwegian Singles training blocks. Progression comes
from pace recalibration between blocks, not from volume: weeks 1-5 are
identical and week 6 is an unload week ending in a test.

Weekly structure (7 days):
- Monday: Easy
- Tuesday: Sub-T short
- Wednesday: Easy
- Thursday: Sub-T medium
- Friday: Easy
- Saturday: Sub-T long (test in week 6)
- Sunday: Long run
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from nsplanner.core.constants import (
    ASSUMED_MINUTES_PER_KM,
    COOLDOWN_MINUTES,
    MAX_TRAINING_DAYS,
    MIN_TRAINING_DAYS,
    TEST_WEEK,
    WARMUP_MINUTES,
    WEEKS_PER_BLOCK,
)
from nsplanner.models.common import Distance, IntervalType, SessionType, Unit, unit_label
from nsplanner.models.plan import (
    IntervalSession,
    RepRange,
    SessionPaces,
    TrainingBlock,
    TrainingSession,
    WeekPlan,
)
from nsplanner.models.race import Race
from nsplanner.models.schemas import Paces
from nsplanner.models.user import UserInput
from nsplanner.services.paces import NS_INTERVALS_BY_TIME, calculate_paces, calculate_paces_from_10k
from nsplanner.services.time_codec import format_pace
from nsplanner.services.vdot import calculate_vdot, parse_race_seconds

logger = logging.getLogger(__name__)


class PlanInputError(ValueError):
    """Base exception for input that cannot produce a plan."""

    pass


class MissingRaceTimeError(PlanInputError):
    """Neither a 5K nor a 10K time was given."""

    def __init__(self) -> None:
        super().__init__("At least one race time is required")


class InvalidTimeFormatError(PlanInputError):
    """The chosen race time string did not parse."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field} time format")


@dataclass(frozen=True)
class SessionSlot:
    """Template entry for one weekday."""

    type: SessionType
    interval_type: Optional[IntervalType] = None


REST_SLOT = SessionSlot(SessionType.REST)

BASE_WEEK_STRUCTURE: tuple[SessionSlot, ...] = (
    SessionSlot(SessionType.EASY),  # Monday
    SessionSlot(SessionType.THRESHOLD, IntervalType.SHORT),  # Tuesday
    SessionSlot(SessionType.EASY),  # Wednesday
    SessionSlot(SessionType.THRESHOLD, IntervalType.MEDIUM),  # Thursday
    SessionSlot(SessionType.EASY),  # Friday
    SessionSlot(SessionType.THRESHOLD, IntervalType.LONG),  # Saturday
    SessionSlot(SessionType.LONG),  # Sunday
)

# Slots turned into rest days when training fewer than 7 days, in order:
# Friday easy, Monday easy, Wednesday easy, Saturday long Sub-T, Thursday
# medium Sub-T. Tuesday and Sunday are never removed.
DAY_REMOVAL_PRIORITY: tuple[int, ...] = (4, 0, 2, 5, 3)

TEST_DAY_INDEX = 5  # Saturday


@dataclass(frozen=True)
class DurationConfig:
    """Run duration in minutes for build weeks and the unload week."""

    base: int
    unload: int


EASY_RUN_DURATIONS: dict[Distance, DurationConfig] = {
    Distance.FIVE_K: DurationConfig(base=45, unload=30),
    Distance.TEN_K: DurationConfig(base=50, unload=35),
    Distance.HALF_MARATHON: DurationConfig(base=60, unload=40),
    Distance.MARATHON: DurationConfig(base=75, unload=50),
}

LONG_RUN_DURATIONS: dict[Distance, DurationConfig] = {
    Distance.FIVE_K: DurationConfig(base=70, unload=45),
    Distance.TEN_K: DurationConfig(base=85, unload=55),
    Distance.HALF_MARATHON: DurationConfig(base=105, unload=70),
    Distance.MARATHON: DurationConfig(base=130, unload=90),
}


@dataclass(frozen=True)
class RepCounts:
    """Repetitions per interval length for one week."""

    short: int
    medium: int
    long: int

    def for_type(self, interval_type: IntervalType) -> int:
        return {
            IntervalType.SHORT: self.short,
            IntervalType.MEDIUM: self.medium,
            IntervalType.LONG: self.long,
        }[interval_type]


def _stable_reps(build: RepCounts, unload: RepCounts) -> tuple[RepCounts, ...]:
    return (build,) * (WEEKS_PER_BLOCK - 1) + (unload,)


INTERVAL_REPS_BY_DISTANCE: dict[Distance, tuple[RepCounts, ...]] = {
    Distance.FIVE_K: _stable_reps(RepCounts(10, 5, 3), RepCounts(6, 3, 2)),
    Distance.TEN_K: _stable_reps(RepCounts(12, 6, 3), RepCounts(8, 4, 2)),
    Distance.HALF_MARATHON: _stable_reps(RepCounts(12, 6, 4), RepCounts(8, 4, 3)),
    Distance.MARATHON: _stable_reps(RepCounts(14, 8, 5), RepCounts(8, 5, 3)),
}

# Share of full volume per week, for display
WEEK_VOLUME_MULTIPLIERS: tuple[float, ...] = (1.0, 1.0, 1.0, 1.0, 1.0, 0.7)

# Work minutes per repetition, used by the volume estimate
PER_REP_MINUTES: dict[IntervalType, float] = {
    IntervalType.SHORT: 3.5,
    IntervalType.MEDIUM: 7,
    IntervalType.LONG: 11,
}

INTERVAL_NAMES: dict[IntervalType, str] = {
    IntervalType.SHORT: "Short",
    IntervalType.MEDIUM: "Medium",
    IntervalType.LONG: "Long",
}


def clamp_training_days(training_days: float) -> int:
    """Clamp a requested day count into the supported 3-7 range."""
    return max(MIN_TRAINING_DAYS, min(MAX_TRAINING_DAYS, math.floor(training_days)))


def get_week_structure(training_days: float) -> list[SessionSlot]:
    """Get the weekly template reduced to the given number of training days.

    Returns a new list; the base template is never modified.
    """
    structure = list(BASE_WEEK_STRUCTURE)
    days_to_remove = len(structure) - clamp_training_days(training_days)

    for index in DAY_REMOVAL_PRIORITY[:days_to_remove]:
        structure[index] = REST_SLOT

    return structure


def get_easy_duration(week_number: int, target_distance: Distance) -> int:
    config = EASY_RUN_DURATIONS[target_distance]
    return config.unload if week_number == TEST_WEEK else config.base


def get_long_duration(week_number: int, target_distance: Distance) -> int:
    config = LONG_RUN_DURATIONS[target_distance]
    return config.unload if week_number == TEST_WEEK else config.base


def get_interval_reps(
    week_number: int,
    interval_type: IntervalType,
    target_distance: Distance,
) -> int:
    """Get interval repetitions for a week, interval length and target distance."""
    weeks = INTERVAL_REPS_BY_DISTANCE[target_distance]
    week_config = weeks[week_number - 1] if 1 <= week_number <= len(weeks) else weeks[0]
    return week_config.for_type(interval_type)


def create_race_session(day: int, race: Race) -> TrainingSession:
    """Race day prescription for the given race."""
    tier = "Priority" if race.is_priority else "Tune-up"
    return TrainingSession(
        day=day,
        type=SessionType.RACE,
        title=f"Race Day: {race.name}",
        description=f"{race.distance.value} race - {tier}",
        race=race,
    )


def _create_threshold_session(
    day: int,
    interval_type: IntervalType,
    paces: Paces,
    week_number: int,
    target_distance: Distance,
    unit: Unit,
) -> TrainingSession:
    template = NS_INTERVALS_BY_TIME[interval_type]
    pace_range = paces.intervals.for_type(interval_type)
    reps = get_interval_reps(week_number, interval_type, target_distance)
    pace_text = f"{format_pace(pace_range.min, unit)}-{format_pace(pace_range.max, unit)}"

    return TrainingSession(
        day=day,
        type=SessionType.THRESHOLD,
        title=f"NS {INTERVAL_NAMES[interval_type]} Sub-T",
        description=(
            f"{reps} × {template.work} @ {pace_text}/{unit_label(unit)} "
            f"({template.recovery}s rec)"
        ),
        intervals=IntervalSession(
            type=interval_type,
            reps=RepRange(min=reps, max=reps),
            duration=template.work,
            pace_range=pace_range,
            recovery=template.recovery,
        ),
        paces=SessionPaces(target=pace_range.midpoint, range=pace_range),
    )


def create_session(
    day: int,
    slot: SessionSlot,
    paces: Paces,
    week_number: int,
    target_distance: Distance,
    unit: Unit = "km",
    race: Optional[Race] = None,
) -> TrainingSession:
    """Create a training session for a specific day.

    Args:
        day: Day of week, Monday = 1.
        slot: Template entry for the day.
        paces: Paces for the block.
        week_number: Week within the block (1-6).
        target_distance: Target race distance.
        unit: Unit used in interval descriptions.
        race: Race to attach when the slot is a race day.

    Returns:
        TrainingSession for the day.
    """
    if slot.type == SessionType.EASY:
        duration = get_easy_duration(week_number, target_distance)
        return TrainingSession(
            day=day,
            type=SessionType.EASY,
            title="Easy Run",
            description=f"{duration} min @ easy pace",
            duration=duration,
            paces=SessionPaces(target=paces.easy),
        )

    if slot.type == SessionType.THRESHOLD:
        return _create_threshold_session(
            day,
            slot.interval_type or IntervalType.SHORT,
            paces,
            week_number,
            target_distance,
            unit,
        )

    if slot.type == SessionType.LONG:
        duration = get_long_duration(week_number, target_distance)
        return TrainingSession(
            day=day,
            type=SessionType.LONG,
            title="Long Run",
            description=f"{duration} min @ easy pace",
            duration=duration,
            paces=SessionPaces(target=paces.easy),
        )

    if slot.type == SessionType.TEST:
        return TrainingSession(
            day=day,
            type=SessionType.TEST,
            title="Test Day",
            description="Time trial 5K or 10K - max effort",
        )

    if slot.type == SessionType.RACE:
        if race is None:
            raise ValueError("A race session needs a race")
        return create_race_session(day, race)

    return TrainingSession(
        day=day,
        type=SessionType.REST,
        title="Rest",
        description="Active recovery or complete rest",
    )


def calculate_week_volume(sessions: list[TrainingSession]) -> int:
    """Approximate weekly volume in km.

    Easy and long runs count their duration. Threshold sessions count
    warmup + reps x work + cooldown. Minutes convert at 5:30/km.
    """
    total_minutes = 0.0

    for session in sessions:
        if session.type in (SessionType.EASY, SessionType.LONG):
            total_minutes += session.duration or 0
        elif session.type == SessionType.THRESHOLD and session.intervals:
            work_minutes = session.intervals.reps.min * PER_REP_MINUTES[session.intervals.type]
            total_minutes += WARMUP_MINUTES + work_minutes + COOLDOWN_MINUTES

    return round(total_minutes / ASSUMED_MINUTES_PER_KM)


def generate_week_plan(
    week_number: int,
    training_days: float,
    paces: Paces,
    target_distance: Distance,
    unit: Unit = "km",
) -> WeekPlan:
    """Generate one week of the block."""
    is_test_week = week_number == TEST_WEEK
    structure = get_week_structure(training_days)

    if is_test_week:
        # Test day wins over a rest conversion
        structure[TEST_DAY_INDEX] = SessionSlot(SessionType.TEST)

    sessions = [
        create_session(index + 1, slot, paces, week_number, target_distance, unit)
        for index, slot in enumerate(structure)
    ]

    return WeekPlan(
        week_number=week_number,
        is_test_week=is_test_week,
        is_recovery_week=is_test_week,
        sessions=sessions,
        total_volume=calculate_week_volume(sessions),
    )


def generate_training_block(
    block_number: int,
    user_input: UserInput,
    vdot: float,
    paces: Paces,
) -> TrainingBlock:
    """Generate a complete 6-week training block from one vdot/paces pair."""
    weeks = [
        generate_week_plan(
            week_number,
            user_input.training_days,
            paces,
            user_input.target_distance,
            user_input.unit,
        )
        for week_number in range(1, WEEKS_PER_BLOCK + 1)
    ]

    return TrainingBlock(block_number=block_number, weeks=weeks, vdot=vdot, paces=paces)


def get_week_load_percentage(week_number: int) -> int:
    """Week load relative to a full week, in percent."""
    return round(WEEK_VOLUME_MULTIPLIERS[week_number - 1] * 100)


def create_training_plan(user_input: UserInput) -> TrainingBlock:
    """Create the first training block from user input.

    The 10K time is preferred when both times are given. Races in the
    input are carried along but not applied; call
    ``tapering.apply_race_tapering`` explicitly to taper for one.

    Raises:
        MissingRaceTimeError: If no race time is given.
        InvalidTimeFormatError: If the chosen race time does not parse or
            is zero.
    """
    if user_input.time_10k:
        time_seconds = parse_race_seconds(user_input.time_10k)
        if time_seconds is None:
            raise InvalidTimeFormatError("10K")
        vdot = calculate_vdot(Distance.TEN_K.meters, time_seconds)
        paces = calculate_paces_from_10k(time_seconds)
        source = Distance.TEN_K
    elif user_input.time_5k:
        time_seconds = parse_race_seconds(user_input.time_5k)
        if time_seconds is None:
            raise InvalidTimeFormatError("5K")
        vdot = calculate_vdot(Distance.FIVE_K.meters, time_seconds)
        paces = calculate_paces(vdot)
        source = Distance.FIVE_K
    else:
        raise MissingRaceTimeError()

    block = generate_training_block(1, user_input, vdot, paces)

    logger.info(
        "Created training plan: target=%s days=%d source=%s vdot=%.1f",
        user_input.target_distance.value,
        clamp_training_days(user_input.training_days),
        source.value,
        vdot,
    )
    if user_input.races:
        logger.debug("%d race(s) carried without tapering", len(user_input.races))

    return block
