"""Race taper pass over a generated training block.

Not applied by ``create_training_plan``; the caller decides whether and
where a race goes and calls ``apply_race_tapering`` itself.

Race A: 7 day taper
Race B: 3 day taper
"""

import logging

from nsplanner.core.constants import TAPER_DAYS_A, TAPER_DAYS_B, TAPER_EASY_MINUTES
from nsplanner.models.common import RaceType, SessionType
from nsplanner.models.plan import TrainingBlock, TrainingSession
from nsplanner.models.race import Race
from nsplanner.services.plan_generator import calculate_week_volume, create_race_session

logger = logging.getLogger(__name__)


def taper_days_for(race_type: RaceType) -> int:
    return TAPER_DAYS_A if race_type == RaceType.A else TAPER_DAYS_B


def _taper_session(session: TrainingSession) -> TrainingSession:
    if session.type == SessionType.THRESHOLD:
        # Same reps and paces, relabeled
        return session.model_copy(
            update={
                "title": "NS Intervals (Taper)",
                "description": "Reduced volume - maintain intensity",
            }
        )
    if session.type == SessionType.LONG:
        return session.model_copy(
            update={
                "type": SessionType.EASY,
                "title": "Easy Run (Taper)",
                "description": f"{TAPER_EASY_MINUTES} min @ easy pace",
                "duration": TAPER_EASY_MINUTES,
            }
        )
    return session


def apply_race_tapering(
    block: TrainingBlock,
    race: Race,
    race_week: int,
    race_day: int,
) -> TrainingBlock:
    """Place a race in the block and taper the days before it.

    Walks back from the race day, crossing into the previous week's
    Sunday at a week boundary and stopping at the first day of the
    block. Every walked day counts toward the taper, whatever its type.

    Args:
        block: Block to taper. Left unchanged.
        race: Race to place.
        race_week: Week of the race (1-6).
        race_day: Day of the race (1-7, Monday = 1).

    Returns:
        A new TrainingBlock, or ``block`` itself when the race position is
        outside the block.
    """
    week_index = race_week - 1
    day_index = race_day - 1
    if not 0 <= week_index < len(block.weeks):
        return block
    if not 0 <= day_index < len(block.weeks[week_index].sessions):
        return block

    sessions = [list(week.sessions) for week in block.weeks]
    touched = {week_index}
    sessions[week_index][day_index] = create_race_session(race_day, race)

    days_to_taper = taper_days_for(race.type)
    current_week = week_index
    current_day = day_index - 1

    while days_to_taper > 0:
        if current_day < 0:
            if current_week == 0:
                break
            current_week -= 1
            current_day = len(sessions[current_week]) - 1
            continue

        sessions[current_week][current_day] = _taper_session(sessions[current_week][current_day])
        touched.add(current_week)
        current_day -= 1
        days_to_taper -= 1

    weeks = [
        week.model_copy(
            update={
                "sessions": sessions[index],
                "total_volume": calculate_week_volume(sessions[index]),
            }
        )
        if index in touched
        else week
        for index, week in enumerate(block.weeks)
    ]

    logger.info(
        "Tapered for race %r (%s): week %d day %d, %d taper day(s) unused",
        race.name,
        race.type.value,
        race_week,
        race_day,
        days_to_taper,
    )

    return block.model_copy(update={"weeks": weeks})
