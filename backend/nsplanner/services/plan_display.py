"""Plain-text rendering of paces and training blocks.

Labels come from ``nsplanner.i18n``; session titles and descriptions are
rendered as generated.
"""

from nsplanner.i18n import DEFAULT_LOCALE, Locale, day_name, interval_label, session_type_label, text
from nsplanner.models.common import IntervalType, SessionType, Unit, unit_label
from nsplanner.models.plan import TrainingBlock, TrainingSession, WeekPlan
from nsplanner.models.schemas import Paces
from nsplanner.services.paces import format_pace_range
from nsplanner.services.time_codec import format_pace


def render_paces(paces: Paces, unit: Unit = "km", locale: Locale = DEFAULT_LOCALE) -> list[str]:
    suffix = f"/{unit_label(unit)}"
    lines = [
        text("plan.paces", locale),
        f"  {text('pace.threshold', locale)}: {format_pace(paces.threshold, unit)}{suffix}",
        f"  {text('pace.easy', locale)}: {format_pace(paces.easy, unit)}{suffix}",
        f"  {text('plan.intervals', locale)}:",
    ]
    for interval_type in IntervalType:
        band = format_pace_range(paces.intervals.for_type(interval_type), unit)
        lines.append(f"    {interval_label(interval_type, locale)}: {band}{suffix}")
    return lines


def render_session(session: TrainingSession, locale: Locale = DEFAULT_LOCALE) -> str:
    label = session_type_label(session.type, locale)
    line = f"{day_name(session.day, locale, short=True)}  [{label}] {session.title}"
    if session.type != SessionType.REST:
        line += f": {session.description}"
    return line


def render_week(week: WeekPlan, locale: Locale = DEFAULT_LOCALE) -> list[str]:
    """Render a week as a header line followed by one line per day."""
    header = f"{text('plan.week', locale)} {week.week_number}"
    if week.is_test_week:
        header += f" ({text('plan.testWeek', locale)})"
    if week.total_volume is not None:
        header += f" - {text('plan.volume', locale)}: ~{week.total_volume} km"

    return [header] + [f"  {render_session(session, locale)}" for session in week.sessions]


def render_block(
    block: TrainingBlock,
    unit: Unit = "km",
    locale: Locale = DEFAULT_LOCALE,
) -> list[str]:
    """Render a full block: VDOT, paces, then every week."""
    lines = [
        f"{text('plan.title', locale)} - {text('plan.block', locale)} {block.block_number}",
        f"VDOT: {block.vdot:.1f}",
        "",
        *render_paces(block.paces, unit, locale),
    ]
    for week in block.weeks:
        lines.append("")
        lines.extend(render_week(week, locale))
    return lines
