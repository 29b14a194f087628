#!/usr/bin/env python3
"""Generate a Norwegian Singles training block from a race time.

Usage:
    # 10K time, 5 training days
    python scripts/generate_plan.py --target 21K --time-10k 42:30

    # English labels, paces per mile, 4 days
    python scripts/generate_plan.py --target 10K --time-5k 20:00 --days 4 --unit mile --locale en

    # Estimate the missing time and race equivalents only
    python scripts/generate_plan.py --time-5k 20:00 --estimate

    # Taper for a priority race on Sunday of week 6 and save the result
    python scripts/generate_plan.py --target 10K --time-10k 42:30 \
        --race-name "City 10K" --race-type A --race-week 6 --race-day 7 --save

    # Show the saved plan
    python scripts/generate_plan.py --show-saved
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nsplanner.core.config import get_settings
from nsplanner.i18n import LOCALES, distance_label, resolve_locale, text
from nsplanner.models import Distance, Race, RaceType, UserInput
from nsplanner.services.plan_display import render_block
from nsplanner.services.plan_generator import PlanInputError, create_training_plan
from nsplanner.services.storage import get_plan_store
from nsplanner.services.tapering import apply_race_tapering
from nsplanner.services.vdot import (
    estimate_5k_from_10k,
    estimate_10k_from_5k,
    get_race_equivalents,
    get_vdot_from_race,
)


def print_estimates(args: argparse.Namespace, locale: str) -> int:
    """Print the estimated counterpart time and race equivalents."""
    if args.time_10k:
        result = get_vdot_from_race(Distance.TEN_K, args.time_10k)
        estimate = estimate_5k_from_10k(args.time_10k)
        other = Distance.FIVE_K
    elif args.time_5k:
        result = get_vdot_from_race(Distance.FIVE_K, args.time_5k)
        estimate = estimate_10k_from_5k(args.time_5k)
        other = Distance.TEN_K
    else:
        print(f"Error: {text('form.validation.required', locale)}")
        return 1

    if result is None or estimate is None:
        print(f"Error: {text('form.validation.format', locale)}")
        return 1

    print(f"VDOT: {result.vdot:.1f}")
    print(f"{distance_label(other, locale)}: ~{estimate}")
    print("-" * 40)
    for equivalent in get_race_equivalents(result.vdot):
        print(f"  {distance_label(equivalent.distance, locale):<15} {equivalent.time_formatted}")
    return 0


def show_saved(requested_locale: str | None, default_locale: str) -> int:
    """Print the saved plan in the requested, saved or configured locale."""
    store = get_plan_store()
    data = store.get_user_data()
    if data is None or data.current_block is None:
        print("No saved plan found")
        return 1

    locale = resolve_locale(requested_locale or store.get_saved_locale() or default_locale)
    unit = data.input.unit if data.input else "km"
    print(f"Saved: {data.updated_at:%Y-%m-%d %H:%M}")
    print("\n".join(render_block(data.current_block, unit, locale)))
    return 0


def build_race(args: argparse.Namespace) -> Race:
    return Race(
        id="cli-race",
        name=args.race_name,
        race_date=date.today(),
        type=RaceType(args.race_type),
        distance=Distance(args.race_distance or args.target),
    )


def main() -> int:
    """Main entry point for the plan script."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Generate a Norwegian Singles training block"
    )
    parser.add_argument(
        "--target",
        choices=[distance.value for distance in Distance],
        default=Distance.TEN_K.value,
        help="Target race distance",
    )
    parser.add_argument("--time-5k", help="Recent 5K time (mm:ss)")
    parser.add_argument("--time-10k", help="Recent 10K time (mm:ss or h:mm:ss)")
    parser.add_argument(
        "--days",
        type=int,
        default=settings.default_training_days,
        help="Training days per week (3-7)",
    )
    parser.add_argument(
        "--unit",
        choices=["km", "mile"],
        default=settings.default_unit,
        help="Pace unit",
    )
    parser.add_argument(
        "--locale",
        choices=list(LOCALES),
        default=None,
        help="Label language (defaults to the configured locale)",
    )
    parser.add_argument(
        "--estimate",
        action="store_true",
        help="Only print VDOT, the estimated other time and race equivalents",
    )
    parser.add_argument("--race-name", help="Race to taper for")
    parser.add_argument(
        "--race-type",
        choices=[race_type.value for race_type in RaceType],
        default=RaceType.A.value,
        help="Race priority (A: 7-day taper, B: 3-day taper)",
    )
    parser.add_argument(
        "--race-distance",
        choices=[distance.value for distance in Distance],
        help="Race distance (defaults to the target distance)",
    )
    parser.add_argument("--race-week", type=int, default=6, help="Week of the race (1-6)")
    parser.add_argument("--race-day", type=int, default=7, help="Day of the race (1-7, Monday = 1)")
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save input, paces and block as the current plan",
    )
    parser.add_argument(
        "--show-saved",
        action="store_true",
        help="Print the saved plan and exit",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    locale = resolve_locale(args.locale or settings.default_locale)

    if args.show_saved:
        return show_saved(args.locale, settings.default_locale)

    if args.estimate:
        return print_estimates(args, locale)

    user_input = UserInput(
        target_distance=Distance(args.target),
        time_5k=args.time_5k,
        time_10k=args.time_10k,
        training_days=args.days,
        unit=args.unit,
    )

    try:
        block = create_training_plan(user_input)
    except PlanInputError as e:
        print(f"Error: {e}")
        return 1

    if args.race_name:
        block = apply_race_tapering(block, build_race(args), args.race_week, args.race_day)

    print("\n".join(render_block(block, args.unit, locale)))

    if args.save:
        store = get_plan_store()
        store.save_input(user_input, block.vdot, block.paces)
        store.save_block(block)
        if args.locale:
            store.save_locale(args.locale)
        print(f"\n✅ Plan saved to {settings.storage_url}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
