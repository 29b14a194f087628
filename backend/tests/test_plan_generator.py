"""Tests for the 6-week Norwegian Singles block generator."""

import pytest

from nsplanner.models import Distance, IntervalType, SessionType, UserInput
from nsplanner.services.paces import calculate_paces, calculate_paces_from_10k
from nsplanner.services.plan_generator import (
    BASE_WEEK_STRUCTURE,
    InvalidTimeFormatError,
    MissingRaceTimeError,
    PlanInputError,
    SessionSlot,
    calculate_week_volume,
    clamp_training_days,
    create_race_session,
    create_session,
    create_training_plan,
    generate_week_plan,
    get_interval_reps,
    get_week_load_percentage,
    get_week_structure,
)

E = SessionType.EASY
T = SessionType.THRESHOLD
L = SessionType.LONG
R = SessionType.REST
X = SessionType.TEST


@pytest.fixture
def paces():
    return calculate_paces_from_10k(2220)


class TestWeekStructure:
    """Tests for reducing the template to the runner's training days."""

    @pytest.mark.plan
    @pytest.mark.parametrize(
        "days,expected",
        [
            (7, [E, T, E, T, E, T, L]),
            (6, [E, T, E, T, R, T, L]),
            (5, [R, T, E, T, R, T, L]),
            (4, [R, T, R, T, R, T, L]),
            (3, [R, T, R, T, R, R, L]),
        ],
    )
    def test_rest_days_follow_removal_order(self, days: int, expected: list):
        assert [slot.type for slot in get_week_structure(days)] == expected

    @pytest.mark.plan
    @pytest.mark.parametrize("days,clamped", [(1, 3), (2, 3), (3, 3), (7, 7), (9, 7), (5.8, 5)])
    def test_clamps_training_days(self, days, clamped: int):
        assert clamp_training_days(days) == clamped

    @pytest.mark.plan
    def test_base_template_untouched(self):
        get_week_structure(3)

        assert BASE_WEEK_STRUCTURE[4].type == SessionType.EASY

    @pytest.mark.plan
    @pytest.mark.parametrize("days", range(1, 10))
    def test_tuesday_and_sunday_always_train(self, days: int):
        structure = get_week_structure(days)

        assert structure[1].type == SessionType.THRESHOLD
        assert structure[6].type == SessionType.LONG


class TestSessions:
    """Tests for single-day prescriptions."""

    @pytest.mark.plan
    def test_easy_session(self, paces):
        session = create_session(1, SessionSlot(E), paces, 1, Distance.TEN_K)

        assert session.title == "Easy Run"
        assert session.description == "50 min @ easy pace"
        assert session.duration == 50
        assert session.paces.target == paces.easy

    @pytest.mark.plan
    def test_unload_week_shortens_runs(self, paces):
        easy = create_session(1, SessionSlot(E), paces, 6, Distance.TEN_K)
        long_run = create_session(7, SessionSlot(L), paces, 6, Distance.TEN_K)

        assert easy.duration == 35
        assert long_run.duration == 55
        assert long_run.title == "Long Run"

    @pytest.mark.plan
    def test_threshold_session(self, paces):
        session = create_session(2, SessionSlot(T, IntervalType.SHORT), paces, 1, Distance.TEN_K)

        assert session.title == "NS Short Sub-T"
        assert session.description.startswith("12 × 3–4' @ ")
        assert session.description.endswith("/km (60s rec)")
        assert session.intervals.reps.min == session.intervals.reps.max == 12
        assert session.intervals.pace_range == paces.intervals.short
        assert session.paces.target == paces.intervals.short.midpoint
        assert session.paces.range == paces.intervals.short

    @pytest.mark.plan
    def test_threshold_description_in_miles(self, paces):
        session = create_session(
            4, SessionSlot(T, IntervalType.MEDIUM), paces, 1, Distance.TEN_K, unit="mile"
        )

        assert session.title == "NS Medium Sub-T"
        assert session.description.endswith("/mi (60s rec)")

    @pytest.mark.plan
    def test_test_and_rest_sessions(self, paces):
        test_day = create_session(6, SessionSlot(X), paces, 6, Distance.TEN_K)
        rest_day = create_session(5, SessionSlot(R), paces, 1, Distance.TEN_K)

        assert test_day.title == "Test Day"
        assert test_day.description == "Time trial 5K or 10K - max effort"
        assert rest_day.title == "Rest"
        assert rest_day.duration is None

    @pytest.mark.plan
    def test_race_session(self, priority_race, tune_up_race):
        session = create_race_session(7, priority_race)

        assert session.type == SessionType.RACE
        assert session.title == "Race Day: City 10K"
        assert session.description == "10K race - Priority"
        assert session.race == priority_race
        assert create_race_session(3, tune_up_race).description == "5K race - Tune-up"

    @pytest.mark.plan
    def test_race_slot_requires_race(self, paces):
        with pytest.raises(ValueError):
            create_session(7, SessionSlot(SessionType.RACE), paces, 1, Distance.TEN_K)

    @pytest.mark.plan
    @pytest.mark.parametrize(
        "distance,week,interval_type,expected",
        [
            (Distance.FIVE_K, 1, IntervalType.SHORT, 10),
            (Distance.FIVE_K, 6, IntervalType.LONG, 2),
            (Distance.HALF_MARATHON, 3, IntervalType.LONG, 4),
            (Distance.MARATHON, 5, IntervalType.MEDIUM, 8),
            (Distance.MARATHON, 6, IntervalType.SHORT, 8),
        ],
    )
    def test_interval_reps(self, distance, week, interval_type, expected):
        assert get_interval_reps(week, interval_type, distance) == expected


class TestWeekPlan:
    """Tests for whole weeks and their volume."""

    @pytest.mark.plan
    def test_full_week_volume(self, paces):
        week = generate_week_plan(1, 7, paces, Distance.TEN_K)

        # 3x50 + 85 + (25 + 12*3.5) + (25 + 6*7) + (25 + 3*11) = 427 min
        assert week.total_volume == 78
        assert calculate_week_volume(week.sessions) == 78

    @pytest.mark.plan
    def test_test_week(self, paces):
        week = generate_week_plan(6, 7, paces, Distance.TEN_K)

        assert week.is_test_week
        assert week.is_recovery_week
        assert week.session_types() == [E, T, E, T, E, X, L]
        # 3x35 + 55 + (25 + 8*3.5) + (25 + 4*7) = 266 min
        assert week.total_volume == 48

    @pytest.mark.plan
    def test_test_day_overrides_rest(self, paces):
        week = generate_week_plan(6, 3, paces, Distance.TEN_K)

        assert week.session_types() == [R, T, R, T, R, X, L]

    @pytest.mark.plan
    def test_days_numbered_monday_first(self, paces):
        week = generate_week_plan(2, 5, paces, Distance.FIVE_K)

        assert [session.day for session in week.sessions] == list(range(1, 8))

    @pytest.mark.plan
    def test_rest_weeks_have_no_volume_from_rest(self, paces):
        week = generate_week_plan(1, 3, paces, Distance.TEN_K)

        # 85 + (25 + 12*3.5) + (25 + 6*7) = 219 min
        assert week.total_volume == round(219 / 5.5)

    @pytest.mark.plan
    @pytest.mark.parametrize("week,expected", [(1, 100), (5, 100), (6, 70)])
    def test_week_load_percentage(self, week: int, expected: int):
        assert get_week_load_percentage(week) == expected


class TestCreateTrainingPlan:
    """Tests for the plan entry point."""

    @pytest.mark.plan
    def test_block_shape(self, ten_k_block):
        assert ten_k_block.block_number == 1
        assert len(ten_k_block.weeks) == 6
        assert [week.week_number for week in ten_k_block.weeks] == [1, 2, 3, 4, 5, 6]
        assert all(len(week.sessions) == 7 for week in ten_k_block.weeks)
        assert [week.is_test_week for week in ten_k_block.weeks] == [False] * 5 + [True]

    @pytest.mark.plan
    def test_build_weeks_identical(self, ten_k_block):
        first = ten_k_block.week(1)

        for week_number in range(2, 6):
            assert ten_k_block.week(week_number).sessions == first.sessions

    @pytest.mark.plan
    def test_uses_10k_time(self, ten_k_block):
        assert ten_k_block.vdot == 56.9
        assert ten_k_block.paces == calculate_paces_from_10k(2220)

    @pytest.mark.plan
    def test_prefers_10k_over_5k(self):
        user_input = UserInput(target_distance=Distance.TEN_K, time_5k="15:00", time_10k="37:00")

        assert create_training_plan(user_input).vdot == 56.9

    @pytest.mark.plan
    def test_uses_5k_time(self, five_k_input):
        block = create_training_plan(five_k_input)

        assert block.paces == calculate_paces(block.vdot)
        assert block.week(1).session_types() == [R, T, E, T, R, T, L]

    @pytest.mark.plan
    def test_missing_times(self):
        with pytest.raises(MissingRaceTimeError, match="At least one race time is required"):
            create_training_plan(UserInput(target_distance=Distance.TEN_K))

    @pytest.mark.plan
    @pytest.mark.parametrize(
        "field,kwargs",
        [
            ("10K", {"time_10k": "37:99"}),
            ("5K", {"time_5k": "twenty"}),
            ("10K", {"time_5k": "20:00", "time_10k": "bad"}),
            ("10K", {"time_10k": "0:00"}),
            ("5K", {"time_5k": "0:00:00"}),
        ],
    )
    def test_invalid_time(self, field: str, kwargs: dict):
        with pytest.raises(InvalidTimeFormatError, match=f"Invalid {field} time format") as exc_info:
            create_training_plan(UserInput(target_distance=Distance.TEN_K, **kwargs))

        assert exc_info.value.field == field

    @pytest.mark.plan
    def test_input_errors_are_value_errors(self):
        assert issubclass(PlanInputError, ValueError)
        assert issubclass(MissingRaceTimeError, PlanInputError)

    @pytest.mark.plan
    def test_races_are_not_applied(self, priority_race):
        user_input = UserInput(
            target_distance=Distance.TEN_K,
            time_10k="37:00",
            training_days=7,
            races=[priority_race],
        )
        block = create_training_plan(user_input)

        assert all(SessionType.RACE not in week.session_types() for week in block.weeks)
