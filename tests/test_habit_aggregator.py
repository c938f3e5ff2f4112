"""Tests for the habit aggregator.

Tests cover:
- Per-habit totals and percentages (short lists, zero goal, >100%)
- Daily consistency and weekly buckets
- Best streak
- Top habits ranking (ordering, ties, limit)
- Month-level aggregation, including the empty month
"""

from helpers import make_habit

from services.habit_aggregator import (
    aggregate_habits,
    best_streak,
    completed_on,
    daily_consistency,
    habit_percentage,
    habit_progress,
    longest_streak,
    overall_percentage,
    top_habits,
    total_completions,
    weekly_series,
)

JANUARY_DAYS = 31


def first_days(done: int, length: int = JANUARY_DAYS):
    return [True] * done + [False] * (length - done)


class TestPerHabit:
    """Tests for totals and percentages of a single habit."""

    def test_total_counts_true_entries(self) -> None:
        habit = make_habit("h1", [True, False, True, True])
        assert total_completions(habit) == 3

    def test_empty_completions(self) -> None:
        habit = make_habit("h1", [])
        assert total_completions(habit) == 0
        assert habit_percentage(habit) == 0

    def test_percentage_rounds(self) -> None:
        assert habit_percentage(make_habit("h1", first_days(15), goal=20)) == 75
        # 1/8 = 12.5% rounds half up
        assert habit_percentage(make_habit("h1", [True], goal=8)) == 13
        assert habit_percentage(make_habit("h1", [True, True], goal=3)) == 67

    def test_percentage_above_goal_is_not_capped(self) -> None:
        habit = make_habit("h1", first_days(30), goal=20)
        assert habit_percentage(habit) == 150

    def test_zero_goal_is_zero_percent(self) -> None:
        habit = make_habit("h1", [True, True], goal=0)
        assert habit_percentage(habit) == 0

    def test_completed_on_past_end_of_list(self) -> None:
        habit = make_habit("h1", [True])
        assert completed_on(habit, 0)
        assert not completed_on(habit, 1)
        assert not completed_on(habit, 30)

    def test_habit_progress_record(self) -> None:
        progress = habit_progress(make_habit("h1", first_days(10), goal=20, name="Read"))
        assert progress.habit_id == "h1"
        assert progress.name == "Read"
        assert progress.total == 10
        assert progress.percentage == 50


class TestSeries:
    """Tests for daily consistency and weekly buckets."""

    def test_daily_length_matches_month(self) -> None:
        habits = [make_habit("h1", [True]), make_habit("h2", [])]
        assert len(daily_consistency(habits, 28)) == 28
        assert len(daily_consistency([], 31)) == 31

    def test_daily_counts_habits_per_day(self) -> None:
        habits = [
            make_habit("h1", [True, True, False]),
            make_habit("h2", [True, False, True]),
        ]
        daily = daily_consistency(habits, 30)
        assert daily[:4] == [2, 1, 1, 0]
        assert sum(daily) == sum(total_completions(h) for h in habits)

    def test_weekly_has_four_buckets(self) -> None:
        for days in (28, 29, 30, 31):
            weekly = weekly_series([1] * days)
            assert len(weekly) == 4
            assert sum(weekly) == days

    def test_weekly_tail_folded_into_last_bucket(self) -> None:
        assert weekly_series([1] * 31) == [7, 7, 7, 10]


class TestBestStreak:
    """Tests for the longest run of completed days."""

    def test_longest_run_within_one_habit(self) -> None:
        assert longest_streak([True, True, False, True, True, True, False]) == 3

    def test_false_resets_run(self) -> None:
        assert longest_streak([True, True, False, True]) == 2

    def test_streak_grows_with_appended_days(self) -> None:
        base = [True, False, True]
        assert longest_streak(base) == 1
        assert longest_streak(base + [True]) == 2
        assert longest_streak(base + [True, True]) == 3

    def test_streaks_do_not_span_habits(self) -> None:
        habits = [
            make_habit("h1", [False, False, True, True]),
            make_habit("h2", [True, True, True, False]),
        ]
        assert best_streak(habits) == 3

    def test_no_habits(self) -> None:
        assert best_streak([]) == 0


class TestTopHabits:
    """Tests for the ranking by percentage."""

    def test_sorted_descending_and_limited(self) -> None:
        habits = [make_habit(f"h{i}", first_days(i), goal=10) for i in range(1, 8)]
        top = top_habits([habit_progress(h) for h in habits], limit=5)
        assert [p.habit_id for p in top] == ["h7", "h6", "h5", "h4", "h3"]

    def test_ties_keep_input_order(self) -> None:
        habits = [
            make_habit("a", first_days(5), goal=10),
            make_habit("b", first_days(8), goal=10),
            make_habit("c", first_days(5), goal=10),
        ]
        top = top_habits([habit_progress(h) for h in habits])
        assert [p.habit_id for p in top] == ["b", "a", "c"]

    def test_empty(self) -> None:
        assert top_habits([]) == []


class TestAggregateHabits:
    """Tests for the month-level habit statistics."""

    def test_january_example(self) -> None:
        habit = make_habit("h1", first_days(15), goal=20)
        stats = aggregate_habits([habit], JANUARY_DAYS)

        assert stats.habit_count == 1
        assert stats.total_completions == 15
        assert stats.per_habit[0].percentage == 75
        assert stats.overall_percentage == 75
        assert stats.best_streak == 15
        assert stats.weekly == [7, 7, 1, 0]
        assert len(stats.daily_consistency) == JANUARY_DAYS

    def test_overall_percentage_uses_sums(self) -> None:
        habits = [
            make_habit("h1", first_days(10), goal=20),
            make_habit("h2", first_days(5), goal=10),
        ]
        stats = aggregate_habits(habits, JANUARY_DAYS)
        assert stats.total_goals == 30
        assert stats.overall_percentage == 50
        assert overall_percentage(habits) == 50

    def test_short_lists_are_padded(self) -> None:
        habits = [make_habit("h1", [True, True]), make_habit("h2", [True])]
        stats = aggregate_habits(habits, 30)
        assert stats.daily_consistency[:3] == [2, 1, 0]
        assert sum(stats.weekly) == sum(stats.daily_consistency) == 3

    def test_empty_month(self) -> None:
        stats = aggregate_habits([], 30)
        assert stats.habit_count == 0
        assert stats.total_completions == 0
        assert stats.overall_percentage == 0
        assert stats.best_streak == 0
        assert stats.daily_consistency == [0] * 30
        assert stats.weekly == [0, 0, 0, 0]
        assert stats.top_habits == []

    def test_top_limit(self) -> None:
        habits = [make_habit(f"h{i}", first_days(i)) for i in range(8)]
        assert len(aggregate_habits(habits, 31, top_limit=3).top_habits) == 3
        assert len(aggregate_habits(habits, 31).top_habits) == 5

    def test_same_input_same_output(self) -> None:
        habits = [make_habit("h1", first_days(12), goal=15), make_habit("h2", [False, True])]
        assert aggregate_habits(habits, 31) == aggregate_habits(habits, 31)
        assert habits[0].completions == first_days(12)
