# services/habit_aggregator.py

"""
Habit statistics for a single month.

Every function takes the month's habits (joined with their completion flags)
and returns new values; nothing here reads the clock or touches storage.
"""

from typing import List, Sequence

from models.analytics import HabitProgress, HabitStats
from models.habit import HabitWithCompletions
from utils.datetime_utils import WEEK_BUCKETS, week_bucket_index
from utils.math_utils import percentage

DEFAULT_TOP_LIMIT = 5


def completed_on(habit: HabitWithCompletions, day_index: int) -> bool:
    """Completion flag for a day; days past the end of the list are not done."""
    return 0 <= day_index < len(habit.completions) and bool(habit.completions[day_index])


def total_completions(habit: HabitWithCompletions) -> int:
    return sum(1 for completed in habit.completions if completed)


def habit_percentage(habit: HabitWithCompletions) -> int:
    return percentage(total_completions(habit), habit.goal)


def longest_streak(completions: Sequence[bool]) -> int:
    best = current = 0
    for completed in completions:
        if completed:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def best_streak(habits: Sequence[HabitWithCompletions]) -> int:
    """Longest run of consecutive completed days in any one habit."""
    return max((longest_streak(h.completions) for h in habits), default=0)


def daily_consistency(habits: Sequence[HabitWithCompletions], days_in_month: int) -> List[int]:
    return [
        sum(1 for habit in habits if completed_on(habit, day_index))
        for day_index in range(days_in_month)
    ]


def weekly_series(daily: Sequence[int]) -> List[int]:
    weeks = [0] * WEEK_BUCKETS
    for day_index, count in enumerate(daily):
        weeks[week_bucket_index(day_index)] += count
    return weeks


def habit_progress(habit: HabitWithCompletions) -> HabitProgress:
    total = total_completions(habit)
    return HabitProgress(
        habit_id=habit.id,
        name=habit.name,
        icon=habit.icon,
        goal=habit.goal,
        total=total,
        percentage=percentage(total, habit.goal),
    )


def top_habits(progress: Sequence[HabitProgress], limit: int = DEFAULT_TOP_LIMIT) -> List[HabitProgress]:
    # sorted() is stable, ties keep input order
    return sorted(progress, key=lambda p: p.percentage, reverse=True)[:limit]


def overall_percentage(habits: Sequence[HabitWithCompletions]) -> int:
    return percentage(
        sum(total_completions(h) for h in habits),
        sum(h.goal for h in habits),
    )


def aggregate_habits(
    habits: Sequence[HabitWithCompletions],
    days_in_month: int,
    top_limit: int = DEFAULT_TOP_LIMIT,
) -> HabitStats:
    """Compute every habit statistic the dashboard shows for one month."""
    progress = [habit_progress(habit) for habit in habits]
    daily = daily_consistency(habits, days_in_month)
    total = sum(p.total for p in progress)
    goals = sum(p.goal for p in progress)

    return HabitStats(
        habit_count=len(progress),
        per_habit=progress,
        total_completions=total,
        total_goals=goals,
        overall_percentage=percentage(total, goals),
        daily_consistency=daily,
        weekly=weekly_series(daily),
        best_streak=best_streak(habits),
        top_habits=top_habits(progress, top_limit),
    )
