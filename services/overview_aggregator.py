# services/overview_aggregator.py

from typing import Optional, Sequence

from models.analytics import HabitStats, OverviewStats
from models.task import DayTask
from utils.math_utils import ratio


def aggregate_overview(
    habit_stats: HabitStats,
    tasks: Sequence[DayTask],
    today_key: str,
    current_day: int,
    days_in_month: int,
    today_day: Optional[int] = None,
) -> OverviewStats:
    """Headline numbers of the overview page.

    ``tasks`` is the raw task list of the month, not the visible set: today's
    tasks are never hidden, and the monthly completion total counts every
    finished task. ``current_day`` (1-based) drives month progress only.
    ``today_day`` picks today's habit completions; it defaults to
    ``current_day`` and 0 means today is outside the month.
    """
    if today_day is None:
        today_day = current_day
    daily = habit_stats.daily_consistency
    day_index = today_day - 1
    today_habits = daily[day_index] if 0 <= day_index < len(daily) else 0

    today_tasks = [task for task in tasks if task.date == today_key]
    completed_tasks = sum(1 for task in tasks if task.completed)

    return OverviewStats(
        habit_count=habit_stats.habit_count,
        today_habit_completions=today_habits,
        today_tasks_total=len(today_tasks),
        today_tasks_completed=sum(1 for task in today_tasks if task.completed),
        current_day=current_day,
        days_in_month=days_in_month,
        month_progress=ratio(current_day, days_in_month),
        total_completions=habit_stats.total_completions + completed_tasks,
    )
