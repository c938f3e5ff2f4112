"""Glue between the data manager and the aggregation services.

Each helper fetches one month's snapshot for one owner and hands it to the
aggregators; the routers only shape the result into JSON.
"""

from typing import List, Optional, Tuple

from dashboard.core.data_manager import DataManager
from dashboard.dependencies import MonthWindow
from models.analytics import HabitStats, OverviewStats, TaskStats
from models.habit import HabitWithCompletions
from models.task import DayTask
from services.habit_aggregator import aggregate_habits
from services.overview_aggregator import aggregate_overview
from services.task_aggregator import aggregate_tasks
from utils.datetime_utils import month_date_range


def month_habits(dm: DataManager, user_id: str, window: MonthWindow) -> List[HabitWithCompletions]:
    return dm.get_habits_with_completions(user_id, window.year, window.month)


def month_tasks(dm: DataManager, user_id: str, window: MonthWindow) -> List[DayTask]:
    start_key, end_key = month_date_range(window.year, window.month)
    return dm.get_tasks(user_id, start_key, end_key)


def habit_report(
    dm: DataManager, user_id: str, window: MonthWindow, top_limit: int
) -> Tuple[List[HabitWithCompletions], HabitStats]:
    habits = month_habits(dm, user_id, window)
    return habits, aggregate_habits(habits, window.days_in_month, top_limit)


def task_report(
    dm: DataManager, user_id: str, window: MonthWindow, selected_day: Optional[int] = None
) -> TaskStats:
    tasks = month_tasks(dm, user_id, window)
    return aggregate_tasks(
        tasks,
        window.year,
        window.month,
        window.days_in_month,
        window.today_key,
        selected_day,
    )


def overview_report(dm: DataManager, user_id: str, window: MonthWindow, top_limit: int) -> OverviewStats:
    _, habit_stats = habit_report(dm, user_id, window, top_limit)
    tasks = month_tasks(dm, user_id, window)
    return aggregate_overview(
        habit_stats,
        tasks,
        window.today_key,
        window.current_day,
        window.days_in_month,
        today_day=window.today_day_in_month,
    )
