# services/__init__.py

"""
Aggregation services of Schedule Tracker.

Pure functions that turn a month's habits, completion flags and day tasks
into the statistics and series shown on the dashboard. Nothing in this
package performs I/O or reads the clock: "today" is always passed in.
"""

from .habit_aggregator import (
    aggregate_habits,
    best_streak,
    daily_consistency,
    habit_percentage,
    overall_percentage,
    top_habits,
    total_completions,
)
from .task_aggregator import (
    aggregate_tasks,
    filter_visible,
    group_by_date,
    is_overdue,
    priority_counts,
)
from .overview_aggregator import aggregate_overview

__all__ = [
    # Habits
    'aggregate_habits',
    'best_streak',
    'daily_consistency',
    'habit_percentage',
    'overall_percentage',
    'top_habits',
    'total_completions',

    # Tasks
    'aggregate_tasks',
    'filter_visible',
    'group_by_date',
    'is_overdue',
    'priority_counts',

    # Overview
    'aggregate_overview'
]
