# services/task_aggregator.py

"""
Day task grouping and statistics for a month view.

Visibility rules:
- with a selected day, every task of that day is shown and nothing else;
- otherwise past dates keep only unfinished tasks (a finished past date
  disappears), today and future dates keep everything.

All counts and series are computed over the visible tasks only.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from models.analytics import TaskGroup, TaskStats
from models.enums import PRIORITY_ORDER, DateLabel
from models.task import DayTask
from utils.datetime_utils import (
    WEEK_BUCKETS,
    format_date_key,
    is_past_date,
    is_today,
    week_bucket_index,
)
from utils.math_utils import percentage

logger = logging.getLogger(__name__)


def group_by_date(tasks: Iterable[DayTask]) -> "OrderedDict[str, List[DayTask]]":
    """Bucket tasks by date key, buckets in ascending date order."""
    groups: Dict[str, List[DayTask]] = {}
    for task in tasks:
        groups.setdefault(task.date, []).append(task)
    return OrderedDict(sorted(groups.items()))


def filter_visible(
    tasks: Iterable[DayTask],
    year: int,
    month: int,
    today_key: str,
    selected_day: Optional[int] = None,
) -> "OrderedDict[str, List[DayTask]]":
    grouped = group_by_date(tasks)

    if selected_day is not None:
        selected_key = format_date_key(year, month, selected_day)
        return OrderedDict(
            (date_key, date_tasks) for date_key, date_tasks in grouped.items()
            if date_key == selected_key
        )

    visible: "OrderedDict[str, List[DayTask]]" = OrderedDict()
    for date_key, date_tasks in grouped.items():
        if is_past_date(date_key, today_key):
            incomplete = [t for t in date_tasks if not t.completed]
            if incomplete:
                visible[date_key] = incomplete
        else:
            visible[date_key] = date_tasks
    return visible


def date_label(date_key: str, today_key: str, date_tasks: Sequence[DayTask]) -> Optional[str]:
    """Label of a visible date group."""
    if is_today(date_key, today_key):
        return DateLabel.TODAY.value
    if is_past_date(date_key, today_key) and date_tasks:
        return DateLabel.OVERDUE.value
    return None


def is_overdue(date_key: str, tasks: Iterable[DayTask], today_key: str) -> bool:
    """A date is overdue when it is in the past and still has an unfinished task.

    Dates whose tasks are all done are not overdue, matching their absence
    from the default grouping.
    """
    if not is_past_date(date_key, today_key):
        return False
    return any(t.date == date_key and not t.completed for t in tasks)


def priority_counts(tasks: Iterable[DayTask]) -> Dict[str, int]:
    """Visible tasks per priority; values outside low/medium/high are skipped."""
    counts = {priority.value: 0 for priority in PRIORITY_ORDER}
    for task in tasks:
        if task.priority in counts:
            counts[task.priority] += 1
        else:
            logger.warning(f"⚠️ Task {task.id} has unknown priority {task.priority!r}, not counted")
    return counts


def _day_index_by_key(year: int, month: int, days_in_month: int) -> Dict[str, int]:
    return {
        format_date_key(year, month, day_index + 1): day_index
        for day_index in range(days_in_month)
    }


def tasks_by_day(tasks: Iterable[DayTask], year: int, month: int, days_in_month: int) -> List[int]:
    index_by_key = _day_index_by_key(year, month, days_in_month)
    series = [0] * days_in_month
    for task in tasks:
        day_index = index_by_key.get(task.date)
        if day_index is not None:
            series[day_index] += 1
    return series


def weekly_series(
    tasks: Iterable[DayTask], year: int, month: int, days_in_month: int
) -> Tuple[List[int], List[int]]:
    """Weekly (total, completed) counts over the four week buckets."""
    index_by_key = _day_index_by_key(year, month, days_in_month)
    totals = [0] * WEEK_BUCKETS
    completed = [0] * WEEK_BUCKETS
    for task in tasks:
        day_index = index_by_key.get(task.date)
        if day_index is None:
            continue
        bucket = week_bucket_index(day_index)
        totals[bucket] += 1
        if task.completed:
            completed[bucket] += 1
    return totals, completed


def aggregate_tasks(
    tasks: Sequence[DayTask],
    year: int,
    month: int,
    days_in_month: int,
    today_key: str,
    selected_day: Optional[int] = None,
) -> TaskStats:
    """Group the month's tasks for display and compute statistics over what is shown."""
    visible_groups = filter_visible(tasks, year, month, today_key, selected_day)

    groups = [
        TaskGroup(date=date_key, tasks=list(date_tasks), label=date_label(date_key, today_key, date_tasks))
        for date_key, date_tasks in visible_groups.items()
    ]
    visible = [task for group in groups for task in group.tasks]

    total = len(visible)
    completed = sum(1 for task in visible if task.completed)
    weekly_total, weekly_completed = weekly_series(visible, year, month, days_in_month)

    return TaskStats(
        groups=groups,
        total=total,
        completed=completed,
        pending=total - completed,
        completion_rate=percentage(completed, total),
        tasks_by_day=tasks_by_day(visible, year, month, days_in_month),
        priority_counts=priority_counts(visible),
        weekly_total=weekly_total,
        weekly_completed=weekly_completed,
    )
