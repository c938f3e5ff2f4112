"""Tests for day task grouping and statistics.

Tests cover:
- Visibility of past, today and future dates
- Selected-day filtering
- Group labels and the overdue check
- Priority counts, including unknown priorities
- Per-day and weekly series
"""

import logging

from helpers import TODAY_KEY, make_task

from models.enums import DateLabel
from services.task_aggregator import (
    aggregate_tasks,
    date_label,
    filter_visible,
    group_by_date,
    is_overdue,
    priority_counts,
    tasks_by_day,
    weekly_series,
)

YEAR, MONTH, DAYS = 2025, 0, 31


def aggregate(tasks, selected_day=None):
    return aggregate_tasks(tasks, YEAR, MONTH, DAYS, TODAY_KEY, selected_day)


class TestGrouping:
    """Tests for bucketing tasks by date."""

    def test_groups_sorted_by_date(self) -> None:
        tasks = [
            make_task("t1", "2025-01-20"),
            make_task("t2", "2025-01-03"),
            make_task("t3", "2025-01-20"),
        ]
        groups = group_by_date(tasks)
        assert list(groups) == ["2025-01-03", "2025-01-20"]
        assert [t.id for t in groups["2025-01-20"]] == ["t1", "t3"]


class TestVisibility:
    """Tests for which tasks the month view shows."""

    def test_single_overdue_high_priority_task(self) -> None:
        stats = aggregate([make_task("t1", "2025-01-10", priority="high")])

        assert [g.date for g in stats.groups] == ["2025-01-10"]
        assert stats.groups[0].label == "Overdue"
        assert stats.total == 1
        assert stats.completed == 0
        assert stats.pending == 1
        assert stats.completion_rate == 0
        assert stats.priority_counts == {"high": 1, "medium": 0, "low": 0}

    def test_completed_past_date_disappears(self) -> None:
        tasks = [
            make_task("t1", "2025-01-10", completed=True),
            make_task("t2", "2025-01-10", completed=True),
        ]
        stats = aggregate(tasks)
        assert stats.groups == []
        assert stats.total == 0
        assert stats.completion_rate == 0

    def test_past_date_keeps_only_unfinished(self) -> None:
        tasks = [
            make_task("t1", "2025-01-10", completed=True),
            make_task("t2", "2025-01-10"),
        ]
        stats = aggregate(tasks)
        assert len(stats.groups) == 1
        group = stats.groups[0]
        assert [t.id for t in group.tasks] == ["t2"]
        assert group.label == DateLabel.OVERDUE.value
        assert stats.total == 1
        assert stats.completed == 0
        assert stats.pending == 1

    def test_today_and_future_keep_everything(self) -> None:
        tasks = [
            make_task("t1", TODAY_KEY, completed=True),
            make_task("t2", TODAY_KEY),
            make_task("t3", "2025-01-20", completed=True),
        ]
        stats = aggregate(tasks)
        assert [g.date for g in stats.groups] == [TODAY_KEY, "2025-01-20"]
        assert stats.groups[0].label == DateLabel.TODAY.value
        assert stats.groups[1].label is None
        assert stats.total == 3
        assert stats.completed == 2
        assert stats.completion_rate == 67

    def test_selected_day_shows_all_its_tasks(self) -> None:
        tasks = [
            make_task("t1", "2025-01-10", completed=True),
            make_task("t2", "2025-01-10"),
            make_task("t3", "2025-01-11"),
            make_task("t4", TODAY_KEY),
        ]
        stats = aggregate(tasks, selected_day=10)
        assert [g.date for g in stats.groups] == ["2025-01-10"]
        assert {t.id for t in stats.visible_tasks} == {"t1", "t2"}
        assert stats.total == 2
        assert stats.completed == 1
        assert stats.completion_rate == 50

    def test_selected_day_without_tasks(self) -> None:
        stats = aggregate([make_task("t1", TODAY_KEY)], selected_day=3)
        assert stats.groups == []
        assert stats.total == 0
        assert stats.tasks_by_day == [0] * DAYS

    def test_filter_visible_returns_ordered_groups(self) -> None:
        tasks = [make_task("t1", "2025-01-20"), make_task("t2", "2025-01-02")]
        visible = filter_visible(tasks, YEAR, MONTH, TODAY_KEY)
        assert list(visible) == ["2025-01-02", "2025-01-20"]

    def test_empty_month(self) -> None:
        stats = aggregate([])
        assert stats.groups == []
        assert stats.total == stats.completed == stats.pending == 0
        assert stats.completion_rate == 0
        assert stats.priority_counts == {"high": 0, "medium": 0, "low": 0}
        assert stats.weekly_total == [0, 0, 0, 0]
        assert stats.weekly_completed == [0, 0, 0, 0]


class TestLabels:
    """Tests for group labels and the overdue check."""

    def test_date_label(self) -> None:
        task = make_task("t1", "2025-01-10")
        assert date_label(TODAY_KEY, TODAY_KEY, []) == "Today"
        assert date_label("2025-01-10", TODAY_KEY, [task]) == "Overdue"
        assert date_label("2025-01-20", TODAY_KEY, [task]) is None

    def test_is_overdue(self) -> None:
        tasks = [
            make_task("t1", "2025-01-10"),
            make_task("t2", "2025-01-11", completed=True),
            make_task("t3", "2025-01-20"),
        ]
        assert is_overdue("2025-01-10", tasks, TODAY_KEY)
        assert not is_overdue("2025-01-11", tasks, TODAY_KEY)
        assert not is_overdue("2025-01-20", tasks, TODAY_KEY)
        assert not is_overdue(TODAY_KEY, tasks, TODAY_KEY)


class TestPriorityCounts:
    """Tests for counting visible tasks by priority."""

    def test_counts_each_priority(self) -> None:
        tasks = [
            make_task("t1", TODAY_KEY, priority="high"),
            make_task("t2", TODAY_KEY, priority="high"),
            make_task("t3", TODAY_KEY, priority="low"),
        ]
        assert priority_counts(tasks) == {"high": 2, "medium": 0, "low": 1}

    def test_unknown_priority_skipped_but_totalled(self, caplog) -> None:
        tasks = [
            make_task("t1", TODAY_KEY, priority="urgent"),
            make_task("t2", TODAY_KEY, priority="medium"),
        ]
        with caplog.at_level(logging.WARNING):
            stats = aggregate(tasks)
        assert stats.priority_counts == {"high": 0, "medium": 1, "low": 0}
        assert stats.total == 2
        assert "urgent" in caplog.text


class TestSeries:
    """Tests for per-day and weekly task series."""

    def test_tasks_by_day(self) -> None:
        tasks = [
            make_task("t1", "2025-01-01"),
            make_task("t2", "2025-01-01"),
            make_task("t3", "2025-01-31"),
            make_task("t4", "2025-02-01"),
        ]
        series = tasks_by_day(tasks, YEAR, MONTH, DAYS)
        assert len(series) == DAYS
        assert series[0] == 2
        assert series[30] == 1
        assert sum(series) == 3

    def test_weekly_buckets(self) -> None:
        tasks = [
            make_task("t1", "2025-01-01", completed=True),
            make_task("t2", "2025-01-08"),
            make_task("t3", "2025-01-22", completed=True),
            make_task("t4", "2025-01-29"),
            make_task("t5", "2025-01-31", completed=True),
        ]
        totals, completed = weekly_series(tasks, YEAR, MONTH, DAYS)
        assert totals == [1, 1, 0, 3]
        assert completed == [1, 0, 0, 2]

    def test_series_use_visible_tasks_only(self) -> None:
        tasks = [
            make_task("t1", "2025-01-02", completed=True),
            make_task("t2", "2025-01-03"),
            make_task("t3", "2025-01-20", completed=True),
        ]
        stats = aggregate(tasks)
        assert stats.tasks_by_day[1] == 0
        assert stats.tasks_by_day[2] == 1
        assert stats.tasks_by_day[19] == 1
        assert stats.weekly_total == [1, 0, 1, 0]
        assert stats.weekly_completed == [0, 0, 1, 0]
        assert sum(stats.weekly_total) == stats.total

    def test_to_dict_is_serialisable(self) -> None:
        stats = aggregate([make_task("t1", TODAY_KEY, completed=True)])
        data = stats.to_dict()
        assert data["total"] == 1
        assert data["groups"][0]["label"] == "Today"
        assert data["groups"][0]["tasks"][0]["id"] == "t1"
