#!/usr/bin/env python3
"""
Charts API for the Schedule Tracker dashboard
Labelled datasets for the habit and task charts, ready for a Chart.js front end
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from dashboard.config import DashboardSettings
from dashboard.core.data_manager import DataManager
from dashboard.core.reports import habit_report, task_report
from dashboard.dependencies import (
    MonthWindow,
    get_current_user_id,
    get_data_manager,
    get_month_window,
    get_settings,
)
from models.analytics import HabitStats, TaskStats
from models.enums import PRIORITY_ORDER

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/charts", tags=["charts"])

# ============================================================================
# PAYLOAD BUILDERS
# ============================================================================


def _day_labels(days_in_month: int) -> List[int]:
    return list(range(1, days_in_month + 1))


def _dataset(label: str, data: List[Any], color: Any, **extra: Any) -> Dict[str, Any]:
    dataset = {"label": label, "data": data, "backgroundColor": color}
    dataset.update(extra)
    return dataset


def build_habit_charts(stats: HabitStats, days_in_month: int, settings: DashboardSettings) -> Dict[str, Any]:
    """Daily consistency, completed/remaining doughnut, weekly line and the top habits"""
    remaining = max(0, stats.total_goals - stats.total_completions)

    return {
        "cards": {
            "habits_tracked": stats.habit_count,
            "completions": stats.total_completions,
            "success_rate": stats.overall_percentage,
            "best_streak": stats.best_streak,
        },
        "daily_consistency": {
            "type": "bar",
            "labels": _day_labels(days_in_month),
            "datasets": [
                _dataset("Completions", stats.daily_consistency, settings.get_chart_color("indigo")),
            ],
        },
        "completion": {
            "type": "doughnut",
            "labels": ["Completed", "Remaining"],
            "datasets": [
                _dataset(
                    "Habits",
                    [stats.total_completions, remaining],
                    [settings.get_chart_color("green"), settings.get_chart_color("gray")],
                ),
            ],
        },
        "weekly": {
            "type": "line",
            "labels": [f"Week {i + 1}" for i in range(len(stats.weekly))],
            "datasets": [
                _dataset(
                    "Completions",
                    stats.weekly,
                    settings.get_chart_color("pink"),
                    borderColor=settings.get_chart_color("pink"),
                ),
            ],
        },
        "top_habits": [
            {
                "name": p.name,
                "icon": p.icon,
                "total": p.total,
                "goal": p.goal,
                "percentage": p.percentage,
            }
            for p in stats.top_habits
        ],
    }


def build_task_charts(stats: TaskStats, days_in_month: int, settings: DashboardSettings) -> Dict[str, Any]:
    """Tasks per day, completed/pending doughnut, priority doughnut and weekly lines"""
    priorities = [p.value for p in PRIORITY_ORDER]

    return {
        "cards": {
            "total": stats.total,
            "completed": stats.completed,
            "pending": stats.pending,
            "completion_rate": stats.completion_rate,
        },
        "tasks_by_day": {
            "type": "bar",
            "labels": _day_labels(days_in_month),
            "datasets": [
                _dataset("Tasks", stats.tasks_by_day, settings.get_chart_color("pink")),
            ],
        },
        "status": {
            "type": "doughnut",
            "labels": ["Completed", "Pending"],
            "datasets": [
                _dataset(
                    "Tasks",
                    [stats.completed, stats.pending],
                    [settings.get_chart_color("green"), settings.get_chart_color("gray")],
                ),
            ],
        },
        "priority": {
            "type": "doughnut",
            "labels": [p.capitalize() for p in priorities],
            "datasets": [
                _dataset(
                    "Priority",
                    [stats.priority_counts.get(p, 0) for p in priorities],
                    [settings.PRIORITY_COLORS[p] for p in priorities],
                ),
            ],
        },
        "weekly": {
            "type": "line",
            "labels": [f"W{i + 1}" for i in range(len(stats.weekly_total))],
            "datasets": [
                _dataset(
                    "Total",
                    stats.weekly_total,
                    settings.get_chart_color("indigo"),
                    borderColor=settings.get_chart_color("indigo"),
                ),
                _dataset(
                    "Completed",
                    stats.weekly_completed,
                    settings.get_chart_color("green"),
                    borderColor=settings.get_chart_color("green"),
                ),
            ],
        },
    }


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.get("/habits", response_model=Dict[str, Any])
def get_habit_charts(
    window: MonthWindow = Depends(get_month_window),
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
    app_settings: DashboardSettings = Depends(get_settings),
):
    _, stats = habit_report(data_manager, user_id, window, app_settings.TOP_HABITS_LIMIT)
    return build_habit_charts(stats, window.days_in_month, app_settings)


@router.get("/tasks", response_model=Dict[str, Any])
def get_task_charts(
    day: Optional[int] = Query(None, ge=1, le=31),
    window: MonthWindow = Depends(get_month_window),
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
    app_settings: DashboardSettings = Depends(get_settings),
):
    if day is not None and day > window.days_in_month:
        raise HTTPException(status_code=422, detail=f"Day {day} is outside a {window.days_in_month}-day month")

    stats = task_report(data_manager, user_id, window, selected_day=day)
    return build_task_charts(stats, window.days_in_month, app_settings)
