from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from dashboard.config import DashboardSettings
from dashboard.core.data_manager import DataManager
from dashboard.core.reports import habit_report, overview_report, task_report
from dashboard.dependencies import (
    MonthWindow,
    get_current_user_id,
    get_data_manager,
    get_month_window,
    get_settings,
)

router = APIRouter(prefix="/api/stats", tags=["statistics"])


def _window_info(window: MonthWindow) -> Dict[str, Any]:
    return {
        "year": window.year,
        "month": window.month,
        "days_in_month": window.days_in_month,
        "today": window.today_key,
    }


@router.get("/habits", response_model=Dict[str, Any])
def get_habit_stats(
    window: MonthWindow = Depends(get_month_window),
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
    app_settings: DashboardSettings = Depends(get_settings),
):
    """
    Habit statistics of the month: totals, success rate, best streak,
    daily consistency, weekly buckets and the top habits
    """
    _, stats = habit_report(data_manager, user_id, window, app_settings.TOP_HABITS_LIMIT)
    return {**_window_info(window), **stats.to_dict()}


@router.get("/tasks", response_model=Dict[str, Any])
def get_task_stats(
    day: Optional[int] = Query(None, ge=1, le=31),
    window: MonthWindow = Depends(get_month_window),
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    """Task statistics over the visible tasks of the month"""
    if day is not None and day > window.days_in_month:
        raise HTTPException(status_code=422, detail=f"Day {day} is outside a {window.days_in_month}-day month")

    stats = task_report(data_manager, user_id, window, selected_day=day)
    result = stats.to_dict()
    # the grouped listing is served by /api/tasks
    result.pop("groups")
    return {**_window_info(window), "selected_day": day, **result}


@router.get("/overview", response_model=Dict[str, Any])
def get_overview_stats(
    window: MonthWindow = Depends(get_month_window),
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
    app_settings: DashboardSettings = Depends(get_settings),
):
    """Headline numbers of the overview page"""
    overview = overview_report(data_manager, user_id, window, app_settings.TOP_HABITS_LIMIT)
    return {**_window_info(window), **overview.to_dict()}
