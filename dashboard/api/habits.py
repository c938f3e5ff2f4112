import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from dashboard.config import DashboardSettings
from dashboard.core.data_manager import DataManager
from dashboard.core.reports import habit_report
from dashboard.dependencies import (
    MonthWindow,
    get_current_user_id,
    get_data_manager,
    get_month_window,
    get_settings,
)
from shared.models import CompletionToggle, GoalUpdate, HabitCreate, HabitMove, HabitReorder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/habits", tags=["habits"])


@router.get("/", response_model=Dict[str, Any])
def get_month_habits(
    window: MonthWindow = Depends(get_month_window),
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
    app_settings: DashboardSettings = Depends(get_settings),
):
    """Habits of the month with their completion flags and progress"""
    habits, stats = habit_report(data_manager, user_id, window, app_settings.TOP_HABITS_LIMIT)
    progress = {p.habit_id: p for p in stats.per_habit}

    return {
        "year": window.year,
        "month": window.month,
        "days_in_month": window.days_in_month,
        "today": window.today_key,
        "habits": [
            {
                **habit.to_dict(),
                "total": progress[habit.id].total,
                "percentage": progress[habit.id].percentage,
            }
            for habit in habits
        ],
    }


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=Dict[str, Any])
def create_habit(
    payload: HabitCreate,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    habit = data_manager.create_habit(user_id, payload.name, icon=payload.icon, goal=payload.goal)
    return {**habit.to_dict(), "completions": []}


@router.patch("/{habit_id}/goal", response_model=Dict[str, Any])
def update_goal(
    habit_id: str,
    payload: GoalUpdate,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    return data_manager.update_habit_goal(user_id, habit_id, payload.goal).to_dict()


@router.post("/reorder", response_model=Dict[str, Any])
def reorder_habits(
    payload: HabitReorder,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    habits = data_manager.reorder_habits(user_id, payload.ordered_ids)
    return {"habits": [h.to_dict() for h in habits]}


@router.post("/{habit_id}/move", response_model=Dict[str, Any])
def move_habit(
    habit_id: str,
    payload: HabitMove,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    """Drag-and-drop: put the habit where the target habit is"""
    habits = data_manager.move_habit(user_id, habit_id, payload.target_id)
    return {"habits": [h.to_dict() for h in habits]}


@router.delete("/{habit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_habit(
    habit_id: str,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    data_manager.delete_habit(user_id, habit_id)


@router.post("/{habit_id}/toggle", response_model=Dict[str, Any])
def toggle_completion(
    habit_id: str,
    payload: CompletionToggle,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    record = data_manager.toggle_completion(
        user_id, habit_id, payload.year, payload.month, payload.day_index
    )
    return record.to_dict()
