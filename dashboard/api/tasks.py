import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dashboard.core.data_manager import DataManager
from dashboard.core.reports import task_report
from dashboard.dependencies import MonthWindow, get_current_user_id, get_data_manager, get_month_window
from shared.models import TaskCreate
from utils.datetime_utils import format_date_display

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("/", response_model=Dict[str, Any])
def get_month_tasks(
    day: Optional[int] = Query(None, ge=1, le=31, description="Show only this day of the month"),
    window: MonthWindow = Depends(get_month_window),
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    """
    Visible tasks of the month grouped by date, with statistics over what is shown.

    Without ``day``, finished tasks of past dates are hidden.
    """
    if day is not None and day > window.days_in_month:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Day {day} is outside a {window.days_in_month}-day month",
        )

    stats = task_report(data_manager, user_id, window, selected_day=day)

    return {
        "year": window.year,
        "month": window.month,
        "selected_day": day,
        "today": window.today_key,
        "groups": [
            {
                "date": group.date,
                "display": format_date_display(group.date),
                "label": group.label,
                "tasks": [task.to_dict() for task in group.tasks],
            }
            for group in stats.groups
        ],
        "summary": {
            "total": stats.total,
            "completed": stats.completed,
            "pending": stats.pending,
            "completion_rate": stats.completion_rate,
        },
    }


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=Dict[str, Any])
def create_task(
    payload: TaskCreate,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    task = data_manager.create_task(user_id, payload.name, payload.date, payload.priority.value)
    return task.to_dict()


@router.post("/{task_id}/toggle", response_model=Dict[str, Any])
def toggle_task(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    return data_manager.toggle_task(user_id, task_id).to_dict()


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    data_manager: DataManager = Depends(get_data_manager),
):
    data_manager.delete_task(user_id, task_id)
