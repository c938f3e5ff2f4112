"""Builders and constants shared by the tests."""

from datetime import datetime
from typing import List, Optional

import pytz

from models.habit import HabitWithCompletions
from models.task import DayTask

# 2025-01-15 11:30 in Asia/Kolkata
FIXED_NOW = datetime(2025, 1, 15, 6, 0, tzinfo=pytz.utc)
TODAY_KEY = "2025-01-15"


def make_habit(
    habit_id: str,
    completions: Optional[List[bool]] = None,
    goal: int = 20,
    name: Optional[str] = None,
    position: int = 0,
) -> HabitWithCompletions:
    """Build a habit joined with its completion flags."""
    return HabitWithCompletions(
        id=habit_id,
        user_id="u1",
        name=name or habit_id,
        icon="💪",
        goal=goal,
        position=position,
        completions=list(completions or []),
    )


def make_task(
    task_id: str,
    date: str,
    completed: bool = False,
    priority: str = "medium",
) -> DayTask:
    """Build a day task."""
    return DayTask(
        id=task_id,
        user_id="u1",
        name=task_id,
        date=date,
        priority=priority,
        completed=completed,
    )
