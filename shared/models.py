from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from models.enums import TaskPriority
from models.habit import MAX_GOAL, MIN_GOAL


# Habit requests
class HabitCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str = "💪"
    goal: int = 20  # clamped to 1..31 by the store

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Habit name must not be blank')
        return v


class GoalUpdate(BaseModel):
    goal: int = Field(..., ge=MIN_GOAL, le=MAX_GOAL)


class HabitReorder(BaseModel):
    ordered_ids: List[str]


class HabitMove(BaseModel):
    target_id: str


class CompletionToggle(BaseModel):
    year: int = Field(..., ge=1970, le=9999)
    month: int = Field(..., ge=0, le=11)
    day_index: int = Field(..., ge=0, le=30)


# Task requests
class TaskCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    priority: TaskPriority = TaskPriority.MEDIUM

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Task name must not be blank')
        return v


# Responses
class HealthCheck(BaseModel):
    status: str
    service: str
    version: str
    timestamp: float
    uptime: float
    records: Optional[dict] = None
