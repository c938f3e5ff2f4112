# models/analytics.py

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

from models.task import DayTask


@dataclass
class HabitProgress:
    habit_id: str
    name: str
    icon: str
    goal: int
    total: int
    percentage: int


@dataclass
class HabitStats:
    habit_count: int = 0
    per_habit: List[HabitProgress] = field(default_factory=list)
    total_completions: int = 0
    total_goals: int = 0
    overall_percentage: int = 0
    daily_consistency: List[int] = field(default_factory=list)
    weekly: List[int] = field(default_factory=lambda: [0, 0, 0, 0])
    best_streak: int = 0
    top_habits: List[HabitProgress] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TaskGroup:
    date: str
    tasks: List[DayTask] = field(default_factory=list)
    label: Optional[str] = None  # "Today", "Overdue" or None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TaskStats:
    groups: List[TaskGroup] = field(default_factory=list)
    total: int = 0
    completed: int = 0
    pending: int = 0
    completion_rate: int = 0
    tasks_by_day: List[int] = field(default_factory=list)
    priority_counts: Dict[str, int] = field(default_factory=dict)
    weekly_total: List[int] = field(default_factory=lambda: [0, 0, 0, 0])
    weekly_completed: List[int] = field(default_factory=lambda: [0, 0, 0, 0])

    @property
    def visible_tasks(self) -> List[DayTask]:
        return [task for group in self.groups for task in group.tasks]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class OverviewStats:
    habit_count: int = 0
    today_habit_completions: int = 0
    today_tasks_total: int = 0
    today_tasks_completed: int = 0
    current_day: int = 0
    days_in_month: int = 0
    month_progress: float = 0.0
    total_completions: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
