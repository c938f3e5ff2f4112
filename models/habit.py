# models/habit.py

from dataclasses import dataclass, field, asdict
from typing import List, Optional

MIN_GOAL = 1
MAX_GOAL = 31


@dataclass
class Habit:
    id: str
    user_id: str
    name: str
    icon: str = "💪"
    goal: int = 20
    position: int = 0
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Habit":
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            name=data["name"],
            icon=data.get("icon", "💪"),
            goal=int(data.get("goal", 20)),
            position=int(data.get("position", 0)),
            created_at=data.get("created_at"),
        )


@dataclass
class MonthlyCompletion:
    """Completion flags of one habit for one month.

    ``completions[0]`` is day 1. The list may be shorter than the month;
    missing days count as not completed.
    """
    habit_id: str
    year: int
    month: int  # zero-based
    completions: List[bool] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "MonthlyCompletion":
        return cls(
            habit_id=data["habit_id"],
            year=int(data["year"]),
            month=int(data["month"]),
            completions=[bool(c) for c in data.get("completions", [])],
        )


@dataclass
class HabitWithCompletions(Habit):
    completions: List[bool] = field(default_factory=list)

    @classmethod
    def join(cls, habit: Habit, completion: Optional[MonthlyCompletion] = None) -> "HabitWithCompletions":
        return cls(
            **habit.to_dict(),
            completions=list(completion.completions) if completion else [],
        )
