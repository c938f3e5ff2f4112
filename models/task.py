# models/task.py

from dataclasses import dataclass, asdict
from typing import Optional

from models.enums import TaskPriority


@dataclass
class DayTask:
    id: str
    user_id: str
    name: str
    date: str  # YYYY-MM-DD
    priority: str = TaskPriority.MEDIUM.value
    completed: bool = False
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "DayTask":
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            name=data["name"],
            date=data["date"],
            priority=data.get("priority", TaskPriority.MEDIUM.value),
            completed=bool(data.get("completed", False)),
            created_at=data.get("created_at"),
        )
