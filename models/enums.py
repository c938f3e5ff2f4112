# models/enums.py

from enum import Enum


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DateLabel(str, Enum):
    TODAY = "Today"
    OVERDUE = "Overdue"


# Order used by priority counts and the priority chart
PRIORITY_ORDER = (TaskPriority.HIGH, TaskPriority.MEDIUM, TaskPriority.LOW)
