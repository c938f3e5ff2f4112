#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schedule Tracker - Models Package
Data records for habits, monthly completions, day tasks and derived statistics

Version: 1.0.0
"""

from .enums import (
    TaskPriority,
    DateLabel,
    PRIORITY_ORDER
)

from .habit import (
    Habit,
    MonthlyCompletion,
    HabitWithCompletions,
    MIN_GOAL,
    MAX_GOAL
)

from .task import DayTask

from .analytics import (
    HabitProgress,
    HabitStats,
    TaskGroup,
    TaskStats,
    OverviewStats
)

__all__ = [
    # Enums
    'TaskPriority',
    'DateLabel',
    'PRIORITY_ORDER',

    # Habit models
    'Habit',
    'MonthlyCompletion',
    'HabitWithCompletions',
    'MIN_GOAL',
    'MAX_GOAL',

    # Task models
    'DayTask',

    # Derived statistics
    'HabitProgress',
    'HabitStats',
    'TaskGroup',
    'TaskStats',
    'OverviewStats'
]
