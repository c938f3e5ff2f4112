#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schedule Tracker - Dashboard Dependencies
Providers injected into the FastAPI routes: data manager, owner, and the month window

Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fastapi import Depends, Header, HTTPException, Query, status

from dashboard.config import DashboardSettings, settings
from dashboard.core.data_manager import DataManager
from utils.datetime_utils import days_in_month, format_date_key, today_parts

logger = logging.getLogger(__name__)

# ===== GLOBALS =====

# Data manager (singleton)
_data_manager: Optional[DataManager] = None


# ===== INITIALISATION =====

def init_data_manager(app_settings: DashboardSettings = settings) -> DataManager:
    """Create the process-wide data manager"""
    global _data_manager

    if _data_manager is None:
        logger.info("🔄 Initialising DataManager...")
        _data_manager = DataManager(
            app_settings.DATA_DIR,
            max_habits=app_settings.MAX_HABITS,
            max_tasks_per_day=app_settings.MAX_TASKS_PER_DAY,
        )
        logger.info(f"✅ DataManager initialised in {app_settings.DATA_DIR}")

    return _data_manager


def reset_data_manager() -> None:
    global _data_manager
    _data_manager = None


# ===== PROVIDERS =====

def get_settings() -> DashboardSettings:
    return settings


def get_now() -> Optional[datetime]:
    """Reference instant for "today"; None reads the wall clock."""
    return None


def get_data_manager() -> DataManager:
    if _data_manager is None:
        return init_data_manager()
    return _data_manager


def get_current_user_id(
    x_user_id: Optional[str] = Header(None),
    app_settings: DashboardSettings = Depends(get_settings),
) -> str:
    """Owner of the request: the X-User-Id header or the configured default"""
    user_id = (x_user_id or app_settings.DEFAULT_USER_ID).strip()
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty X-User-Id header")
    return user_id


@dataclass
class MonthWindow:
    """Month under view plus the injected notion of today"""
    year: int
    month: int  # zero-based
    days_in_month: int
    today_key: str
    today_day: int
    is_current_month: bool
    is_past_month: bool

    @property
    def current_day(self) -> int:
        """Day used for month progress: today's day, the whole month, or none."""
        if self.is_current_month:
            return self.today_day
        if self.is_past_month:
            return self.days_in_month
        return 0

    @property
    def today_day_in_month(self) -> int:
        """Today's day when today falls inside the month under view, else 0."""
        return self.today_day if self.is_current_month else 0


def build_month_window(
    year: Optional[int],
    month: Optional[int],
    tz_name: str,
    now: Optional[datetime] = None,
) -> MonthWindow:
    today_year, today_month, today_day = today_parts(tz_name, now)
    year = today_year if year is None else year
    month = today_month if month is None else month

    return MonthWindow(
        year=year,
        month=month,
        days_in_month=days_in_month(year, month),
        today_key=format_date_key(today_year, today_month, today_day),
        today_day=today_day,
        is_current_month=(year, month) == (today_year, today_month),
        is_past_month=(year, month) < (today_year, today_month),
    )


def get_month_window(
    year: Optional[int] = Query(None, ge=1970, le=9999),
    month: Optional[int] = Query(None, ge=0, le=11, description="Zero-based month"),
    app_settings: DashboardSettings = Depends(get_settings),
    now: Optional[datetime] = Depends(get_now),
) -> MonthWindow:
    return build_month_window(year, month, app_settings.TIMEZONE, now)
