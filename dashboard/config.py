#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schedule Tracker - Dashboard Configuration
Settings of the web dashboard, read from the environment and an optional .env file

Version: 1.0.0
"""

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytz
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardSettings(BaseSettings):
    """Settings of the Schedule Tracker dashboard"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===== GENERAL =====

    APP_NAME: str = Field(
        default="Schedule Tracker",
        description="Application name"
    )

    VERSION: str = Field(
        default="1.0.0",
        description="Dashboard version"
    )

    ENVIRONMENT: str = Field(
        default="development",
        description="Runtime environment (development/production/testing)"
    )

    DEBUG: bool = Field(
        default=True,
        description="Debug mode, also enables the API docs"
    )

    # ===== NETWORK =====

    DASHBOARD_HOST: str = Field(
        default="0.0.0.0",
        description="Host the dashboard binds to"
    )

    DASHBOARD_PORT: int = Field(
        default=8000,
        description="Port the dashboard listens on"
    )

    ALLOWED_ORIGINS: List[str] = Field(
        default=["*"],
        description="CORS origins, as a JSON list in the environment"
    )

    # ===== PATHS =====

    DATA_DIR: Path = Field(
        default=Path("data"),
        description="Directory holding habits.json, completions.json and tasks.json"
    )

    LOGS_DIR: Path = Field(
        default=Path("logs"),
        description="Directory for rotating log files"
    )

    # ===== LOGGING =====

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level (DEBUG/INFO/WARNING/ERROR/CRITICAL)"
    )

    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format"
    )

    LOG_DATE_FORMAT: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format of log records"
    )

    LOG_TO_FILE: bool = Field(
        default=True,
        description="Also write logs to LOGS_DIR/dashboard_<env>.log"
    )

    # ===== TRACKER =====

    TIMEZONE: str = Field(
        default="Asia/Kolkata",
        description="Timezone that decides which calendar day is today"
    )

    DEFAULT_USER_ID: str = Field(
        default="local",
        description="Owner used when a request carries no X-User-Id header"
    )

    TOP_HABITS_LIMIT: int = Field(
        default=5,
        ge=1,
        description="Number of habits in the top habits ranking"
    )

    MAX_HABITS: int = Field(
        default=25,
        ge=1,
        description="Maximum number of habits per user"
    )

    MAX_TASKS_PER_DAY: int = Field(
        default=50,
        ge=1,
        description="Maximum number of tasks per user and day"
    )

    # ===== CHARTS =====

    CHART_COLORS: Dict[str, str] = Field(
        default={
            "green": "#22c55e",
            "yellow": "#f59e0b",
            "red": "#ef4444",
            "purple": "#a855f7",
            "blue": "#3b82f6",
            "cyan": "#06b6d4",
            "pink": "#ec4899",
            "indigo": "#8b5cf6",
            "gray": "rgba(255, 255, 255, 0.1)"
        },
        description="Chart palette"
    )

    PRIORITY_COLORS: Dict[str, str] = Field(
        default={
            "high": "#ef4444",
            "medium": "#f59e0b",
            "low": "#22c55e"
        },
        description="Colors of the priority doughnut"
    )

    # ===== VALIDATORS =====

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v):
        allowed_envs = ['development', 'production', 'testing', 'staging']
        if v.lower() not in allowed_envs:
            raise ValueError(f"ENVIRONMENT must be one of {allowed_envs}")
        return v.lower()

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        allowed_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator('DASHBOARD_PORT')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("DASHBOARD_PORT must be between 1 and 65535")
        return v

    @field_validator('TIMEZONE')
    @classmethod
    def validate_timezone(cls, v):
        if v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown TIMEZONE: {v}")
        return v

    @model_validator(mode='after')
    def validate_production_settings(self):
        # No debug mode (and so no API docs) in production
        if self.is_production:
            self.DEBUG = False
        return self

    # ===== HELPERS =====

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def get_chart_color(self, color_name: str) -> str:
        return self.CHART_COLORS.get(color_name, self.CHART_COLORS["purple"])

    def get_logging_config(self) -> Dict[str, Any]:
        """``logging.config.dictConfig`` mapping: console always, rotating file optionally."""
        handlers = ['console']
        if self.LOG_TO_FILE:
            handlers.append('file')

        handler_config: Dict[str, Any] = {
            'console': {
                'class': 'logging.StreamHandler',
                'level': self.LOG_LEVEL,
                'formatter': 'default',
                'stream': sys.stdout
            }
        }
        if self.LOG_TO_FILE:
            handler_config['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.LOG_LEVEL,
                'formatter': 'default',
                'filename': str(self.LOGS_DIR / f"dashboard_{self.ENVIRONMENT}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }

        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.LOG_FORMAT,
                    'datefmt': self.LOG_DATE_FORMAT
                }
            },
            'handlers': handler_config,
            'loggers': {
                '': {
                    'level': self.LOG_LEVEL,
                    'handlers': handlers
                },
                'uvicorn.access': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                },
                'httpx': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }


# ===== SETTINGS INSTANCE =====

settings = DashboardSettings()
