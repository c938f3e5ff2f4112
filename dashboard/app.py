#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schedule Tracker Web Dashboard - FastAPI Application
JSON API for habits, day tasks, statistics and chart data

Version: 1.0.0
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from dashboard.api import charts, habits, stats, tasks
from dashboard.config import settings
from dashboard.core.data_manager import DataManager, DataManagerError, LimitExceededError, NotFoundError, ValidationError
from dashboard.dependencies import get_data_manager, init_data_manager
from shared.models import HealthCheck

logger = logging.getLogger(__name__)

app_start_time = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    global app_start_time

    # Startup
    logger.info(f"🚀 Starting {settings.APP_NAME} dashboard...")
    app_start_time = time.time()

    data_manager = init_data_manager(settings)
    counts = data_manager.get_counts()
    logger.info(f"📊 Loaded habits: {counts['habits']}, tasks: {counts['tasks']}")
    logger.info(f"🌐 Dashboard available at http://{settings.DASHBOARD_HOST}:{settings.DASHBOARD_PORT}")
    logger.info("✅ Dashboard ready")

    yield

    # Shutdown
    logger.info("🛑 Dashboard stopped")


app = FastAPI(
    title=settings.APP_NAME,
    description="Habit and day task tracker: monthly habit goals, dated tasks and their statistics",
    version=settings.VERSION,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
    openapi_url="/api/openapi.json" if settings.DEBUG else None,
    lifespan=lifespan
)

# ===== MIDDLEWARE =====

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log every request with its status and processing time"""
    start_time = time.time()
    client_ip = request.headers.get("X-Forwarded-For", request.client.host if request.client else "-")

    try:
        response = await call_next(request)
    except Exception:
        process_time = time.time() - start_time
        logger.exception(f"❌ Request failed: {request.method} {request.url.path} ({process_time:.3f}s)")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"- {response.status_code} "
        f"- {process_time:.3f}s "
        f"- {client_ip}"
    )
    response.headers["X-Process-Time"] = f"{process_time:.6f}"
    return response


# ===== ERROR HANDLERS =====

ERROR_STATUS = {
    NotFoundError: 404,
    ValidationError: 422,
    LimitExceededError: 409,
}


@app.exception_handler(DataManagerError)
async def data_manager_error_handler(request: Request, exc: DataManagerError):
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.warning(f"⚠️ {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# ===== API ROUTERS =====

app.include_router(habits.router)
app.include_router(tasks.router)
app.include_router(stats.router)
app.include_router(charts.router)


# ===== SYSTEM ROUTES =====

@app.get("/api/health", response_model=HealthCheck)
def health_check(data_manager: DataManager = Depends(get_data_manager)):
    now = time.time()
    return HealthCheck(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.VERSION,
        timestamp=now,
        uptime=round(now - app_start_time, 3),
        records=data_manager.get_counts(),
    )
