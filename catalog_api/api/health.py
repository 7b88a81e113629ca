# ==============================================================================
# HEALTH ENDPOINT - Liveness & Runtime Statistics
# ==============================================================================

from __future__ import annotations

import gc
import os
import platform
import threading
import time
from datetime import timedelta

import psutil
from fastapi import APIRouter, Request

from catalog_api.api.dependencies import DatabaseDep, SettingsDep
from catalog_api.core.constants import APIConstants
from catalog_api.schemas.base import APIResponse, DatabaseStats, HealthResponse
from catalog_api.utils.helpers import utc_now

router = APIRouter(tags=["Health"])


def format_uptime(seconds: float) -> str:
    """Render uptime as ``[Nd ]HH:MM:SS``."""
    return str(timedelta(seconds=int(seconds)))


@router.get(
    APIConstants.HEALTH_PATH,
    response_model=APIResponse[HealthResponse],
    summary="Health Check",
    description="Liveness plus process statistics and database connectivity.",
)
async def health_check(
    request: Request,
    adapter: DatabaseDep,
    settings: SettingsDep,
) -> APIResponse[HealthResponse]:
    """
    Report liveness and runtime statistics.

    Always answers 200 while the process is up; a broken database shows
    as ``database.status == "disconnected"``.
    """
    uptime_seconds = time.monotonic() - request.app.state.started_at
    memory = psutil.Process().memory_info()

    connected = await adapter.health_check()

    report = HealthResponse(
        status="ok",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT.value,
        uptime_seconds=round(uptime_seconds, 3),
        uptime=format_uptime(uptime_seconds),
        python_version=platform.python_version(),
        os=platform.system().lower(),
        arch=platform.machine(),
        cpu_cores=os.cpu_count(),
        threads=threading.active_count(),
        memory={"rss": memory.rss, "vms": memory.vms},
        gc_counts={
            f"gen{generation}": count
            for generation, count in enumerate(gc.get_count())
        },
        database=DatabaseStats(
            status="connected" if connected else "disconnected",
            driver=settings.DB_DRIVER,
        ),
        timestamp=utc_now(),
    )
    return APIResponse.ok(data=report, message="Service is healthy")
