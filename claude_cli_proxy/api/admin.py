import time

from fastapi import APIRouter, Depends, Query

from ..core.config import APP_VERSION
from ..core.logging_utils import memory_log_handler
from ..core.security import verify_admin
from ..utils.helpers import json_response

router = APIRouter()

START_TIME = time.time()


@router.get("/logs", dependencies=[Depends(verify_admin)])
async def get_logs(limit: int = Query(100, ge=1, le=1000)):
    """Most recent in-memory log records, oldest first."""
    return json_response({
        "logs": memory_log_handler.get_logs(limit),
        "app_version": APP_VERSION,
        "uptime_seconds": round(time.time() - START_TIME, 1),
    })
