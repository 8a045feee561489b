import logging
from pathlib import Path

from fastapi import APIRouter
from src.fleet_api.config import get_settings

logger = logging.getLogger(__name__)

health_router = APIRouter(prefix="/health", tags=["Health Check"])


@health_router.get("")
async def health_check():
    """Liveness plus whether the configured roster file is present."""
    settings = get_settings()
    roster_present = Path(settings.ROSTER_FILE_PATH).is_file()
    if not roster_present:
        logger.warning("Roster file not found at %s", settings.ROSTER_FILE_PATH)
    return {
        "status": "ok",
        "rosterFile": roster_present,
        "windowDays": settings.window_days,
    }
