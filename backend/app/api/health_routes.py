import time
from datetime import datetime, timezone

from fastapi import APIRouter

from app.config import APP_VERSION, settings
from app.models.health_models import HealthResponse

router = APIRouter()

_STARTED_AT = time.monotonic()


@router.get("", response_model=HealthResponse)
async def health_check():
    """Liveness probe."""
    return HealthResponse(
        status="ok",
        app=settings.app_name,
        version=APP_VERSION,
        environment=settings.environment,
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
