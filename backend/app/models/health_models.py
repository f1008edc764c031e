from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str
    app: str
    version: str
    environment: str
    uptime_seconds: float
    timestamp: str


class RootResponse(BaseModel):
    name: str
    status: str
    environment: str
