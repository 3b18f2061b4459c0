from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Returned by GET /health for container probes and load balancers."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
