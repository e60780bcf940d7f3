"""Health and error response bodies."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthResponse(BaseModel):
    """Liveness response."""

    status: HealthStatus
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    version: str = "0.1.0"


class CheckResult(BaseModel):
    """Outcome of one readiness check (database or storage)."""

    name: str
    healthy: bool
    latency_ms: float | None = None
    error: str | None = None


class ReadinessResponse(BaseModel):
    """Readiness response with one entry per checked dependency."""

    status: HealthStatus
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    checks: list[CheckResult] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    ``error`` is the short error type (``validation_error``, ``not_found``,
    ...) and ``message`` is the text meant for the user, such as
    "Email required".
    """

    error: str = Field(description="Error type")
    message: str = Field(description="Human-readable error description")
    request_id: str | None = Field(default=None, description="X-Request-ID of the failed request")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
