from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str      # healthy | unhealthy
    database: str    # connected | disconnected
    timestamp: str   # RFC 3339, UTC


class ErrorResponse(BaseModel):
    error: str
    details: dict | None = None
