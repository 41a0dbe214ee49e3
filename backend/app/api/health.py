from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.time_utils import rfc3339_now
from app.schemas.health import HealthResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    if request.app.state.database.ping():
        body = HealthResponse(status="healthy", database="connected", timestamp=rfc3339_now())
        return body

    body = HealthResponse(status="unhealthy", database="disconnected", timestamp=rfc3339_now())
    return JSONResponse(status_code=500, content=body.model_dump())
