"""Translate core errors into JSON responses.

Body shape for every failure: {"error": <message>, "details": {...}} with
details omitted when there is nothing to add.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
    WeightTrackerError,
)
from app.schemas.health import ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StorageError: 500,
}

# Path parameters whose parse failure gets a dedicated message
_ID_PARAMS = {"entry_id"}


def _error_body(message: str, details: dict | None = None) -> dict:
    return ErrorResponse(error=message, details=details).model_dump(exclude_none=True)


def status_for(exc: WeightTrackerError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


async def weight_tracker_error_handler(request: Request, exc: WeightTrackerError):
    status_code = status_for(exc)
    details = exc.details() if isinstance(exc, ValidationError) else None
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content=_error_body(exc.message, details))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    for err in errors:
        loc = err.get("loc", ())
        if len(loc) >= 2 and loc[0] == "path" and loc[1] in _ID_PARAMS:
            return JSONResponse(status_code=400, content=_error_body("Invalid weight ID"))

    details = {}
    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "body"
        details[field] = err.get("msg", "invalid value")
    logger.info("%s %s -> 400: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=400, content=_error_body("Invalid request", {"validation": details}))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeightTrackerError, weight_tracker_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
