"""API error handling and response helpers."""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from househunt.services.errors import ConflictError, NotFoundError, TrackerError, ValidationError

logger = logging.getLogger(__name__)

HTTP_STATUS: dict[type[TrackerError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def http_status_for(error: TrackerError) -> int:
    """HTTP status for a tracker error (400 when the type is not mapped)."""
    for error_type, code in HTTP_STATUS.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def error_response(error: TrackerError) -> Dict[str, Any]:
    """Create a standardized error response."""
    return {
        "error": {
            "code": error.code,
            "message": error.message,
        }
    }


async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    """Turn a TrackerError raised by a service into a JSON failure."""
    status_code = http_status_for(exc)
    logger.warning(f"{request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return JSONResponse(status_code=status_code, content=error_response(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TrackerError, tracker_error_handler)
