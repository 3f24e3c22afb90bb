"""Error Handlers — map exceptions escaping a route to the error envelope.

Invariants:
    - WiccapediaError → its own http_status and to_response() body
    - RequestValidationError → 400 VALIDATION_ERROR; each detail names where the
      bad value came from (body, path, query) and the field inside it
    - Any other exception → 500 INTERNAL_ERROR with the request path only;
      the exception text goes to the log, never to the client
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wiccapedia.core.errors import ErrorCategory, ErrorSeverity, WiccapediaError

logger = logging.getLogger(__name__)


def _envelope(code: str, message: str, category: ErrorCategory,
              severity: ErrorSeverity, **extra) -> dict:
    return {"error": {
        "code": code, "message": message,
        "category": category.value, "severity": severity.value, **extra,
    }}


def _validation_detail(error: dict) -> dict:
    location, *field = error["loc"]
    return {
        "location": str(location),
        "field": ".".join(str(part) for part in field),
        "message": error["msg"],
        "type": error["type"],
    }


async def handle_wiccapedia_error(request: Request, exc: WiccapediaError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [_validation_detail(e) for e in exc.errors()]
    logger.warning(
        f"Rejected {request.method} {request.url.path}: "
        f"{len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            path=request.url.path,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers, most specific first."""
    app.add_exception_handler(WiccapediaError, handle_wiccapedia_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
