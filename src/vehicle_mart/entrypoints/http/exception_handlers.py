"""Translation of domain errors into JSON error responses.

Every error body has the shape {"detail": ..., "code": ...}, plus "errors"
for field-level validation failures.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from vehicle_mart.domain.errors import DomainError

logger = logging.getLogger(__name__)

# Codes missing here answer 400
STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CATALOG_LOAD_ERROR": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _request_info(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Answer a domain error with the status its error code maps to.

    A failed catalog load was logged once by the startup load, so requests
    that hit it afterwards are not logged again.

    Args:
        request: Incoming request
        exc: Raised domain error

    Returns:
        JSON error body
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if exc.error_code != "CATALOG_LOAD_ERROR":
        logger.info(
            "Request rejected",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                **_request_info(request),
            },
        )

    body: dict[str, Any] = {"detail": exc.message, "code": exc.error_code}
    errors = exc.to_dict().get("errors")
    if errors:
        body["errors"] = errors

    return JSONResponse(status_code=status_code, content=body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for bugs: log with traceback, hide the details from the client."""
    logger.error(
        "Unhandled error while serving request",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, **_request_info(request)},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
