"""Error Handlers — global exception handlers for the Benefits API.

Invariants:
    - BenefitsError → its own http_status with the structured envelope
    - RequestValidationError → 400 with field-level details
    - HTTPException (unknown route, wrong method) → its own status code
    - Exception (catch-all) → 500, never leaks internal details
    - Every error body has the shape {"success": false, "error": {...}}

Design Decisions:
    - Status chosen from the error type, never from message text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import BenefitsError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_benefits_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_benefits_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BenefitsError)
    async def benefits_error_handler(request: Request, exc: BenefitsError):
        """Handle all Benefits API domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"BenefitsError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


_HTTP_ERRORS = {
    status.HTTP_404_NOT_FOUND: ("ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", ErrorCategory.VALIDATION),
}


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle routing errors (unknown path, unsupported method)."""
        route = f"{request.method} {request.url.path}"
        logger.warning(
            f"HTTP {exc.status_code} on {route}",
            extra={"path": request.url.path},
        )
        code, category = _HTTP_ERRORS.get(
            exc.status_code, ("HTTP_ERROR", ErrorCategory.INTERNAL),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "error": {
                    "code": code,
                    "message": f"Route {route}: {exc.detail}",
                    "category": category.value,
                    "severity": ErrorSeverity.WARNING.value,
                },
            },
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "success": False,
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
