# backend/core/error_handling.py

"""
Error types and handlers for consistent API error responses.

Services raise the exceptions below; the handlers registered with the
FastAPI app turn them into ``{"detail", "error_code", "path"}`` bodies.
"""

from typing import Any, Dict, Optional
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base exception for API errors"""

    error_code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        if error_code:
            self.error_code = error_code
        super().__init__(self.message)


class NotFoundError(APIError):
    """Resource not found error"""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} with identifier {identifier} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "identifier": str(identifier)},
        )


class APIValidationError(APIError):
    """Input validation error - named to avoid clashing with Pydantic's ValidationError"""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"validation_errors": errors} if errors else {},
        )


class InvalidFilter(APIError):
    """Malformed date or identifier in a report filter"""

    error_code = "INVALID_FILTER"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"field": field} if field else {},
        )


class StoreUnavailable(APIError):
    """The data store could not be reached or a query failed"""

    error_code = "STORE_UNAVAILABLE"

    def __init__(self, operation: str, reason: str = ""):
        super().__init__(
            message=f"Data store unavailable during {operation}",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={"operation": operation, "reason": reason} if reason else {"operation": operation},
        )


async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as a JSON response"""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} at {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.error_code} at {request.url.path}: {exc.message}")
    content = {
        "detail": exc.message,
        "error_code": exc.error_code,
        "path": str(request.url.path),
    }
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(APIError, handle_api_error)
