"""
Centralized error handling middleware for FastAPI.

Provides consistent error responses and logging for all API routes.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base exception for errors reported to API clients."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class FontCatalogError(ServiceError):
    """Raised when the upstream font catalog cannot be fetched.

    ``reason`` is for server logs only; clients get a generic message.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(message="Failed to fetch fonts.", status_code=500)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that catches unhandled exceptions and returns consistent error responses.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response

        except ServiceError as e:
            logger.error(
                f"{type(e).__name__}: {e.message}",
                extra={"status_code": e.status_code},
            )
            return JSONResponse(status_code=e.status_code, content={"error": e.message})

        except Exception as e:
            # Log full stack trace for unexpected errors
            logger.exception(f"Unhandled exception: {str(e)}")
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "message": str(e) if logger.isEnabledFor(logging.DEBUG) else None,
                },
            )
