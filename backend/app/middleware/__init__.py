"""FastAPI middleware for request/response processing."""

from .error_handler import (
    ErrorHandlerMiddleware,
    ServiceError,
    FontCatalogError,
)
from .upload_size_validator import enforce_upload_limits

__all__ = [
    "ErrorHandlerMiddleware",
    "ServiceError",
    "FontCatalogError",
    "enforce_upload_limits",
]
