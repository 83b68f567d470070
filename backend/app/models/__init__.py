"""Pydantic models for API request/response schemas."""

from .certificate_options import CertificateOptions
from .error_response import ErrorResponse
from .font_family import FontFamily

__all__ = [
    "CertificateOptions",
    "ErrorResponse",
    "FontFamily",
]
