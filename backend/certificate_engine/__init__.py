"""Certificate rendering and packaging module."""

from .archive import build_archive
from .exceptions import (
    ArchiveError,
    CertificateGenerationError,
    CertificateWriteError,
    FontLoadError,
    InvalidParticipantError,
    InvalidStyleError,
    TemplateImageError,
)
from .fonts import FontRegistry, load_font_registry
from .generator import CertificateGenerator, TextStyle, load_template
from .names import certificate_filename, decode_participants, normalize_name, parse_participants

__all__ = [
    "CertificateGenerator",
    "TextStyle",
    "load_template",
    "FontRegistry",
    "load_font_registry",
    "build_archive",
    "normalize_name",
    "parse_participants",
    "decode_participants",
    "certificate_filename",
    "CertificateGenerationError",
    "TemplateImageError",
    "FontLoadError",
    "InvalidStyleError",
    "InvalidParticipantError",
    "CertificateWriteError",
    "ArchiveError",
]
