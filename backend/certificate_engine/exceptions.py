"""Custom exceptions for certificate generation module."""


class CertificateGenerationError(Exception):
    """Base exception for certificate generation errors."""

    pass


class TemplateImageError(CertificateGenerationError):
    """Template image is missing, unreadable or corrupt."""

    pass


class FontLoadError(CertificateGenerationError):
    """A registered font file could not be loaded."""

    pass


class InvalidStyleError(CertificateGenerationError):
    """Requested text style cannot be rendered (e.g. unknown color)."""

    pass


class InvalidParticipantError(CertificateGenerationError):
    """Participant name cannot be turned into a certificate file name."""

    pass


class CertificateWriteError(CertificateGenerationError):
    """Error writing a generated certificate to disk."""

    pass


class ArchiveError(CertificateGenerationError):
    """Error building the certificates archive."""

    pass
