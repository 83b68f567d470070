"""Service layer for business logic and external integrations."""

from .font_catalog import FontCatalogClient, get_font_catalog_client
from .workspace import CertificateWorkspace

__all__ = [
    "FontCatalogClient",
    "get_font_catalog_client",
    "CertificateWorkspace",
]
