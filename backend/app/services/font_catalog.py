"""
Font Catalog Service

Fetches the Google Web Fonts listing with the server-held API key and
reshapes it into {family, variants} entries.
"""

import logging

import httpx

from app.config import settings
from app.middleware.error_handler import FontCatalogError
from app.models import FontFamily

logger = logging.getLogger(__name__)


class FontCatalogClient:
    """
    Client for the upstream web font listing API.

    Every failure is raised as FontCatalogError, whose client-facing message
    never includes upstream detail or the API key.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_url: Listing endpoint URL
            api_key: API key sent as the ``key`` query parameter
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url
        self._api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _redact(self, text: str) -> str:
        return text.replace(self._api_key, "***") if self._api_key else text

    async def list_fonts(self) -> list[FontFamily]:
        """
        Fetch the font catalog.

        Returns:
            list[FontFamily]: One entry per upstream item, in upstream order

        Raises:
            FontCatalogError: On missing key, network error, non-2xx status
                or malformed body
        """
        if not self._api_key:
            raise FontCatalogError("Google Fonts API key is not configured")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.api_url, params={"key": self._api_key})
                response.raise_for_status()
                payload = response.json()

            fonts = [
                FontFamily(family=item["family"], variants=item.get("variants", []))
                for item in payload["items"]
            ]

        except httpx.HTTPStatusError as e:
            reason = f"Upstream returned HTTP {e.response.status_code}"
            logger.error(f"Error fetching fonts from Google API: {reason}")
            raise FontCatalogError(reason) from e
        except httpx.HTTPError as e:
            reason = self._redact(f"{type(e).__name__}: {e}")
            logger.error(f"Error fetching fonts from Google API: {reason}")
            raise FontCatalogError(reason) from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # ValueError covers both invalid JSON and pydantic validation errors
            reason = f"Malformed font catalog response: {type(e).__name__}"
            logger.error(f"Error fetching fonts from Google API: {reason}")
            raise FontCatalogError(reason) from e

        logger.info(f"Fetched {len(fonts)} font families from Google API")
        return fonts


def get_font_catalog_client() -> FontCatalogClient:
    """FastAPI dependency returning a client built from current settings."""
    return FontCatalogClient(
        api_url=settings.GOOGLE_FONTS_API_URL,
        api_key=settings.GOOGLE_FONTS_API_KEY,
        timeout=settings.FONTS_API_TIMEOUT,
    )
