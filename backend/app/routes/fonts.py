"""
Font catalog endpoint.

Provides GET /fonts, a thin proxy over the Google Web Fonts listing.
"""

import logging

from fastapi import APIRouter, Depends

from app.models import ErrorResponse, FontFamily
from app.services.font_catalog import FontCatalogClient, get_font_catalog_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/fonts",
    response_model=list[FontFamily],
    summary="List Web Fonts",
    description="""
List font families available from Google Web Fonts.

The API key stays on the server. Upstream failures are reported as a
generic error; details are only written to the server log.
""",
    responses={
        500: {"description": "Upstream font catalog unavailable", "model": ErrorResponse},
    },
)
async def list_fonts(
    catalog: FontCatalogClient = Depends(get_font_catalog_client),
) -> list[FontFamily]:
    """
    Return the upstream font catalog as {family, variants} entries.

    Raises:
        FontCatalogError: Turned into a 500 response by ErrorHandlerMiddleware
    """
    return await catalog.list_fonts()
