"""
Local font registry.

Scans a font directory once per generation run and hands the drawing code
an immutable family-name -> font-file mapping.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from PIL import ImageFont

from .exceptions import FontLoadError

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf")


class FontRegistry:
    """Read-only view of the fonts available to the certificate generator."""

    def __init__(self, fonts: Mapping[str, Path] | None = None):
        self._fonts = MappingProxyType(dict(fonts or {}))

    def __contains__(self, family: str) -> bool:
        return family in self._fonts

    def __len__(self) -> int:
        return len(self._fonts)

    @property
    def families(self) -> list[str]:
        """Registered family names, sorted."""
        return sorted(self._fonts)

    def path_for(self, family: str) -> Path | None:
        return self._fonts.get(family)

    def resolve(self, family: str, size: int) -> ImageFont.FreeTypeFont:
        """
        Load a font by family name at the given pixel size.

        Lookup order:
        1. Font file registered under ``family``
        2. A font Pillow can locate by that name on the system
        3. Pillow's built-in scalable default font

        Args:
            family: Font family name (e.g. "Lato")
            size: Font size in pixels

        Returns:
            Font object usable with ImageDraw

        Raises:
            FontLoadError: If a registered font file cannot be loaded
        """
        font_path = self._fonts.get(family)
        if font_path is not None:
            try:
                return ImageFont.truetype(str(font_path), size)
            except OSError as e:
                logger.error(f"Failed to load font '{family}' from {font_path}: {e}")
                raise FontLoadError(f"Failed to load font '{family}'") from e

        try:
            return ImageFont.truetype(family, size)
        except OSError:
            logger.warning(
                f"Font family '{family}' is not registered, using default font"
            )
            return ImageFont.load_default(size=size)


def load_font_registry(fonts_dir: str | Path) -> FontRegistry:
    """
    Register every .ttf/.otf file in ``fonts_dir`` under its file stem.

    Args:
        fonts_dir: Directory holding font files (not searched recursively)

    Returns:
        FontRegistry: Empty if the directory does not exist
    """
    fonts_path = Path(fonts_dir)

    if not fonts_path.is_dir():
        logger.error(f"Fonts directory not found: {fonts_path}")
        return FontRegistry()

    fonts = {}
    for font_file in sorted(fonts_path.iterdir()):
        if font_file.is_file() and font_file.name.endswith(FONT_EXTENSIONS):
            fonts[font_file.stem] = font_file
            logger.info(f"Registered font: {font_file.stem}")

    return FontRegistry(fonts)
