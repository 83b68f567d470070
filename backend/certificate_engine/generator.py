"""Certificate rendering: draws participant names onto a template image."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image, ImageColor, ImageDraw, UnidentifiedImageError

from .exceptions import (
    CertificateWriteError,
    InvalidStyleError,
    TemplateImageError,
)
from .fonts import FontRegistry
from .names import certificate_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextStyle:
    """How a participant name is drawn on the template.

    ``x`` of None centers the name horizontally.
    """

    font_family: str = "Lato"
    font_size: int = 80
    color: str = "gold"
    x: Optional[int] = 0
    y: int = 0


def load_template(template_path: str | Path) -> Image.Image:
    """
    Open and fully decode the template image.

    Raises:
        TemplateImageError: If the file is missing, unreadable or corrupt
    """
    try:
        with Image.open(template_path) as image:
            image.load()
            template = image.convert("RGBA")
    except FileNotFoundError as e:
        raise TemplateImageError(f"Template image not found: {template_path}") from e
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        logger.error(f"Failed to read template image {template_path}: {e}")
        raise TemplateImageError(f"Unreadable template image: {e}") from e

    logger.info(f"Loaded template {template_path} ({template.width}x{template.height})")
    return template


class CertificateGenerator:
    """
    Renders one certificate per participant into an output directory.

    The font and color are resolved once, up front, so a bad style fails
    before any file is written.
    """

    def __init__(self, template: Image.Image, style: TextStyle, fonts: FontRegistry):
        self.template = template
        self.style = style

        try:
            self._fill = ImageColor.getrgb(style.color)
        except ValueError as e:
            raise InvalidStyleError(f"Unrecognized font color: {style.color}") from e

        self._font = fonts.resolve(style.font_family, style.font_size)

    def render(self, name: str) -> Image.Image:
        """Draw ``name`` on a fresh copy of the template."""
        surface = Image.new("RGBA", self.template.size)
        surface.paste(self.template, (0, 0))

        draw = ImageDraw.Draw(surface)
        x = self.style.x
        if x is None:
            text_width = draw.textlength(name, font=self._font)
            x = (self.template.width - text_width) / 2

        # Left/baseline anchor: (x, y) is where the text baseline starts
        draw.text((x, self.style.y), name, fill=self._fill, font=self._font, anchor="ls")
        return surface

    def generate(self, names: list[str], output_dir: str | Path) -> list[Path]:
        """
        Render and save a PNG for every name.

        All file names are validated before drawing starts. A name that
        appears twice overwrites its earlier file.

        Args:
            names: Normalized display names
            output_dir: Directory receiving the PNG files

        Returns:
            list[Path]: Paths written, in input order (may repeat)

        Raises:
            InvalidParticipantError: If a name cannot form a file name
            CertificateWriteError: If a certificate cannot be saved
        """
        output_path = Path(output_dir)
        targets = [(name, output_path / certificate_filename(name)) for name in names]

        output_path.mkdir(parents=True, exist_ok=True)

        written = []
        for name, cert_path in targets:
            certificate = self.render(name)
            try:
                certificate.save(cert_path, format="PNG")
            except OSError as e:
                logger.error(f"Failed to write certificate {cert_path}: {e}")
                raise CertificateWriteError(f"Failed to write certificate for {name}") from e
            written.append(cert_path)

        logger.info(f"Generated {len(written)} certificate(s) in {output_path}")
        return written
