"""
Unit Tests for CertificateGenerator

Renders against small in-memory templates using Pillow's default font.
"""

from unittest.mock import patch

import pytest
from PIL import Image, ImageChops

from certificate_engine import (
    CertificateGenerator,
    CertificateWriteError,
    FontRegistry,
    InvalidParticipantError,
    InvalidStyleError,
    TemplateImageError,
    TextStyle,
    load_template,
)

GOLD = (255, 215, 0, 255)


def _ink_bbox(certificate, template):
    """Bounding box of the pixels that differ from the template.

    Compared in RGB: on opaque RGBA images ``getbbox()`` only looks at alpha.
    """
    return ImageChops.difference(certificate.convert("RGB"), template.convert("RGB")).getbbox()


@pytest.fixture
def style():
    return TextStyle(font_family="Lato", font_size=40, color="gold", x=20, y=100)


@pytest.fixture
def generator(template_image, style):
    return CertificateGenerator(template_image, style, FontRegistry())


class TestLoadTemplate:
    """Tests for load_template."""

    def test_loads_png_as_rgba(self, tmp_path, template_png):
        path = tmp_path / "template"
        path.write_bytes(template_png)

        template = load_template(path)

        assert template.size == (400, 200)
        assert template.mode == "RGBA"

    def test_corrupt_template_raises(self, tmp_path):
        path = tmp_path / "template"
        path.write_bytes(b"this is not an image")

        with pytest.raises(TemplateImageError):
            load_template(path)

    def test_truncated_template_raises(self, tmp_path, template_png):
        path = tmp_path / "template"
        path.write_bytes(template_png[: len(template_png) // 2])

        with pytest.raises(TemplateImageError):
            load_template(path)

    def test_missing_template_raises(self, tmp_path):
        with pytest.raises(TemplateImageError):
            load_template(tmp_path / "missing.png")


class TestRender:
    """Tests for CertificateGenerator.render."""

    def test_render_keeps_template_size(self, generator):
        certificate = generator.render("Alice Smith")
        assert certificate.size == (400, 200)

    def test_render_draws_text_in_fill_color(self, generator, template_image):
        certificate = generator.render("Alice Smith")

        assert _ink_bbox(certificate, template_image) is not None
        colors = {color for _, color in certificate.getcolors(maxcolors=1 << 16)}
        assert GOLD in colors

    def test_render_does_not_modify_template(self, generator, template_image):
        before = template_image.copy()
        generator.render("Alice Smith")
        assert _ink_bbox(before, template_image) is None

    def test_text_sits_on_baseline_at_position(self, generator, template_image):
        certificate = generator.render("Alice")
        left, top, right, bottom = _ink_bbox(certificate, template_image)

        assert left >= 18
        # Baseline at y=100: glyphs without descenders end above it
        assert bottom <= 102
        assert top < 100

    def test_centered_text(self, template_image):
        style = TextStyle(font_size=40, color="black", x=None, y=100)
        generator = CertificateGenerator(template_image, style, FontRegistry())

        certificate = generator.render("Centered")
        left, _, right, _ = _ink_bbox(certificate, template_image)

        assert abs((400 - right) - left) <= 8

    def test_opaque_render_keeps_alpha_and_changes_color(self, generator, template_image):
        """Drawn text changes RGB only; the certificate stays fully opaque."""
        certificate = generator.render("Alice")

        assert certificate.getchannel("A").getextrema() == (255, 255)
        assert ImageChops.difference(certificate, template_image).getchannel("A").getbbox() is None
        left, top, right, bottom = _ink_bbox(certificate, template_image)
        assert left < right
        assert top < bottom <= 102

    def test_invalid_color_raises_before_drawing(self, template_image):
        style = TextStyle(color="not-a-color")

        with pytest.raises(InvalidStyleError, match="not-a-color"):
            CertificateGenerator(template_image, style, FontRegistry())

    @pytest.mark.parametrize("color", ["#ff0000", "rgb(0, 128, 255)", "navy"])
    def test_css_colors_are_accepted(self, template_image, color):
        CertificateGenerator(template_image, TextStyle(color=color), FontRegistry())


class TestGenerate:
    """Tests for CertificateGenerator.generate."""

    def test_writes_one_png_per_name(self, generator, tmp_path):
        output_dir = tmp_path / "certificates"

        written = generator.generate(["Alice Smith", "Bob Jones"], output_dir)

        assert [p.name for p in written] == ["Alice Smith.png", "Bob Jones.png"]
        assert sorted(p.name for p in output_dir.iterdir()) == ["Alice Smith.png", "Bob Jones.png"]
        with Image.open(output_dir / "Alice Smith.png") as image:
            assert image.format == "PNG"
            assert image.size == (400, 200)

    def test_duplicate_names_share_a_file(self, generator, tmp_path):
        output_dir = tmp_path / "certificates"

        generator.generate(["Ann Lee", "Ann Lee"], output_dir)

        assert [p.name for p in output_dir.iterdir()] == ["Ann Lee.png"]

    def test_invalid_name_aborts_before_any_output(self, generator, tmp_path):
        output_dir = tmp_path / "certificates"

        with pytest.raises(InvalidParticipantError):
            generator.generate(["Alice", ".."], output_dir)

        assert not output_dir.exists()

    def test_write_failure_aborts_batch(self, generator, tmp_path):
        output_dir = tmp_path / "certificates"

        with patch.object(Image.Image, "save", side_effect=OSError("disk full")):
            with pytest.raises(CertificateWriteError):
                generator.generate(["Alice", "Bob"], output_dir)

        assert list(output_dir.iterdir()) == []
