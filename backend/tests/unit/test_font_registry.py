"""
Unit Tests for the local font registry
"""

from unittest.mock import patch

import pytest
from PIL import ImageFont

from certificate_engine import FontLoadError, FontRegistry, load_font_registry


@pytest.fixture
def fonts_dir(tmp_path):
    """Directory with a mix of font and non-font files."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    (directory / "Lato.ttf").write_bytes(b"not really a font")
    (directory / "Roboto-Bold.otf").write_bytes(b"not really a font")
    (directory / "README.txt").write_text("fonts live here")
    (directory / "nested.ttf").mkdir()
    return directory


class TestLoadFontRegistry:
    """Tests for load_font_registry."""

    def test_registers_ttf_and_otf_by_stem(self, fonts_dir):
        registry = load_font_registry(fonts_dir)

        assert registry.families == ["Lato", "Roboto-Bold"]
        assert "Lato" in registry
        assert registry.path_for("Lato") == fonts_dir / "Lato.ttf"

    def test_ignores_other_files_and_directories(self, fonts_dir):
        registry = load_font_registry(fonts_dir)

        assert "README" not in registry
        assert "nested" not in registry
        assert len(registry) == 2

    def test_missing_directory_gives_empty_registry(self, tmp_path, caplog):
        registry = load_font_registry(tmp_path / "does-not-exist")

        assert len(registry) == 0
        assert "Fonts directory not found" in caplog.text

    def test_reloading_is_idempotent(self, fonts_dir):
        assert load_font_registry(fonts_dir).families == load_font_registry(fonts_dir).families


class TestFontRegistryResolve:
    """Tests for FontRegistry.resolve."""

    def test_registry_is_read_only(self, fonts_dir):
        registry = load_font_registry(fonts_dir)

        with pytest.raises(TypeError):
            registry._fonts["Other"] = fonts_dir / "Other.ttf"

    def test_registered_font_is_loaded_from_its_file(self, fonts_dir):
        registry = load_font_registry(fonts_dir)

        with patch("certificate_engine.fonts.ImageFont.truetype") as mock_truetype:
            registry.resolve("Lato", 42)

        mock_truetype.assert_called_once_with(str(fonts_dir / "Lato.ttf"), 42)

    def test_corrupt_registered_font_raises(self, fonts_dir):
        registry = load_font_registry(fonts_dir)

        with pytest.raises(FontLoadError):
            registry.resolve("Lato", 42)

    def test_unknown_family_falls_back_to_default(self, caplog):
        registry = FontRegistry()

        font = registry.resolve("Definitely Not A Font", 30)

        assert isinstance(font, (ImageFont.FreeTypeFont, ImageFont.ImageFont))
        assert "using default font" in caplog.text
