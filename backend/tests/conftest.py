"""
Pytest configuration and fixtures
"""

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.config import settings
from app.main import app


@pytest.fixture
def client():
    """FastAPI test client fixture"""
    return TestClient(app)


@pytest.fixture
def storage_path(tmp_path, monkeypatch):
    """Point workspaces and fonts at temporary directories."""
    storage = tmp_path / "storage"
    storage.mkdir()
    monkeypatch.setattr(settings, "STORAGE_PATH", str(storage))
    monkeypatch.setattr(settings, "FONTS_DIR", str(tmp_path / "fonts"))
    return storage


def make_template_png(width: int = 400, height: int = 200, color: str = "white") -> bytes:
    """Create an in-memory PNG to use as certificate template."""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def template_png():
    """400x200 white PNG template."""
    return make_template_png()


@pytest.fixture
def template_image():
    """400x200 white RGBA template as a Pillow image."""
    return Image.new("RGBA", (400, 200), "white")
