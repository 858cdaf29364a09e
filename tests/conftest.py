"""Shared fixtures for resolve_it tests."""

import pytest
from PIL import Image, features


def _save(path, image_format, **kwargs):
    img = Image.new("RGB", (16, 16))
    for x in range(16):
        for y in range(16):
            img.putpixel((x, y), (x * 16, y * 16, (x + y) * 8))
    img.save(path, format=image_format, **kwargs)
    return str(path)


@pytest.fixture
def jpeg_image(tmp_path):
    return _save(tmp_path / "photo.jpg", "JPEG", quality=90)


@pytest.fixture
def png_image(tmp_path):
    return _save(tmp_path / "diagram.png", "PNG")


@pytest.fixture
def webp_lossy_image(tmp_path):
    if not features.check("webp"):
        pytest.skip("Pillow built without WebP support")
    return _save(tmp_path / "lossy.webp", "WEBP", quality=80)


@pytest.fixture
def webp_lossless_image(tmp_path):
    if not features.check("webp"):
        pytest.skip("Pillow built without WebP support")
    return _save(tmp_path / "lossless.webp", "WEBP", lossless=True)


@pytest.fixture
def not_an_image(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("definitely not pixels")
    return str(path)
