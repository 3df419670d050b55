"""Tests for solid, checker and image textures."""

import pytest
from PIL import Image

from core.vector import Color, Point3
from materials.lambertian import Lambertian
from materials.metal import Metal
import materials.texture_loader as texture_loader
from materials.texture_loader import create_image_material, load_texture
from materials.textures import CheckerTexture, ImageTexture, SolidTexture

ORIGIN = Point3(0, 0, 0)


@pytest.fixture
def quadrant_png(tmp_path):
    """2x2 image: red, green on the top row; blue, white on the bottom row."""
    path = tmp_path / "quadrants.png"
    img = Image.new("RGB", (2, 2))
    img.putpixel((0, 0), (255, 0, 0))
    img.putpixel((1, 0), (0, 255, 0))
    img.putpixel((0, 1), (0, 0, 255))
    img.putpixel((1, 1), (255, 255, 255))
    img.save(path)
    return path


class TestProceduralTextures:
    """Tests for solid and checker textures."""

    def test_solid(self):
        assert SolidTexture(Color(0.1, 0.2, 0.3)).sample(0.9, 0.1, ORIGIN) == Color(0.1, 0.2, 0.3)

    @pytest.mark.parametrize("p, even", [
        (Point3(0.5, 0.5, 0.5), True),
        (Point3(1.5, 0.5, 0.5), False),
        (Point3(1.5, 1.5, 0.5), True),
        (Point3(-0.5, 0.5, 0.5), False),
    ])
    def test_checker_parity(self, p, even):
        checker = CheckerTexture(1.0, Color(1, 1, 1), Color(0, 0, 0))
        expected = Color(1, 1, 1) if even else Color(0, 0, 0)
        assert checker.sample(0, 0, p) == expected

    def test_checker_scale(self):
        checker = CheckerTexture(2.0, Color(1, 1, 1), Color(0, 0, 0))
        assert checker.sample(0, 0, Point3(1.5, 0.5, 0.5)) == Color(1, 1, 1)

    def test_checker_accepts_nested_textures(self):
        inner = CheckerTexture(0.5, Color(1, 0, 0), Color(0, 1, 0))
        checker = CheckerTexture(1.0, inner, Color(0, 0, 0))
        assert checker.sample(0, 0, Point3(0.25, 0.25, 0.25)) == Color(1, 0, 0)


class TestImageTexture:
    """Tests for Pillow-backed image textures."""

    def test_corners_with_flipped_v(self, quadrant_png):
        texture = ImageTexture(str(quadrant_png))
        assert (texture.width, texture.height) == (2, 2)
        assert texture.sample(0.0, 1.0, ORIGIN) == Color(1, 0, 0)
        assert texture.sample(0.99, 0.99, ORIGIN) == Color(0, 1, 0)
        assert texture.sample(0.0, 0.0, ORIGIN) == Color(0, 0, 1)
        assert texture.sample(1.0, 0.0, ORIGIN) == Color(1, 1, 1)

    def test_out_of_range_uv_is_clamped(self, quadrant_png):
        texture = ImageTexture(str(quadrant_png))
        assert texture.sample(-3.0, 7.0, ORIGIN) == Color(1, 0, 0)
        assert texture.sample(5.0, -1.0, ORIGIN) == Color(1, 1, 1)

    def test_grayscale_image_is_converted(self, tmp_path):
        path = tmp_path / "gray.png"
        Image.new("L", (1, 1), 255).save(path)
        assert ImageTexture(str(path)).sample(0.5, 0.5, ORIGIN) == Color(1, 1, 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ImageTexture(str(tmp_path / "missing.png"))

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_text("not an image")
        with pytest.raises(ValueError):
            ImageTexture(str(path))


class TestTextureLoader:
    """Tests for the texture loading helpers."""

    def test_load_texture_accepts_paths(self, quadrant_png):
        assert isinstance(load_texture(quadrant_png), ImageTexture)

    def test_create_image_material(self, quadrant_png):
        material = create_image_material(quadrant_png, Lambertian)
        assert isinstance(material, Lambertian)
        assert isinstance(material.texture, ImageTexture)

    def test_create_image_material_with_params(self, quadrant_png):
        material = create_image_material(quadrant_png, Metal, fuzz=0.25)
        assert material.fuzz == 0.25

    def test_relative_path_falls_back_to_texture_dir(self, quadrant_png, tmp_path, monkeypatch):
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        monkeypatch.setattr(texture_loader, "TEXTURE_DIR", quadrant_png.parent)
        texture = load_texture(quadrant_png.name)
        assert texture.path == str(quadrant_png)

    def test_missing_everywhere_raises(self, tmp_path, monkeypatch):
        monkeypatch.setattr(texture_loader, "TEXTURE_DIR", tmp_path)
        with pytest.raises(FileNotFoundError):
            load_texture("no_such_texture.png")
