# materials/textures.py
import math
import os
import numpy as np
from PIL import Image, UnidentifiedImageError
from core.vector import Color, Point3

class Texture:
    """Base class for all textures."""
    def sample(self, u: float, v: float, p: Point3) -> Color:
        """Sample the texture at surface coordinates (u, v) and hit point p."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def sample(self, u: float, v: float, p: Point3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern in world space. scale is the edge length of one cell.
    """
    def __init__(self, scale: float, even, odd):
        self.inv_scale = 1.0 / scale
        self.even = even if isinstance(even, Texture) else SolidTexture(even)
        self.odd = odd if isinstance(odd, Texture) else SolidTexture(odd)

    def sample(self, u: float, v: float, p: Point3) -> Color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        is_even = (x + y + z) % 2 == 0
        return self.even.sample(u, v, p) if is_even else self.odd.sample(u, v, p)

class ImageTexture(Texture):
    """
    A texture from an image file. Loading failures raise immediately so a
    broken scene is rejected before rendering starts.
    """
    def __init__(self, image_path: str):
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Texture file not found: {image_path}")
        try:
            with Image.open(image_path) as img:
                # Convert to RGB if necessary
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                # Convert to numpy array for faster access
                self.data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
                self.width = img.width
                self.height = img.height
        except (UnidentifiedImageError, OSError) as e:
            raise ValueError(f"Error loading texture {image_path}: {e}") from e
        self.path = image_path

    def sample(self, u: float, v: float, p: Point3) -> Color:
        if self.height <= 0:
            return Color(0, 1, 1)

        # Clamp to [0,1] and flip V to image row order
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x]
        return Color(float(r), float(g), float(b))
