# materials/presets.py
from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with common refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    """Predefined light sources with different colors and intensities."""

    @staticmethod
    def daylight(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Common color presets for materials."""

    RED = Color(0.65, 0.05, 0.05)
    GREEN = Color(0.12, 0.45, 0.15)
    ORANGE = Color(1.0, 0.5, 0.0)
    TEAL = Color(0.2, 0.8, 0.8)
    PINK = Color(1.0, 0.2, 0.2)
    WHITE = Color(0.73, 0.73, 0.73)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(even: Color = None, odd: Color = None, scale: float = 0.32) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if even is None:
            even = Color(0.2, 0.3, 0.1)
        if odd is None:
            odd = Color(0.9, 0.9, 0.9)
        return CheckerTexture(scale, even, odd)
