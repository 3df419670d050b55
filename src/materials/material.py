# materials/material.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color, Point3
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are shared between hittables and never change after construction.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """
        Radiance emitted at the hit point. Only lights emit.
        """
        return Color(0, 0, 0)

    @staticmethod
    def as_texture(value) -> Texture:
        if isinstance(value, Texture):
            return value
        return SolidTexture(value)
