# materials/metal.py
import random
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = self.as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.texture.sample(rec.u, rec.v, rec.p), scattered

        return None  # Absorb the ray if it does not scatter forward
