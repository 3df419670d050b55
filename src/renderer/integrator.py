# renderer/integrator.py
import math
import random
from typing import Optional
from core.interval import Interval
from core.ray import Ray
from core.utils import lerp
from core.vector import Color
from geometry.hittable import Hittable

# Lower bound of the hit interval, skips self-intersection at the bounce origin
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)
SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def sky_color(ray: Ray) -> Color:
    """
    Vertical white-to-blue gradient used when the scene has no background color.
    """
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return lerp(SKY_WHITE, SKY_BLUE, a)

def ray_color(ray: Ray, depth: int, world: Hittable,
              background: Optional[Color], rng: random.Random) -> Color:
    """
    Radiance arriving along the ray: emission at the first hit plus the
    attenuated radiance of the scattered ray, recursively.

    Args:
        ray: The ray to trace.
        depth: Remaining bounce budget. Zero or less gathers no light.
        world: Root hittable, usually a BVH over the whole scene.
        background: Color returned on a miss, or None for the sky gradient.
        rng: Random stream owned by the calling worker.
    """
    # If we've exceeded the ray bounce limit, no more light is gathered.
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, Interval(T_MIN, math.inf))
    if rec is None:
        return background if background is not None else sky_color(ray)

    color_from_emission = rec.material.emitted(rec.u, rec.v, rec.p)

    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return color_from_emission

    attenuation, scattered = scatter
    color_from_scatter = attenuation * ray_color(scattered, depth - 1, world, background, rng)
    return color_from_emission + color_from_scatter
