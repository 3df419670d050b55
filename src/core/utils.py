# core/utils.py
import math
import random
from typing import Optional
from core.vector import Vector3

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_vector(rng: random.Random, low: float = 0.0, high: float = 1.0) -> Vector3:
    """
    Returns a vector with each component drawn uniformly from [low, high).
    """
    return Vector3(rng.uniform(low, high),
                   rng.uniform(low, high),
                   rng.uniform(low, high))

def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if 1e-160 < p.length_squared() < 1.0:
            return p

def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng: random.Random) -> Vector3:
    """
    Returns a random point inside the unit disk in the z=0 plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.length_squared() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def reflectance(cosine: float, refraction_ratio: float) -> float:
    # Schlick's approximation
    r0 = (1.0 - refraction_ratio) / (1.0 + refraction_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)

def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    return a * (1.0 - t) + b * t

def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Returns an independent random stream. Never share one across threads.
    """
    return random.Random(seed)
