# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        self.bbox = AABB.from_points(center - offset, center + offset)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0 or a == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        if self.radius > 0:
            outward_normal = (rec.p - self.center) / self.radius
        else:
            outward_normal = (-ray.direction).normalize()
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = self.get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    @staticmethod
    def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
        """
        Map a point on the unit sphere to (u, v) in [0, 1].

        u is the angle around the Y axis from X=-1, v the angle from Y=-1
        to Y=+1:
            (1, 0, 0) -> (0.50, 0.50)    (-1,  0,  0) -> (0.00, 0.50)
            (0, 1, 0) -> (0.50, 1.00)    ( 0, -1,  0) -> (0.50, 0.00)
            (0, 0, 1) -> (0.25, 0.50)    ( 0,  0, -1) -> (0.75, 0.50)
        """
        theta = math.acos(max(-1.0, min(1.0, -p.y)))
        phi = math.atan2(-p.z, p.x) + math.pi
        return phi / (2 * math.pi), theta / math.pi
