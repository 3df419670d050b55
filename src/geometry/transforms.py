# geometry/transforms.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.utils import degrees_to_radians
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Moves a child hittable by a fixed offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.bbox = obj.bounding_box() + offset

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Move the ray backwards by the offset
        offset_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)

        rec = self.object.hit(offset_ray, ray_t)
        if rec is None:
            return None

        # Move the intersection point forwards by the offset
        rec.p = rec.p + self.offset
        return rec

class RotateY(Hittable):
    """
    Rotates a child hittable about the Y axis by an angle in degrees.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        self.angle = angle
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.bbox = self._rotated_bbox(obj.bounding_box())

    def _rotated_bbox(self, bbox: AABB) -> AABB:
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]

        for x in (bbox.x.min, bbox.x.max):
            for y in (bbox.y.min, bbox.y.max):
                for z in (bbox.z.min, bbox.z.max):
                    corner = self._to_world(Vector3(x, y, z))
                    for c in range(3):
                        lo[c] = min(lo[c], corner[c])
                        hi[c] = max(hi[c], corner[c])

        return AABB(Interval(lo[0], hi[0]), Interval(lo[1], hi[1]), Interval(lo[2], hi[2]))

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Change the ray from world space to object space
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)

        rec = self.object.hit(rotated, ray_t)
        if rec is None:
            return None

        # Back to world space. Rotation keeps the normal facing the ray.
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec
