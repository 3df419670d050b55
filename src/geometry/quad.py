# geometry/quad.py
from typing import Optional
from core.vector import Vector3, Point3
from core.ray import Ray
from core.interval import Interval
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList

class Quad(Hittable):
    """
    Planar parallelogram with corner Q and edge vectors u and v.
    """
    def __init__(self, Q: Point3, u: Vector3, v: Vector3, material):
        self.Q = Q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.D = self.normal.dot(Q)
        nn = n.length_squared()
        # A zero-area quad keeps w at zero and never reports a hit
        self.w = n / nn if nn > 0 else Vector3(0, 0, 0)

        self.set_bounding_box()

    def set_bounding_box(self):
        bbox_diagonal1 = AABB.from_points(self.Q, self.Q + self.u + self.v)
        bbox_diagonal2 = AABB.from_points(self.Q + self.u, self.Q + self.v)
        self.bbox = AABB.surrounding_box(bbox_diagonal1, bbox_diagonal2).pad()

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)

        # No hit if the ray is parallel to the plane.
        if abs(denom) < 1e-8:
            return None

        t = (self.D - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        # Determine the hit point lies within the planar shape using its plane coordinates.
        intersection = ray.at(t)
        planar_hitpt_vector = intersection - self.Q
        alpha = self.w.dot(planar_hitpt_vector.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hitpt_vector))

        if not self.is_interior(alpha, beta):
            return None

        rec = HitRecord(p=intersection, t=t, u=alpha, v=beta, material=self.material)
        rec.set_face_normal(ray, self.normal)
        return rec

    @staticmethod
    def is_interior(a: float, b: float) -> bool:
        # Closed on both ends of the unit square
        return 0.0 <= a <= 1.0 and 0.0 <= b <= 1.0

def box(a: Point3, b: Point3, material) -> HittableList:
    """
    Returns the 3D box (six sides) that contains the two opposite vertices a & b.
    """
    sides = HittableList()

    lo = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0, 0)
    dy = Vector3(0, hi.y - lo.y, 0)
    dz = Vector3(0, 0, hi.z - lo.z)

    sides.add(Quad(Point3(lo.x, lo.y, hi.z), dx, dy, material))   # front
    sides.add(Quad(Point3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
    sides.add(Quad(Point3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
    sides.add(Quad(Point3(lo.x, lo.y, lo.z), dz, dy, material))   # left
    sides.add(Quad(Point3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
    sides.add(Quad(Point3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom

    return sides
