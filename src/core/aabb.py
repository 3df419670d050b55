# src/core/aabb.py
from core.interval import Interval, EMPTY, UNIVERSE
from core.ray import Ray
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box stored as one interval per axis.
    """
    __slots__ = ("x", "y", "z")

    # Minimum thickness enforced by pad()
    PAD_DELTA = 0.0001

    def __init__(self, x: Interval = EMPTY, y: Interval = EMPTY, z: Interval = EMPTY):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3) -> "AABB":
        """
        Box spanned by two extreme corners given in any order.
        """
        return cls(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z)),
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.hull(box0.x, box1.x),
            Interval.hull(box0.y, box1.y),
            Interval.hull(box0.z, box1.z),
        )

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, ray: Ray, ray_t: Interval) -> bool:
        # Slab method: narrow [t_min, t_max] against each axis in turn.
        t_min = ray_t.min
        t_max = ray_t.max
        for axis in range(3):
            ax = self.axis_interval(axis)
            origin = ray.origin[axis]
            direction = ray.direction[axis]

            if direction == 0.0:
                # Parallel to this slab: every t is inside it or none is.
                if origin < ax.min or origin > ax.max:
                    return False
                continue

            inv_d = 1.0 / direction
            t0 = (ax.min - origin) * inv_d
            t1 = (ax.max - origin) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0

            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def pad(self) -> "AABB":
        """
        Return a box with no side narrower than PAD_DELTA.
        """
        delta = self.PAD_DELTA
        x = self.x if self.x.size() >= delta else self.x.expand(delta)
        y = self.y if self.y.size() >= delta else self.y.expand(delta)
        z = self.z if self.z.size() >= delta else self.z.expand(delta)
        return AABB(x, y, z)

    def longest_axis(self) -> int:
        sx, sy, sz = self.x.size(), self.y.size(), self.z.size()
        if sx > sy:
            return 0 if sx > sz else 2
        return 1 if sy > sz else 2

    def surface_area(self) -> float:
        dx, dy, dz = self.x.size(), self.y.size(), self.z.size()
        return 2 * (dx * dy + dx * dz + dy * dz)

    def __add__(self, offset: Vector3) -> "AABB":
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(EMPTY, EMPTY, EMPTY)
AABB.UNIVERSE = AABB(UNIVERSE, UNIVERSE, UNIVERSE)
