# src/geometry/world.py
from typing import Iterator, List, Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    An unordered list of Hittable objects, intersected by linear scan.
    The bounding box grows with every add().
    """
    def __init__(self, obj: Optional[Hittable] = None):
        self.objects: List[Hittable] = []
        self.bbox = AABB.EMPTY
        if obj is not None:
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bbox = AABB.surrounding_box(self.bbox, obj.bounding_box())

    def clear(self):
        self.objects.clear()
        self.bbox = AABB.EMPTY

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)
