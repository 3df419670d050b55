# src/geometry/bvh.py
import logging
import math
import random
import time
from typing import Optional, Sequence, Union
from core.aabb import AABB
from core.config import BVH_SPLIT_AXIS
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList

logger = logging.getLogger(__name__)

SPLIT_AXIS_POLICIES = ("longest", "random", "sah")

class BVHNode(Hittable):
    """
    Bounding volume hierarchy node with exactly two children.

    A range of one object stores it as both children, so traversal never
    meets an empty child. The node box is the union of the child boxes and
    is fixed once built.
    """
    def __init__(self, objects: Union[HittableList, Sequence[Hittable]],
                 start: int = 0, end: Optional[int] = None,
                 split_axis: str = BVH_SPLIT_AXIS,
                 rng: Optional[random.Random] = None):
        if isinstance(objects, HittableList):
            objects = objects.objects
        if end is None:
            end = len(objects)
        if split_axis not in SPLIT_AXIS_POLICIES:
            raise ValueError(f"Unknown BVH split axis policy: {split_axis!r}")

        object_span = end - start
        if object_span <= 0:
            raise ValueError("Cannot build a BVH over an empty range of objects")

        # Work on a copy so the caller's list keeps its order
        objects = list(objects[start:end])

        if object_span == 1:
            self.left = self.right = objects[0]
        elif object_span == 2:
            self.left = objects[0]
            self.right = objects[1]
        else:
            axis = self._choose_axis(objects, split_axis, rng)
            objects.sort(key=lambda obj: obj.bounding_box().axis_interval(axis).min)

            mid = object_span // 2
            self.left = BVHNode(objects, 0, mid, split_axis, rng)
            self.right = BVHNode(objects, mid, object_span, split_axis, rng)

        self.bbox = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    @staticmethod
    def _choose_axis(objects: Sequence[Hittable], split_axis: str,
                     rng: Optional[random.Random]) -> int:
        if split_axis == "random":
            if rng is None:
                rng = random.Random()
            return rng.randint(0, 2)

        if split_axis == "sah":
            return BVHNode._cheapest_median_axis(objects)

        return _enclosing_box(objects).longest_axis()

    @staticmethod
    def _cheapest_median_axis(objects: Sequence[Hittable]) -> int:
        """
        Axis whose median split has the lowest surface area heuristic cost,
        count times surface area summed over both halves.
        """
        mid = len(objects) // 2
        best_axis = 0
        best_cost = math.inf
        for axis in range(3):
            ordered = sorted(objects, key=lambda obj: obj.bounding_box().axis_interval(axis).min)
            cost = (mid * _enclosing_box(ordered[:mid]).surface_area()
                    + (len(ordered) - mid) * _enclosing_box(ordered[mid:]).surface_area())
            if cost < best_cost:
                best_cost = cost
                best_axis = axis
        return best_axis

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.bbox.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)

        # Anything the right subtree returns now is nearer than the left hit
        right_t = Interval(ray_t.min, hit_left.t if hit_left is not None else ray_t.max)
        hit_right = self.right.hit(ray, right_t)

        return hit_right if hit_right is not None else hit_left

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

    def node_count(self) -> int:
        count = 1
        for child in (self.left, self.right):
            if isinstance(child, BVHNode):
                count += child.node_count()
        return count

def _enclosing_box(objects: Sequence[Hittable]) -> AABB:
    bbox = AABB.EMPTY
    for obj in objects:
        bbox = AABB.surrounding_box(bbox, obj.bounding_box())
    return bbox

def build_bvh(objects: Union[HittableList, Sequence[Hittable]],
              split_axis: Optional[str] = None,
              rng: Optional[random.Random] = None) -> BVHNode:
    """
    Build a BVH over a finished object list and log its shape.
    """
    if split_axis is None:
        split_axis = BVH_SPLIT_AXIS
    start = time.perf_counter()
    root = BVHNode(objects, split_axis=split_axis, rng=rng)
    logger.debug("Built BVH over %d objects (%s axis): %d nodes, depth %d in %.3fs",
                 len(objects), split_axis, root.node_count(), root.depth(),
                 time.perf_counter() - start)
    return root
