from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList
from geometry.sphere import Sphere
from geometry.quad import Quad, box
from geometry.transforms import Translate, RotateY
from geometry.bvh import BVHNode, build_bvh

__all__ = [
    "Hittable",
    "HitRecord",
    "HittableList",
    "Sphere",
    "Quad",
    "box",
    "Translate",
    "RotateY",
    "BVHNode",
    "build_bvh",
]
