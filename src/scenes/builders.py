# scenes/builders.py
import logging
import random
from typing import Callable, Dict, Optional, Tuple
from camera.camera import Camera
from core.config import DEFAULT_SEED
from core.utils import random_vector
from core.vector import Color, Point3, Vector3
from geometry.bvh import build_bvh
from geometry.hittable import Hittable
from geometry.quad import Quad, box
from geometry.sphere import Sphere
from geometry.transforms import RotateY, Translate
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import (ColorPresets, DielectricPresets, LightPresets, MetalPresets,
                               TexturePresets)
from materials.texture_loader import create_image_material

logger = logging.getLogger(__name__)

Scene = Tuple[Hittable, Camera]

def two_spheres(**_) -> Scene:
    """
    A small sphere resting on a huge ground sphere under a sky gradient.
    """
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.5, 0.5, 0.5))))
    world.add(Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.5, 0.5, 0.5))))
    logger.debug("two_spheres: %d objects", len(world))

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=128,
        samples_per_pixel=10,
        max_depth=10,
        vfov=90,
        lookfrom=Point3(0, 0, 0),
        lookat=Point3(0, 0, -1),
        focus_dist=1.0,
        background=None,
    )
    return world, camera

def random_spheres(seed: int = DEFAULT_SEED, split_axis: Optional[str] = None, **_) -> Scene:
    """
    The classic field of small random spheres around three large ones.
    """
    rng = random.Random(seed)
    world = HittableList()

    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                material = Metal(random_vector(rng, 0.5, 1), rng.uniform(0, 0.5))
            else:
                # glass
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.mirror()))
    logger.debug("random_spheres: %d objects", len(world))

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=50,
        max_depth=50,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )
    return build_bvh(world, split_axis=split_axis, rng=rng), camera

def earth(texture: Optional[str] = None, **_) -> Scene:
    """
    A globe wrapped in an equirectangular image texture.
    """
    if texture is None:
        raise ValueError("The earth scene needs an image texture path (--texture)")
    surface = create_image_material(texture, Lambertian)
    globe = Sphere(Point3(0, 0, 0), 2, surface)
    logger.debug("earth: globe textured with %s", texture)

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
        vfov=20,
        lookfrom=Point3(0, 0, 12),
        lookat=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
    )
    return HittableList(globe), camera

def quads(**_) -> Scene:
    """
    Five colored quads facing the camera from different sides.
    """
    world = HittableList()
    world.add(Quad(Point3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), Lambertian(ColorPresets.PINK)))
    world.add(Quad(Point3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), Lambertian(Color(0.2, 1.0, 0.2))))
    world.add(Quad(Point3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), Lambertian(Color(0.2, 0.2, 1.0))))
    world.add(Quad(Point3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), Lambertian(ColorPresets.ORANGE)))
    world.add(Quad(Point3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), Lambertian(ColorPresets.TEAL)))
    logger.debug("quads: %d objects", len(world))

    camera = Camera(
        aspect_ratio=1.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
        vfov=80,
        lookfrom=Point3(0, 0, 9),
        lookat=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
    )
    return world, camera

def cornell_box(split_axis: Optional[str] = None, **_) -> Scene:
    """
    Cornell box lit by a ceiling quad, with two rotated blocks.
    """
    world = HittableList()

    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)
    light = LightPresets.daylight(15)

    world.add(Quad(Point3(555, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), green))
    world.add(Quad(Point3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red))
    world.add(Quad(Point3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105), light))
    world.add(Quad(Point3(0, 0, 0), Vector3(555, 0, 0), Vector3(0, 0, 555), white))
    world.add(Quad(Point3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white))
    world.add(Quad(Point3(0, 0, 555), Vector3(555, 0, 0), Vector3(0, 555, 0), white))

    box1 = box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    world.add(Translate(RotateY(box1, 15), Vector3(265, 0, 295)))

    box2 = box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    world.add(Translate(RotateY(box2, -18), Vector3(130, 0, 65)))
    logger.debug("cornell_box: %d objects", len(world))

    camera = Camera(
        aspect_ratio=1.0,
        image_width=300,
        samples_per_pixel=200,
        max_depth=50,
        vfov=40,
        lookfrom=Point3(278, 278, -800),
        lookat=Point3(278, 278, 0),
        vup=Vector3(0, 1, 0),
        background=Color(0, 0, 0),
    )
    return build_bvh(world, split_axis=split_axis), camera

SCENES: Dict[str, Callable[..., Scene]] = {
    "two_spheres": two_spheres,
    "random_spheres": random_spheres,
    "earth": earth,
    "quads": quads,
    "cornell_box": cornell_box,
}

def build_scene(name: str, **options) -> Scene:
    """
    Build a named scene. Unknown names raise KeyError listing the choices.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}, choose from {sorted(SCENES)}") from None
    return builder(**options)
