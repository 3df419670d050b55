# camera/camera.py
import math
import random
from typing import Optional
from core.vector import Vector3, Point3, Color
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

DEFAULT_BACKGROUND = (0.70, 0.80, 1.00)

class Camera:
    """
    Positionable pinhole or thin-lens camera.

    Every field is a plain value with a default; initialize() derives the
    viewport from them and must run again after any field changes.
    """
    def __init__(self,
                 aspect_ratio: float = 1.0,
                 image_width: int = 100,
                 samples_per_pixel: int = 10,
                 max_depth: int = 10,
                 vfov: float = 90.0,
                 lookfrom: Point3 = None,
                 lookat: Point3 = None,
                 vup: Vector3 = None,
                 defocus_angle: float = 0.0,
                 focus_dist: float = 10.0,
                 background: Optional[Color] = DEFAULT_BACKGROUND):
        self.aspect_ratio = aspect_ratio            # Ratio of image width over height
        self.image_width = image_width              # Rendered image width in pixel count
        self.samples_per_pixel = samples_per_pixel  # Count of random samples for each pixel
        self.max_depth = max_depth                  # Maximum number of ray bounces into scene

        self.vfov = vfov  # Vertical view angle in degrees
        self.lookfrom = lookfrom if lookfrom is not None else Point3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Point3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)

        self.defocus_angle = defocus_angle  # Variation angle of rays through each pixel
        self.focus_dist = focus_dist        # Distance from lookfrom to the plane of perfect focus

        # None selects the sky gradient
        self.background = Color(*background) if isinstance(background, tuple) else background

        self.initialize()

    def initialize(self):
        """Validates the settings and updates the camera's basis vectors and viewport."""
        if self.image_width < 1:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel

        self.center = self.lookfrom

        # Determine viewport dimensions.
        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Calculate the u,v,w unit basis vectors for the camera coordinate frame.
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges.
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        # Horizontal and vertical delta vectors from pixel to pixel.
        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        # Location of the upper left pixel.
        viewport_upper_left = (self.center - self.w * self.focus_dist
                               - viewport_u / 2 - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        # Camera defocus disk basis vectors.
        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int, rng: random.Random) -> Ray:
        """
        Returns a randomly sampled camera ray for the pixel at column i, row j,
        originating from the defocus disk when defocus_angle > 0.
        """
        offset = self.sample_square(rng)
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset.x)
                        + self.pixel_delta_v * (j + offset.y))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin
        ray_time = rng.random()

        return Ray(ray_origin, ray_direction, ray_time)

    @staticmethod
    def sample_square(rng: random.Random) -> Vector3:
        """Returns a random offset in the unit square [-0.5, 0.5) x [-0.5, 0.5)."""
        return Vector3(rng.random() - 0.5, rng.random() - 0.5, 0)

    def defocus_disk_sample(self, rng: random.Random) -> Point3:
        """Returns a random point in the camera defocus disk."""
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
