# renderer/raytracer.py
import logging
import random
import threading
import time
from concurrent import futures
from typing import List, Optional
import numpy as np
from camera.camera import Camera
from core.config import DEFAULT_EXECUTOR, DEFAULT_SEED, DEFAULT_WORKERS
from core.vector import Color
from geometry.hittable import Hittable
from renderer.integrator import ray_color

logger = logging.getLogger(__name__)

EXECUTORS = ("thread", "process")

class RenderCancelled(RuntimeError):
    """Raised when a render is stopped through its cancel event."""

def row_seeds(seed: int, height: int) -> List[int]:
    """
    One independent seed per scanline, so the image depends only on the seed
    and never on worker count or completion order.
    """
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]

def render_row(camera: Camera, world: Hittable, j: int, rng: random.Random) -> np.ndarray:
    """
    Average of samples_per_pixel estimates for every pixel of scanline j,
    as a (width, 3) array of linear RGB.
    """
    row = np.zeros((camera.image_width, 3), dtype=np.float64)
    for i in range(camera.image_width):
        pixel_color = Color(0, 0, 0)
        for _ in range(camera.samples_per_pixel):
            ray = camera.get_ray(i, j, rng)
            pixel_color = pixel_color + ray_color(ray, camera.max_depth, world,
                                                  camera.background, rng)
        row[i] = (pixel_color.x, pixel_color.y, pixel_color.z)
    row *= camera.pixel_samples_scale
    return row

# Scene shipped once to each worker process by the pool initializer
_worker_scene = {}

def _init_worker(camera: Camera, world: Hittable):
    _worker_scene["camera"] = camera
    _worker_scene["world"] = world

def _render_row_in_worker(j: int, seed: int) -> np.ndarray:
    return render_row(_worker_scene["camera"], _worker_scene["world"], j, random.Random(seed))

class Renderer:
    """
    Renders a camera view of a world into a (height, width, 3) buffer of
    averaged linear RGB, one scanline per task.
    """
    def __init__(self, camera: Camera, workers: int = DEFAULT_WORKERS,
                 executor: str = DEFAULT_EXECUTOR, seed: int = DEFAULT_SEED):
        if executor not in EXECUTORS:
            raise ValueError(f"Unknown executor {executor!r}, expected one of {EXECUTORS}")
        self.camera = camera
        self.workers = max(1, workers)
        self.executor = executor
        self.seed = seed
        self.image: Optional[np.ndarray] = None

    def render(self, world: Hittable, cancel_event: Optional[threading.Event] = None) -> np.ndarray:
        camera = self.camera
        camera.initialize()
        width, height = camera.image_width, camera.image_height
        self.image = np.zeros((height, width, 3), dtype=np.float64)
        seeds = row_seeds(self.seed, height)

        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d %s worker(s)",
                    width, height, camera.samples_per_pixel, camera.max_depth,
                    self.workers, self.executor if self.workers > 1 else "inline")
        start = time.perf_counter()

        if self.workers <= 1:
            self._render_inline(world, seeds, cancel_event)
        else:
            self._render_pooled(world, seeds, cancel_event)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return self.image

    def _render_inline(self, world: Hittable, seeds: List[int],
                       cancel_event: Optional[threading.Event]):
        height = len(seeds)
        for j, seed in enumerate(seeds):
            self._check_cancelled(cancel_event)
            self.image[j] = render_row(self.camera, world, j, random.Random(seed))
            logger.debug("Scanline %d done, %d remaining", j, height - j - 1)

    def _render_pooled(self, world: Hittable, seeds: List[int],
                       cancel_event: Optional[threading.Event]):
        if self.executor == "process":
            pool = futures.ProcessPoolExecutor(max_workers=self.workers,
                                               initializer=_init_worker,
                                               initargs=(self.camera, world))
        else:
            pool = futures.ThreadPoolExecutor(max_workers=self.workers)

        remaining = len(seeds)
        try:
            pending = {}
            for j, seed in enumerate(seeds):
                if self.executor == "process":
                    future = pool.submit(_render_row_in_worker, j, seed)
                else:
                    future = pool.submit(self._render_row_guarded, world, j, seed, cancel_event)
                pending[future] = j
            for future in futures.as_completed(pending):
                self._check_cancelled(cancel_event)
                j = pending[future]
                # Rows land by index, so completion order never affects the image
                self.image[j] = future.result()
                remaining -= 1
                logger.debug("Scanline %d done, %d remaining", j, remaining)
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise
        pool.shutdown(wait=True)

    def _render_row_guarded(self, world: Hittable, j: int, seed: int,
                            cancel_event: Optional[threading.Event]) -> np.ndarray:
        self._check_cancelled(cancel_event)
        return render_row(self.camera, world, j, random.Random(seed))

    @staticmethod
    def _check_cancelled(cancel_event: Optional[threading.Event]):
        if cancel_event is not None and cancel_event.is_set():
            raise RenderCancelled("Render cancelled")
