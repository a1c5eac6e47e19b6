# renderer/raytracer.py
import logging
import math
import multiprocessing
import time
from typing import List, Optional, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.tone_mapping import encode_buffer

logger = logging.getLogger(__name__)

# Scene queries start slightly off the surface to skip self-hits.
T_MIN = 1e-3

SKY_HORIZON = Vector3(1.0, 1.0, 1.0)
SKY_ZENITH = Vector3(0.5, 0.7, 1.0)

# Scanlines per task handed to a worker process.
ROWS_PER_CHUNK = 4


class Renderer:
    """
    CPU path tracer. Each pixel owns a PCG32 seeded from its row and column,
    so the output does not depend on how scanlines are scheduled.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings.validate()
        self.width = settings.image_width
        self.height = settings.image_height
        self.samples_per_pixel = settings.samples_per_pixel
        self.max_depth = settings.max_depth

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Renders the scene and returns a flat uint8 RGB buffer, top row first.
        """
        check_scene(world)
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.settings.workers)
        start = time.perf_counter()

        linear = np.zeros((self.height, self.width, 3), dtype=np.float64)
        if self.settings.workers == 1:
            for j in range(self.height):
                logger.debug("Scanlines remaining: %d", self.height - j)
                linear[j] = self.render_scanline(j, world, camera)
        else:
            self._render_parallel(linear, world, camera)

        buffer = encode_buffer(linear)
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return buffer

    def _render_parallel(self, linear: np.ndarray, world: Hittable, camera: Camera):
        chunks = [(start, min(start + ROWS_PER_CHUNK, self.height))
                  for start in range(0, self.height, ROWS_PER_CHUNK)]
        logger.debug("Split %d scanlines into %d chunks", self.height, len(chunks))
        with multiprocessing.Pool(self.settings.workers, initializer=_init_worker,
                                  initargs=(self, world, camera)) as pool:
            done = 0
            for start, end, rows in pool.imap_unordered(_render_chunk, chunks):
                linear[start:end] = rows
                done += end - start
                logger.debug("Scanlines remaining: %d", self.height - done)

    def render_scanline(self, j: int, world: Hittable, camera: Camera) -> np.ndarray:
        row = np.empty((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            color = self.render_pixel(i, j, world, camera)
            row[i] = (color.x, color.y, color.z)
        return row

    def render_pixel(self, i: int, j: int, world: Hittable, camera: Camera) -> Vector3:
        """
        Averaged radiance for column ``i`` of scanline ``j`` (0 is the top row).
        """
        rng = PCG32.for_pixel(i, j, self.settings.seed_state, self.settings.seed_sequence)
        pixel_color = Vector3.zero()
        for _ in range(self.samples_per_pixel):
            s = (i + rng.random()) / self.width
            t = (self.height - 1 - j + rng.random()) / self.height
            ray = camera.get_ray(s, t, rng)
            pixel_color = pixel_color + self.ray_color(ray, world, self.max_depth, rng)
        return pixel_color / self.samples_per_pixel

    def ray_color(self, ray: Ray, world: Hittable, depth: int, rng: PCG32) -> Vector3:
        """
        Radiance carried back along ``ray`` after at most ``depth`` bounces.

        Bounces are followed in a loop so any depth runs in constant stack.
        Attenuations are kept and applied innermost first, giving the same
        floats as ``attenuation * ray_color(scattered, depth - 1)``.
        """
        attenuations: List[Vector3] = []
        color = Vector3.zero()
        while depth > 0:
            rec = world.hit(ray, T_MIN, math.inf)
            if rec is None:
                color = background(ray)
                break

            scattered = rec.material.scatter(ray, rec, rng)
            if scattered is None:
                break
            ray, attenuation = scattered
            attenuations.append(attenuation)
            depth -= 1

        for attenuation in reversed(attenuations):
            color = attenuation * color
        return color


def background(ray: Ray) -> Vector3:
    """Vertical white-to-blue sky gradient."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON + (SKY_ZENITH - SKY_HORIZON) * a


def check_scene(world: Optional[Hittable]):
    if world is None:
        raise ConfigurationError("no scene to render")
    if world.bounding_box().is_empty():
        raise ConfigurationError("scene contains no objects")


_worker_context: Optional[Tuple[Renderer, Hittable, Camera]] = None


def _init_worker(renderer: Renderer, world: Hittable, camera: Camera):
    global _worker_context
    _worker_context = (renderer, world, camera)


def _render_chunk(rows: Tuple[int, int]) -> Tuple[int, int, np.ndarray]:
    renderer, world, camera = _worker_context
    start, end = rows
    scanlines: List[np.ndarray] = [renderer.render_scanline(j, world, camera)
                                   for j in range(start, end)]
    return start, end, np.stack(scanlines)
