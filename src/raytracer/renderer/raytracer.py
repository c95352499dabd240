# raytracer/renderer/raytracer.py
import logging
import math
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional
import numpy as np
from raytracer.camera.camera import Camera
from raytracer.config import default_workers
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Hittable
from raytracer.renderer.integrator import colour

logger = logging.getLogger(__name__)

def partition_rows(height: int, workers: int) -> List[range]:
    """
    Split image rows into `workers` contiguous bands of height // workers
    rows each; the last band absorbs the remainder. Bands may be empty when
    there are fewer rows than workers.
    """
    rows = height // workers
    bands = []
    for worker in range(workers):
        start = worker * rows
        stop = height if worker == workers - 1 else (worker + 1) * rows
        bands.append(range(start, stop))
    return bands

def row_rng(seed: int, row: int) -> random.Random:
    """Independent random stream for one image row, derived from the render seed."""
    state = np.random.SeedSequence([seed, row]).generate_state(2, dtype=np.uint64)
    return random.Random(int(state[0]) << 64 | int(state[1]))

def to_byte(channel: float) -> int:
    # Gamma 2 then quantize; sqrt of a radiance above 1 saturates at 255.
    return min(255, int(255.99 * math.sqrt(channel)))

class Renderer:
    """
    Multi-threaded path tracer. Rows are split into one band per worker
    thread; each worker traces its band straight into its own slice of the
    shared output image, so no locking is needed.
    """
    def __init__(self, width: int, height: int, samples: int, workers: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if samples <= 0:
            raise ValueError(f"samples per pixel must be positive, got {samples}")
        self.width = width
        self.height = height
        self.samples = samples
        self.workers = workers if workers is not None else default_workers()
        if self.workers <= 0:
            raise ValueError(f"worker count must be positive, got {self.workers}")

    def render_rows(self, rows: range, world: Hittable, camera: Camera, seed: int, image: np.ndarray):
        """Trace every pixel of `rows` (counted from the top) into `image`."""
        nx, ny, ns = self.width, self.height, self.samples
        for row in rows:
            rng = row_rng(seed, row)
            j = ny - row - 1
            out_row = image[row]
            for i in range(nx):
                total = Vector3(0.0, 0.0, 0.0)
                for _ in range(ns):
                    u = (i + rng.random()) / nx
                    v = (j + rng.random()) / ny
                    r = camera.get_ray(u, v, rng)
                    total = total + colour(r, world, 0, rng)
                total = total / ns
                out_row[i] = (to_byte(total.x), to_byte(total.y), to_byte(total.z))

    def render(self, world: Hittable, camera: Camera, seed: int) -> np.ndarray:
        """
        Render the scene and return a (height, width, 3) uint8 RGB image,
        row 0 at the top. Output depends only on the scene and seed, not on
        the number of workers.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        bands = partition_rows(self.height, self.workers)

        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="raytracer") as executor:
            futures = [executor.submit(self.render_rows, band, world, camera, seed, image)
                       for band in bands if len(band) > 0]
            for future in futures:
                future.result()
        logger.info("Raytrace complete in %.2f seconds", time.perf_counter() - start)
        return image

def render(world: Hittable, camera: Camera, width: int, height: int, samples: int,
           seed: int, workers: Optional[int] = None) -> np.ndarray:
    """Convenience wrapper: build a Renderer and render one image."""
    return Renderer(width, height, samples, workers).render(world, camera, seed)
