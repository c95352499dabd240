# raytracer/camera/camera.py
import math
import random
from raytracer.core.ray import Ray
from raytracer.core.utils import random_in_unit_disk
from raytracer.core.vector import Vector3

class Camera:
    """
    Thin-lens camera with a shutter interval.

    The basis and image plane are fixed at construction; the camera is then
    shared read-only by every render thread. Rays start on a lens disk of
    radius aperture / 2 (depth of field) and carry a time drawn uniformly from
    [shutter_open, shutter_open + shutter_duration) (motion blur).
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, up: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float, focus_dist: float,
                 shutter_open: float = 0.0, shutter_duration: float = 1.0):
        self.origin = look_from
        self.lens_radius = aperture / 2.0
        self.shutter_open = shutter_open
        self.shutter_duration = shutter_duration

        # vfov is the vertical field of view in degrees
        theta = vfov * math.pi / 180.0
        half_height = math.tan(theta / 2.0)
        half_width = aspect_ratio * half_height

        self.w = (look_from - look_at).normalize()
        self.u = up.cross(self.w)
        self.v = self.w.cross(self.u)

        # Scale the image plane out to the focus distance
        self.lower_left_corner = (look_from
                                  - self.u * (half_width * focus_dist)
                                  - self.v * (half_height * focus_dist)
                                  - self.w * focus_dist)
        self.horizontal = self.u * (2.0 * half_width * focus_dist)
        self.vertical = self.v * (2.0 * half_height * focus_dist)

    def get_ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """Ray through image-plane coordinates (s, t) in [0, 1], from a random lens point."""
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        time = self.shutter_open + self.shutter_duration * rng.random()
        return Ray(self.origin + offset,
                   self.lower_left_corner + self.horizontal * s + self.vertical * t - self.origin - offset,
                   time)
