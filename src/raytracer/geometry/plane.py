# raytracer/geometry/plane.py
from typing import Optional
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Hittable, HitRecord

EPSILON = 1e-5

class Plane(Hittable):
    """
    An infinite plane through `center` with the given surface normal.

    Only rays travelling against the normal (direction . normal < EPSILON)
    can hit it, so the plane is invisible from behind. Being unbounded it has
    no bounding box; bounding_box() keeps the base class NotImplementedError.
    """
    def __init__(self, center: Vector3, surface_normal: Vector3, material):
        self.center = center
        self.surface_normal = surface_normal
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        dot = self.surface_normal.dot(ray.direction)
        if dot >= EPSILON or dot == 0.0:
            return None
        t = (self.center - ray.origin).dot(self.surface_normal) / dot
        if t > EPSILON and t_min < t < t_max:
            return HitRecord(t, ray.at(t), self.surface_normal, self.material)
        return None
