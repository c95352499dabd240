# raytracer/geometry/sphere.py
import math
from typing import Optional
from raytracer.core.aabb import AABB
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Hittable, HitRecord

def _hit_sphere(center: Vector3, radius: float, material, ray: Ray,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    # Non-halved quadratic: b = oc.d, so the roots are (-b +- sqrt(b^2 - ac)) / a.
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = b * b - a * c

    if discriminant <= 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    for root in ((-b - sqrt_disc) / a, (-b + sqrt_disc) / a):
        if t_min < root < t_max:
            p = ray.at(root)
            return HitRecord(root, p, (p - center) / radius, material)
    return None

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # The bounding box of a sphere is center +- radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

class MovingSphere(Hittable):
    """
    A sphere whose center travels linearly from center0 (at movement_start)
    to center1 (at movement_start + movement_duration). Times outside that
    window extrapolate the path rather than clamping to its ends.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 movement_start: float, movement_duration: float,
                 radius: float, material):
        if movement_duration == 0:
            raise ValueError("moving sphere needs a non-zero movement_duration")
        self.center0 = center0
        self.center1 = center1
        self.movement_start = movement_start
        self.movement_duration = movement_duration
        self.radius = radius
        self.material = material

    def center_at(self, time: float) -> Vector3:
        fraction = (time - self.movement_start) / self.movement_duration
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center_at(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        box0 = AABB(self.center0 - offset, self.center0 + offset)
        box1 = AABB(self.center1 - offset, self.center1 + offset)
        return AABB.surrounding_box(box0, box1)
