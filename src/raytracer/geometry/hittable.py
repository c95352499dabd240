# raytracer/geometry/hittable.py
from typing import Optional
from raytracer.core.aabb import AABB
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection. The normal is whatever the
    primitive defines (outward for spheres, the stored face normal for planes
    and triangles); it is not flipped to face the ray.
    """
    __slots__ = ("t", "p", "normal", "material")

    def __init__(self, t: float, p: Vector3, normal: Vector3, material=None):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal at intersection
        self.material = material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Box enclosing the object over the shutter interval [time0, time1],
        or None when the object has no extent to report.
        """
        raise NotImplementedError(f"{type(self).__name__} does not report a bounding box.")
