from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.core.aabb import AABB
from raytracer.core.errors import BVHConstructionError, RaytracerError

__all__ = ["Vector3", "Ray", "AABB", "BVHConstructionError", "RaytracerError"]
