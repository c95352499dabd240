# raytracer/materials/material.py
import random
from typing import Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable and shared between render threads.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Ray, bool]:
        """
        Computes the attenuation and scattered ray for an incoming ray.
        Returns a tuple (attenuation, scattered_ray, did_scatter); when
        did_scatter is False the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

def scatter(material: Material, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Ray, bool]:
    """Dispatch to the material's own scatter()."""
    return material.scatter(ray_in, rec, rng)
