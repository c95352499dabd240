# raytracer/materials/metal.py
import random
from typing import Tuple
from raytracer.core.ray import Ray
from raytracer.core.utils import reflect, random_in_unit_sphere
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material

class Metal(Material):
    """
    Metal material: mirror reflection blurred by `fuzz`.
    """
    def __init__(self, albedo: Vector3, fuzz: float):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Ray, bool]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)
        # Absorb the ray if it does not scatter away from the surface
        return self.albedo, scattered, scattered.direction.dot(rec.normal) > 0
