# raytracer/materials/lambertian.py
import random
from typing import Tuple
from raytracer.core.ray import Ray
from raytracer.core.utils import random_in_unit_sphere
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material
from raytracer.materials.textures import Texture

def _diffuse_ray(ray_in: Ray, rec: HitRecord, rng: random.Random) -> Ray:
    # Aim at a random point in the unit sphere sitting on the normal.
    target = rec.p + rec.normal + random_in_unit_sphere(rng)
    return Ray(rec.p, target - rec.p, ray_in.time)

class Lambertian(Material):
    """
    Lambertian diffuse material with a constant albedo.
    """
    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Ray, bool]:
        return self.albedo, _diffuse_ray(ray_in, rec, rng), True

class TexturedLambertian(Material):
    """
    Lambertian diffuse material whose albedo is sampled from a texture at the hit point.
    """
    def __init__(self, texture: Texture):
        self.texture = texture

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Ray, bool]:
        albedo = self.texture.value(0.0, 0.0, rec.p)
        return albedo, _diffuse_ray(ray_in, rec, rng), True
