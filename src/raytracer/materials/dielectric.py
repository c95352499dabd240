# raytracer/materials/dielectric.py
import random
from typing import Tuple
from raytracer.core.ray import Ray
from raytracer.core.utils import reflect, refract, schlick
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Clear refractive material (glass, water). Each scatter either reflects or
    refracts, picked at random with the Schlick reflectance as probability.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Ray, bool]:
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)

        # Determine if we're exiting (ray along the normal) or entering the material
        direction_dot_normal = direction.dot(rec.normal)
        if direction_dot_normal > 0.0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * direction_dot_normal / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -direction_dot_normal / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        # Total internal reflection always reflects
        reflect_prob = schlick(cosine, self.ref_idx) if refracted is not None else 1.0

        if rng.random() < reflect_prob:
            return WHITE, Ray(rec.p, reflected, ray_in.time), True
        return WHITE, Ray(rec.p, refracted, ray_in.time), True
