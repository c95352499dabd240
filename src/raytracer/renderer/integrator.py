# raytracer/renderer/integrator.py
import math
import random
from raytracer.config import MAX_DEPTH, T_MIN
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Hittable
from raytracer.materials.material import scatter

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def sky(ray: Ray) -> Vector3:
    """Background gradient: white at the horizon blending to light blue overhead."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def colour(ray: Ray, world: Hittable, depth: int, rng: random.Random) -> Vector3:
    """
    Radiance carried back along `ray`.

    Each bounce multiplies in the material's attenuation; the path ends in
    the sky on a miss, or black when a surface absorbs the ray, has no
    material, or the bounce count reaches MAX_DEPTH. Written as a loop over
    the depth counter, equivalent to recursing on the scattered ray.
    """
    attenuation = WHITE
    while True:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return attenuation * sky(ray)
        if rec.material is None or depth >= MAX_DEPTH:
            return BLACK
        bounce_attenuation, scattered, did_scatter = scatter(rec.material, ray, rec, rng)
        if not did_scatter:
            return BLACK
        attenuation = attenuation * bounce_attenuation
        ray = scattered
        depth += 1
