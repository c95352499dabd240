# raytracer/geometry/triangle.py
from typing import Optional, Sequence, Tuple
from raytracer.core.aabb import AABB
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Hittable, HitRecord

EPSILON = 1e-5
BOX_PADDING = 1e-4

def moller_trumbore(v0: Vector3, v1: Vector3, v2: Vector3, ray: Ray,
                    t_min: float, t_max: float) -> Optional[Tuple[float, float, float]]:
    """
    Möller–Trumbore ray/triangle intersection.

    Returns (t, u, v) with barycentric weights u (for v1) and v (for v2), or
    None when the ray is near-parallel to the triangle, passes outside it, or
    the hit lies outside (t_min, t_max) or closer than EPSILON.
    """
    edge1 = v1 - v0
    edge2 = v2 - v0
    pvec = ray.direction.cross(edge2)
    det = edge1.dot(pvec)

    # Ray is parallel to the triangle
    if -EPSILON < det < EPSILON:
        return None

    inv_det = 1.0 / det
    tvec = ray.origin - v0
    u = tvec.dot(pvec) * inv_det
    if u < 0.0 or u > 1.0:
        return None

    qvec = tvec.cross(edge1)
    v = ray.direction.dot(qvec) * inv_det
    if v < 0.0 or u + v > 1.0:
        return None

    t = edge2.dot(qvec) * inv_det
    if t > EPSILON and t_min < t < t_max:
        return t, u, v
    return None

def triangle_box(vertices: Sequence[Vector3]) -> AABB:
    """
    Compute the bounding box of a triangle's vertices, padded by BOX_PADDING
    so axis-aligned triangles still get a box the slab test can hit.
    """
    pad = Vector3(BOX_PADDING, BOX_PADDING, BOX_PADDING)
    return AABB(
        Vector3(min(p.x for p in vertices), min(p.y for p in vertices), min(p.z for p in vertices)) - pad,
        Vector3(max(p.x for p in vertices), max(p.y for p in vertices), max(p.z for p in vertices)) + pad,
    )

class Triangle(Hittable):
    """A flat-shaded triangle; every hit reports the precomputed face normal."""
    def __init__(self, vertices: Sequence[Vector3], material):
        self.vertices = tuple(vertices)
        v0, v1, v2 = self.vertices
        self.surface_normal = (v2 - v0).cross(v1 - v0).normalize()
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        result = moller_trumbore(*self.vertices, ray, t_min, t_max)
        if result is None:
            return None
        t, _, _ = result
        return HitRecord(t, ray.at(t), self.surface_normal, self.material)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return triangle_box(self.vertices)

class NormalTriangle(Hittable):
    """A triangle with per-vertex normals interpolated across its face."""
    def __init__(self, vertices: Sequence[Vector3], normals: Sequence[Vector3], material):
        self.vertices = tuple(vertices)
        self.normals = tuple(normals)
        self.material = material

    def get_normal(self, u: float, v: float) -> Vector3:
        """Interpolate normal at the given barycentric coordinates."""
        n0, n1, n2 = self.normals
        return n1 * u + n2 * v + n0 * (1.0 - u - v)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        result = moller_trumbore(*self.vertices, ray, t_min, t_max)
        if result is None:
            return None
        t, u, v = result
        return HitRecord(t, ray.at(t), self.get_normal(u, v), self.material)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return triangle_box(self.vertices)
