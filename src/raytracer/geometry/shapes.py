# raytracer/geometry/shapes.py
"""
Composite shapes assembled from triangles.

Each shape owns a HittableList of its triangles and delegates both hit() and
bounding_box() to it. Rotations are 3x3 numpy matrices (see rotation_y).
"""
import math
from typing import Optional, Sequence, Tuple
import numpy as np
from raytracer.core.aabb import AABB
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Hittable, HitRecord
from raytracer.geometry.triangle import NormalTriangle, Triangle
from raytracer.geometry.world import HittableList

IDENTITY = np.identity(3)

def rotation_y(degrees: float) -> np.ndarray:
    """Rotation matrix about the +y axis (right-handed)."""
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    return np.array([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ])

def rotate(rotation: np.ndarray, v: Vector3) -> Vector3:
    x, y, z = rotation @ np.array([v.x, v.y, v.z])
    return Vector3(float(x), float(y), float(z))

class _Composite(Hittable):
    def __init__(self):
        self.hittable_list = HittableList()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.hittable_list.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.hittable_list.bounding_box(time0, time1)

class Quad(_Composite):
    """
    A planar quadrilateral v0-v1-v2-v3 split into triangles (v0, v1, v2) and
    (v0, v2, v3). The rotation is applied to the vertices about the origin.
    """
    def __init__(self, vertices: Sequence[Vector3], material, rotation: np.ndarray = IDENTITY):
        super().__init__()
        r0, r1, r2, r3 = (rotate(rotation, v) for v in vertices)
        self.hittable_list.add(Triangle((r0, r1, r2), material))
        self.hittable_list.add(Triangle((r0, r2, r3), material))

class Pyramid(_Composite):
    """
    A square pyramid standing on `position`: four triangular sides meeting at
    a zenith `height` above the base, and a quad base. The rotation turns the
    base about `position`; the zenith stays directly above it.
    """
    def __init__(self, position: Vector3, base_length: float, height: float,
                 material, rotation: np.ndarray = IDENTITY):
        super().__init__()
        corners = [(-0.5, 0.0, 0.5), (-0.5, 0.0, -0.5), (0.5, 0.0, -0.5), (0.5, 0.0, 0.5)]
        b0, b1, b2, b3 = (position + rotate(rotation, Vector3(*c) * base_length) for c in corners)
        zenith = position + Vector3(0.0, height, 0.0)

        self.hittable_list.add(Triangle((b0, zenith, b3), material))
        self.hittable_list.add(Triangle((b3, zenith, b2), material))
        self.hittable_list.add(Triangle((b2, zenith, b1), material))
        self.hittable_list.add(Triangle((b1, zenith, b0), material))
        self.hittable_list.add(Quad((b0, b3, b2, b1), material))

class Mesh(_Composite):
    """
    A smooth-shaded triangle mesh built from in-memory data: vertex positions,
    per-vertex normals and faces given as index triples into both. Vertices are
    scaled, rotated and then moved to `position`; normals are rotated.
    """
    def __init__(self, vertices: Sequence[Vector3], normals: Sequence[Vector3],
                 faces: Sequence[Tuple[int, int, int]], material,
                 position: Vector3 = Vector3(0.0, 0.0, 0.0), scale: float = 1.0,
                 rotation: np.ndarray = IDENTITY):
        super().__init__()
        if len(vertices) != len(normals):
            raise ValueError(f"mesh needs one normal per vertex, got {len(vertices)} vertices "
                             f"and {len(normals)} normals")
        placed = [position + rotate(rotation, v * scale) for v in vertices]
        turned = [rotate(rotation, n) for n in normals]
        for i0, i1, i2 in faces:
            self.hittable_list.add(NormalTriangle(
                (placed[i0], placed[i1], placed[i2]),
                (turned[i0], turned[i1], turned[i2]),
                material,
            ))

    def __len__(self) -> int:
        return len(self.hittable_list)
