from raytracer.geometry.hittable import Hittable, HitRecord
from raytracer.geometry.sphere import Sphere, MovingSphere
from raytracer.geometry.plane import Plane
from raytracer.geometry.triangle import Triangle, NormalTriangle
from raytracer.geometry.bvh import BVHNode
from raytracer.geometry.world import HittableList
from raytracer.geometry.shapes import Quad, Pyramid, Mesh, rotation_y

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "MovingSphere",
    "Plane",
    "Triangle",
    "NormalTriangle",
    "BVHNode",
    "HittableList",
    "Quad",
    "Pyramid",
    "Mesh",
    "rotation_y",
]
