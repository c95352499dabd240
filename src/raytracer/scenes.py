# raytracer/scenes.py
"""
Named demo scenes. Every builder takes the image aspect ratio and a seeded
random generator (used for procedural placement) and returns (world, camera).
"""
import logging
import random
from typing import Callable, Dict, Tuple
from raytracer.camera.camera import Camera
from raytracer.config import SHUTTER_DURATION, SHUTTER_OPEN
from raytracer.core.vector import Vector3
from raytracer.geometry.plane import Plane
from raytracer.geometry.shapes import Pyramid, Quad, rotation_y
from raytracer.geometry.sphere import MovingSphere, Sphere
from raytracer.geometry.world import HittableList
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian, TexturedLambertian
from raytracer.materials.metal import Metal
from raytracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets, TexturePresets
from raytracer.materials.textures import ConstantTexture

logger = logging.getLogger(__name__)

Scene = Tuple[HittableList, Camera]

UP = Vector3(0.0, 1.0, 0.0)
VFOV = 15.0

def _camera(look_from: Vector3, look_at: Vector3, aspect: float, aperture: float, focus_dist: float = None) -> Camera:
    if focus_dist is None:
        focus_dist = (look_from - look_at).length()
    return Camera(look_from, look_at, UP, VFOV, aspect, aperture, focus_dist,
                  SHUTTER_OPEN, SHUTTER_DURATION)

def _random_small_spheres(world: HittableList, rng: random.Random, ground_level: float, motion_blur: bool = False):
    """Scatter a 22x22 grid of jittered small spheres over the ground."""
    num = 11
    avoid = Vector3(4.0, 0.2 + ground_level, 0.0)
    for a in range(-num, num):
        for b in range(-num, num):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2 + ground_level, b + 0.9 * rng.random())
            if (center - avoid).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian(Vector3(rng.random() * rng.random(),
                                              rng.random() * rng.random(),
                                              rng.random() * rng.random()))
            elif choose_mat < 0.95:
                material = Metal(Vector3(0.5 * (1.0 + rng.random()),
                                         0.5 * (1.0 + rng.random()),
                                         0.5 * (1.0 + rng.random())),
                                 fuzz=0.5 * rng.random())
            else:
                material = DielectricPresets.glass()

            if motion_blur:
                end = center + Vector3(0.0, 0.5 * rng.random(), 0.0)
                world.add(MovingSphere(center, end, SHUTTER_OPEN, SHUTTER_DURATION, 0.2, material))
            else:
                world.add(Sphere(center, 0.2, material))

def random_scene(aspect: float, rng: random.Random, motion_blur: bool = False) -> Scene:
    ground_level = 0.0
    world = HittableList()
    world.add(Quad(
        (Vector3(-30.0, ground_level, -30.0),
         Vector3(30.0, ground_level, -30.0),
         Vector3(30.0, ground_level, 30.0),
         Vector3(-30.0, ground_level, 30.0)),
        TexturePresets.chequerboard(),
        rotation=rotation_y(10.0),
    ))
    world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, TexturedLambertian(ConstantTexture(Vector3(0.4, 0.2, 0.1)))))
    world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, MetalPresets.polished_bronze()))
    _random_small_spheres(world, rng, ground_level, motion_blur)

    return world, _camera(Vector3(24.0, 2.0, 6.0), UP, aspect, aperture=0.001)

def motion_blur_scene(aspect: float, rng: random.Random) -> Scene:
    return random_scene(aspect, rng, motion_blur=True)

def default_scene(aspect: float, rng: random.Random) -> Scene:
    ground_level = -0.5
    world = HittableList([
        Plane(Vector3(0.0, ground_level, 0.0), UP, ColorPresets.matte(ColorPresets.MUSTARD)),
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, ColorPresets.matte(ColorPresets.NAVY)),
        Sphere(Vector3(1.0, 0.0, -1.0), 0.5, MetalPresets.brushed_gold()),
        Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, DielectricPresets.glass()),
    ])
    return world, _camera(Vector3(6.0, 1.0, 2.0), Vector3(0.0, 0.0, -1.1), aspect, aperture=0.001)

def two_spheres(aspect: float, rng: random.Random) -> Scene:
    chequers = TexturePresets.chequerboard()
    world = HittableList([
        Sphere(Vector3(0.0, -10.0, 0.0), 10.0, chequers),
        Sphere(Vector3(0.0, 10.0, 0.0), 10.0, chequers),
    ])
    return world, _camera(Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), aspect, aperture=0.0, focus_dist=10.0)

def two_perlin_spheres(aspect: float, rng: random.Random) -> Scene:
    marble = TexturePresets.marble(0.01)
    world = HittableList([
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, marble),
        Sphere(Vector3(0.0, 2.0, 0.0), 2.0, marble),
    ])
    return world, _camera(Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), aspect, aperture=0.0, focus_dist=10.0)

def showcase_scene(aspect: float, rng: random.Random) -> Scene:
    ground_level = -0.5
    sphere_radius = 1.0
    world = HittableList([
        Pyramid(Vector3(-400.0, ground_level, -1200.0), 250.0, 100.0,
                ColorPresets.matte(ColorPresets.CLAY), rotation=rotation_y(45.0)),
        Plane(Vector3(0.0, ground_level, 0.0), UP, ColorPresets.matte(ColorPresets.OCHRE)),
        Sphere(Vector3(-10.0, sphere_radius + ground_level, -25.0), sphere_radius, Dielectric(1.5)),
        Sphere(Vector3(-4.0, sphere_radius + ground_level, -20.0), sphere_radius, ColorPresets.matte(ColorPresets.NAVY)),
        Sphere(Vector3(-21.0, sphere_radius + ground_level, -60.0), sphere_radius, MetalPresets.polished_bronze()),
    ])
    _random_small_spheres(world, rng, ground_level)
    return world, _camera(Vector3(11.4, 1.0, 22.8), Vector3(0.75, 0.0, 0.5), aspect, aperture=0.001)

SCENES: Dict[str, Callable[[float, random.Random], Scene]] = {
    "default": default_scene,
    "random": random_scene,
    "test": showcase_scene,
    "motionblur": motion_blur_scene,
    "2spheres": two_spheres,
    "2perlinspheres": two_perlin_spheres,
}

def build_scene(name: str, aspect: float, rng: random.Random) -> Scene:
    """Look up a scene by name and build it."""
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"unknown scene {name!r}, expected one of {', '.join(SCENES)}") from None
    world, camera = builder(aspect, rng)
    logger.info("Built scene %r with %d objects", name, len(world))
    return world, camera
