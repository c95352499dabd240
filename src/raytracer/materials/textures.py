# raytracer/materials/textures.py
import math
from raytracer.core.vector import Vector3
from raytracer.materials.perlin import Turbulence

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Colour of the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class ConstantTexture(Texture):
    """A solid color texture."""
    def __init__(self, colour: Vector3):
        self.colour = colour

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.colour

class ChequeredTexture(Texture):
    """
    A 3D checker pattern: the sign of a product of sines over the hit point
    selects `odd` or `even`. On the y = 0 plane the y factor is dropped so the
    floor still shows squares.
    """
    FREQUENCY = 10.0

    def __init__(self, odd: Texture, even: Texture):
        self.odd = odd
        self.even = even

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        f = self.FREQUENCY
        if p.y == 0:
            sines = math.sin(f * p.x) * math.sin(f * p.z)
        else:
            sines = math.sin(f * p.x) * math.sin(f * p.y) * math.sin(f * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Marble-like grey bands along z, perturbed by Perlin turbulence."""
    def __init__(self, scale: float, seed: int = 0):
        self.scale = scale
        self.turbulence = Turbulence(seed)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        level = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.turbulence.get(p)))
        return Vector3(level, level, level)
