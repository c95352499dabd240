# raytracer/materials/presets.py
from raytracer.core.vector import Vector3
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian, TexturedLambertian
from raytracer.materials.metal import Metal
from raytracer.materials.textures import ChequeredTexture, ConstantTexture, NoiseTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def polished_bronze() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class ColorPresets:
    """Colours shared by the scene presets."""

    NAVY = Vector3(0.1, 0.2, 0.5)
    MUSTARD = Vector3(0.8, 0.8, 0.0)
    OCHRE = Vector3(0.8, 0.5, 0.2)
    CLAY = Vector3(0.4, 0.2, 0.1)
    MOSS = Vector3(0.2, 0.3, 0.1)
    OFF_WHITE = Vector3(0.9, 0.9, 0.9)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined textured materials."""

    @staticmethod
    def chequerboard(odd: Vector3 = None, even: Vector3 = None) -> TexturedLambertian:
        """Green and white chequers unless other colours are given."""
        if odd is None:
            odd = ColorPresets.MOSS
        if even is None:
            even = ColorPresets.OFF_WHITE
        return TexturedLambertian(ChequeredTexture(ConstantTexture(odd), ConstantTexture(even)))

    @staticmethod
    def marble(scale: float = 0.01, seed: int = 0) -> TexturedLambertian:
        """Perlin-turbulence marble."""
        return TexturedLambertian(NoiseTexture(scale, seed))
