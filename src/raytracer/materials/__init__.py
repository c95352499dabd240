from raytracer.materials.material import Material, scatter
from raytracer.materials.lambertian import Lambertian, TexturedLambertian
from raytracer.materials.metal import Metal
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.textures import ChequeredTexture, ConstantTexture, NoiseTexture, Texture

__all__ = [
    "Material",
    "scatter",
    "Lambertian",
    "TexturedLambertian",
    "Metal",
    "Dielectric",
    "Texture",
    "ConstantTexture",
    "ChequeredTexture",
    "NoiseTexture",
]
