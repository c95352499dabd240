from raytracer.renderer.integrator import colour, sky
from raytracer.renderer.raytracer import Renderer, partition_rows, render
from raytracer.renderer.output import save_png, to_image

__all__ = ["colour", "sky", "Renderer", "partition_rows", "render", "save_png", "to_image"]
