from raytracer.camera.camera import Camera

__all__ = ["Camera"]
