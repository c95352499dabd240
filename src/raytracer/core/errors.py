# raytracer/core/errors.py

class RaytracerError(Exception):
    """Base class for errors raised by the raytracer."""


class BVHConstructionError(RaytracerError, ValueError):
    """
    Raised when a bounding volume hierarchy cannot be built, e.g. because a
    member (such as an infinite Plane) has no bounding box or the list is empty.
    """
