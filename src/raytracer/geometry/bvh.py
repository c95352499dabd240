# raytracer/geometry/bvh.py
import random
from typing import Optional, Sequence
from raytracer.core.aabb import AABB
from raytracer.core.errors import BVHConstructionError
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import Hittable, HitRecord

def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    try:
        box = obj.bounding_box(time0, time1)
    except NotImplementedError as e:
        raise BVHConstructionError(f"no bounding box in bvh node constructor: {obj!r}") from e
    if box is None:
        raise BVHConstructionError(f"no bounding box in bvh node constructor: {obj!r}")
    return box

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Construction picks a random axis, sorts the objects by the minimum of
    their boxes along it and splits the sorted list at its midpoint. A single
    object becomes a leaf whose two children are that object; two objects
    become one child each.

    With legacy_split=True the right half starts one past the midpoint, so
    the midpoint object is dropped from the tree for lists of three or more.
    That reproduces an old construction bug and exists only for comparison.
    """
    def __init__(self, objects: Sequence[Hittable], time0: float, time1: float,
                 rng: random.Random, legacy_split: bool = False):
        if not objects:
            raise BVHConstructionError("cannot build a bvh over an empty list")

        axis = int(3 * rng.random())
        assert 0 <= axis <= 2, f"bvh split axis out of range: {axis}"

        boxes = {id(obj): _box_of(obj, time0, time1) for obj in objects}
        ordered = sorted(objects, key=lambda obj: boxes[id(obj)].minimum[axis])

        if len(ordered) == 1:
            self.left = self.right = ordered[0]
        elif len(ordered) == 2:
            self.left, self.right = ordered
        else:
            mid = len(ordered) // 2
            right_start = mid + 1 if legacy_split else mid
            self.left = BVHNode(ordered[:mid], time0, time1, rng, legacy_split)
            self.right = BVHNode(ordered[right_start:], time0, time1, rng, legacy_split)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        hit_right = self.right.hit(ray, t_min, t_max)

        # Return the closer hit
        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.t < hit_right.t else hit_right
        return hit_left if hit_left is not None else hit_right

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box

    def leaves(self):
        """Yield every leaf primitive reachable from this node, left to right."""
        if self.left is self.right and not isinstance(self.left, BVHNode):
            yield self.left
            return
        for child in (self.left, self.right):
            if isinstance(child, BVHNode):
                yield from child.leaves()
            else:
                yield child
