# raytracer/geometry/world.py
import logging
import random
from typing import Iterable, List, Optional
from raytracer.core.aabb import AABB
from raytracer.core.ray import Ray
from raytracer.geometry.bvh import BVHNode
from raytracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects. Optionally a BVH can be built over the members,
    after which hit() traverses the tree instead of scanning the list.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []
        self.bvh_root = None

    def add(self, obj: Hittable) -> "HittableList":
        """Append a member. Any built BVH is discarded; call build_bvh() again to re-accelerate."""
        self.objects.append(obj)
        self.bvh_root = None
        return self

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float, time1: float, rng: random.Random, legacy_split: bool = False):
        """
        Build a BVH over the current members. Raises BVHConstructionError if
        any member has no bounding box; the list is left unaccelerated then.
        """
        self.bvh_root = None
        self.bvh_root = BVHNode(self.objects, time0, time1, rng, legacy_split=legacy_split)
        logger.info("Built BVH over %d objects", len(self.objects))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)

        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(time0, time1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box
