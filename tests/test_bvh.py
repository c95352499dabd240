"""Unit tests for the bounding volume hierarchy and HittableList.

Tests cover:
- Leaf multiset equality with the input list
- The opt-in legacy split that drops the midpoint object
- Construction errors for empty lists
- Closest-hit agreement between the BVH and a linear scan
- HittableList bounding boxes and mutation
"""

import math
import random
from collections import Counter

import pytest

from raytracer.core.aabb import AABB
from raytracer.core.errors import BVHConstructionError
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.bvh import BVHNode
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.triangle import Triangle
from raytracer.geometry.world import HittableList


def sphere_row(n, material):
    return [Sphere(Vector3(2.0 * i, 0.0, 0.0), 0.5, material) for i in range(n)]


def random_spheres(n, material, seed=7):
    rng = random.Random(seed)
    return [Sphere(Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10)),
                   rng.uniform(0.2, 1.5), material)
            for _ in range(n)]


class TestBVHConstruction:
    """Tests for building BVH nodes."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 7, 16, 33])
    def test_leaves_match_input(self, grey, n):
        """Test every input object appears exactly once among the leaves."""
        objects = sphere_row(n, grey)
        node = BVHNode(objects, 0.0, 1.0, random.Random(n))
        assert Counter(map(id, node.leaves())) == Counter(map(id, objects))

    def test_single_object_leaf(self, grey):
        """Test a one-object node uses that object for both children."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, grey)
        node = BVHNode([sphere], 0.0, 1.0, random.Random(0))
        assert node.left is sphere
        assert node.right is sphere
        assert node.bounding_box(0.0, 1.0) == sphere.bounding_box(0.0, 1.0)

    @pytest.mark.parametrize("seed", range(6))
    def test_legacy_split_drops_midpoint(self, grey, seed):
        """Test the legacy split loses exactly the middle object of three, on any axis."""
        # Collinear along x: sorting on x keeps input order and ties on y or z are stable.
        objects = sphere_row(3, grey)
        node = BVHNode(objects, 0.0, 1.0, random.Random(seed), legacy_split=True)
        leaves = list(node.leaves())
        assert [id(obj) for obj in leaves] == [id(objects[0]), id(objects[2])]
        assert all(obj is not objects[1] for obj in leaves)

    def test_box_encloses_all_objects(self, grey):
        """Test the root box contains every member's box."""
        objects = random_spheres(20, grey)
        node = BVHNode(objects, 0.0, 1.0, random.Random(3))
        root = node.bounding_box(0.0, 1.0)
        for obj in objects:
            box = obj.bounding_box(0.0, 1.0)
            assert AABB.surrounding_box(root, box) == root

    def test_empty_list_rejected(self):
        """Test an empty list cannot be turned into a BVH."""
        with pytest.raises(BVHConstructionError):
            BVHNode([], 0.0, 1.0, random.Random(0))

    def test_member_without_box_rejected(self, grey):
        """Test a member reporting no box (an empty nested list) is rejected."""
        with pytest.raises(BVHConstructionError):
            BVHNode([HittableList(), Sphere(Vector3(0, 0, 0), 1.0, grey)], 0.0, 1.0, random.Random(0))


class TestBVHTraversal:
    """Tests comparing BVH traversal with a linear scan."""

    def test_hits_match_linear_scan(self, grey):
        """Test the BVH reports the same closest hit as the plain list for many rays."""
        objects = random_spheres(40, grey)
        linear = HittableList(objects)
        accelerated = HittableList(objects)
        accelerated.build_bvh(0.0, 1.0, random.Random(11))

        rng = random.Random(5)
        for _ in range(200):
            origin = Vector3(rng.uniform(-20, 20), rng.uniform(-20, 20), 30.0)
            target = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
            ray = Ray(origin, target - origin)
            expected = linear.hit(ray, 0.001, math.inf)
            actual = accelerated.hit(ray, 0.001, math.inf)
            if expected is None:
                assert actual is None
            else:
                assert actual is not None
                assert actual.t == pytest.approx(expected.t)

    def test_flat_triangles_are_found(self, grey):
        """Test triangles lying in an axis plane are still reached through the tree."""
        floor = [
            Triangle((Vector3(-1.0, 0.0, -1.0), Vector3(1.0, 0.0, -1.0), Vector3(1.0, 0.0, 1.0)), grey),
            Triangle((Vector3(-1.0, 0.0, -1.0), Vector3(1.0, 0.0, 1.0), Vector3(-1.0, 0.0, 1.0)), grey),
        ]
        world = HittableList(floor + sphere_row(3, grey))
        world.build_bvh(0.0, 1.0, random.Random(2))
        rec = world.hit(Ray(Vector3(0.2, 3.0, 0.5), Vector3(0.0, -1.0, 0.0)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(3.0)


class TestHittableList:
    """Tests for the plain object list."""

    def test_closest_hit_wins(self, grey, mirror):
        """Test the nearer of two spheres along the ray is reported."""
        near = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, grey)
        far = Sphere(Vector3(0.0, 0.0, -5.0), 0.5, mirror)
        world = HittableList([far, near])
        rec = world.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.material is grey
        assert rec.t == pytest.approx(1.5)

    def test_empty_list(self):
        """Test an empty list never hits and has no box."""
        world = HittableList()
        assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None
        assert world.bounding_box(0.0, 1.0) is None
        assert len(world) == 0

    def test_bounding_box_union(self, grey):
        """Test the list box is the union of its members' boxes."""
        world = HittableList(sphere_row(3, grey))
        assert world.bounding_box(0.0, 1.0) == AABB(Vector3(-0.5, -0.5, -0.5), Vector3(4.5, 0.5, 0.5))

    def test_add_and_clear(self, grey):
        """Test add chains and clear drops members and the tree."""
        world = HittableList()
        world.add(Sphere(Vector3(0, 0, 0), 1.0, grey)).add(Sphere(Vector3(3, 0, 0), 1.0, grey))
        world.build_bvh(0.0, 1.0, random.Random(0))
        assert len(world) == 2
        world.clear()
        assert len(world) == 0
        assert world.bvh_root is None

    def test_add_after_build_is_visible(self, grey, mirror):
        """Test a sphere added after build_bvh wins the closest hit and drops the stale tree."""
        world = HittableList([Sphere(Vector3(0.0, 0.0, -10.0), 0.5, grey)])
        world.build_bvh(0.0, 1.0, random.Random(0))
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, mirror))
        assert world.bvh_root is None
        rec = world.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.5)
        assert rec.material is mirror

    def test_rebuild_after_add(self, grey, mirror):
        """Test rebuilding the tree after an add still finds the new member."""
        world = HittableList([Sphere(Vector3(0.0, 0.0, -10.0), 0.5, grey)])
        world.build_bvh(0.0, 1.0, random.Random(0))
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, mirror))
        world.build_bvh(0.0, 1.0, random.Random(0))
        rec = world.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.material is mirror
