"""Tests for HittableList and the BVH.

The key property: a BVH built over a set of objects answers every query
with the same nearest hit as a linear scan of the same set.
"""

import math

import pytest

from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector, random_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


def random_world(rng, count):
    world = HittableList()
    for _ in range(count):
        material = Lambertian(random_vector(rng))
        world.add(Sphere(random_vector(rng, -10.0, 10.0), rng.uniform(0.2, 1.5), material))
    return world


class TestHittableList:
    def test_empty_list(self):
        world = HittableList()
        assert len(world) == 0
        assert world.bounding_box().is_empty()
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert world.hit(ray, 0.001, math.inf) is None

    def test_returns_nearest_regardless_of_order(self, gray):
        far = Sphere(Vector3(0.0, 0.0, -5.0), 0.5, gray)
        near = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, gray)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        for objects in ([far, near], [near, far]):
            rec = HittableList(objects).hit(ray, 0.001, math.inf)
            assert rec.t == pytest.approx(1.5)

    def test_bounding_box_tracks_additions(self, gray):
        world = HittableList()
        world.add(Sphere(Vector3(0.0, 0.0, 0.0), 1.0, gray))
        world.add(Sphere(Vector3(5.0, 0.0, 0.0), 1.0, gray))
        box = world.bounding_box()
        assert box.minimum == Vector3(-1.0, -1.0, -1.0)
        assert box.maximum == Vector3(6.0, 1.0, 1.0)
        world.clear()
        assert world.bounding_box().is_empty()


class TestBVHConstruction:
    def test_single_object_leaf_aliases_children(self, gray):
        s = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, gray)
        node = BVHNode([s], PCG32(1, 1))
        assert node.left is s and node.right is s
        assert node.is_leaf

    def test_two_objects_ordered_along_axis(self, gray):
        a = Sphere(Vector3(-3.0, -3.0, -3.0), 1.0, gray)
        b = Sphere(Vector3(3.0, 3.0, 3.0), 1.0, gray)
        # Whichever axis is picked, a has the smaller box minimum.
        for seed in range(5):
            node = BVHNode([b, a], PCG32(seed, 0))
            assert node.left is a and node.right is b

    def test_bounding_box_encloses_everything(self):
        world = random_world(PCG32(3, 3), 40)
        node = world.build_bvh(PCG32(4, 4))
        assert node.bounding_box().minimum == world.bounding_box().minimum
        assert node.bounding_box().maximum == world.bounding_box().maximum

    def test_tree_is_balanced(self):
        world = random_world(PCG32(5, 5), 64)
        node = world.build_bvh(PCG32(6, 6))
        assert node.depth() == 6

    def test_construction_is_deterministic(self):
        world = random_world(PCG32(7, 7), 30)
        a = world.build_bvh(PCG32(8, 8))
        b = world.build_bvh(PCG32(8, 8))

        def leaves(node):
            if not isinstance(node, BVHNode):
                return [node]
            if node.is_leaf:
                return [node.left]
            return leaves(node.left) + leaves(node.right)

        assert [id(x) for x in leaves(a)] == [id(x) for x in leaves(b)]
        assert sorted(id(x) for x in leaves(a)) == sorted(id(x) for x in world.objects)

    def test_empty_input_rejected(self):
        with pytest.raises(ValueError):
            BVHNode([], PCG32())


class TestBVHTraversal:
    @pytest.mark.parametrize("count", [1, 2, 3, 17, 100])
    def test_matches_linear_scan(self, count):
        rng = PCG32(count, 77)
        world = random_world(rng, count)
        bvh = world.build_bvh(PCG32(11, 13))

        hits = 0
        for _ in range(400):
            ray = Ray(random_vector(rng, -15.0, 15.0), random_unit_vector(rng))
            expected = world.hit(ray, 0.001, math.inf)
            actual = bvh.hit(ray, 0.001, math.inf)
            if expected is None:
                assert actual is None
                continue
            hits += 1
            assert actual is not None
            assert actual.t == pytest.approx(expected.t)
            assert actual.material is expected.material
            assert actual.front_face == expected.front_face
        if count >= 17:
            assert hits > 0

    def test_respects_t_max(self, gray):
        world = HittableList([Sphere(Vector3(0.0, 0.0, -5.0), 1.0, gray),
                              Sphere(Vector3(0.0, 0.0, -10.0), 1.0, gray),
                              Sphere(Vector3(0.0, 0.0, -15.0), 1.0, gray)])
        bvh = world.build_bvh(PCG32(1, 2))
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert bvh.hit(ray, 0.001, math.inf).t == pytest.approx(4.0)
        assert bvh.hit(ray, 0.001, 3.0) is None
        assert bvh.hit(ray, 7.0, math.inf).t == pytest.approx(9.0)
