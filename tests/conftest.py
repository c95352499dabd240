"""Shared fixtures for the raytracer test suite."""

import random

import pytest

from raytracer.core.vector import Vector3
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.metal import Metal


@pytest.fixture
def rng():
    """A deterministically seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def grey():
    """A mid-grey diffuse material."""
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def mirror():
    """A perfect (fuzz-free) mirror."""
    return Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0)


@pytest.fixture
def glass():
    """Glass with refractive index 1.5."""
    return Dielectric(1.5)


def assert_vec_close(actual, expected, tol=1e-9):
    """Compare two Vector3 component-wise."""
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)
