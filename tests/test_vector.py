"""Unit tests for Vector3 and Ray.

Tests cover:
- Arithmetic, element-wise products and negation
- Dot, cross, length and normalization
- Axis indexing
- Ray evaluation and time
"""

import math

import pytest

from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_add_sub_neg(self):
        """Test component-wise addition, subtraction and negation."""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert a + b == Vector3(5.0, 7.0, 9.0)
        assert b - a == Vector3(3.0, 3.0, 3.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_scalar_and_elementwise_multiply(self):
        """Test scalar scaling from both sides and colour products."""
        a = Vector3(1.0, 2.0, 3.0)
        assert a * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2 * a == Vector3(2.0, 4.0, 6.0)
        assert a * Vector3(2.0, 0.5, 0.0) == Vector3(2.0, 1.0, 0.0)

    def test_dot_cross(self):
        """Test that x cross y is z and orthogonal axes have zero dot."""
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
        assert x.dot(y) == 0.0

    def test_length_and_normalize(self):
        """Test length of a 3-4-0 vector and unit length after normalize."""
        v = Vector3(3.0, 4.0, 0.0)
        assert v.length() == 5.0
        assert v.squared_length() == 25.0
        assert v.normalize().length() == pytest.approx(1.0)

    def test_normalize_zero_vector(self):
        """Test that normalizing the zero vector does not divide by zero."""
        assert Vector3(0.0, 0.0, 0.0).normalize() == Vector3(0, 0, 0)

    def test_indexing(self):
        """Test axis access by index and the out-of-range error."""
        v = Vector3(7.0, 8.0, 9.0)
        assert [v[0], v[1], v[2]] == [7.0, 8.0, 9.0]
        with pytest.raises(IndexError):
            v[3]


class TestRay:
    """Tests for Ray."""

    def test_at(self):
        """Test evaluating a point along the ray."""
        r = Ray(Vector3(1.0, 1.0, 1.0), Vector3(0.0, 0.0, -2.0))
        assert r.at(1.5) == Vector3(1.0, 1.0, -2.0)

    def test_time_defaults_to_zero(self):
        """Test the default ray time and keeping an explicit one."""
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)).time == 0.0
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0), 0.25).time == 0.25

    def test_at_infinity(self):
        """Test that direction need not be normalized."""
        r = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 3.0))
        assert r.at(2.0).z == 6.0
        assert math.isinf(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)).at(math.inf).z)
