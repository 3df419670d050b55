"""Tests for quads and the six-sided box."""

import math

import pytest

from core.interval import Interval
from core.ray import Ray
from core.vector import Point3, Vector3
from geometry.quad import Quad, box

FORWARD = Interval(0.001, math.inf)


@pytest.fixture
def unit_quad(gray):
    """Unit square in the z=0 plane, facing +z."""
    return Quad(Point3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), gray)


def down_at(x, y):
    return Ray(Point3(x, y, 1), Vector3(0, 0, -1))


class TestQuadHit:
    """Tests for plane intersection and the interior test."""

    def test_hit_at_corner_q(self, unit_quad):
        rec = unit_quad.hit(down_at(0, 0), FORWARD)
        assert rec is not None
        assert (rec.u, rec.v) == (0, 0)
        assert rec.t == pytest.approx(1.0)

    def test_hit_at_far_corner(self, unit_quad):
        rec = unit_quad.hit(down_at(1, 1), FORWARD)
        assert rec is not None
        assert (rec.u, rec.v) == (1, 1)

    def test_interior_point(self, unit_quad):
        rec = unit_quad.hit(down_at(0.25, 0.75), FORWARD)
        assert rec.u == pytest.approx(0.25)
        assert rec.v == pytest.approx(0.75)
        assert rec.p == Point3(0.25, 0.75, 0)

    def test_outside_edge_misses(self, unit_quad):
        assert unit_quad.hit(down_at(2, 0), FORWARD) is None
        assert unit_quad.hit(down_at(0.5, -0.01), FORWARD) is None

    def test_interior_bounds_are_closed(self):
        assert Quad.is_interior(0.0, 1.0)
        assert Quad.is_interior(1.0, 0.0)
        assert not Quad.is_interior(2.0, 0.0)
        assert not Quad.is_interior(0.5, -1e-9)

    def test_parallel_ray_misses(self, unit_quad):
        ray = Ray(Point3(0.5, 0.5, 1), Vector3(1, 0, 0))
        assert unit_quad.hit(ray, FORWARD) is None

    def test_plane_outside_interval_misses(self, unit_quad):
        assert unit_quad.hit(down_at(0.5, 0.5), Interval(0.001, 0.5)) is None

    def test_front_and_back_faces(self, unit_quad):
        front = unit_quad.hit(down_at(0.5, 0.5), FORWARD)
        assert front.front_face
        assert front.normal == Vector3(0, 0, 1)

        back = unit_quad.hit(Ray(Point3(0.5, 0.5, -1), Vector3(0, 0, 1)), FORWARD)
        assert not back.front_face
        assert back.normal == Vector3(0, 0, -1)

    def test_degenerate_quad_never_hits(self, gray):
        quad = Quad(Point3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0), gray)
        assert quad.hit(down_at(0.5, 0.0), FORWARD) is None

    def test_bounding_box_is_padded(self, unit_quad):
        bbox = unit_quad.bounding_box()
        assert bbox.x == Interval(0, 1)
        assert bbox.y == Interval(0, 1)
        assert bbox.z.size() > 0


class TestBox:
    """Tests for the six-quad box helper."""

    def test_has_six_sides(self, gray):
        assert len(box(Point3(0, 0, 0), Point3(1, 2, 3), gray)) == 6

    def test_bounds_match_corners(self, gray):
        bbox = box(Point3(1, 2, 3), Point3(0, 0, 0), gray).bounding_box()
        assert bbox.x.min == pytest.approx(0, abs=1e-3)
        assert bbox.x.max == pytest.approx(1, abs=1e-3)
        assert bbox.y.max == pytest.approx(2, abs=1e-3)
        assert bbox.z.max == pytest.approx(3, abs=1e-3)

    def test_hit_front_face(self, gray):
        sides = box(Point3(0, 0, 0), Point3(1, 1, 1), gray)
        rec = sides.hit(Ray(Point3(0.5, 0.5, 5), Vector3(0, 0, -1)), FORWARD)
        assert rec.t == pytest.approx(4.0)
        assert rec.normal == Vector3(0, 0, 1)

    def test_hit_from_each_axis(self, gray):
        sides = box(Point3(-1, -1, -1), Point3(1, 1, 1), gray)
        for direction in (Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)):
            for sign in (1, -1):
                d = direction * sign
                rec = sides.hit(Ray(d * -5, d), FORWARD)
                assert rec is not None
                assert rec.t == pytest.approx(4.0)
                assert rec.normal == -d
