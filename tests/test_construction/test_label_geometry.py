"""Tests for face normals, label anchors and label orientations."""

import itertools

import numpy as np
import pytest

from tetradie.construction.faces import face_catalog, face_points
from tetradie.construction.orientation import (
    centroid,
    face_centre,
    label_orientation,
    label_position,
    outward_normal,
)
from tetradie.errors import DegenerateGeometryError, InvalidConfigurationError
from tetradie.model import Vector3

FORWARD = Vector3(0.0, 0.0, 1.0)
UP = Vector3(0.0, 1.0, 0.0)


def _faces(vertices):
    return [face_points(face, vertices) for face in face_catalog()]


class TestCentroids:
    def test_regular_centroid_is_origin(self, regular_vertices):
        assert centroid(regular_vertices) == Vector3(0.0, 0.0, 0.0)

    def test_irregular_centroid(self, irregular_vertices):
        np.testing.assert_allclose(
            centroid(irregular_vertices).as_array(),
            irregular_vertices.mean(axis=0),
        )

    def test_face_centre(self):
        points = (Vector3(0, 0, 0), Vector3(3, 0, 0), Vector3(0, 3, 3))
        np.testing.assert_allclose(face_centre(points).as_array(), [1.0, 1.0, 1.0])


class TestOutwardNormal:
    @pytest.mark.parametrize("fixture", ["regular_vertices", "irregular_vertices"])
    def test_never_points_inward(self, fixture, request):
        vertices = request.getfixturevalue(fixture)
        interior = centroid(vertices)
        for points in _faces(vertices):
            normal = outward_normal(points, interior)
            assert normal.dot(interior - face_centre(points)) <= 0
            assert normal.length() == pytest.approx(1.0, abs=1e-6)

    def test_independent_of_winding(self, irregular_vertices):
        interior = centroid(irregular_vertices)
        for points in _faces(irregular_vertices):
            reference = outward_normal(points, interior)
            for perm in itertools.permutations(points):
                assert outward_normal(perm, interior).is_close(reference, atol=1e-12)

    def test_independent_of_vertex_order(self, regular_vertices):
        """Relabelling the corners permutes faces but not the normal set."""
        def normals(vertices):
            interior = centroid(vertices)
            return sorted(
                tuple(np.round(outward_normal(p, interior).as_array(), 12))
                for p in _faces(vertices)
            )
        assert normals(regular_vertices) == normals(regular_vertices[[3, 1, 0, 2]])

    def test_regular_face_one(self, regular_vertices):
        points = _faces(regular_vertices)[0]
        normal = outward_normal(points, centroid(regular_vertices))
        np.testing.assert_allclose(
            normal.as_array(), np.array([1.0, 1.0, -1.0]) / np.sqrt(3), atol=1e-12,
        )

    def test_collinear_face_raises(self):
        points = (Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0))
        with pytest.raises(DegenerateGeometryError):
            outward_normal(points, Vector3(0, 1, 0))


class TestLabelPosition:
    def test_offsets_along_normal(self):
        pos = label_position(Vector3(1, 2, 3), Vector3(0, 0, 1), 0.1)
        np.testing.assert_allclose(pos.as_array(), [1.0, 2.0, 3.1])

    @pytest.mark.parametrize("offset", [0.0, -0.1])
    def test_non_positive_offset_raises(self, offset):
        with pytest.raises(InvalidConfigurationError, match="offset"):
            label_position(Vector3(0, 0, 0), Vector3(0, 0, 1), offset)

    @pytest.mark.parametrize("offset", [1e-4, 0.1])
    def test_outside_solid(self, regular_vertices, offset):
        interior = centroid(regular_vertices)
        positions = []
        for points in _faces(regular_vertices):
            centre = face_centre(points)
            normal = outward_normal(points, interior)
            pos = label_position(centre, normal, offset)
            plane_distance = abs((centre - interior).dot(normal))
            assert (pos - interior).length() > plane_distance
            positions.append(pos)
        for a, b in itertools.combinations(positions, 2):
            assert not a.is_close(b)


class TestLabelOrientation:
    @pytest.mark.parametrize("fixture", ["regular_vertices", "irregular_vertices"])
    def test_forward_is_radial(self, fixture, request):
        vertices = request.getfixturevalue(fixture)
        interior = centroid(vertices)
        for points in _faces(vertices):
            centre = face_centre(points)
            q = label_orientation(centre, interior, points[0])
            radial = (centre - interior).normalised()
            np.testing.assert_allclose(
                q.rotate(FORWARD).as_array(), radial.as_array(), atol=1e-6,
            )

    def test_regular_top_points_at_reference_vertex(self, regular_vertices):
        interior = centroid(regular_vertices)
        for points in _faces(regular_vertices):
            centre = face_centre(points)
            q = label_orientation(centre, interior, points[0])
            expected = (points[0] - centre).normalised()
            np.testing.assert_allclose(
                q.rotate(UP).as_array(), expected.as_array(), atol=1e-6,
            )

    def test_irregular_top_leans_towards_reference_vertex(self, irregular_vertices):
        interior = centroid(irregular_vertices)
        for points in _faces(irregular_vertices):
            centre = face_centre(points)
            q = label_orientation(centre, interior, points[0])
            up = q.rotate(UP)
            radial = (centre - interior).normalised()
            assert up.dot(radial) == pytest.approx(0.0, abs=1e-9)
            assert up.dot(points[0] - centre) > 0

    def test_unit_magnitude(self, irregular_vertices):
        interior = centroid(irregular_vertices)
        for points in _faces(irregular_vertices):
            q = label_orientation(face_centre(points), interior, points[0])
            assert abs(q.magnitude() - 1.0) < 1e-6

    def test_half_turn_twist_keeps_forward(self):
        """Target up exactly opposite the turned up still faces outward."""
        q = label_orientation(
            Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, 0.0), Vector3(0.0, -1.0, 1.0),
        )
        np.testing.assert_allclose(q.rotate(FORWARD).as_array(), [0.0, 0.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(q.rotate(UP).as_array(), [0.0, -1.0, 0.0], atol=1e-12)

    def test_deterministic(self, regular_vertices):
        interior = centroid(regular_vertices)
        points = _faces(regular_vertices)[3]
        centre = face_centre(points)
        first = label_orientation(centre, interior, points[0])
        second = label_orientation(centre, interior, points[0])
        assert first == second

    def test_centre_at_interior_raises(self):
        with pytest.raises(DegenerateGeometryError):
            label_orientation(Vector3(0, 0, 0), Vector3(0, 0, 0), Vector3(1, 0, 0))
