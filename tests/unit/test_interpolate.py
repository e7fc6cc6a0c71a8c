"""Tests for fraction interpolation of edge curves."""

import math

import pytest

from axisthin.core.interpolate import axis_curve, interpolate_curve, thin_edge
from axisthin.domain import Circle, Cubic, Edge, Line, Point, Quadratic, TransformTree
from axisthin.exceptions import CurveDegreeError


def _two_node_tree(r0: float = 2.0, r1: float = 1.0) -> TransformTree:
    tree = TransformTree()
    tree.add_node(Circle(Point(0, 0), r0))
    tree.add_node(Circle(Point(6, 0), r1))
    return tree


class TestAxisCurve:
    """Tests for axis_curve."""

    def test_line_axis_joins_centers(self):
        """Test a line's axis curve runs between both centers."""
        tree = _two_node_tree()
        edge = tree.connect(0, 1, Line(Point(0, 2), Point(6, 1)))
        assert axis_curve(tree, 0, edge) == Line(Point(0, 0), Point(6, 0))

    def test_quadratic_axis_is_elevated_chord(self):
        """Test a quadratic's axis curve has its control point mid-chord."""
        tree = _two_node_tree()
        edge = tree.connect(0, 1, Quadratic(Point(0, 2), Point(3, 3), Point(6, 1)))
        assert axis_curve(tree, 0, edge) == Quadratic(Point(0, 0), Point(3, 0), Point(6, 0))

    def test_cubic_axis_is_elevated_chord(self):
        """Test a cubic's axis control points sit at thirds of the chord."""
        tree = _two_node_tree()
        edge = tree.connect(0, 1, Cubic(Point(0, 2), Point(2, 3), Point(4, 3), Point(6, 1)))
        axis = axis_curve(tree, 0, edge)
        assert isinstance(axis, Cubic)
        assert axis.p0 == Point(0, 0)
        assert axis.p1.x == pytest.approx(2.0)
        assert axis.p2.x == pytest.approx(4.0)
        assert axis.p3 == Point(6, 0)

    def test_explicit_axis_used(self):
        """Test an explicit axis curve overrides the derived one."""
        tree = _two_node_tree()
        explicit = Line(Point(1, 1), Point(5, 1))
        edge = tree.connect(0, 1, Line(Point(0, 2), Point(6, 1)), axis=explicit)
        assert axis_curve(tree, 0, edge) is explicit

    def test_zero_radius_falls_back_to_parent_center(self):
        """Test a zero-radius node is anchored at its parent's center."""
        tree = _two_node_tree(r0=2.0, r1=0.0)
        edge = tree.connect(0, 1, Line(Point(0, 2), Point(6, 0)))
        assert axis_curve(tree, 0, edge) == Line(Point(0, 0), Point(0, 0))

    def test_zero_radius_anchor_shared_by_all_edges(self):
        """Test a zero-radius node has one anchor for incoming and outgoing edges."""
        tree = TransformTree()
        r = tree.add_node(Circle(Point(0, 0), 1.0))
        x = tree.add_node(Circle(Point(4, 0), 0.0))
        b = tree.add_node(Circle(Point(8, 0), 1.0))
        into = tree.connect(r, x, Line(Point(0, 1), Point(4, 0)))
        out = tree.connect(x, b, Line(Point(4, 0), Point(8, 1)))

        assert axis_curve(tree, r, into).p1 == Point(0, 0)
        assert axis_curve(tree, x, out).p0 == Point(0, 0)

    def test_zero_radius_without_parent_keeps_center(self):
        """Test a degenerate root stays at its own center."""
        tree = _two_node_tree(r0=0.0, r1=1.0)
        edge = tree.connect(0, 1, Line(Point(0, 0), Point(6, 1)))
        assert axis_curve(tree, 0, edge) == Line(Point(0, 0), Point(6, 0))

    def test_both_zero_radius_keep_own_centers(self):
        """Test two degenerate circles keep their own centers."""
        tree = _two_node_tree(r0=0.0, r1=0.0)
        edge = tree.connect(0, 1, Line(Point(0, 0), Point(6, 0)))
        assert axis_curve(tree, 0, edge) == Line(Point(0, 0), Point(6, 0))

    def test_edge_without_curve(self):
        """Test asking for the axis of a curveless edge."""
        tree = _two_node_tree()
        edge = tree.connect(0, 1)
        with pytest.raises(ValueError):
            axis_curve(tree, 0, edge)


class TestInterpolateCurve:
    """Tests for interpolate_curve."""

    @pytest.mark.parametrize(
        "boundary,axis",
        [
            (Line(Point(0, 2), Point(6, 1)), Line(Point(0, 0), Point(6, 0))),
            (
                Quadratic(Point(0, 2), Point(3, 3), Point(6, 1)),
                Quadratic(Point(0, 0), Point(3, 0), Point(6, 0)),
            ),
            (
                Cubic(Point(0.1, 2.3), Point(2, 3), Point(4, 3), Point(6.7, 1)),
                Cubic(Point(0, 0), Point(2, 0), Point(4, 0), Point(6, 0)),
            ),
        ],
    )
    def test_degree_and_limits(self, boundary, axis):
        """Test degree preservation and exact limits at 0 and 1."""
        assert interpolate_curve(boundary, axis, 0.0) == boundary
        assert interpolate_curve(boundary, axis, 1.0) == axis
        for f in (0.25, 0.5, 0.75):
            assert type(interpolate_curve(boundary, axis, f)) is type(boundary)

    def test_midpoint(self):
        """Test control points move halfway at 0.5."""
        boundary = Quadratic(Point(0, 4), Point(4, 8), Point(8, 4))
        axis = Quadratic(Point(0, 0), Point(4, 0), Point(8, 0))
        assert interpolate_curve(boundary, axis, 0.5) == Quadratic(
            Point(0, 2), Point(4, 4), Point(8, 2)
        )

    def test_monotonic_in_fraction(self):
        """Test distance to the axis shrinks monotonically."""
        boundary = Line(Point(0, 10), Point(10, 10))
        axis = Line(Point(0, 0), Point(10, 0))
        heights = [interpolate_curve(boundary, axis, i / 20).p0.y for i in range(21)]
        assert heights == sorted(heights, reverse=True)

    def test_mismatched_degrees(self):
        """Test curves of different degree cannot be interpolated."""
        with pytest.raises(CurveDegreeError):
            interpolate_curve(
                Line(Point(0, 0), Point(1, 0)),
                Quadratic(Point(0, 0), Point(0.5, 0), Point(1, 0)),
                0.5,
            )


class TestThinEdge:
    """Tests for thin_edge."""

    def test_curveless_edge(self):
        """Test an edge without curve yields None."""
        tree = _two_node_tree()
        assert thin_edge(tree, 0, Edge(target=1), 0.5) is None

    def test_zero_radius_no_nan(self):
        """Test zero-radius nodes never produce NaN or infinity."""
        tree = _two_node_tree(r0=0.0, r1=0.0)
        edge = tree.connect(0, 1, Cubic(Point(0, 0), Point(2, 3), Point(4, 3), Point(6, 0)))
        for i in range(11):
            curve = thin_edge(tree, 0, edge, i / 10)
            assert curve is not None
            assert all(math.isfinite(p.x) and math.isfinite(p.y) for p in curve.points)
