"""Tests for rfs/geom/arcs.py and rfs/geom/bbox.py."""
import math
import pytest
from svgelements import Arc, Close, CubicBezier, Line, Matrix, Move, Path

from rfs.geom.arcs import append_arc, append_circle, append_polyline, apply_matrix
from rfs.geom.bbox import BBoxXYXY, bbox_from_xyxy_tuple, path_bbox, union_bbox


# --- append_arc ---

def test_arc_is_one_svgelements_arc():
    p = append_arc(Path(), (0, 0), 2.0, 0.0, math.pi / 2)
    assert isinstance(p[0], Move)
    assert [type(s) for s in p[1:]] == [Arc]
    assert p[-1].sweep == pytest.approx(math.pi / 2)
    assert abs(p[-1].end.x) < 1e-12
    assert abs(p[-1].end.y - 2.0) < 1e-12


def test_arc_approximates_to_cubics():
    p = append_arc(Path(), (0, 0), 1.0, 0.0, 3 * math.pi / 2)
    p.approximate_arcs_with_cubics()
    cubics = [s for s in p if isinstance(s, CubicBezier)]
    assert len(cubics) >= 3
    assert (cubics[-1].end.x, cubics[-1].end.y) == pytest.approx((0, -1), abs=1e-12)


def test_arc_decreasing_angle():
    p = append_arc(Path(), (1, 1), 1.0, math.pi, math.pi / 2)
    assert abs(p[0].end.x - 0.0) < 1e-12 and abs(p[0].end.y - 1.0) < 1e-12
    assert p[-1].sweep == pytest.approx(-math.pi / 2)
    assert abs(p[-1].end.x - 1.0) < 1e-12 and abs(p[-1].end.y - 2.0) < 1e-12


def test_arc_midpoint_close_to_circle():
    p = append_arc(Path(), (0, 0), 10.0, 0.0, math.pi / 2)
    p.approximate_arcs_with_cubics()
    for seg in p[1:]:
        mid = seg.point(0.5)
        assert abs(math.hypot(mid.x, mid.y) - 10.0) < 10.0 * 3e-4


def test_arc_joins_open_subpath_with_line():
    p = Path()
    p.move((5, 5))
    append_arc(p, (0, 0), 1.0, 0.0, math.pi)
    assert isinstance(p[1], Line)
    assert abs(p[1].end.x - 1.0) < 1e-12
    assert isinstance(p[2], Arc)


def test_arc_after_close_starts_new_subpath():
    p = append_polyline(Path(), [(0, 0), (1, 0), (1, 1)], close=True)
    append_arc(p, (5, 5), 1.0, 0.0, math.pi)
    assert isinstance(p[4], Move)


def test_zero_sweep_only_positions():
    p = append_arc(Path(), (0, 0), 1.0, 0.5, 0.5)
    assert [type(s) for s in p] == [Move]


# --- append_circle ---

def test_circle_bbox():
    p = append_circle(Path(), (3, -1), 2.0)
    p.approximate_arcs_with_cubics()
    b = path_bbox(p)
    assert b.as_list() == pytest.approx([1, -3, 5, 1], abs=1e-3)
    assert isinstance(p[-1], Close)


# --- append_polyline ---

def test_polyline_skips_duplicates():
    p = append_polyline(Path(), [(0, 0), (0, 0), (1, 0), (1, 0), (2, 0)])
    assert len(p) == 3


def test_polyline_empty():
    assert len(append_polyline(Path(), [], close=True)) == 0


# --- apply_matrix ---

def test_apply_matrix_translates_points():
    p = append_polyline(Path(), [(0, 0), (1, 0)])
    apply_matrix(p, Matrix.translate(10, 5))
    assert (p[-1].end.x, p[-1].end.y) == pytest.approx((11, 5))
    assert path_bbox(p).as_list() == pytest.approx([10, 5, 11, 5])


# --- BBoxXYXY ---

def test_bbox_union_and_inflate():
    a = BBoxXYXY(0, 0, 1, 1)
    b = BBoxXYXY(-2, 0.5, 0.5, 3)
    u = a.union(b)
    assert u.as_list() == [-2, 0, 1, 3]
    assert (u.w, u.h) == (3, 3)
    assert u.inflate(1).as_list() == [-3, -1, 2, 4]


def test_bbox_from_tuple():
    assert bbox_from_xyxy_tuple(None) is None
    assert bbox_from_xyxy_tuple((1, 2, 3)) is None
    assert bbox_from_xyxy_tuple([1, 2, 3, 4]) == BBoxXYXY(1, 2, 3, 4)


def test_path_bbox_empty():
    assert path_bbox(Path()) is None


def test_union_bbox_skips_empty():
    c = append_circle(Path(), (0, 0), 1.0)
    assert union_bbox([Path(), c]).as_list() == pytest.approx([-1, -1, 1, 1], abs=1e-9)
    assert union_bbox([]) is None
