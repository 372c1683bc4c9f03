"""Tests for rfs/svg/qpath_render.py (skipped without PySide6)."""
import pytest

pytest.importorskip("PySide6.QtGui")

from svgelements import Path  # noqa: E402

from rfs.geom.arcs import append_circle  # noqa: E402
from rfs.geom.bbox import path_bbox  # noqa: E402
from rfs.geom.shapes import crop_marks, sprocket, standard_chain_link  # noqa: E402
from rfs.svg.qpath_render import path_to_qpath  # noqa: E402


def _rect_xyxy(r):
    return [r.left(), r.top(), r.right(), r.bottom()]


def test_empty_path():
    assert path_to_qpath(Path()).isEmpty()


def test_crop_marks_bounding_rect():
    p = crop_marks((0, 0, 100, 50), 5, 2)
    q = path_to_qpath(p)
    assert q.elementCount() == 16
    assert _rect_xyxy(q.boundingRect()) == pytest.approx(path_bbox(p).as_list())


def test_scale():
    p = crop_marks((0, 0, 10, 10), 2, 0)
    q = path_to_qpath(p, scale=2.0)
    assert _rect_xyxy(q.boundingRect()) == pytest.approx([-4, -4, 24, 24])


def test_curves_become_cubics():
    p = standard_chain_link()
    q = path_to_qpath(p)
    assert not q.isEmpty()
    assert _rect_xyxy(q.boundingRect()) == pytest.approx(path_bbox(p).as_list(), abs=1e-6)


def test_sprocket_closed():
    q = path_to_qpath(sprocket(12.7, 15))
    assert q.elementCount() > 15
    assert q.contains(q.boundingRect().center())


def test_arc_segments_are_approximated():
    p = append_circle(Path(), (0, 0), 5.0)
    q = path_to_qpath(p)
    assert _rect_xyxy(q.boundingRect()) == pytest.approx([-5, -5, 5, 5], abs=1e-3)
    # the source path keeps its Arc segment
    assert type(p[1]).__name__ == "Arc"
