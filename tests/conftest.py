"""Shared test fixtures for rfs shape tests."""
import pytest
from svgelements import Move


def _split(path):
    out = []
    for seg in path:
        if isinstance(seg, Move):
            out.append([])
        out[-1].append(seg)
    return out


def _sig(path):
    return [(type(s).__name__, round(s.end.x, 9), round(s.end.y, 9)) for s in path]


@pytest.fixture(scope="session")
def split_subpaths():
    """Split a path into lists of segments, one per Move."""
    return _split


@pytest.fixture(scope="session")
def signature():
    """Comparable (segment type, end point) list of a path."""
    return _sig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("RFS_EXPORT_MARGIN_MM", "RFS_EXPORT_STROKE_MM", "RFS_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(scope="session")
def m8_bolt_dims():
    """M8 x 30 hex bolt, 10 mm shank."""
    return dict(
        length=30.0, thread_diameter=8.0, thread_pitch=1.25,
        head_diameter=13.0, head_height=5.5, shank_length=10.0,
    )
