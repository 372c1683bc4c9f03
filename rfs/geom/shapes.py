"""Engineering shape paths: chains, sprockets, threads, bolts, crop marks.

Every constructor is a pure function of its scalar inputs (and options
flags) returning a fresh `svgelements.Path`:

- chains and sprockets: `standard_chain_link`, `chain_link_between`,
  `sprocket`
- nuts and bolts: `threaded_bar`, `thread_lines`, `hex_head_side_view`,
  `bolt`
- crop marks: `crop_marks`, `crop_marks_default`

Coordinates are plain user units (mm in the exporter). Fasteners lie along
+x with their axis on y = 0; the head, when any, is at the x origin.

Failure policy: invalid dimensions (non-numeric, non-finite, <= 0, or an
inconsistent combination) raise `RfsGeometryError`. No constructor returns an
empty path.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from svgelements import Matrix, Path, Point

from rfs.core.options import ShapeOption, coerce_options
from rfs.geom.arcs import PointXY, append_arc, append_circle, append_polyline, apply_matrix, connect_to
from rfs.geom.constants import (
    CAP_HEAD_CORNER_RATIO,
    CENTRE_LINE_OVERSHOOT_RATIO,
    CHAIN_LINK_ARC_START_DEG,
    CHAIN_LINK_END_RADIUS,
    CHAIN_LINK_PIN_RADIUS,
    CHAIN_LINK_WAIST,
    DEFAULT_CROP_MARK_LENGTH,
    HEX_FACE_CHAMFER_RATIO,
    SPROCKET_MIN_TEETH,
    SPROCKET_SEAT_RATIO,
    SPROCKET_TIP_RATIO,
    SPROCKET_TIP_WIDTH,
    THREAD_DEPTH_RATIO,
    THREAD_MAX_DEPTH_FRACTION,
)
from rfs.utils.errors import RfsGeometryError

log = logging.getLogger(__name__)

RectXYWH = Tuple[float, float, float, float]


# ------------------------------
# Validation
# ------------------------------

def _finite(name: str, value: object) -> float:
    if isinstance(value, bool):
        raise RfsGeometryError(f"{name} must be a number, got {value!r}")
    try:
        v = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise RfsGeometryError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v):
        raise RfsGeometryError(f"{name} must be finite, got {value!r}")
    return v


def _positive(name: str, value: object) -> float:
    v = _finite(name, value)
    if v <= 0:
        raise RfsGeometryError(f"{name} must be > 0, got {value!r}")
    return v


def _non_negative(name: str, value: object) -> float:
    v = _finite(name, value)
    if v < 0:
        raise RfsGeometryError(f"{name} must be >= 0, got {value!r}")
    return v


def _point(name: str, value: object) -> PointXY:
    try:
        x, y = value  # type: ignore[misc]
    except (TypeError, ValueError):
        raise RfsGeometryError(f"{name} must be an (x, y) pair, got {value!r}") from None
    return (_finite(f"{name}.x", x), _finite(f"{name}.y", y))


def _options(value: object) -> ShapeOption:
    try:
        return coerce_options(value)
    except (TypeError, ValueError) as e:
        raise RfsGeometryError(str(e)) from None


# ------------------------------
# Chains and sprockets
# ------------------------------

def standard_chain_link() -> Path:
    """Roller chain link plate with link centres at (0, 0) and (1, 0).

    Scale the result for other pitches, or use `chain_link_between`.
    The outline is followed by the two pin holes as separate subpaths.
    """
    r = CHAIN_LINK_END_RADIUS
    w = CHAIN_LINK_WAIST
    a = math.radians(CHAIN_LINK_ARC_START_DEG)
    # waist cubics are symmetric: their midpoint is (P0 + 3*C1 + 3*C2 + P3) / 8
    c = (4 * w - r * math.sin(a)) / 3
    p = Path()

    # left end, around the back (through 180 degrees)
    append_arc(p, (0.0, 0.0), r, a, 2 * math.pi - a)
    lower_right = Point.polar((1.0, 0.0), math.pi + a, r)
    p.cubic((0.35, -c), (0.65, -c), lower_right)
    # right end, around the front (through 0 degrees)
    append_arc(p, (1.0, 0.0), r, math.pi + a, 3 * math.pi - a)
    upper_left = Point.polar((0.0, 0.0), a, r)
    p.cubic((0.65, c), (0.35, c), upper_left)
    p.closed()

    append_circle(p, (0.0, 0.0), CHAIN_LINK_PIN_RADIUS)
    append_circle(p, (1.0, 0.0), CHAIN_LINK_PIN_RADIUS)
    p.approximate_arcs_with_cubics()
    return p


def chain_link_between(a: Sequence[float], b: Sequence[float]) -> Path:
    """Standard chain link scaled and rotated so its pin centres sit on `a` and `b`."""
    ax, ay = _point("a", a)
    bx, by = _point("b", b)
    dx, dy = bx - ax, by - ay
    pitch = math.hypot(dx, dy)
    if not pitch > 0 or not math.isfinite(pitch):
        raise RfsGeometryError(f"chain link needs two distinct points, got {a!r} and {b!r}")

    m = Matrix()
    m.post_scale(pitch, pitch)
    m.post_rotate(math.atan2(dy, dx))
    m.post_translate(ax, ay)
    p = apply_matrix(standard_chain_link(), m)
    log.debug("chain link: (%g, %g) -> (%g, %g), pitch=%g", ax, ay, bx, by, pitch)
    return p


def sprocket_pitch_diameter(pitch: float, teeth: int) -> float:
    """Pitch circle diameter of a sprocket for the given chain pitch."""
    pitch = _positive("pitch", pitch)
    n = _teeth(teeth)
    return pitch / math.sin(math.pi / n)


def _teeth(teeth: object) -> int:
    if isinstance(teeth, bool):
        raise RfsGeometryError(f"teeth must be an integer, got {teeth!r}")
    v = _finite("teeth", teeth)
    if v != int(v):
        raise RfsGeometryError(f"teeth must be an integer, got {teeth!r}")
    n = int(v)
    if n < SPROCKET_MIN_TEETH:
        raise RfsGeometryError(f"teeth must be >= {SPROCKET_MIN_TEETH}, got {teeth!r}")
    return n


def sprocket(pitch: float, teeth: int) -> Path:
    """Sprocket outline centred on the origin.

    Roller seats are half circles centred on the pitch circle; teeth end in
    short arcs on the outside circle, joined to the seats by straight flanks.
    """
    pitch = _positive("pitch", pitch)
    n = _teeth(teeth)
    radius = pitch / math.sin(math.pi / n) / 2
    seat = SPROCKET_SEAT_RATIO * pitch
    outside = radius + SPROCKET_TIP_RATIO * pitch
    half_tip = SPROCKET_TIP_WIDTH * math.pi / n

    p = Path()
    for i in range(n):
        theta = 2 * math.pi * i / n
        # seat: inner half circle, swept against the outline direction
        append_arc(p, Point.polar((0.0, 0.0), theta, radius), seat, theta - math.pi / 2, theta - 3 * math.pi / 2)
        tooth = theta + math.pi / n
        append_arc(p, (0.0, 0.0), outside, tooth - half_tip, tooth + half_tip)
    p.closed()
    p.approximate_arcs_with_cubics()
    log.debug("sprocket: pitch=%g teeth=%d pcd=%g od=%g", pitch, n, 2 * radius, 2 * outside)
    return p


# ------------------------------
# Threads
# ------------------------------

def _thread_depth(diameter: float, pitch: float) -> float:
    return min(THREAD_DEPTH_RATIO * pitch, THREAD_MAX_DEPTH_FRACTION * diameter)


def _sawtooth(x0: float, x1: float, radius: float, depth: float, pitch: float, phase: float) -> List[PointXY]:
    """Thread profile from x0 to x1: crests at phase + k*pitch, roots half way between."""
    half = pitch / 2
    eps = 1e-9 * pitch

    def y_at(x: float) -> float:
        f = ((x - phase) / pitch) % 1.0
        tri = 2 * f if f <= 0.5 else 2 * (1 - f)
        return radius - depth * tri

    pts = [(x0, y_at(x0))]
    k = math.floor((x0 - phase) / half) + 1
    x = phase + k * half
    while x < x1 - eps:
        if x > x0 + eps:
            pts.append((x, radius if k % 2 == 0 else radius - depth))
        k += 1
        x = phase + k * half
    pts.append((x1, y_at(x1)))
    return pts


def _bar_edge(
    x0: float,
    x1: float,
    radius: float,
    depth: float,
    pitch: float,
    phase: float,
    thread_x0: float,
    left_cap: bool,
    right_cap: bool,
) -> List[PointXY]:
    """Upper silhouette edge (y > 0), left to right."""
    eps = 1e-9 * pitch
    if thread_x0 >= x1 - eps:
        # plain shank all the way
        pts: List[PointXY] = [(x0, radius), (x1, radius)]
    elif thread_x0 > x0 + eps:
        pts = [(x0, radius), (thread_x0, radius)] + _sawtooth(thread_x0, x1, radius, depth, pitch, phase)
    else:
        pts = _sawtooth(x0, x1, radius, depth, pitch, phase)
    if left_cap:
        pts = _chamfer(pts, x0, radius - depth)
    if right_cap:
        pts = _chamfer(pts, x1, radius - depth)
    return pts


def _chamfer(pts: List[PointXY], end: float, root: float) -> List[PointXY]:
    """Clip an edge to the 45 degree line y = root + |x - end| (pointwise minimum)."""

    def line(x: float) -> float:
        return root + abs(x - end)

    # (x, y, lies on the chamfer line)
    out: List[Tuple[float, float, bool]] = []
    for (xa, ya), (xb, yb) in zip(pts, pts[1:]):
        da = ya - line(xa)
        db = yb - line(xb)
        out.append((xa, line(xa), True) if da >= 0 else (xa, ya, False))
        if (da > 0 and db < 0) or (da < 0 and db > 0):
            x = xa + (xb - xa) * da / (da - db)
            out.append((x, line(x), True))
    xl, yl = pts[-1]
    out.append((xl, line(xl), True) if yl >= line(xl) else (xl, yl, False))

    # keep only the two ends of each run along the chamfer line
    kept = [
        (x, y)
        for i, (x, y, on) in enumerate(out)
        if not (on and 0 < i < len(out) - 1 and out[i - 1][2] and out[i + 1][2])
    ]
    return kept


def _append_thread_lines(path: Path, x0: float, x1: float, radius: float, pitch: float, phase: float) -> int:
    """Lines from each top crest to the next bottom crest inside [x0, x1]."""
    eps = 1e-9 * pitch
    k = math.ceil((x0 - phase) / pitch - 1e-9)
    count = 0
    while True:
        x = phase + k * pitch
        if x + pitch / 2 > x1 + eps:
            break
        if x >= x0 - eps:
            path.move((x, radius))
            path.line((x + pitch / 2, -radius))
            count += 1
        k += 1
    return count


def _append_bar(
    path: Path,
    x0: float,
    x1: float,
    diameter: float,
    pitch: float,
    thread_x0: float,
    options: ShapeOption,
) -> None:
    left_cap = bool(options & ShapeOption.LEFT_END_CAPPED)
    right_cap = bool(options & ShapeOption.RIGHT_END_CAPPED)
    radius = diameter / 2
    depth = _thread_depth(diameter, pitch)

    lo = x0 + depth if left_cap else x0
    hi = x1 - depth if right_cap else x1
    if hi - lo <= 1e-9 * pitch:
        raise RfsGeometryError(
            f"bar length {x1 - x0:g} too short for its end chamfers (depth {depth:g})"
        )

    top = _bar_edge(x0, x1, radius, depth, pitch, thread_x0, thread_x0, left_cap, right_cap)
    bottom = _bar_edge(x0, x1, radius, depth, pitch, thread_x0 + pitch / 2, thread_x0, left_cap, right_cap)
    outline = top + [(x, -y) for (x, y) in reversed(bottom)]
    append_polyline(path, outline, close=True)

    if options & ShapeOption.THREAD_LINES_DRAWN:
        _append_thread_lines(path, max(lo, thread_x0), hi, radius, pitch, thread_x0)


def threaded_bar(length: float, diameter: float, pitch: float, options: object = ShapeOption.NONE) -> Path:
    """Threaded bar from x=0 to x=length, diameter across y.

    Consumes LEFT_END_CAPPED, RIGHT_END_CAPPED and THREAD_LINES_DRAWN. The
    thread lines, when drawn, follow the silhouette as open subpaths and do
    not change it.
    """
    length = _positive("length", length)
    diameter = _positive("diameter", diameter)
    pitch = _positive("pitch", pitch)
    opts = _options(options)

    p = Path()
    _append_bar(p, 0.0, length, diameter, pitch, 0.0, opts)
    log.debug("threaded bar: L=%g d=%g p=%g options=%r -> %d segments", length, diameter, pitch, opts, len(p))
    return p


def thread_lines(length: float, diameter: float, pitch: float) -> Path:
    """Only the slanted thread lines of a bar of the given size."""
    length = _positive("length", length)
    diameter = _positive("diameter", diameter)
    pitch = _positive("pitch", pitch)

    p = Path()
    if _append_thread_lines(p, 0.0, length, diameter / 2, pitch, 0.0) == 0:
        raise RfsGeometryError(f"length {length:g} shorter than half a thread pitch ({pitch:g})")
    return p


# ------------------------------
# Heads and bolts
# ------------------------------

def _append_face_curve(path: Path, x_corner: float, x_top: float, ya: float, yb: float) -> None:
    # symmetric cubic reaching x_top at its midpoint
    xc = (4 * x_top - x_corner) / 3
    path.cubic((xc, ya), (xc, yb), (x_corner, yb))


def _append_hex_head(path: Path, x0: float, height: float, diameter: float, face_curves: bool) -> None:
    r = diameter / 2
    q = diameter / 4
    x1 = x0 + height
    if not face_curves:
        append_polyline(path, [(x1, -r), (x0, -r), (x0, r), (x1, r)], close=True)
        xf = x0
    else:
        xf = x0 + HEX_FACE_CHAMFER_RATIO * height
        path.move((x1, -r))
        path.line((xf, -r))
        for ya, yb in ((-r, -q), (-q, q), (q, r)):
            _append_face_curve(path, xf, x0, ya, yb)
        path.line((x1, r))
        path.closed()
    # visible face edges
    append_polyline(path, [(xf, -q), (x1, -q)])
    append_polyline(path, [(xf, q), (x1, q)])


def _append_cap_head(path: Path, x0: float, height: float, diameter: float) -> None:
    r = diameter / 2
    x1 = x0 + height
    rc = min(CAP_HEAD_CORNER_RATIO * diameter, height / 2)
    path.move((x1, -r))
    append_arc(path, (x0 + rc, -r + rc), rc, -math.pi / 2, -math.pi)
    append_arc(path, (x0 + rc, r - rc), rc, math.pi, math.pi / 2)
    connect_to(path, (x1, r))
    path.closed()


def _append_centre_line(path: Path, x0: float, x1: float, diameter: float) -> None:
    o = CENTRE_LINE_OVERSHOOT_RATIO * diameter
    path.move((x0 - o, 0.0))
    path.line((x1 + o, 0.0))


def hex_head_side_view(height: float, diameter: float, options: object = ShapeOption.NONE) -> Path:
    """Hex head seen across corners: x in [0, height], y in [-diameter/2, diameter/2].

    Consumes HEX_FACE_CURVES_DRAWN and CENTRE_LINE.
    """
    height = _positive("height", height)
    diameter = _positive("diameter", diameter)
    opts = _options(options)

    p = Path()
    _append_hex_head(p, 0.0, height, diameter, bool(opts & ShapeOption.HEX_FACE_CURVES_DRAWN))
    if opts & ShapeOption.CENTRE_LINE:
        _append_centre_line(p, 0.0, height, diameter)
    return p


def bolt(
    length: float,
    thread_diameter: float,
    thread_pitch: float,
    head_diameter: float,
    head_height: float,
    shank_length: float,
    options: object = ShapeOption.NONE,
) -> Path:
    """Bolt side view: head at x in [0, head_height], body to head_height + length.

    `length` is measured under the head; `shank_length` is the unthreaded
    part next to the head (0 for a fully threaded bolt). The tip is always
    chamfered. Consumes HAS_CAP_HEAD, HEX_FACE_CURVES_DRAWN (hex heads only),
    THREAD_LINES_DRAWN and CENTRE_LINE.
    """
    length = _positive("length", length)
    thread_diameter = _positive("thread_diameter", thread_diameter)
    thread_pitch = _positive("thread_pitch", thread_pitch)
    head_diameter = _positive("head_diameter", head_diameter)
    head_height = _positive("head_height", head_height)
    shank_length = _non_negative("shank_length", shank_length)
    opts = _options(options)

    if shank_length > length:
        raise RfsGeometryError(f"shank_length {shank_length:g} exceeds bolt length {length:g}")
    if head_diameter < thread_diameter:
        raise RfsGeometryError(
            f"head_diameter {head_diameter:g} smaller than thread_diameter {thread_diameter:g}"
        )

    p = Path()
    if opts & ShapeOption.HAS_CAP_HEAD:
        _append_cap_head(p, 0.0, head_height, head_diameter)
    else:
        _append_hex_head(p, 0.0, head_height, head_diameter, bool(opts & ShapeOption.HEX_FACE_CURVES_DRAWN))

    body_opts = ShapeOption.RIGHT_END_CAPPED | (opts & ShapeOption.THREAD_LINES_DRAWN)
    x1 = head_height + length
    _append_bar(p, head_height, x1, thread_diameter, thread_pitch, head_height + shank_length, body_opts)

    if opts & ShapeOption.CENTRE_LINE:
        _append_centre_line(p, 0.0, x1, head_diameter)
    p.approximate_arcs_with_cubics()
    log.debug(
        "bolt: L=%g d=%g p=%g head=%gx%g shank=%g options=%r",
        length, thread_diameter, thread_pitch, head_diameter, head_height, shank_length, opts,
    )
    return p


# ------------------------------
# Crop marks
# ------------------------------

def _rect(value: object) -> RectXYWH:
    try:
        x, y, w, h = value  # type: ignore[misc]
    except (TypeError, ValueError):
        raise RfsGeometryError(f"rect must be (x, y, width, height), got {value!r}") from None
    return (_finite("rect.x", x), _finite("rect.y", y), _positive("rect.width", w), _positive("rect.height", h))


def crop_marks(rect: Sequence[float], length: float, extension: float) -> Path:
    """Eight crop ticks, two per corner, in line with the edges of `rect`.

    Each tick starts `extension` away from its corner and is `length` long.
    """
    x, y, w, h = _rect(rect)
    length = _positive("length", length)
    ext = _non_negative("extension", extension)

    p = Path()
    for cx, sx in ((x, -1.0), (x + w, 1.0)):
        for cy, sy in ((y, -1.0), (y + h, 1.0)):
            p.move((cx + sx * ext, cy))
            p.line((cx + sx * (ext + length), cy))
            p.move((cx, cy + sy * ext))
            p.line((cx, cy + sy * (ext + length)))
    return p


def crop_marks_default(rect: Sequence[float], extension: float) -> Path:
    """`crop_marks` with DEFAULT_CROP_MARK_LENGTH ticks."""
    return crop_marks(rect, DEFAULT_CROP_MARK_LENGTH, extension)
