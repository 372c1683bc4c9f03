"""RusticFormasSvg (RFS): trazados de formas de ingeniería sobre svgelements."""

from rfs.core.options import ShapeOption, coerce_options
from rfs.core.version import APP_VERSION as __version__
from rfs.geom.shapes import (
    bolt,
    chain_link_between,
    crop_marks,
    crop_marks_default,
    hex_head_side_view,
    sprocket,
    sprocket_pitch_diameter,
    standard_chain_link,
    thread_lines,
    threaded_bar,
)
from rfs.utils.errors import RfsError, RfsGeometryError
