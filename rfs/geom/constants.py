"""Proportions used by the shape constructors.

Ratios are relative to the chain pitch, thread pitch, or head dimension
named in each comment. Keep these stable: they define what every drawing
looks like.
"""

# Standard chain link, in units of the link pitch (centre-to-centre = 1.0).
CHAIN_LINK_END_RADIUS = 0.3
CHAIN_LINK_WAIST = 0.2
CHAIN_LINK_PIN_RADIUS = 0.1
# Angle (degrees from the axis) where the end arcs meet the waist curves.
CHAIN_LINK_ARC_START_DEG = 60.0

# Sprocket, in units of the chain pitch.
SPROCKET_SEAT_RATIO = 0.3125   # roller seat radius
SPROCKET_TIP_RATIO = 0.3       # outside radius = pitch radius + ratio * pitch
# Tip arc half-width as a fraction of the half tooth angle (pi / teeth).
SPROCKET_TIP_WIDTH = 0.2
SPROCKET_MIN_TEETH = 3

# Threads: root depth = ratio * pitch (ISO external), capped at diameter / 4.
THREAD_DEPTH_RATIO = 0.6134
THREAD_MAX_DEPTH_FRACTION = 0.25

# Hex head side view: chamfer depth as a fraction of the head height.
HEX_FACE_CHAMFER_RATIO = 0.15
# Cap head corner radius: min(ratio * diameter, height / 2).
CAP_HEAD_CORNER_RATIO = 0.15

# Centre line overshoot past each end, as a fraction of the largest diameter.
CENTRE_LINE_OVERSHOOT_RATIO = 0.1

# Crop marks (same units as the rect, usually mm).
DEFAULT_CROP_MARK_LENGTH = 10.0
