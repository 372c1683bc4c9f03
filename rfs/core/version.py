"""RFS - version constants.

Keep this module tiny and dependency-free. It is imported by the CLI and the
exporter and must not have side effects.
"""

APP_NAME = "RusticFormasSvg"
APP_SHORT = "RFS"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Export defaults (in millimeters)
# NOTE: keep these stable; changing impacts every exported drawing.
DEFAULT_EXPORT_MARGIN_MM = 5.0
DEFAULT_EXPORT_STROKE_MM = 0.25
