"""svg-fixup: Repair SVG documents from real-world exporters.

This library rewrites SVG text so it parses cleanly and renders safely:
- Reserved namespace bindings rebound to the XLink namespace
- Stray ``svg:`` tag prefixes removed
- ``<script>`` and ``<metadata>`` bodies emptied
- Invalid image MIME types in data URIs corrected
- External ``href`` references removed

Only the defects it knows about are touched; every other character of the
document is kept as it was.

Example:
    >>> from svg_fixup import fixup
    >>> fixup('<svg:svg xmlns:svg="http://www.w3.org/2000/svg"/>')
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:svg="http://www.w3.org/2000/svg"/>'
"""

from svg_fixup.api import FixupResult, SVGFixer
from svg_fixup.config import Config
from svg_fixup.exceptions import (
    ConfigError,
    FixupIOError,
    SVGFixupError,
    SVGParseError,
    UnknownPassError,
)
from svg_fixup.fixup import PASS_NAMES, PASSES, fixup, fixup_with_passes

__version__ = "0.1.0"

__all__ = [
    # Core
    "fixup",
    "fixup_with_passes",
    "PASSES",
    "PASS_NAMES",
    # Main API
    "SVGFixer",
    "FixupResult",
    "Config",
    # Exceptions
    "SVGFixupError",
    "SVGParseError",
    "ConfigError",
    "UnknownPassError",
    "FixupIOError",
    # Metadata
    "__version__",
]
