"""SVG parsing helpers for svg-fixup.

This subpackage provides:
- Safe well-formedness checks with XXE protection (defusedxml)
- Element prefix inspection (lxml)
"""

from svg_fixup.svg.parser import (
    find_prefixed_elements,
    is_well_formed,
    iter_element_prefixes,
    parse_svg_string,
)

__all__ = [
    "find_prefixed_elements",
    "is_well_formed",
    "iter_element_prefixes",
    "parse_svg_string",
]
