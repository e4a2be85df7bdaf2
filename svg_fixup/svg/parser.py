"""Hardened SVG parsing used to verify fixup output.

Parsing here never feeds back into the fixup passes; it only answers
whether a document is well-formed and which element prefixes it uses.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException
from lxml import etree

from svg_fixup.exceptions import SVGParseError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element


def _lxml_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
    )


def parse_svg_string(svg_string: str) -> Element:
    """Parse an SVG string and return its root element.

    Raises:
        SVGParseError: If the document is not well-formed, or uses
            entity or DTD constructs that defusedxml refuses.
    """
    try:
        return ET.fromstring(svg_string)
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}", details={"position": e.position}) from e
    except DefusedXmlException as e:
        raise SVGParseError(f"Unsafe XML construct: {e}") from e


def is_well_formed(svg_string: str) -> bool:
    """Return True when ``svg_string`` parses without error."""
    try:
        parse_svg_string(svg_string)
    except SVGParseError:
        return False
    return True


def iter_element_prefixes(svg_string: str) -> Iterator[tuple[str, str | None]]:
    """Yield ``(local_name, prefix)`` for every element in document order.

    ElementTree discards prefixes, so this walks an lxml tree instead.

    Raises:
        SVGParseError: If lxml cannot parse the document.
    """
    try:
        root = etree.fromstring(svg_string.encode("utf-8"), _lxml_parser())
    except etree.XMLSyntaxError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}") from e

    for element in root.iter(etree.Element):
        yield etree.QName(element).localname, element.prefix


def find_prefixed_elements(svg_string: str, prefix: str = "svg") -> list[str]:
    """Return local names of elements written with ``prefix``."""
    return [name for name, p in iter_element_prefixes(svg_string) if p == prefix]
