"""Textual repairs for SVG documents produced by third-party exporters.

Each pass takes the document as a string and returns a string. Passes do
not parse the document; they match narrow, syntactically anchored patterns
(attribute assignments, tag names, literal element pairs) and leave every
other character untouched. Running the pipeline twice gives the same result
as running it once.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import NamedTuple

from svg_fixup.markup import (
    REMOVE,
    Attribute,
    empty_element_bodies,
    find_start_tag,
    iter_attributes,
    rewrite_start_tags,
    sub_markup,
)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
ADOBE_EXTENSIBILITY_NS = "http://ns.adobe.com/Extensibility/1.0/"

# Namespace names no prefix other than "xml" may be bound to. Inkscape has
# been seen binding arbitrary prefixes to these.
RESERVED_NAMESPACE_URIS = frozenset(
    {
        "http://www.w3.org/XML/1998/namespace",
        "http://www.w3.org/2000/xmlns/",
    }
)

# Invalid MIME types found in image data URIs, mapped to the correct type.
# Photoshop writes "img/png".
INVALID_MIME_TYPES = {
    "img/png": "image/png",
}

_SVG_PREFIX_RE = re.compile(r"<(/?)\s*(?:svg:)+(?=[A-Za-z_])")
_ILLUSTRATOR_ENTITY_RE = re.compile(r"&ns_[^;&<>\"'\s]+;")


def fix_reserved_namespaces(svg_string: str) -> str:
    """Rebind ``xmlns:prefix`` declarations that point at a reserved namespace.

    Only real attribute assignments inside start tags are considered, and
    ``xmlns:xml`` is left alone since it is the one legal binding.
    """

    def _fix(_tag: str, attribute: Attribute) -> str | None:
        if attribute.prefix != "xmlns" or attribute.local_name == "xml":
            return None
        if attribute.value in RESERVED_NAMESPACE_URIS:
            return XLINK_NS
        return None

    return rewrite_start_tags(svg_string, _fix)


def strip_svg_prefixes(svg_string: str) -> str:
    """Remove the ``svg:`` prefix from opening and closing tag names."""
    return sub_markup(_SVG_PREFIX_RE, r"<\1", svg_string)


def add_missing_svg_namespace(svg_string: str) -> str:
    """Declare the SVG namespace on the root element when it is missing."""
    root = find_start_tag(svg_string, "svg")
    if root is None or any(a.name == "xmlns" for a in iter_attributes(root.group(0), "svg")):
        return svg_string

    insert_at = root.start() + len("<svg")
    return f'{svg_string[:insert_at]} xmlns="{SVG_NS}"{svg_string[insert_at:]}'


def replace_illustrator_entities(svg_string: str) -> str:
    """Replace undeclared ``&ns_*;`` entities in the root tag.

    Illustrator declares these entities in a DOCTYPE; when the DOCTYPE has
    been stripped the references can no longer be resolved.
    """
    if "<!DOCTYPE" in svg_string:
        return svg_string

    root = find_start_tag(svg_string, "svg")
    if root is None or "&ns_" not in root.group(0):
        return svg_string

    fixed_tag = _ILLUSTRATOR_ENTITY_RE.sub(ADOBE_EXTENSIBILITY_NS, root.group(0))
    return svg_string[: root.start()] + fixed_tag + svg_string[root.end() :]


def empty_metadata(svg_string: str) -> str:
    """Drop the contents of ``<metadata>`` elements."""
    return empty_element_bodies(svg_string, "metadata")


def empty_scripts(svg_string: str) -> str:
    """Drop the contents of ``<script>`` elements."""
    return empty_element_bodies(svg_string, "script")


def fix_image_mime_types(svg_string: str) -> str:
    """Correct invalid MIME types at the start of ``href`` data URIs."""

    def _fix(_tag: str, attribute: Attribute) -> str | None:
        if attribute.local_name != "href":
            return None
        value = attribute.value
        stripped = value.lstrip()
        if stripped[:5].lower() != "data:":
            return None
        offset = len(value) - len(stripped) + 5
        for invalid, valid in INVALID_MIME_TYPES.items():
            end = offset + len(invalid)
            # The MIME type ends at the parameter or payload separator.
            if value[offset:end].lower() == invalid and value[end : end + 1] in (";", ","):
                return value[:offset] + valid + value[end:]
        return None

    return rewrite_start_tags(svg_string, _fix)


def is_embedded_reference(value: str) -> bool:
    """Return True for ``data:`` URIs and same-document ``#fragment`` links."""
    stripped = value.strip()
    return stripped.startswith("#") or stripped[:5].lower() == "data:"


def remove_external_hrefs(svg_string: str) -> str:
    """Remove ``href`` attributes that would fetch an external resource."""

    def _fix(_tag: str, attribute: Attribute) -> object:
        if attribute.local_name != "href":
            return None
        if is_embedded_reference(attribute.value):
            return None
        return REMOVE

    return rewrite_start_tags(svg_string, _fix)


class FixupPass(NamedTuple):
    """A named step of the fixup pipeline."""

    name: str
    func: Callable[[str], str]
    description: str


PASSES: tuple[FixupPass, ...] = (
    FixupPass(
        "reserved-namespaces",
        fix_reserved_namespaces,
        "Rebind xmlns:* declarations that use a reserved namespace name",
    ),
    FixupPass("svg-prefixes", strip_svg_prefixes, "Strip svg: prefixes from tag names"),
    FixupPass(
        "svg-namespace",
        add_missing_svg_namespace,
        "Declare the SVG namespace on the root element if missing",
    ),
    FixupPass(
        "illustrator-entities",
        replace_illustrator_entities,
        "Replace undeclared Illustrator &ns_*; entities in the root tag",
    ),
    FixupPass("metadata", empty_metadata, "Empty <metadata> elements"),
    FixupPass("scripts", empty_scripts, "Empty <script> elements"),
    FixupPass("mime-types", fix_image_mime_types, "Correct invalid image MIME types in data URIs"),
    FixupPass("external-hrefs", remove_external_hrefs, "Remove hrefs to external resources"),
)

PASS_NAMES: tuple[str, ...] = tuple(p.name for p in PASSES)


def get_passes(names: Iterable[str] | None = None) -> list[FixupPass]:
    """Return passes in pipeline order, restricted to ``names`` if given.

    Raises:
        KeyError: If a name is not a known pass.
    """
    if names is None:
        return list(PASSES)

    wanted = set(names)
    unknown = wanted.difference(PASS_NAMES)
    if unknown:
        raise KeyError(", ".join(sorted(unknown)))
    return [p for p in PASSES if p.name in wanted]


def fixup_with_passes(
    svg_string: str, passes: Iterable[FixupPass] | None = None
) -> tuple[str, list[str]]:
    """Run ``passes`` (all by default) and report which ones changed the text."""
    applied: list[str] = []
    for fixup_pass in PASSES if passes is None else passes:
        fixed = fixup_pass.func(svg_string)
        if fixed != svg_string:
            applied.append(fixup_pass.name)
            svg_string = fixed
    return svg_string, applied


def fixup(svg_string: str) -> str:
    """Apply every pass to ``svg_string`` and return the repaired document."""
    return fixup_with_passes(svg_string)[0]
