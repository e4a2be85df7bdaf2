"""Locate tags, attributes and literal element pairs in raw SVG markup.

All patterns here are written so that scanning stays linear in the size of
the input: quoted attribute values are consumed whole, and element bodies
are found by searching for the literal closing tag rather than by nesting.

Comments, CDATA sections and processing instructions are never treated as
markup, so tag-like text inside them is left as it is.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import NamedTuple

# Start tag with its attributes. Quoted values may contain '>'.
START_TAG_RE = re.compile(
    r"""<(?P<name>[A-Za-z_][\w.:-]*)(?![\w.:-])"""
    r"""(?P<rest>[^<>"']*(?:(?:"[^"<]*"|'[^'<]*')[^<>"']*)*)>"""
)

ATTRIBUTE_RE = re.compile(
    r"""(?P<lead>\s+)(?P<name>[^\s=/<>"']+)(?P<eq>\s*=\s*)"""
    r"""(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')"""
)

# Openers of sections whose content is not markup, and the literal ending each.
_OPAQUE_START = r"<!--|<!\[CDATA\[|<\?"
_OPAQUE_END = {"<!--": "-->", "<![CDATA[": "]]>", "<?": "?>"}
_OPAQUE_RE = re.compile(_OPAQUE_START)

# Elements whose bodies are skipped whole while looking for any other
# element's opening tag.
OPAQUE_ELEMENTS = ("metadata", "script")

# Returned by an attribute callback to drop the attribute altogether.
REMOVE = object()


class Attribute(NamedTuple):
    """One attribute assignment inside a start tag."""

    name: str
    value: str
    quote: str

    @property
    def prefix(self) -> str | None:
        prefix, sep, _local = self.name.rpartition(":")
        return prefix if sep else None

    @property
    def local_name(self) -> str:
        return self.name.rpartition(":")[2]


AttributeCallback = Callable[[str, Attribute], object]


def markup_spans(document: str) -> Iterator[tuple[int, int, bool]]:
    """Split ``document`` into ``(start, end, is_markup)`` spans.

    Comments, CDATA sections and processing instructions are yielded with
    ``is_markup`` False. One left unterminated runs to the end of the document.
    """
    pos = 0
    length = len(document)
    while pos < length:
        match = _OPAQUE_RE.search(document, pos)
        if match is None:
            break
        if match.start() > pos:
            yield pos, match.start(), True
        terminator = _OPAQUE_END[match.group(0)]
        end = document.find(terminator, match.end())
        end = length if end == -1 else end + len(terminator)
        yield match.start(), end, False
        pos = end
    if pos < length:
        yield pos, length, True


def sub_markup(
    pattern: re.Pattern[str],
    repl: str | Callable[[re.Match[str]], str],
    document: str,
) -> str:
    """``pattern.sub`` restricted to the markup spans of ``document``."""
    pieces = []
    for start, end, is_markup in markup_spans(document):
        chunk = document[start:end]
        pieces.append(pattern.sub(repl, chunk) if is_markup else chunk)
    return "".join(pieces)


def _attribute(match: re.Match[str]) -> Attribute:
    if match.group("dq") is not None:
        return Attribute(match.group("name"), match.group("dq"), '"')
    return Attribute(match.group("name"), match.group("sq"), "'")


def iter_attributes(tag: str, tag_name: str) -> Iterator[Attribute]:
    """Yield the attributes of a single start tag in order."""
    for match in ATTRIBUTE_RE.finditer(tag, 1 + len(tag_name)):
        yield _attribute(match)


def rewrite_attributes(tag: str, tag_name: str, callback: AttributeCallback) -> str:
    """Apply ``callback`` to every attribute of a single start tag.

    The callback receives the element name and the attribute. It returns
    ``None`` to keep the attribute, a string to replace its value, or
    ``REMOVE`` to delete it (together with its leading whitespace).
    """

    def _replace(match: re.Match[str]) -> str:
        attribute = _attribute(match)
        result = callback(tag_name, attribute)
        if result is None:
            return match.group(0)
        if result is REMOVE:
            return ""
        quote = attribute.quote
        if quote in result:
            quote = "'" if quote == '"' else '"'
        return f"{match.group('lead')}{attribute.name}{match.group('eq')}{quote}{result}{quote}"

    # Skip "<name" so the tag name itself is never taken for an attribute.
    head = 1 + len(tag_name)
    return tag[:head] + ATTRIBUTE_RE.sub(_replace, tag[head:])


def rewrite_start_tags(document: str, callback: AttributeCallback) -> str:
    """Run ``callback`` over the attributes of every start tag in ``document``."""

    def _replace(match: re.Match[str]) -> str:
        return rewrite_attributes(match.group(0), match.group("name"), callback)

    return sub_markup(START_TAG_RE, _replace, document)


def find_start_tag(document: str, name: str) -> re.Match[str] | None:
    """Return the first start tag called ``name`` outside comments, or None."""
    for start, end, is_markup in markup_spans(document):
        if not is_markup:
            continue
        for match in START_TAG_RE.finditer(document, start, end):
            if match.group("name") == name:
                return match
    return None


def empty_element_bodies(document: str, name: str) -> str:
    """Remove everything between ``<name ...>`` and the next literal ``</name>``.

    Bodies are not parsed: the first closing tag after an opening tag ends
    the element, whatever markup sits in between. The document is scanned
    once from left to right; comments, CDATA sections, processing
    instructions and the bodies of ``OPAQUE_ELEMENTS`` are stepped over, so
    an opening tag quoted inside any of them is ignored. Opening tags keep
    their attributes; self-closing tags are left alone.
    """
    target = name.lower()
    names = sorted({target, *OPAQUE_ELEMENTS})
    opening = re.compile(
        rf"(?P<opaque>{_OPAQUE_START})"
        rf"|<(?P<name>{'|'.join(map(re.escape, names))})(?=[\s/>])"
        r"""[^<>"']*(?:(?:"[^"<]*"|'[^'<]*')[^<>"']*)*>""",
        re.IGNORECASE,
    )
    closers = {n: re.compile(rf"</{re.escape(n)}\s*>", re.IGNORECASE) for n in names}

    pieces: list[str] = []
    pos = 0
    scan = 0
    while True:
        match = opening.search(document, scan)
        if match is None:
            break

        opaque = match.group("opaque")
        if opaque is not None:
            terminator = _OPAQUE_END[opaque.upper()]
            end = document.find(terminator, match.end())
            if end == -1:
                break
            scan = end + len(terminator)
            continue

        if match.group(0).endswith("/>"):
            scan = match.end()
            continue

        element = match.group("name").lower()
        close_match = closers[element].search(document, match.end())
        if close_match is None:
            # No closing tag anywhere after this point.
            break
        if element == target:
            pieces.append(document[pos : match.end()])
            pieces.append(close_match.group(0))
            pos = close_match.end()
        scan = close_match.end()

    if not pieces:
        return document
    pieces.append(document[pos:])
    return "".join(pieces)
