"""Parse tidy's cleaned output into an ElementTree."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple
from xml.etree import ElementTree

from .buffers import Span, TextBuffer, transient_buffer
from .cleanup import clean_region
from .config import Settings, get_settings
from .diagnostics import DiagnosticsLog
from .errors import TidyDomError

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
ATTRIBUTE_PREFIXES = {
    XML_NAMESPACE: "xml",
    XLINK_NAMESPACE: "xlink",
}


class ParseError(TidyDomError):
    """Cleaned text is not well-formed XML."""

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.position = position


def _split_name(name: str) -> Tuple[Optional[str], str]:
    if name.startswith("{"):
        uri, _, local = name[1:].partition("}")
        return uri, local
    return None, name


def _walk(
    root: ElementTree.Element,
) -> Iterator[Tuple[ElementTree.Element, Optional[str]]]:
    """Yield each element with the namespace URI of its parent."""
    stack: List[Tuple[ElementTree.Element, Optional[str]]] = [(root, None)]
    while stack:
        element, parent_uri = stack.pop()
        yield element, parent_uri
        uri = _split_name(element.tag)[0] if isinstance(element.tag, str) else parent_uri
        stack.extend((child, uri) for child in reversed(element))


def localize_names(root: ElementTree.Element) -> ElementTree.Element:
    """Replace ``{uri}`` prefixes with plain names and declarations, in place.

    Every element whose namespace differs from its parent's gets an
    ``xmlns`` attribute. Attributes in the xml and xlink namespaces keep
    their prefix; other namespaced attributes are left untouched.
    """
    for element, parent_uri in list(_walk(root)):
        if not isinstance(element.tag, str):
            continue
        uri, element.tag = _split_name(element.tag)
        if uri != parent_uri and "xmlns" not in element.attrib:
            element.set("xmlns", uri or "")
        for name in [key for key in element.attrib if key.startswith("{")]:
            attr_uri, local = _split_name(name)
            prefix = ATTRIBUTE_PREFIXES.get(attr_uri)
            if prefix is None:
                continue
            element.attrib[f"{prefix}:{local}"] = element.attrib.pop(name)
            if prefix != "xml":
                element.attrib.setdefault(f"xmlns:{prefix}", attr_uri)
    return root


def parse_xml(text: str, strip_namespaces: bool = True) -> ElementTree.Element:
    """Parse well-formed XML text and return its root element."""
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as exc:
        raise ParseError(f"Cleaned output is not well-formed XML: {exc}", exc.position) from exc
    return localize_names(root) if strip_namespaces else root


def parse_region(
    buffer: TextBuffer,
    span: Span | None = None,
    settings: Settings | None = None,
    diagnostics: DiagnosticsLog | None = None,
) -> ElementTree.Element:
    """Tidy ``span`` of ``buffer`` in place, then parse the cleaned text."""
    settings = settings or get_settings()
    cleaned = clean_region(buffer, span, settings=settings, diagnostics=diagnostics)
    return parse_xml(buffer.substring(cleaned), strip_namespaces=settings.strip_namespaces)


def parse_buffer(
    buffer: TextBuffer,
    settings: Settings | None = None,
    diagnostics: DiagnosticsLog | None = None,
) -> ElementTree.Element:
    """Tidy and parse the whole of ``buffer``."""
    return parse_region(buffer, buffer.whole(), settings=settings, diagnostics=diagnostics)


def parse_string(
    text: str,
    settings: Settings | None = None,
    diagnostics: DiagnosticsLog | None = None,
) -> ElementTree.Element:
    """Tidy and parse a standalone string through a scratch buffer."""
    with transient_buffer(text) as buffer:
        return parse_buffer(buffer, settings=settings, diagnostics=diagnostics)
