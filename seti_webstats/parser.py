"""XML parsing for stats documents.

Turns the server's XML into plain nested dicts:

- the document element is dropped, its children become top-level keys
- leaf elements become their text, kept exactly as sent
- attributes become keys; text next to child elements goes under ``content``
- repeated sibling elements are collected into a list
- an ``<a>`` element, or an element wrapping nothing but one ``<a>``,
  becomes a :class:`~seti_webstats.types.Link`
"""

import logging
import re
from xml.etree import ElementTree as ET

from .exceptions import ResponseParseError
from .types import Link, StatsNode, StatsTree

LINK_TAG = "a"
CONTENT_KEY = "content"
DEFAULT_ENCODING = "utf-8"

_DECLARED_ENCODING = re.compile(
    rb"""^\s*<\?xml\s[^>]*?encoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']"""
)

logger = logging.getLogger(__name__)


def decode_document(content: bytes, charset: str | None = None) -> str:
    """Decode a response body the way an XML parser would read it.

    The encoding named in the XML declaration is used first, then the
    HTTP charset, then UTF-8. Undecodable bytes become U+FFFD.
    """
    match = _DECLARED_ENCODING.match(content)
    encoding = match.group(1).decode("ascii") if match else charset
    try:
        return content.decode(encoding or DEFAULT_ENCODING, errors="replace")
    except LookupError:
        logger.debug("Unknown encoding %r, falling back to %s", encoding, DEFAULT_ENCODING)
        return content.decode(DEFAULT_ENCODING, errors="replace")


def parse_stats(xml_text: str) -> StatsTree:
    """Parse a stats document into a tree.

    Args:
        xml_text: Raw response body.

    Returns:
        Mapping of the root element's children. Empty if the root
        carries no child elements.

    Raises:
        ResponseParseError: If the body is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise ResponseParseError(f"Malformed XML: {exc}", body=xml_text) from exc

    tree = _convert(root)
    if not isinstance(tree, dict):
        logger.debug("Root <%s> has no child elements", root.tag)
        return {}
    logger.debug("Parsed <%s> with sections: %s", root.tag, ", ".join(tree))
    return tree


def _convert(element: ET.Element) -> StatsNode:
    if element.tag == LINK_TAG:
        return _to_link(element)

    children = list(element)

    if (
        len(children) == 1
        and children[0].tag == LINK_TAG
        and not element.attrib
        and not _mixed_text(element)
    ):
        return _to_link(children[0])

    if not children and not element.attrib:
        return element.text or ""

    node: StatsTree = dict(element.attrib)
    for child in children:
        value = _convert(child)
        if child.tag not in node:
            node[child.tag] = value
        elif isinstance(node[child.tag], list):
            node[child.tag].append(value)
        else:
            node[child.tag] = [node[child.tag], value]

    text = _mixed_text(element)
    if text:
        node[CONTENT_KEY] = text
    return node


def _to_link(element: ET.Element) -> Link:
    return Link(text="".join(element.itertext()), href=element.get("href"))


def _mixed_text(element: ET.Element) -> str:
    """Non-blank text found between an element's children."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip()
