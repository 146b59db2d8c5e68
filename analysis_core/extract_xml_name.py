"""Best-effort extraction of single values from XML documents.

Both helpers return ``None`` instead of raising when the document cannot be
parsed, so a broken descriptor never aborts a scan.
"""

import logging
from typing import BinaryIO
from xml.etree.ElementTree import Element, ParseError

from defusedxml import ElementTree
from defusedxml.common import DefusedXmlException

logger = logging.getLogger(__name__)


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _parse_root(stream: BinaryIO) -> Element | None:
    try:
        return ElementTree.parse(stream).getroot()
    except (ParseError, DefusedXmlException) as exc:
        logger.debug("Ignoring unparsable XML document: %s", exc)
        return None


def extract_child_text(stream: BinaryIO, root_tag: str, child_tag: str) -> str | None:
    """Return the stripped text of the first root_tag/child_tag element."""
    root = _parse_root(stream)
    if root is None or local_name(root.tag) != root_tag:
        return None
    for child in root:
        if isinstance(child.tag, str) and local_name(child.tag) == child_tag:
            return (child.text or "").strip()
    return None


def extract_root_attribute(stream: BinaryIO, root_tag: str, attribute: str) -> str | None:
    """Return an attribute of the document element if it is named root_tag."""
    root = _parse_root(stream)
    if root is None or local_name(root.tag) != root_tag:
        return None
    return root.get(attribute)
