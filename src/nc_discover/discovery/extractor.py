"""
Extraction of the <state> subtree from <get> replies.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from lxml import etree

from nc_discover.constants import DOCUMENT_INDENT, STATE_PATH
from nc_discover.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)

# Replies can exceed libxml2's default text node limits
_PARSER = etree.XMLParser(huge_tree=True)


def local_name_xpath(path: str) -> str:
    """
    Convert an absolute path into a namespace-agnostic XPath.

    NETCONF replies qualify every element, so '/rpc-reply/data' has to
    match on local names: /*[local-name()='rpc-reply']/*[local-name()='data']
    """
    steps = [step for step in path.split("/") if step]
    return "".join(f"/*[local-name()='{step}']" for step in steps)


STATE_XPATH = local_name_xpath(STATE_PATH)


def parse_document(raw_document: str | bytes) -> etree._Element:
    """
    Parse reply XML.

    Raises:
        ExtractionError: If the document is not well-formed XML
    """
    if isinstance(raw_document, str):
        # lxml rejects str input carrying an encoding declaration
        raw_document = raw_document.encode("utf-8")
    try:
        return etree.fromstring(raw_document, _PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ExtractionError(f"Malformed reply document: {e}") from e


def serialize(node: etree._Element, indent: str = DOCUMENT_INDENT) -> str:
    """Serialize a copy of node, indented, without declaration or tail."""
    node = copy.deepcopy(node)
    node.tail = None
    etree.indent(node, space=indent)
    return etree.tostring(node, encoding="unicode", xml_declaration=False)


def extract(raw_document: Any, xpath: str = STATE_XPATH) -> str | None:
    """
    Extract the operational state subtree from a <get> reply.

    Args:
        raw_document: Reply as XML text/bytes or an lxml element/tree
        xpath: Query selecting the subtree (default /rpc-reply/data/state)

    Returns:
        First matched node serialized with 4-space indentation,
        or None if the reply holds no matching subtree

    Raises:
        ExtractionError: If the document cannot be parsed or queried
    """
    if isinstance(raw_document, (str, bytes)):
        document: Any = parse_document(raw_document)
    elif isinstance(raw_document, (etree._Element, etree._ElementTree)):
        document = raw_document
    else:
        raise ExtractionError(
            f"Cannot query reply of type {type(raw_document).__name__}", xpath=xpath
        )

    try:
        matches = document.xpath(xpath)
    except etree.XPathError as e:
        raise ExtractionError(f"XPath query failed: {e}", xpath=xpath) from e

    if not matches:
        logger.debug("Reply carried no state subtree")
        return None

    return serialize(matches[0])
