from __future__ import annotations

import logging
from typing import Dict, Iterator, List

from .exceptions import EmptyDocumentError, MalformedDocumentError, NoRootElementError
from .structures import CharData, EndElement, StartElement, Token, Tree, Value
from .tokenizer import iter_tokens
from .utils import join_path, promote

TEXT_KEY = "_text"

logger = logging.getLogger(__name__)


def convert(xml_text: str) -> Tree:
    """Convert an XML document into a combined flattened-path and nested map.

    The result maps the root name to the root's value, and every element and
    attribute path (``root/child``, ``root/child/attr``) to its value. Values
    are text for leaf elements, ``""`` for empty ones and the element's own
    map for elements with children. Keys written more than once hold lists in
    document order.

    Raises:
        EmptyDocumentError: ``xml_text`` is empty or whitespace only.
        NoRootElementError: the document contains no element.
        MalformedDocumentError: the document is not well-formed up to the
            end of the root element.
    """

    xml_text = xml_text.strip()
    if not xml_text:
        logger.debug("Empty XML content provided")
        raise EmptyDocumentError("empty XML content")

    tokens = iter_tokens(xml_text)
    try:
        for token in tokens:
            if isinstance(token, StartElement):
                result = _convert_root(tokens, token)
                logger.debug("XML parsing successful: root=%s keys=%d", token.name, len(result))
                return result
    except MalformedDocumentError as exc:
        logger.debug("XML parsing failed: %s (xml_length=%d)", exc.reason, len(xml_text))
        raise

    logger.debug("No root element found (xml_length=%d)", len(xml_text))
    raise NoRootElementError("no root element found")


def _convert_root(tokens: Iterator[Token], start: StartElement) -> Tree:
    flat: Tree = {}
    # Root attributes land at "root/attr" through the regular attribute pass.
    flat[start.name] = _build_element(tokens, start, "", flat)
    return flat


def _build_element(tokens: Iterator[Token], start: StartElement, parent_path: str, flat: Tree) -> Value:
    """Consume one element from ``tokens`` and return its value.

    Registers the element and its attributes in ``flat``. An element's own
    attributes are written to the parent's own map by the caller, never to
    the map built here.
    """

    name = start.name
    path = join_path(parent_path, name)

    for attr_name, attr_value in start.attributes:
        promote(flat, join_path(path, attr_name), attr_value)

    own: Dict[str, Value] = {}
    chunks: List[str] = []
    has_children = False

    for token in tokens:
        if isinstance(token, StartElement):
            has_children = True
            child_value = _build_element(tokens, token, path, flat)
            for attr_name, attr_value in token.attributes:
                promote(own, join_path(token.name, attr_name), attr_value)
            promote(own, token.name, child_value)
        elif isinstance(token, CharData):
            chunk = token.text.strip()
            if chunk:
                chunks.append(chunk)
        elif isinstance(token, EndElement) and token.name == name:
            break
    else:
        raise MalformedDocumentError(f"unexpected end of document inside <{name}>")

    text = " ".join(chunks)

    if not has_children:
        logger.debug("Storing leaf element: path=%s text=%r", path, text)
        promote(flat, path, text)
        return text

    if text:
        own[TEXT_KEY] = text
    promote(flat, path, own)
    return own


__all__ = ["TEXT_KEY", "convert"]
