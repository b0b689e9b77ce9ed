from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

import httpx
import requests

from .converter import convert
from .exceptions import ConversionError
from .structures import Tree

XML_CONTENT_TYPES = ("text/xml", "application/xml", "application/soap+xml")
JSON_CONTENT_TYPES = ("application/json",)

Message = Union[httpx.Request, httpx.Response, requests.Response, requests.PreparedRequest]

logger = logging.getLogger(__name__)


@dataclass
class MessageBody:
    """Raw body text of an HTTP message with its decoded JSON or XML form."""

    content_type: str
    text: str
    json: Optional[Any] = None
    xml: Optional[Tree] = None


def _media_type(content_type: Optional[str]) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def is_xml_content_type(content_type: Optional[str]) -> bool:
    return _media_type(content_type) in XML_CONTENT_TYPES


def is_json_content_type(content_type: Optional[str]) -> bool:
    return _media_type(content_type) in JSON_CONTENT_TYPES


def decode_body(text: str, content_type: Optional[str] = None) -> MessageBody:
    """Decode a body according to its content type.

    Payloads that fail to decode leave ``json``/``xml`` unset; callers fall
    back to the raw ``text``.
    """

    body = MessageBody(content_type=content_type or "", text=text)
    if not text:
        return body

    if is_json_content_type(content_type):
        try:
            body.json = json.loads(text)
        except ValueError as exc:
            logger.debug("JSON body decoding failed, keeping raw body: %s", exc)
    elif is_xml_content_type(content_type):
        try:
            body.xml = convert(text)
        except ConversionError as exc:
            logger.debug("XML body conversion failed, keeping raw body: %s", exc)
    return body


def _decode_bytes(raw: Any) -> str:
    # Streamed bodies (generators, file objects) have no readable text.
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        return raw
    return ""


def _message_parts(message: Message) -> Tuple[Optional[str], str]:
    if isinstance(message, httpx.Response):
        return message.headers.get("Content-Type"), message.text
    if isinstance(message, httpx.Request):
        return message.headers.get("Content-Type"), _decode_bytes(message.content)
    if isinstance(message, requests.Response):
        return message.headers.get("Content-Type"), message.text
    if isinstance(message, requests.PreparedRequest):
        return (message.headers or {}).get("Content-Type"), _decode_bytes(message.body)
    raise TypeError("message must be an httpx or requests request/response")


def read_message(message: Message) -> MessageBody:
    """Decode the body of an httpx or requests request/response."""

    content_type, text = _message_parts(message)
    return decode_body(text, content_type)


__all__ = [
    "XML_CONTENT_TYPES",
    "JSON_CONTENT_TYPES",
    "Message",
    "MessageBody",
    "is_xml_content_type",
    "is_json_content_type",
    "decode_body",
    "read_message",
]
