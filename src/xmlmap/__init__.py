from __future__ import annotations

from .converter import TEXT_KEY, convert
from .exceptions import ConversionError, EmptyDocumentError, MalformedDocumentError, NoRootElementError
from .messages import MessageBody, decode_body, is_json_content_type, is_xml_content_type, read_message
from .query import (
    HELPERS,
    array_length,
    attribute,
    attribute_array,
    has_attribute,
    has_element,
    is_array,
    list_attributes,
    list_elements,
    text,
    text_array,
    value,
    value_array,
)
from .structures import CharData, EndElement, StartElement, Tree, Value
from .tokenizer import iter_tokens
from .utils import join_path, local_name, promote

__all__ = [
    "convert",
    "TEXT_KEY",
    "iter_tokens",
    "StartElement",
    "CharData",
    "EndElement",
    "Tree",
    "Value",
    "promote",
    "local_name",
    "join_path",
    "attribute",
    "attribute_array",
    "value",
    "value_array",
    "text",
    "text_array",
    "has_attribute",
    "has_element",
    "is_array",
    "array_length",
    "list_attributes",
    "list_elements",
    "HELPERS",
    "MessageBody",
    "decode_body",
    "is_xml_content_type",
    "is_json_content_type",
    "read_message",
    "ConversionError",
    "EmptyDocumentError",
    "NoRootElementError",
    "MalformedDocumentError",
]
