"""Total accessors over converted trees.

Every function degrades to an empty default (``""``, ``[]``, ``0`` or
``False``) on missing keys or unexpected shapes, so templates built on them
never abort.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from .utils import PATH_SEPARATOR

_MISSING = object()


def _attribute_key(path: str, attr: str) -> str:
    return f"{path}{PATH_SEPARATOR}{attr}"


def _lookup(tree: Any, key: str) -> Any:
    if not isinstance(tree, Mapping) or not isinstance(key, str):
        return _MISSING
    return tree.get(key, _MISSING)


def _as_list(found: Any) -> List[Any]:
    if found is _MISSING:
        return []
    if isinstance(found, list):
        return list(found)
    return [found]


def attribute(tree: Any, path: str, attr: str) -> str:
    """Return the first value of ``attr`` on the element at ``path``."""

    found = _lookup(tree, _attribute_key(path, attr))
    if isinstance(found, list):
        found = found[0] if found else _MISSING
    return found if isinstance(found, str) else ""


def attribute_array(tree: Any, path: str, attr: str) -> List[str]:
    """Return every value of ``attr`` across elements sharing ``path``."""

    return [item for item in _as_list(_lookup(tree, _attribute_key(path, attr))) if isinstance(item, str)]


def value(tree: Any, path: str) -> Any:
    """Return the value at ``path``; the first one when it repeats."""

    found = _lookup(tree, path)
    if found is _MISSING:
        return ""
    if isinstance(found, list):
        return found[0] if found else ""
    return found


def value_array(tree: Any, path: str) -> List[Any]:
    return _as_list(_lookup(tree, path))


def text(tree: Any, path: str) -> str:
    found = value(tree, path)
    return found if isinstance(found, str) else ""


def text_array(tree: Any, path: str) -> List[str]:
    return [item for item in value_array(tree, path) if isinstance(item, str)]


def has_attribute(tree: Any, path: str, attr: str) -> bool:
    return _lookup(tree, _attribute_key(path, attr)) is not _MISSING


def has_element(tree: Any, path: str) -> bool:
    return _lookup(tree, path) is not _MISSING


def is_array(tree: Any, path: str) -> bool:
    return isinstance(_lookup(tree, path), list)


def array_length(tree: Any, path: str) -> int:
    found = _lookup(tree, path)
    if found is _MISSING:
        return 0
    if isinstance(found, list):
        return len(found)
    return 1


def list_attributes(tree: Any, path: str) -> List[str]:
    """Return names directly under ``path`` (``path/name`` with no deeper separator)."""

    if not isinstance(tree, Mapping):
        return []
    prefix = f"{path}{PATH_SEPARATOR}"
    names = []
    for key in tree:
        if isinstance(key, str) and key.startswith(prefix):
            name = key[len(prefix):]
            if PATH_SEPARATOR not in name:
                names.append(name)
    return names


def list_elements(tree: Any) -> List[str]:
    """Return top-level keys that are not paths."""

    if not isinstance(tree, Mapping):
        return []
    return [key for key in tree if isinstance(key, str) and PATH_SEPARATOR not in key]


HELPERS: Dict[str, Callable[..., Any]] = {
    "xmlAttr": attribute,
    "xmlAttrArray": attribute_array,
    "xmlValue": value,
    "xmlValueArray": value_array,
    "xmlText": text,
    "xmlTextArray": text_array,
    "hasXMLAttr": has_attribute,
    "hasXMLElement": has_element,
    "isXMLArray": is_array,
    "xmlArrayLen": array_length,
    "xmlAttrs": list_attributes,
    "xmlElements": list_elements,
}


__all__ = [
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
]
