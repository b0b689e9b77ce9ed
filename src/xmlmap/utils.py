from __future__ import annotations

from typing import Any, Dict

PATH_SEPARATOR = "/"


def local_name(name: str) -> str:
    """Strip the namespace prefix from a qualified XML name."""

    return name.rpartition(":")[2]


def join_path(parent: str, name: str) -> str:
    """Join a flattened path and a local name; an empty parent yields the name."""

    if not parent:
        return name
    return f"{parent}{PATH_SEPARATOR}{name}"


def promote(target: Dict[str, Any], key: str, value: Any) -> None:
    """Write value under key, turning the entry into a list on repeated writes."""

    if key not in target:
        target[key] = value
        return
    current = target[key]
    if isinstance(current, list):
        current.append(value)
        return
    target[key] = [current, value]


__all__ = ["PATH_SEPARATOR", "local_name", "join_path", "promote"]
