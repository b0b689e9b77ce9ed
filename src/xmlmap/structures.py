from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

Value = Union[str, List["Value"], Dict[str, "Value"]]
Tree = Dict[str, Value]
Attribute = Tuple[str, str]


@dataclass(frozen=True)
class StartElement:
    """Element start tag with its attributes in document order."""

    name: str
    attributes: Tuple[Attribute, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError("name must be str")
        if not isinstance(self.attributes, tuple):
            raise TypeError("attributes must be tuple")


@dataclass(frozen=True)
class CharData:
    text: str


@dataclass(frozen=True)
class EndElement:
    name: str


Token = Union[StartElement, CharData, EndElement]


__all__ = ["Value", "Tree", "Attribute", "StartElement", "CharData", "EndElement", "Token"]
