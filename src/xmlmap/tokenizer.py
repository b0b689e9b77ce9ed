from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence
from xml.parsers import expat

from .exceptions import MalformedDocumentError
from .structures import CharData, EndElement, StartElement, Token
from .utils import local_name

_NO_ELEMENTS = expat.errors.codes[expat.errors.XML_ERROR_NO_ELEMENTS]


class _TokenCollector:
    """Expat handlers that record the token stream in document order."""

    def __init__(self) -> None:
        self.tokens: List[Token] = []
        self.in_text = False
        self.has_elements = False

    def start_element(self, full_name: str, attrs: Sequence[str]) -> None:
        attributes = tuple(
            (local_name(name), value) for name, value in zip(attrs[0::2], attrs[1::2])
        )
        self.tokens.append(StartElement(local_name(full_name), attributes))
        self.has_elements = True
        self.in_text = False

    def end_element(self, full_name: str) -> None:
        self.tokens.append(EndElement(local_name(full_name)))
        self.in_text = False

    def characters(self, data: str) -> None:
        # Expat may split one text run across several callbacks.
        if self.in_text:
            data = self.tokens.pop().text + data
        self.tokens.append(CharData(data))
        self.in_text = True

    def end_text_run(self, *_args: Any) -> None:
        """Comments, processing instructions and CDATA bounds close a text run."""

        self.in_text = False

    def create_parser(self) -> expat.XMLParserType:
        parser = expat.ParserCreate("utf-8", None)
        parser.ordered_attributes = True
        parser.buffer_text = True
        parser.StartElementHandler = self.start_element
        parser.EndElementHandler = self.end_element
        parser.CharacterDataHandler = self.characters
        parser.CommentHandler = self.end_text_run
        parser.ProcessingInstructionHandler = self.end_text_run
        parser.StartCdataSectionHandler = self.end_text_run
        parser.EndCdataSectionHandler = self.end_text_run
        return parser


def iter_tokens(xml_text: str) -> Iterator[Token]:
    """Yield the tokens of a complete XML document.

    Tokens preceding a tokenizer error are yielded first; the error is raised
    as MalformedDocumentError only when iteration reaches it, so a consumer
    that stops after the root element closes never sees trailing errors.
    A document without any element ends the stream; one that ends while an
    element is still open raises.
    """

    collector = _TokenCollector()
    parser = collector.create_parser()
    error: Optional[expat.ExpatError] = None
    try:
        parser.Parse(xml_text.encode("utf-8"), True)
    except expat.ExpatError as exc:
        error = exc

    yield from collector.tokens

    if error is None:
        return
    if error.code != _NO_ELEMENTS or collector.has_elements:
        raise MalformedDocumentError(str(error)) from error


__all__ = ["iter_tokens"]
