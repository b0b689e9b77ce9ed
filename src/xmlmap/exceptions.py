from __future__ import annotations


class ConversionError(ValueError):
    """Base XML conversion error."""


class EmptyDocumentError(ConversionError):
    """Raised when the document is empty or whitespace only."""


class NoRootElementError(ConversionError):
    """Raised when the token stream ends before any element starts."""


class MalformedDocumentError(ConversionError):
    """Raised when the tokenizer rejects the document before the root closes."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"malformed XML: {reason}")


__all__ = [
    "ConversionError",
    "EmptyDocumentError",
    "NoRootElementError",
    "MalformedDocumentError",
]
