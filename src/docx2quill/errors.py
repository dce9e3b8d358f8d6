"""Exceptions raised while converting a single ``.docx`` package."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    CORRUPT_ARCHIVE = "CorruptArchive"
    MISSING_DOCUMENT_PART = "MissingDocumentPart"
    MALFORMED_XML = "MalformedXml"
    UNEXPECTED = "Unexpected"


class ConversionError(Exception):
    """Base class for failures that are terminal for one package."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, *, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name


class CorruptArchive(ConversionError):
    """The bytes cannot be opened or indexed as a zip container."""

    kind = ErrorKind.CORRUPT_ARCHIVE


class MissingDocumentPart(ConversionError):
    """The container opened but has no main document part."""

    kind = ErrorKind.MISSING_DOCUMENT_PART


class MalformedXml(ConversionError):
    """The main document part is not well-formed XML."""

    kind = ErrorKind.MALFORMED_XML
