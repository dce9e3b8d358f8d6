"""docx2quill - convert Word (.docx) packages to rich-text editor HTML."""

from __future__ import annotations

__version__ = "0.1.0"

from docx2quill.config import ConverterConfig
from docx2quill.converter import BatchResult, Converter, ImportedDocument, ImportFailure
from docx2quill.errors import (
    ConversionError,
    CorruptArchive,
    ErrorKind,
    MalformedXml,
    MissingDocumentPart,
)

__all__ = [
    "__version__",
    "BatchResult",
    "ConversionError",
    "Converter",
    "ConverterConfig",
    "CorruptArchive",
    "ErrorKind",
    "ImportFailure",
    "ImportedDocument",
    "MalformedXml",
    "MissingDocumentPart",
]
