"""High-level ``.docx``-to-HTML conversion orchestrator.

Ties together the parser and renderer into a single public API for
converting one package, a file on disk, or a batch of uploads where one bad
file must not spoil the rest.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from pathlib import Path, PurePath
from typing import Any, Iterable, Optional, Union

from docx2quill.config import PRESETS, ConverterConfig
from docx2quill.errors import ConversionError, ErrorKind
from docx2quill.model import OutputDocument
from docx2quill.parser import DocxParser
from docx2quill.renderer import MarkupRenderer

logger = logging.getLogger(__name__)

_DOCX_SUFFIX_RE = re.compile(r"\.docx$", re.IGNORECASE)


def derive_title(name: str) -> str:
    """Chapter title for an uploaded file: its base name minus ``.docx``."""
    base = PurePath(name.replace("\\", "/")).name
    return _DOCX_SUFFIX_RE.sub("", base)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class ImportedDocument:
    name: str
    title: str
    html: str


@dataclass
class ImportFailure:
    name: str
    kind: ErrorKind
    message: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "kind": self.kind.value, "message": self.message}


@dataclass
class BatchResult:
    """Outcome of :meth:`Converter.convert_batch`, both lists in input order."""

    documents: list[ImportedDocument] = field(default_factory=list)
    failures: list[ImportFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        return {
            "documents": [asdict(d) for d in self.documents],
            "failures": [f.to_dict() for f in self.failures],
        }


# ---------------------------------------------------------------------------
# Converter
# ---------------------------------------------------------------------------

class Converter:
    """Convert Word packages to rich-text editor HTML.

    Usage::

        converter = Converter(style_preset="quill")
        html = converter.convert_bytes(Path("chapter.docx").read_bytes())

        result = converter.convert_batch([("a.docx", data_a), ("b.docx", data_b)])
        for failure in result.failures:
            print(failure.name, failure.kind.value)
    """

    STYLE_PRESETS = PRESETS

    def __init__(
        self,
        style_preset: str = "quill",
        *,
        config: Optional[ConverterConfig] = None,
    ) -> None:
        self.config = config or ConverterConfig.from_preset(style_preset)
        self.parser = DocxParser(self.config)
        self.renderer = MarkupRenderer(self.config)

    def parse_bytes(self, data: bytes) -> OutputDocument:
        return self.parser.parse(data)

    def convert_bytes(self, data: bytes) -> str:
        """Convert ``.docx`` bytes to an HTML string.

        Args:
            data: Raw bytes of a ``.docx`` package.

        Returns:
            The rendered blocks concatenated into one markup string.

        Raises:
            ConversionError: the package is unusable (see :mod:`docx2quill.errors`).
        """
        return self.renderer.render(self.parser.parse(data))

    def convert_file(self, path: Union[str, Path]) -> ImportedDocument:
        """Read and convert one ``.docx`` file from disk.

        Args:
            path: Path to the input ``.docx`` file.

        Returns:
            The HTML together with the file name and the derived title.
        """
        path = Path(path)
        html = self.convert_bytes(path.read_bytes())
        return ImportedDocument(name=path.name, title=derive_title(path.name), html=html)

    def convert_named(self, name: str, data: bytes) -> ImportedDocument:
        """Convert *data*, attaching *name* to any :class:`ConversionError`.

        Args:
            name: Display name of the package, usually its file name.
            data: Raw bytes of the package.
        """
        try:
            html = self.convert_bytes(data)
        except ConversionError as exc:
            exc.name = name
            raise
        return ImportedDocument(name=name, title=derive_title(name), html=html)

    def convert_batch(
        self,
        packages: Iterable[tuple[str, bytes]],
        *,
        max_workers: int = 1,
    ) -> BatchResult:
        """Convert each ``(name, bytes)`` package independently.

        A failing package is recorded in :attr:`BatchResult.failures` and
        never stops the others.  With ``max_workers > 1`` packages are
        converted on a thread pool; results keep the input order either way.

        Args:
            packages: ``(name, bytes)`` pairs, one per uploaded package.
            max_workers: Number of packages converted concurrently.

        Returns:
            A :class:`BatchResult` with the converted documents and the
            recorded failures.
        """
        items = list(packages)
        if max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                outcomes = list(executor.map(lambda item: self._convert_one(*item), items))
        else:
            outcomes = [self._convert_one(name, data) for name, data in items]

        result = BatchResult()
        for outcome in outcomes:
            if isinstance(outcome, ImportFailure):
                result.failures.append(outcome)
            else:
                result.documents.append(outcome)

        logger.info(
            "Batch complete: %d converted, %d failed",
            len(result.documents), len(result.failures),
        )
        return result

    # -- internals ----------------------------------------------------------

    def _convert_one(self, name: str, data: bytes) -> Union[ImportedDocument, ImportFailure]:
        try:
            return self.convert_named(name, data)
        except ConversionError as exc:
            logger.warning("Failed to import %s: %s (%s)", name, exc.kind.value, exc.message)
            return ImportFailure(name=name, kind=exc.kind, message=exc.message)
        except Exception as exc:
            logger.exception("Unexpected error importing %s", name)
            return ImportFailure(name=name, kind=ErrorKind.UNEXPECTED, message=str(exc))
