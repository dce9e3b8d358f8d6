"""Word package parser that produces an :class:`OutputDocument`.

Opens the zip container, parses the main document part and walks every
``w:p`` in body order.  Each paragraph yields exactly one :class:`Block`;
each ``w:r`` inside it yields one :class:`Fragment`.  Content the model
does not cover (tables as such, drawings, fields, footnotes) is dropped
without error, though text inside table cells survives as paragraphs.
"""

from __future__ import annotations

import logging
from typing import Optional

from docx2quill.archive import read_part
from docx2quill.config import ConverterConfig
from docx2quill.model import (
    BREAK_PLACEHOLDER,
    Block,
    BlockType,
    Fragment,
    OutputDocument,
    Piece,
    PieceType,
)
from docx2quill.properties import paragraph_properties, run_properties
from docx2quill.xmltree import XmlNode, parse_xml

logger = logging.getLogger(__name__)

# Left-aligned paragraphs carry no alignment marker.
_ALIGN_MAP = {
    "center": "center",
    "right": "right",
    "justify": "justify",
}


class DocxParser:
    """Parse ``.docx`` bytes into an :class:`OutputDocument`."""

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self.config = config or ConverterConfig()

    # -- public API ---------------------------------------------------------

    def parse(self, data: bytes) -> OutputDocument:
        """Return the document for the package *data*.

        Args:
            data: Raw bytes of a ``.docx`` package.

        Returns:
            One :class:`Block` per paragraph, in body order.

        Raises:
            CorruptArchive: *data* is not a readable zip container.
            MissingDocumentPart: the configured document part is absent.
            MalformedXml: the document part is not well-formed XML.
        """
        blob = read_part(data, self.config.document_part)
        root = parse_xml(blob, self.config.namespace)
        return self.parse_tree(root)

    def parse_tree(self, root: XmlNode) -> OutputDocument:
        """Return the document for an already parsed ``w:document`` root."""
        body = root.child("body") or root
        doc = OutputDocument()
        for paragraph in body.descendants("p"):
            doc.blocks.append(self.assemble_paragraph(paragraph))
        logger.debug("Parsed %d paragraphs", len(doc))
        return doc

    # -- runs ---------------------------------------------------------------

    def collect_run(self, run: XmlNode) -> Fragment:
        """Collect the ordered text, tab and break content of a ``w:r``."""
        pieces: list[Piece] = []
        for child in run.children():
            name = child.local_name
            if name == "t":
                pieces.append(Piece(PieceType.TEXT, child.text))
            elif name == "tab":
                pieces.append(Piece(PieceType.INDENT))
            elif name == "br":
                pieces.append(Piece(PieceType.BREAK))
        return Fragment(pieces=tuple(pieces), properties=run_properties(run))

    # -- paragraphs ---------------------------------------------------------

    def assemble_paragraph(self, paragraph: XmlNode) -> Block:
        """Turn one ``w:p`` into a heading or paragraph block."""
        props = paragraph_properties(paragraph)
        fragments = tuple(
            fragment
            for fragment in (
                self.collect_run(run)
                for run in paragraph.descendants("r", stop_at="p")
            )
            if not fragment.is_empty
        )

        if props.is_heading:
            return Block(BlockType.HEADING, content=fragments)

        if not fragments:
            return Block(
                BlockType.PARAGRAPH,
                content=(BREAK_PLACEHOLDER,),
                alignment=_ALIGN_MAP.get(props.alignment),
            )

        blank = all(fragment.is_blank for fragment in fragments)
        return Block(
            BlockType.PARAGRAPH,
            content=fragments,
            alignment=_ALIGN_MAP.get(props.alignment),
            indented=props.indented and not blank,
        )
