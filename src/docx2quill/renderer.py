"""HTML renderer - serializes an :class:`OutputDocument` to editor markup.

Text is escaped here, once per text piece, so adjacent ``w:t`` nodes can
never be escaped twice.  Tokens (indent, break) and tags come from the
:class:`~docx2quill.config.ConverterConfig` and are emitted verbatim.
"""

from __future__ import annotations

from html import escape
from typing import Optional

from docx2quill.config import ConverterConfig
from docx2quill.model import Block, BlockType, Fragment, OutputDocument, PieceType


class MarkupRenderer:
    """Render blocks and fragments to an HTML string."""

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self.config = config or ConverterConfig()

    # ======================================================================
    # Public API
    # ======================================================================

    def render(self, doc: OutputDocument) -> str:
        """Return the markup for every block of *doc*, in order."""
        return "".join(self.render_block(block) for block in doc.blocks)

    def render_block(self, block: Block) -> str:
        content = self.render_inline(block.content)
        if block.type is BlockType.HEADING:
            tag = self.config.heading_tag
            return f"<{tag}>{content}</{tag}>"

        if block.indented:
            content = self.config.indent_token + content
        tag = self.config.paragraph_tag
        return f"<{tag}{self._align_attr(block.alignment)}>{content}</{tag}>"

    def render_inline(self, fragments: tuple[Fragment, ...]) -> str:
        return "".join(self.render_fragment(f) for f in fragments)

    def render_fragment(self, fragment: Fragment) -> str:
        """Serialize one run and wrap it in its emphasis tags."""
        parts: list[str] = []
        for piece in fragment.pieces:
            if piece.type is PieceType.TEXT:
                parts.append(escape(piece.text, quote=False))
            elif piece.type is PieceType.INDENT:
                parts.append(self.config.indent_token)
            elif piece.type is PieceType.BREAK:
                parts.append(self.config.break_token)
        content = "".join(parts)
        if not content:
            return ""

        # Innermost tag first so the table's first entry ends up outermost.
        for flag, tag in reversed(self.config.emphasis_tags):
            if getattr(fragment.properties, flag):
                content = f"<{tag}>{content}</{tag}>"
        return content

    # ======================================================================
    # Helpers
    # ======================================================================

    def _align_attr(self, alignment: Optional[str]) -> str:
        if alignment is None:
            return ""
        value = self.config.align_values.get(alignment)
        if not value:
            return ""
        return f' {self.config.align_attribute}="{escape(value)}"'
