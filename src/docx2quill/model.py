"""Intermediate representation produced by :mod:`docx2quill.parser`.

A run is collected into a :class:`Fragment` (ordered pieces plus the run's
emphasis flags); a paragraph becomes exactly one :class:`Block`; the blocks,
in body order, form the :class:`OutputDocument`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from docx2quill.properties import RunProperties


class PieceType(Enum):
    TEXT = "text"
    INDENT = "indent"
    BREAK = "break"


@dataclass(frozen=True)
class Piece:
    type: PieceType
    text: str = ""


@dataclass(frozen=True)
class Fragment:
    """Content of one run, not yet serialized."""

    pieces: tuple[Piece, ...] = ()
    properties: RunProperties = RunProperties()

    @property
    def is_empty(self) -> bool:
        return all(p.type is PieceType.TEXT and not p.text for p in self.pieces)

    @property
    def is_blank(self) -> bool:
        """True when the run serializes to whitespace only.

        Emphasis wraps any non-empty content in tags, so a run with a flag
        set is blank only when it is empty.
        """
        if self.properties != RunProperties():
            return self.is_empty
        return all(p.type is PieceType.TEXT and not p.text.strip() for p in self.pieces)


class BlockType(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Block:
    """One output block.

    ``content`` holds the paragraph's runs in order.  ``alignment`` is one
    of ``center``, ``right``, ``justify`` or ``None`` and ``indented`` asks
    for the first-line indent token; both are always unset on headings.
    """

    type: BlockType
    content: tuple[Fragment, ...] = ()
    alignment: str | None = None
    indented: bool = False


@dataclass
class OutputDocument:
    blocks: list[Block] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)


BREAK_PLACEHOLDER = Fragment(pieces=(Piece(PieceType.BREAK),))
