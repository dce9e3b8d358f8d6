"""Paragraph- and run-level formatting read from ``w:pPr`` / ``w:rPr``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from docx2quill.xmltree import XmlNode

# OOXML w:jc value -> normalized alignment. Anything else is left.
ALIGNMENT_VALUES = {
    "left": "left",
    "center": "center",
    "right": "right",
    "both": "justify",
    "justify": "justify",
}


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParagraphProperties:
    """Block formatting of one ``w:p``.

    ``alignment`` is always one of ``left``, ``center``, ``right`` or
    ``justify``; the OOXML spelling ``both`` folds into justify and any
    other ``w:jc`` value falls back to left.
    """

    alignment: str = "left"
    first_line_indent: int = 0
    is_heading: bool = False

    @property
    def indented(self) -> bool:
        return self.first_line_indent > 0


@dataclass(frozen=True)
class RunProperties:
    """Character emphasis of one ``w:r``."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False


# (field, element, value that switches the flag off)
EMPHASIS_ELEMENTS: tuple[tuple[str, str, str], ...] = (
    ("bold", "b", "0"),
    ("italic", "i", "0"),
    ("underline", "u", "none"),
    ("strike", "strike", "0"),
)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def _parse_int(value: Optional[str]) -> int:
    if not value:
        return 0
    try:
        return max(int(value), 0)
    except ValueError:
        return 0


def paragraph_properties(paragraph: XmlNode) -> ParagraphProperties:
    """Derive :class:`ParagraphProperties` for a ``w:p`` node."""
    ppr = paragraph.child("pPr")
    if ppr is None:
        return ParagraphProperties()

    alignment = "left"
    jc = ppr.child("jc")
    if jc is not None:
        alignment = ALIGNMENT_VALUES.get(jc.attr("val") or "", "left")

    indent = 0
    ind = ppr.child("ind")
    if ind is not None:
        indent = _parse_int(ind.attr("firstLine"))

    is_heading = False
    style = ppr.child("pStyle")
    if style is not None:
        is_heading = "heading" in (style.attr("val") or "").lower()

    return ParagraphProperties(
        alignment=alignment,
        first_line_indent=indent,
        is_heading=is_heading,
    )


def run_properties(run: XmlNode) -> RunProperties:
    """Derive :class:`RunProperties` for a ``w:r`` node.

    A flag is on when its element is present and its ``w:val`` is not the
    off value.  An element without ``w:val`` counts as on.
    """
    rpr = run.child("rPr")
    if rpr is None:
        return RunProperties()

    flags: dict[str, bool] = {}
    for field_name, element, off in EMPHASIS_ELEMENTS:
        node = rpr.child(element)
        flags[field_name] = node is not None and node.attr("val") != off
    return RunProperties(**flags)
