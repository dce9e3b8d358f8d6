"""Conversion settings and named output presets.

A :class:`ConverterConfig` carries every constant the conversion needs
(namespace URI, main document part path, markup tokens) so the parser and
renderer hold no module-level state of their own.  Presets map a short name
to a ready-made configuration, the same way style presets are chosen on the
command line and in the web service.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable

W_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
DOCUMENT_PART = "word/document.xml"

NBSP = "&nbsp;"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConverterConfig:
    """Settings for one conversion call."""

    namespace: str = W_NAMESPACE
    document_part: str = DOCUMENT_PART
    indent_token: str = NBSP * 4
    break_token: str = "<br>"
    heading_tag: str = "h1"
    paragraph_tag: str = "p"
    align_attribute: str = "class"
    # Normalized alignment -> attribute value. Missing keys render unaligned.
    align_values: dict[str, str] = field(default_factory=lambda: {
        "center": "ql-align-center",
        "right": "ql-align-right",
        "justify": "ql-align-justify",
    })
    # Outermost first.
    emphasis_tags: tuple[tuple[str, str], ...] = (
        ("bold", "strong"),
        ("italic", "em"),
        ("underline", "u"),
        ("strike", "s"),
    )
    preset: str = "quill"

    def derive(self, **overrides) -> ConverterConfig:
        """Return a copy with selected fields overridden."""
        return replace(self, **overrides)

    @classmethod
    def from_preset(cls, preset: str = "quill", **overrides) -> ConverterConfig:
        """Build the configuration for *preset*, then apply *overrides*."""
        if preset not in _PRESET_BUILDERS:
            raise ValueError(
                f"Unknown preset {preset!r}. Choose from: {', '.join(_PRESET_BUILDERS)}"
            )
        config = _PRESET_BUILDERS[preset]()
        return config.derive(**overrides) if overrides else config


# ---------------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------------

def _build_quill_config() -> ConverterConfig:
    """Classes understood by the Quill editor stylesheet."""
    return ConverterConfig(preset="quill")


def _build_html_config() -> ConverterConfig:
    """Inline ``text-align`` styles for consumers without that stylesheet."""
    return ConverterConfig(
        align_attribute="style",
        align_values={
            "center": "text-align: center",
            "right": "text-align: right",
            "justify": "text-align: justify",
        },
        preset="html",
    )


_PRESET_BUILDERS: dict[str, Callable[[], ConverterConfig]] = {
    "quill": _build_quill_config,
    "html": _build_html_config,
}

PRESETS = list(_PRESET_BUILDERS.keys())
