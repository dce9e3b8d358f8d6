"""Shared fixtures: in-memory .docx packages built with zipfile."""

from __future__ import annotations

import io
import zipfile

import pytest

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

_CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Override PartName="/word/document.xml" ContentType="application/'
    'vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)


def document_xml(body: str, prefix: str = "w") -> str:
    """Wrap *body* markup in a ``w:document``/``w:body`` root."""
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<{prefix}:document xmlns:{prefix}="{W_NS}"><{prefix}:body>'
        f"{body}"
        f"</{prefix}:body></{prefix}:document>"
    )


def make_package(parts: dict[str, str | bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, content in parts.items():
            zf.writestr(name, content)
    return buf.getvalue()


def make_docx(body: str, prefix: str = "w") -> bytes:
    """Build a minimal .docx whose body contains *body*."""
    return make_package({
        "[Content_Types].xml": _CONTENT_TYPES,
        "word/document.xml": document_xml(body, prefix),
    })


@pytest.fixture
def docx_factory():
    return make_docx


@pytest.fixture
def sample_docx() -> bytes:
    return make_docx(
        '<w:p><w:pPr><w:pStyle w:val="Heading1"/></w:pPr>'
        "<w:r><w:t>Chapter One</w:t></w:r></w:p>"
        '<w:p><w:pPr><w:jc w:val="center"/></w:pPr>'
        "<w:r><w:rPr><w:b/></w:rPr><w:t>Centered bold</w:t></w:r></w:p>"
        '<w:p><w:pPr><w:ind w:firstLine="720"/></w:pPr>'
        "<w:r><w:t>It was a dark night.</w:t></w:r></w:p>"
        "<w:p/>"
    )


@pytest.fixture
def missing_part_docx() -> bytes:
    return make_package({"[Content_Types].xml": _CONTENT_TYPES, "word/other.xml": "<x/>"})
