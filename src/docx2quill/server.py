"""FastAPI web service for .docx to HTML conversion.

Endpoints::

    POST /import        Upload one or more .docx files, receive chapters + failures.
    POST /convert       Upload one .docx file and receive its HTML back.
    GET  /health        Health check.
    GET  /styles        List available presets.

Run::

    uvicorn docx2quill.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from docx2quill import __version__
from docx2quill.config import PRESETS
from docx2quill.converter import Converter
from docx2quill.errors import ConversionError

app = FastAPI(
    title="docx2quill",
    description="Word (.docx) to rich-text editor HTML conversion service",
    version=__version__,
)


def _converter(style: str) -> Converter:
    try:
        return Converter(style_preset=style)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/styles")
async def list_styles() -> dict[str, list[str]]:
    """List available presets."""
    return {"presets": PRESETS}


@app.post("/import")
async def import_files(
    files: list[UploadFile] = File(...),
    style: str = Form("quill"),
) -> dict[str, Any]:
    """Upload .docx files and receive one chapter per readable file.

    - **files**: one or more Word documents
    - **style**: preset name (quill, html)

    Files that cannot be converted are listed under ``failures`` with their
    error kind; they never affect the other files.
    """
    converter = _converter(style)
    packages = []
    for upload in files:
        packages.append((upload.filename or "document.docx", await upload.read()))
    return converter.convert_batch(packages).to_dict()


@app.post("/convert", response_class=HTMLResponse)
async def convert_file(
    file: UploadFile = File(...),
    style: str = Form("quill"),
) -> HTMLResponse:
    """Upload one .docx file and receive its HTML body."""
    converter = _converter(style)
    name = file.filename or "document.docx"
    data = await file.read()
    try:
        doc = converter.convert_named(name, data)
    except ConversionError as exc:
        raise HTTPException(
            status_code=422,
            detail={"name": name, "kind": exc.kind.value, "message": exc.message},
        ) from exc
    return HTMLResponse(content=doc.html)
