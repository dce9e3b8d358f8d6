"""Read named parts out of a zipped Office Open XML package."""

from __future__ import annotations

import io
import zipfile
import zlib

from docx2quill.errors import CorruptArchive, MissingDocumentPart


def _open(data: bytes) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, EOFError) as exc:
        raise CorruptArchive(f"Cannot open package: {exc}") from exc


def list_parts(data: bytes) -> list[str]:
    """Return the entry names stored in the package *data*."""
    with _open(data) as zf:
        return zf.namelist()


def read_part(data: bytes, part_name: str) -> bytes:
    """Return the content of *part_name* inside the package *data*.

    Raises:
        CorruptArchive: *data* is not a readable zip container, or the
            entry itself cannot be decompressed or is password protected.
        MissingDocumentPart: the container has no entry named *part_name*.
    """
    with _open(data) as zf:
        try:
            return zf.read(part_name)
        except KeyError as exc:
            raise MissingDocumentPart(
                f"Could not find {part_name} in package"
            ) from exc
        except (zipfile.BadZipFile, zlib.error, RuntimeError, OSError, EOFError) as exc:
            # RuntimeError: encrypted entry or unsupported compression method.
            raise CorruptArchive(f"Cannot read {part_name}: {exc}") from exc
