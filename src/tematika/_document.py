"""Document ingestion: plain text and Word (.docx) files."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

import docx
from docx.opc.exceptions import PackageNotFoundError

from ._errors import DocumentError, UnsupportedFormatError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".txt", ".docx")


def _read_txt(path: Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _read_docx(path: Path) -> str:
    try:
        document = docx.Document(str(path))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as exc:
        raise DocumentError(f"Cannot parse {path.name}: {exc}") from exc
    # one line per paragraph
    return "".join(p.text + "\n" for p in document.paragraphs)


def read_document(path: Path | str) -> str:
    """Return the text of a supported document.

    Raises:
        UnsupportedFormatError: If the file extension is not supported.
        DocumentError: If a .docx file is not a valid Word document.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    logger.debug("Reading document %s", path)
    if suffix == ".txt":
        return _read_txt(path)
    if suffix == ".docx":
        if not path.is_file():
            raise FileNotFoundError(f"No such file: {path}")
        return _read_docx(path)
    raise UnsupportedFormatError(f"Unsupported file format: {path.name}")
