"""Tests for document ingestion."""

import docx
import pytest

from tematika import DocumentError, UnsupportedFormatError, read_document


def test_read_txt(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("Врач осмотрел пациента.", encoding="utf-8")
    assert read_document(path) == "Врач осмотрел пациента."


def test_uppercase_suffix(tmp_path):
    path = tmp_path / "DOC.TXT"
    path.write_text("банк", encoding="utf-8")
    assert read_document(str(path)) == "банк"


def test_read_docx(tmp_path):
    path = tmp_path / "doc.docx"
    document = docx.Document()
    document.add_paragraph("Врач осмотрел пациента.")
    document.add_paragraph("Назначена терапия.")
    document.save(str(path))

    assert read_document(path) == "Врач осмотрел пациента.\nНазначена терапия.\n"


def test_corrupt_docx(tmp_path):
    path = tmp_path / "broken.docx"
    path.write_bytes(b"PK not really a zip")
    with pytest.raises(DocumentError):
        read_document(path)


def test_missing_docx(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_document(tmp_path / "missing.docx")


@pytest.mark.parametrize("name", ["doc.doc", "doc.pdf", "noext"])
def test_unsupported_format(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"data")
    with pytest.raises(UnsupportedFormatError):
        read_document(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_document(tmp_path / "missing.txt")
