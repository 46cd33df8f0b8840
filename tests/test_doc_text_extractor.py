# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: test_doc_text_extractor.py
# -----------------------------------------------------------------------------
import fitz
import pytest

from conftest import docx_bytes
from extractor.DocTextExtractor import DocTextExtractor
from utility.errors import ExtractionError, UnsupportedFormat


def _pdf_bytes(*pages: str) -> bytes:
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def test_pdf_pages_are_joined():
    text = DocTextExtractor().extract("manual.PDF", _pdf_bytes("First page text", "Second page text"))

    assert "First page text" in text
    assert "Second page text" in text
    assert text.index("First") < text.index("Second")


def test_plain_text_is_decoded_as_utf8():
    data = "\ufeffCafé menu\nline two".encode("utf-8")
    assert DocTextExtractor().extract("notes.txt", data) == "Café menu\nline two"


def test_markdown_counts_as_plain_text():
    assert DocTextExtractor().extract("README.md", b"# Title") == "# Title"


@pytest.mark.parametrize("filename", ["slides.pptx", "archive.zip", "no_extension"])
def test_unsupported_formats(filename):
    with pytest.raises(UnsupportedFormat) as exc_info:
        DocTextExtractor().extract(filename, b"whatever")
    assert exc_info.value.filename == filename


def test_corrupt_pdf_is_extraction_error():
    with pytest.raises(ExtractionError):
        DocTextExtractor().extract("broken.pdf", b"definitely not a pdf")


def test_invalid_utf8_is_extraction_error():
    with pytest.raises(ExtractionError):
        DocTextExtractor().extract("latin1.txt", b"\xff\xfe\xfa bad bytes")


def test_docx_paragraphs_and_tables_are_extracted():
    data = docx_bytes(
        "Termination clause",
        "",
        "Either party may end the contract with 30 days notice.",
        table=[["Party", "Role"], ["Acme", "Supplier"]],
    )

    text = DocTextExtractor().extract("contract.DOCX", data)

    assert text == (
        "Termination clause\n\n"
        "Either party may end the contract with 30 days notice.\n\n"
        "Party | Role\n\n"
        "Acme | Supplier"
    )


def test_corrupt_docx_is_extraction_error():
    with pytest.raises(ExtractionError):
        DocTextExtractor().extract("broken.docx", b"PK\x03\x04 not really a zip")
