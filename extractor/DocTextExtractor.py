# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-07
# Description: DocTextExtractor
# -----------------------------------------------------------------------------
import io
import time
from pathlib import Path
from typing import List

import docx
import fitz

from utility.errors import ExtractionError, UnsupportedFormat
from utility.logging_utils import get_class_logger

PDF_EXTENSIONS = {".pdf"}
DOCX_EXTENSIONS = {".docx"}
TEXT_EXTENSIONS = {".txt", ".text", ".md", ".markdown", ".rst", ".csv", ".json", ".log", ".html", ".htm"}


class DocTextExtractor:
    """
    Turns an uploaded file into one plain-text string.
    PDFs go through PyMuPDF (fitz), Word documents through python-docx;
    plain-text files are decoded as UTF-8.
    """

    def __init__(self, logger=None):
        self.logger = logger or get_class_logger(self.__class__)

    @staticmethod
    def extension_of(filename: str) -> str:
        return Path(filename or "").suffix.lower()

    def extract(self, filename: str, data: bytes) -> str:
        ext = self.extension_of(filename)
        if ext in PDF_EXTENSIONS:
            return "\n".join(self.extract_text_from_pdf(data))
        if ext in DOCX_EXTENSIONS:
            return self.extract_text_from_docx(filename, data)
        if ext in TEXT_EXTENSIONS:
            return self.extract_text_from_plain(filename, data)

        self.logger.warning("Unsupported file format for '%s' (%s)", filename, ext or "<none>")
        raise UnsupportedFormat(filename, ext)

    def extract_text_from_pdf(self, pdf_bytes: bytes) -> List[str]:
        """
        Extracts text from PDF bytes using PyMuPDF (fitz).
        Returns: list of page texts (page 1 = index 0)
        """
        start = time.time()
        page_texts: List[str] = []
        try:
            with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
                for page in doc:
                    text = page.get_text("text") or ""
                    page_texts.append(text.strip())

                elapsed = (time.time() - start) * 1000.0
                self.logger.info(
                    "Extracted text from PDF (%d pages, %.1f ms)", len(doc), elapsed
                )

            return page_texts

        except Exception as e:
            self.logger.error("Failed to extract text from PDF: %s", e)
            raise ExtractionError(f"Failed to extract text from PDF: {e}") from e

    def extract_text_from_docx(self, filename: str, data: bytes) -> str:
        """
        Body paragraphs in document order, then table cells row by row.
        Empty paragraphs are dropped; blocks are separated by blank lines.
        """
        start = time.time()
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as e:
            self.logger.error("Failed to open Word document '%s': %s", filename, e)
            raise ExtractionError(f"Failed to read Word document '{filename}': {e}") from e

        blocks: List[str] = [p.text.strip() for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [c.text.strip() for c in row.cells if c.text.strip()]
                if cells:
                    blocks.append(" | ".join(cells))

        elapsed = (time.time() - start) * 1000.0
        self.logger.info("Extracted text from '%s' (%d blocks, %.1f ms)", filename, len(blocks), elapsed)
        return "\n\n".join(blocks)

    def extract_text_from_plain(self, filename: str, data: bytes) -> str:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            self.logger.error("File '%s' is not valid UTF-8: %s", filename, e)
            raise ExtractionError(f"File '{filename}' is not valid UTF-8 text") from e

        self.logger.info("Read plain text file '%s' (%d chars)", filename, len(text))
        return text
