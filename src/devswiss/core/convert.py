"""Document format conversion (PDF to DOCX).

Text is extracted page by page with PyMuPDF and written to a Word document
with python-docx: every non-blank line becomes its own paragraph and a page
break separates consecutive PDF pages. Layout, fonts and images are not
carried over.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import fitz
from docx import Document

logger = logging.getLogger(__name__)


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"

    def __str__(self) -> str:
        return self.value.upper()


class ConvertError(Exception):
    """Base class for conversion errors."""


class UnsupportedConversion(ConvertError):
    def __init__(self, source: DocumentFormat, target: DocumentFormat) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Unsupported conversion: {source} to {target}")


class InputNotFound(ConvertError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class OutputExists(ConvertError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Output file already exists: {path} (use --force to overwrite)")


class PdfReadError(ConvertError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to read PDF: {detail}")


class DocxWriteError(ConvertError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to write DOCX: {detail}")


@dataclass
class ConvertConfig:
    input_path: Path
    output_path: Path
    source_format: DocumentFormat = DocumentFormat.PDF
    target_format: DocumentFormat = DocumentFormat.DOCX
    force: bool = False


@dataclass
class ConvertResult:
    pages_processed: int
    warnings: list[str] = field(default_factory=list)


def extract_pdf_pages(path: Path) -> list[str]:
    """Return the plain text of every page in a PDF.

    Raises:
        PdfReadError: If the file cannot be opened or parsed
    """
    try:
        with fitz.open(path) as doc:
            return [page.get_text() for page in doc]
    except (RuntimeError, ValueError, OSError) as e:
        logger.error(f"Failed to read PDF {path}: {e}")
        raise PdfReadError(str(e)) from e


def write_docx(pages: list[str], path: Path) -> None:
    """Write page texts to a DOCX file, one paragraph per non-blank line.

    Raises:
        DocxWriteError: If the document cannot be saved
    """
    document = Document()
    for index, text in enumerate(pages):
        for line in text.splitlines():
            stripped = line.strip()
            if stripped:
                document.add_paragraph(stripped)
        if index < len(pages) - 1:
            document.add_page_break()

    try:
        document.save(str(path))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to write DOCX {path}: {e}")
        raise DocxWriteError(str(e)) from e


def convert(config: ConvertConfig) -> ConvertResult:
    """Convert a document according to ``config``.

    Raises:
        UnsupportedConversion: For anything other than PDF to DOCX
        InputNotFound: If the input file does not exist
        OutputExists: If the output exists and ``force`` is not set
        PdfReadError: If text extraction fails
        DocxWriteError: If the DOCX cannot be written
    """
    source = DocumentFormat(config.source_format)
    target = DocumentFormat(config.target_format)
    if (source, target) != (DocumentFormat.PDF, DocumentFormat.DOCX):
        raise UnsupportedConversion(source, target)

    input_path = Path(config.input_path)
    output_path = Path(config.output_path)
    if not input_path.exists():
        raise InputNotFound(input_path)
    if output_path.exists() and not config.force:
        raise OutputExists(output_path)

    pages = extract_pdf_pages(input_path)
    warnings = []
    if not any(page.strip() for page in pages):
        warnings.append("PDF appears to contain no extractable text (may be image-based)")

    write_docx(pages, output_path)
    logger.info(f"Converted {len(pages)} page(s) from {input_path} to {output_path}")
    return ConvertResult(pages_processed=len(pages), warnings=warnings)
