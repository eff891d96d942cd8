"""Unit tests for PDF to DOCX conversion."""

from pathlib import Path

import docx
import fitz
import pytest

from devswiss.core.convert import (
    ConvertConfig,
    DocumentFormat,
    InputNotFound,
    OutputExists,
    PdfReadError,
    UnsupportedConversion,
    convert,
    extract_pdf_pages,
)


def make_pdf(path: Path, pages: list[str]) -> Path:
    """Write a PDF with one page per entry (empty strings give blank pages)."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    doc.save(str(path))
    doc.close()
    return path


def docx_lines(path: Path) -> list[str]:
    return [p.text for p in docx.Document(str(path)).paragraphs if p.text.strip()]


class TestDocumentFormat:
    def test_display_is_uppercase(self):
        assert str(DocumentFormat.PDF) == "PDF"
        assert str(DocumentFormat.DOCX) == "DOCX"


class TestExtractPdfPages:
    def test_one_entry_per_page(self, temp_dir):
        pdf = make_pdf(temp_dir / "in.pdf", ["first page", "second page"])
        pages = extract_pdf_pages(pdf)
        assert len(pages) == 2
        assert "first page" in pages[0]
        assert "second page" in pages[1]

    def test_corrupt_pdf(self, temp_dir):
        path = temp_dir / "broken.pdf"
        path.write_bytes(b"this is not a pdf")
        with pytest.raises(PdfReadError, match="Failed to read PDF"):
            extract_pdf_pages(path)


class TestConvert:
    def test_pdf_to_docx(self, temp_dir):
        pdf = make_pdf(temp_dir / "in.pdf", ["Hello PDF", "Page two"])
        output = temp_dir / "out.docx"

        result = convert(ConvertConfig(pdf, output))

        assert result.pages_processed == 2
        assert result.warnings == []
        assert docx_lines(output) == ["Hello PDF", "Page two"]

    def test_blank_pdf_warns(self, temp_dir):
        pdf = make_pdf(temp_dir / "blank.pdf", [""])
        result = convert(ConvertConfig(pdf, temp_dir / "out.docx"))
        assert result.pages_processed == 1
        assert result.warnings == [
            "PDF appears to contain no extractable text (may be image-based)"
        ]

    def test_unsupported_direction(self, temp_dir):
        config = ConvertConfig(
            temp_dir / "in.docx",
            temp_dir / "out.pdf",
            source_format=DocumentFormat.DOCX,
            target_format=DocumentFormat.PDF,
        )
        with pytest.raises(UnsupportedConversion, match="Unsupported conversion: DOCX to PDF"):
            convert(config)

    def test_missing_input(self, temp_dir):
        with pytest.raises(InputNotFound):
            convert(ConvertConfig(temp_dir / "missing.pdf", temp_dir / "out.docx"))

    def test_existing_output(self, temp_dir):
        pdf = make_pdf(temp_dir / "in.pdf", ["text"])
        output = temp_dir / "out.docx"
        output.write_bytes(b"keep me")

        with pytest.raises(OutputExists, match="use --force to overwrite"):
            convert(ConvertConfig(pdf, output))
        assert output.read_bytes() == b"keep me"

    def test_force_overwrites(self, temp_dir):
        pdf = make_pdf(temp_dir / "in.pdf", ["fresh"])
        output = temp_dir / "out.docx"
        output.write_bytes(b"stale")

        convert(ConvertConfig(pdf, output, force=True))

        assert docx_lines(output) == ["fresh"]
