"""Tests for the PDF document provider."""

from __future__ import annotations

import copy
import os
from pathlib import Path

import pytest

from folio.documents.base import (
    DocumentError,
    FileNotFound,
    InvalidDocument,
    PermissionDenied,
)
from folio.documents.pdf_document import PdfDocument, PdfProvider


@pytest.fixture
def provider() -> PdfProvider:
    return PdfProvider()


class TestPdfProvider:
    def test_open(self, provider: PdfProvider, make_pdf):
        path = make_pdf(3)
        doc = provider.open(path)
        assert isinstance(doc, PdfDocument)
        assert doc.page_count == 3
        assert doc.name == "sample.pdf"
        assert doc.path == path.resolve()
        doc.close()

    def test_open_str_path(self, provider: PdfProvider, make_pdf):
        doc = provider.open(str(make_pdf(2)))
        assert doc.page_count == 2
        doc.close()

    def test_missing_file(self, provider: PdfProvider, tmp_path: Path):
        with pytest.raises(FileNotFound) as exc:
            provider.open(tmp_path / "missing.pdf")
        assert exc.value.message == "PDF file not found"

    def test_directory(self, provider: PdfProvider, tmp_path: Path):
        with pytest.raises(InvalidDocument):
            provider.open(tmp_path)

    def test_garbage_file(self, provider: PdfProvider, tmp_path: Path):
        bad = tmp_path / "bad.pdf"
        bad.write_bytes(b"\x00\x01 definitely not a pdf")
        with pytest.raises(InvalidDocument):
            provider.open(bad)

    def test_empty_file(self, provider: PdfProvider, tmp_path: Path):
        empty = tmp_path / "empty.pdf"
        empty.write_bytes(b"")
        with pytest.raises(InvalidDocument):
            provider.open(empty)

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root can read files regardless of mode",
    )
    def test_unreadable_file(self, provider: PdfProvider, make_pdf):
        path = make_pdf(1)
        path.chmod(0)
        try:
            with pytest.raises(PermissionDenied):
                provider.open(path)
        finally:
            path.chmod(0o644)

    def test_errors_share_base(self):
        for cls in (FileNotFound, InvalidDocument, PermissionDenied):
            assert issubclass(cls, DocumentError)

    def test_can_handle(self):
        assert PdfProvider.can_handle(Path("book.PDF"))
        assert not PdfProvider.can_handle(Path("book.epub"))


class TestPdfPages:
    def test_page_text(self, provider: PdfProvider, make_pdf):
        doc = provider.open(make_pdf(2))
        assert "This is page 2" in doc.page(1).text()
        doc.close()

    def test_page_number(self, provider: PdfProvider, make_pdf):
        doc = provider.open(make_pdf(3))
        assert doc.page(0).number == 1
        assert doc.page(2).number == 3
        doc.close()

    def test_page_out_of_range(self, provider: PdfProvider, make_pdf):
        doc = provider.open(make_pdf(2))
        with pytest.raises(IndexError):
            doc.page(2)
        doc.close()

    def test_copied_handle_is_independent(self, provider: PdfProvider, make_pdf):
        doc = provider.open(make_pdf(3))
        page = doc.page(0)
        dup = copy.copy(page)
        dup.index = 2
        assert page.number == 1
        assert "This is page 3" in dup.text()
        doc.close()

    def test_close_twice(self, provider: PdfProvider, make_pdf):
        doc = provider.open(make_pdf(1))
        doc.close()
        doc.close()
