"""PDF documents using PyMuPDF."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

import pymupdf

from .base import (
    Document,
    DocumentProvider,
    FileNotFound,
    InvalidDocument,
    PermissionDenied,
)

log = logging.getLogger(__name__)


@dataclass
class PdfPage:
    """Handle to one page of an open PDF. Copies are independent handles."""

    source: pymupdf.Document
    index: int

    @property
    def number(self) -> int:
        return self.index + 1

    def text(self) -> str:
        """Extract the page text, top to bottom, with whitespace collapsed per block."""
        page = self.source[self.index]
        lines: list[str] = []
        for block in sorted(page.get_text("blocks"), key=lambda b: (b[1], b[0])):
            # block: (x0, y0, x1, y1, text, block_no, block_type)
            if block[6] != 0:  # skip image blocks
                continue
            cleaned = re.sub(r"\s+", " ", block[4]).strip()
            if cleaned:
                lines.append(cleaned)
        return "\n\n".join(lines)


class PdfDocument(Document):
    def __init__(self, path: Path, doc: pymupdf.Document) -> None:
        self.path = path
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def page(self, index: int) -> PdfPage:
        if not 0 <= index < self.page_count:
            raise IndexError(f"page index {index} out of range")
        return PdfPage(source=self._doc, index=index)

    def close(self) -> None:
        if not self._doc.is_closed:
            self._doc.close()


class PdfProvider(DocumentProvider):
    SUPPORTED_EXTENSIONS = (".pdf",)

    def open(self, path: Path | str) -> PdfDocument:
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise FileNotFound(file_path)
        if not file_path.is_file():
            raise InvalidDocument(file_path)
        if not os.access(file_path, os.R_OK):
            raise PermissionDenied(file_path)

        try:
            doc = pymupdf.open(str(file_path))
        except PermissionError as e:
            raise PermissionDenied(file_path) from e
        except (pymupdf.FileDataError, RuntimeError) as e:
            raise InvalidDocument(file_path) from e

        if not doc.is_pdf or doc.needs_pass or doc.page_count == 0:
            doc.close()
            raise InvalidDocument(file_path)

        log.info("Opened %s (%d pages)", file_path, doc.page_count)
        return PdfDocument(file_path.resolve(), doc)
