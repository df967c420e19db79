"""Document provider interface and error taxonomy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class DocumentError(Exception):
    """A file locator could not be opened as a readable document."""

    default_message = "Unable to open document"

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        self.path = str(path)
        self.message = message or self.default_message
        super().__init__(f"{self.message}: {self.path}")


class FileNotFound(DocumentError):
    default_message = "PDF file not found"


class InvalidDocument(DocumentError):
    default_message = "Invalid or damaged PDF file"


class PermissionDenied(DocumentError):
    default_message = "Cannot read PDF file, check file permissions"


class Document(ABC):
    """An open document: a page count and indexable page handles."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages."""

    @abstractmethod
    def page(self, index: int) -> Any:
        """Return an opaque handle for the page at a 0-based index."""

    def close(self) -> None:
        """Release resources held by the document."""


class DocumentProvider(ABC):
    """Opens file locators into documents."""

    SUPPORTED_EXTENSIONS: tuple[str, ...] = ()

    @abstractmethod
    def open(self, path: Path | str) -> Document:
        """Open a document or raise a DocumentError subclass."""

    @classmethod
    def can_handle(cls, file_path: Path) -> bool:
        return file_path.suffix.lower() in cls.SUPPORTED_EXTENSIONS
