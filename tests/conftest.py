"""Shared fixtures for tests."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

import pymupdf
import pytest

from folio.config import AppConfig
from folio.documents.base import Document
from folio.library.database import Database
from folio.reader.models import LayoutFlags, ZoomLevel


@dataclass
class FakePage:
    number: int

    def text(self) -> str:
        return f"Page {self.number}"


class FakeDocument(Document):
    def __init__(self, page_count: int, path: str = "/books/fake.pdf") -> None:
        self.path = Path(path)
        self._count = page_count
        self.closed = False

    @property
    def page_count(self) -> int:
        return self._count

    def page(self, index: int) -> FakePage:
        return FakePage(number=index + 1)

    def close(self) -> None:
        self.closed = True


@dataclass
class SpySurface:
    """Records every directive a state machine sends to its surface."""

    supports_native_rtl: bool = False
    documents: list[list[Any]] = field(default_factory=list)
    layouts: list[LayoutFlags] = field(default_factory=list)
    zooms: list[ZoomLevel] = field(default_factory=list)
    navigations: list[tuple[int, int]] = field(default_factory=list)
    clears: int = 0

    def set_document(self, pages: Any) -> None:
        self.documents.append(list(pages))

    def set_layout(self, flags: LayoutFlags) -> None:
        self.layouts.append(flags)

    def set_zoom(self, zoom: ZoomLevel) -> None:
        self.zooms.append(zoom)

    def navigate_to(self, index: int, page: int) -> None:
        self.navigations.append((index, page))

    def clear(self) -> None:
        self.clears += 1

    @property
    def shown_numbers(self) -> list[int]:
        return [p.number for p in self.documents[-1]]


@pytest.fixture
def db(tmp_path: Path) -> Database:
    db_path = tmp_path / "test.db"
    database = Database(db_path)
    yield database
    database.close()


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        data_dir=tmp_path / "data",
        config_dir=tmp_path / "config",
    )


@pytest.fixture
def surface() -> SpySurface:
    return SpySurface()


@pytest.fixture
def native_surface() -> SpySurface:
    return SpySurface(supports_native_rtl=True)


@pytest.fixture
def make_document() -> Callable[..., FakeDocument]:
    return FakeDocument


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    """Write a PDF with one line of text per page and return its path."""

    def _make(pages: int = 3, name: str = "sample.pdf") -> Path:
        path = tmp_path / name
        doc = pymupdf.open()
        for i in range(pages):
            page = doc.new_page()
            page.insert_text((72, 72), f"This is page {i + 1}")
        doc.save(str(path))
        doc.close()
        return path

    return _make


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path):
    """Keep config dirs under tmp_path and drop FOLIO_* variables set by load_dotenv."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    yield
    for key in [k for k in os.environ if k.startswith("FOLIO_")]:
        del os.environ[key]
