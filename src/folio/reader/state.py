"""Reader state machine.

Keeps the logical reading position (page, mode, zoom) in sync with a
rendering surface. Three things move the page: navigation commands issued
here, page changes the surface makes on its own (scrolling, swipes) and
progress restored when a document is loaded. Only the first and the last
produce a navigate directive; a page reported by the surface is never sent
back to it.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, Sequence

from folio.documents.base import Document, DocumentProvider, FileNotFound
from folio.library.models import RecentEntry
from folio.reader.layout import group_of, spread_groups
from folio.reader.models import (
    LayoutFlags,
    ReaderState,
    ReadingMode,
    RestoredProgress,
    ZoomLevel,
)
from folio.reader.page_order import inverse_order, reorder, rtl_order

log = logging.getLogger(__name__)


class RenderingSurface(Protocol):
    supports_native_rtl: bool

    def set_document(self, pages: Sequence[Any]) -> None: ...

    def set_layout(self, flags: LayoutFlags) -> None: ...

    def set_zoom(self, zoom: ZoomLevel) -> None: ...

    def navigate_to(self, index: int, page: int) -> None: ...

    def clear(self) -> None: ...


class ProgressStore(Protocol):
    def get(self, key: str) -> Optional[RecentEntry]: ...

    def upsert(self, entry: RecentEntry) -> None: ...

    def remove(self, key: str) -> None: ...

    def list(self) -> list[RecentEntry]: ...


class ReaderStateMachine:
    def __init__(
        self,
        surface: RenderingSurface,
        store: Optional[ProgressStore] = None,
        provider: Optional[DocumentProvider] = None,
        mode: ReadingMode = ReadingMode.SINGLE_PAGE,
        zoom: ZoomLevel = ZoomLevel.FIT_PAGE,
        on_change: Optional[Callable[[ReaderState], None]] = None,
    ) -> None:
        self._surface = surface
        self._store = store
        self._provider = provider
        self._on_change = on_change
        self._initial_zoom = zoom
        self._state = ReaderState(mode=mode, zoom=zoom)
        self._document: Optional[Document] = None
        self._display_name = ""
        self._order: list[int] = []
        self._positions: list[int] = []
        self._reordered = False
        # Page the surface was last told to show, or reported showing.
        self._surface_page: Optional[int] = None

    # ── State ─────────────────────────────────────

    @property
    def state(self) -> ReaderState:
        return dataclasses.replace(self._state)

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def total_pages(self) -> int:
        return self._state.total_pages

    @property
    def mode(self) -> ReadingMode:
        return self._state.mode

    @property
    def zoom(self) -> ZoomLevel:
        return self._state.zoom

    @property
    def document(self) -> Optional[Document]:
        return self._document

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def layout(self) -> LayoutFlags:
        return LayoutFlags.for_mode(self.mode, self._surface.supports_native_rtl)

    def _needs_reorder(self, mode: ReadingMode) -> bool:
        return (
            mode is ReadingMode.TWO_PAGE_RTL and not self._surface.supports_native_rtl
        )

    # ── Document Loading ──────────────────────────

    def load_document(
        self,
        doc: Optional[Document],
        restored: Optional[RestoredProgress] = None,
        identity: Optional[str] = None,
        display_name: str = "",
    ) -> None:
        """Replace the current document and seed the reading position."""
        if doc is None:
            self._reset()
            return

        total = doc.page_count
        state = ReaderState(
            total_pages=total,
            mode=self._state.mode,
            zoom=self._state.zoom,
            document_identity=identity,
        )
        if restored is not None and 1 <= restored.page <= total:
            state.current_page = restored.page
            state.mode = restored.mode

        self._state = state
        self._document = doc
        self._display_name = display_name or identity or ""
        self._surface_page = None

        self._surface.set_layout(self.layout)
        self._surface.set_zoom(self.zoom)
        self._rebuild_display()
        if total > 0:
            self._navigate()
        log.info(
            "Loaded %s: page %d/%d, %s",
            self._display_name,
            state.current_page,
            total,
            state.mode.value,
        )
        self._notify()

    def open_path(self, path: Path | str) -> None:
        """Open a file through the provider and restore its saved progress.

        Raises a DocumentError subclass without touching the current state.
        """
        if self._provider is None:
            raise RuntimeError("No document provider configured")

        doc = self._provider.open(path)
        key = str(doc.path)
        entry = self._store.get(key) if self._store else None

        previous = self._document
        self.load_document(
            doc,
            restored=entry.progress if entry else None,
            identity=key,
            display_name=doc.name,
        )
        if previous is not None and previous is not doc:
            previous.close()

        if self._store is not None:
            self._store.upsert(
                RecentEntry(
                    key=key,
                    display_name=doc.name,
                    last_opened=time.time(),
                    current_page=self.current_page,
                    total_pages=self.total_pages,
                    mode=self.mode,
                )
            )

    def open_recent(self, entry: RecentEntry) -> None:
        if not Path(entry.key).exists():
            if self._store is not None:
                self._store.remove(entry.key)
            raise FileNotFound(entry.key, "File was moved or deleted")
        self.open_path(entry.key)

    def close(self) -> None:
        if self._document is not None:
            self._document.close()
        self._reset()

    def _reset(self) -> None:
        self._state = ReaderState(mode=self._state.mode, zoom=self._initial_zoom)
        self._document = None
        self._display_name = ""
        self._order = []
        self._positions = []
        self._reordered = False
        self._surface_page = None
        self._surface.clear()
        self._notify()

    def _rebuild_display(self) -> None:
        doc = self._document
        if doc is None:
            return
        pages = [doc.page(i) for i in range(doc.page_count)]
        self._reordered = self._needs_reorder(self.mode)
        if self._reordered:
            self._order = rtl_order(len(pages))
            display = reorder(pages)
        else:
            self._order = list(range(len(pages)))
            display = pages
        self._positions = inverse_order(self._order)
        self._surface.set_document(display)

    # ── Mode & Zoom ───────────────────────────────

    def set_mode(self, mode: ReadingMode) -> None:
        """Switch reading mode, keeping the same logical page on screen."""
        if mode is self.mode:
            return
        self._state.mode = mode
        self._surface.set_layout(self.layout)
        if self._document is not None and self._needs_reorder(mode) != self._reordered:
            self._rebuild_display()
            if self.total_pages > 0:
                self._navigate()
        self._save_progress()
        self._notify()

    def set_zoom(self, zoom: ZoomLevel) -> None:
        if zoom is self.zoom:
            return
        self._state.zoom = zoom
        self._surface.set_zoom(zoom)
        self._notify()

    def zoom_in(self) -> None:
        self._step_zoom(1)

    def zoom_out(self) -> None:
        self._step_zoom(-1)

    def reset_zoom(self) -> None:
        self.set_zoom(ZoomLevel.PERCENT_100)

    def _step_zoom(self, delta: int) -> None:
        steps = ZoomLevel.steps()
        if self.zoom not in steps:
            log.debug("No zoom step from %s", self.zoom.value)
            return
        target = steps.index(self.zoom) + delta
        if 0 <= target < len(steps):
            self.set_zoom(steps[target])

    # ── Navigation ────────────────────────────────

    def go_to_page(self, page: int) -> None:
        if not 1 <= page <= self.total_pages:
            log.debug("Ignoring go to page %d of %d", page, self.total_pages)
            return
        changed = page != self.current_page
        self._state.current_page = page
        if self._surface_page != page:
            self._navigate()
        if changed:
            self._save_progress()
            self._notify()

    def go_to_previous(self) -> None:
        self.go_to_page(self.current_page - 1)

    def go_to_next(self) -> None:
        self.go_to_page(self.current_page + 1)

    def go_to_first(self) -> None:
        self.go_to_page(1)

    def go_to_last(self) -> None:
        self.go_to_page(self.total_pages)

    def on_surface_reported_page(self, page: int) -> None:
        """Record a page the surface moved to by itself. Never echoed back."""
        if not 1 <= page <= self.total_pages:
            return
        self._surface_page = page
        if page == self.current_page:
            return
        self._state.current_page = page
        self._save_progress()
        self._notify()

    def on_surface_reported_index(self, index: int) -> None:
        """Record the spread holding display position `index` by its lowest page."""
        if not 0 <= index < len(self._order):
            return
        groups = spread_groups(len(self._order), self.layout)
        spread = groups[group_of(index, groups)]
        self.on_surface_reported_page(min(self._order[i] for i in spread) + 1)

    def _navigate(self) -> None:
        page = self.current_page
        index = self._positions[page - 1]
        self._surface_page = page
        log.debug("Navigate to page %d (display index %d)", page, index)
        self._surface.navigate_to(index, page)

    # ── Progress & Listeners ──────────────────────

    def _save_progress(self) -> None:
        key = self._state.document_identity
        if self._store is None or key is None:
            return
        entry = self._store.get(key)
        if entry is None:
            return
        self._store.upsert(
            dataclasses.replace(entry, current_page=self.current_page, mode=self.mode)
        )

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)
