"""Page rendering surface: shows page text in one or two columns."""

from __future__ import annotations

import textwrap
import unicodedata
from typing import Any, Sequence

from textual import events
from textual.message import Message
from textual.widgets import Static

from folio.reader.layout import group_of, spread_groups, visible_columns
from folio.reader.models import LayoutFlags, ZoomLevel

COLUMN_GAP = " │ "


def _display_width(text: str) -> int:
    """Return display width accounting for CJK double-width characters."""
    return sum(
        2 if unicodedata.east_asian_width(ch) in ("F", "W") else 1 for ch in text
    )


def _wrap_cjk(text: str, width: int) -> list[str]:
    """Wrap text to display width, handling CJK double-width characters."""
    if not text.strip():
        return [""]
    if text.isascii():
        return textwrap.wrap(text, width=width) or [""]
    lines: list[str] = []
    current: list[str] = []
    current_w = 0
    for ch in text:
        cw = 2 if unicodedata.east_asian_width(ch) in ("F", "W") else 1
        if current_w + cw > width and current:
            lines.append("".join(current))
            current = []
            current_w = 0
            if ch == " ":
                continue
        current.append(ch)
        current_w += cw
    if current:
        lines.append("".join(current))
    return lines or [""]


def _pad_to_width(text: str, width: int) -> str:
    return text + " " * max(0, width - _display_width(text))


class PageView(Static):
    """Renders a display sequence of pages and turns pages on scroll.

    Directives received before the widget is mounted are kept and applied
    on mount.
    """

    class PageChanged(Message):
        """The view moved to another page by itself."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, native_rtl: bool = False, **kwargs: Any) -> None:
        super().__init__("", markup=False, **kwargs)
        self.supports_native_rtl = native_rtl
        self._pages: list[Any] = []
        self._layout = LayoutFlags()
        self._zoom = ZoomLevel.FIT_PAGE
        self._index = 0
        self._text_cache: dict[int, str] = {}

    @property
    def index(self) -> int:
        return self._index

    # ── Surface contract ──────────────────────────

    def set_document(self, pages: Sequence[Any]) -> None:
        self._pages = list(pages)
        self._text_cache.clear()
        self._index = min(self._index, max(0, len(self._pages) - 1))
        self._redraw()

    def set_layout(self, flags: LayoutFlags) -> None:
        self._layout = flags
        self._redraw()

    def set_zoom(self, zoom: ZoomLevel) -> None:
        self._zoom = zoom
        self._redraw()

    def navigate_to(self, index: int, page: int) -> None:
        if 0 <= index < len(self._pages):
            self._index = index
            self._redraw()

    def clear(self) -> None:
        self._pages = []
        self._text_cache.clear()
        self._index = 0
        self._redraw()

    # ── Own navigation ────────────────────────────

    def turn(self, delta: int) -> None:
        """Move by whole spreads and report the new page."""
        groups = spread_groups(len(self._pages), self._layout)
        if not groups:
            return
        target = group_of(self._index, groups) + delta
        if not 0 <= target < len(groups):
            return
        self._index = groups[target][0]
        self._redraw()
        self.post_message(self.PageChanged(self._index))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        if self._zoom is ZoomLevel.FIT_PAGE:
            event.stop()
            self.turn(1)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        if self._zoom is ZoomLevel.FIT_PAGE:
            event.stop()
            self.turn(-1)

    # ── Rendering ─────────────────────────────────

    def on_mount(self) -> None:
        self._redraw()

    def on_resize(self) -> None:
        self._redraw()

    def _redraw(self) -> None:
        if not self.is_mounted:
            return
        self.set_class(self._zoom is ZoomLevel.FIT_PAGE, "fit-page")
        self.update(self._spread_text())

    def _content_dimensions(self) -> tuple[int, int]:
        w, h = self.content_size.width, self.content_size.height
        if w < 10 or h < 3:
            return 72, 20
        return w, h

    def _page_text(self, index: int) -> str:
        if index not in self._text_cache:
            self._text_cache[index] = self._pages[index].text()
        return self._text_cache[index]

    def _page_lines(self, index: int, width: int) -> list[str]:
        page = self._pages[index]
        number = getattr(page, "number", index + 1)
        lines = [f"- {number} -".center(width).rstrip(), ""]
        for para in self._page_text(index).split("\n\n"):
            lines.extend(_wrap_cjk(para, width))
            lines.append("")
        return lines

    def _text_width(self, column_width: int) -> int:
        scale = self._zoom.scale
        if scale is None:
            return column_width
        return min(column_width, max(10, int(column_width * scale)))

    def _spread_text(self) -> str:
        if not self._pages:
            return ""

        content_w, content_h = self._content_dimensions()
        groups = spread_groups(len(self._pages), self._layout)
        group = groups[group_of(self._index, groups)]

        if self._layout.is_dual:
            column_w = max(20, (content_w - len(COLUMN_GAP)) // 2)
        else:
            column_w = max(20, content_w)
        text_w = self._text_width(column_w)

        columns = [
            self._page_lines(i, text_w) for i in visible_columns(group, self._layout)
        ]
        if self._layout.is_dual and len(columns) == 1:
            # LTR books show the cover on the right and a trailing page on
            # the left; RTL books mirror that.
            cover = group[0] == 0
            if self._layout.native_rtl == cover:
                columns.append([])
            else:
                columns.insert(0, [])

        height = max(len(c) for c in columns)
        if self._zoom is ZoomLevel.FIT_PAGE:
            height = min(height, content_h)

        if len(columns) == 1:
            return "\n".join(columns[0][:height])

        left, right = columns
        rows = []
        for j in range(height):
            l_line = left[j] if j < len(left) else ""
            r_line = right[j] if j < len(right) else ""
            rows.append(f"{_pad_to_width(l_line, column_w)}{COLUMN_GAP}{r_line}")
        return "\n".join(rows)
