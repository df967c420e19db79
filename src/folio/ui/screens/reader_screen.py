from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Input, Static

from folio.reader.gestures import SwipeDirection, swipe_step
from folio.reader.models import ReaderState, ReadingMode, ZoomLevel
from folio.ui.widgets.page_view import PageView

if TYPE_CHECKING:
    from folio.app import FolioApp
    from folio.reader.state import ReaderStateMachine


class ReaderScreen(Screen):
    BINDINGS = [
        Binding("escape", "go_back", "Back"),
        Binding("right", "next_page", "→"),
        Binding("left", "prev_page", "←"),
        Binding("down", "next_page", "Next", show=False),
        Binding("up", "prev_page", "Prev", show=False),
        Binding("space", "next_page", "Next", show=False),
        Binding("pagedown", "next_page", "Next", show=False),
        Binding("pageup", "prev_page", "Prev", show=False),
        Binding("home", "first_page", "First", show=False),
        Binding("end", "last_page", "Last", show=False),
        Binding("g", "toggle_page_input", "Go to"),
        Binding("=", "zoom_in", "+Zoom"),
        Binding("minus", "zoom_out", "-Zoom"),
        Binding("0", "actual_size", "100%"),
        Binding("f", "fit_page", "Fit", show=False),
        Binding("w", "fit_width", "Width", show=False),
        Binding("1", "mode('single')", "Single"),
        Binding("2", "mode('dual-ltr')", "LTR"),
        Binding("3", "mode('dual-rtl')", "RTL"),
        Binding("shift+left", "swipe('left')", "Swipe ←", show=False),
        Binding("shift+right", "swipe('right')", "Swipe →", show=False),
        Binding("o", "open_file", "Open"),
    ]

    def __init__(self, surface: PageView) -> None:
        super().__init__()
        self._surface = surface
        self._entering_page = False

    @property
    def fa(self) -> FolioApp:
        return self.app  # type: ignore[return-value]

    @property
    def machine(self) -> ReaderStateMachine:
        return self.fa.machine

    def compose(self) -> ComposeResult:
        yield Static("", id="reader-header", markup=False)
        with Horizontal(id="page-bar"):
            yield Input(placeholder="Page number (Enter to go)", id="page-input")
        with VerticalScroll(id="page-scroll"):
            yield self._surface
        yield Footer()

    def on_mount(self) -> None:
        self.update_header(self.machine.state)

    def on_screen_resume(self) -> None:
        self.update_header(self.machine.state)

    def update_header(self, state: ReaderState) -> None:
        if not self.is_mounted:
            return
        if state.total_pages == 0:
            text = " No document"
        else:
            parts = [
                f" {self.machine.display_name}",
                f"P {state.current_page}/{state.total_pages}",
                state.mode.label,
                state.zoom.label,
            ]
            text = "  │  ".join(parts)
        self.query_one("#reader-header", Static).update(text)
        if not self._entering_page:
            self.query_one("#page-input", Input).value = (
                str(state.current_page) if state.total_pages else ""
            )

    # ── Surface notifications ──────────────────────

    @on(PageView.PageChanged)
    def on_page_changed(self, event: PageView.PageChanged) -> None:
        self.machine.on_surface_reported_index(event.index)

    # ── Navigation ────────────────────────────────

    def action_next_page(self) -> None:
        self.machine.go_to_next()

    def action_prev_page(self) -> None:
        self.machine.go_to_previous()

    def action_first_page(self) -> None:
        self.machine.go_to_first()

    def action_last_page(self) -> None:
        self.machine.go_to_last()

    def action_swipe(self, direction: str) -> None:
        self._surface.turn(swipe_step(SwipeDirection(direction), self.machine.mode))

    def action_toggle_page_input(self) -> None:
        bar = self.query_one("#page-bar")
        inp = self.query_one("#page-input", Input)
        self._entering_page = not self._entering_page
        bar.styles.display = "block" if self._entering_page else "none"
        if self._entering_page:
            inp.value = ""
            inp.focus()
        else:
            self._surface.focus()

    @on(Input.Submitted, "#page-input")
    def on_page_submitted(self, event: Input.Submitted) -> None:
        try:
            page = int(event.value.strip())
        except ValueError:
            self.notify(f"Not a page number: {event.value}", severity="warning")
            return
        if page != 0:
            self.machine.go_to_page(page)
        self.action_toggle_page_input()

    # ── Zoom & Mode ───────────────────────────────

    def action_zoom_in(self) -> None:
        self.machine.zoom_in()

    def action_zoom_out(self) -> None:
        self.machine.zoom_out()

    def action_actual_size(self) -> None:
        self.machine.reset_zoom()

    def action_fit_page(self) -> None:
        self.machine.set_zoom(ZoomLevel.FIT_PAGE)

    def action_fit_width(self) -> None:
        self.machine.set_zoom(ZoomLevel.FIT_WIDTH)

    def action_mode(self, value: str) -> None:
        self.machine.set_mode(ReadingMode(value))

    # ── Files & Back ──────────────────────────────

    def action_open_file(self) -> None:
        self.fa.pick_file()

    def action_go_back(self) -> None:
        if self._entering_page:
            self.action_toggle_page_input()
            return
        self.app.pop_screen()
