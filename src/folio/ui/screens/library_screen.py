from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Static

from folio.library.models import RecentEntry, format_last_opened
from folio.ui.screens.dialogs import ConfirmDialog

if TYPE_CHECKING:
    from folio.app import FolioApp


class LibraryScreen(Screen):
    """Home screen: the most recently opened PDFs with their saved position."""

    BINDINGS = [
        Binding("o", "open_file", "Open"),
        Binding("r", "resume", "Reader"),
        Binding("d", "remove_entry", "Remove"),
        Binding("C", "clear_recent", "Clear all"),
        Binding("q", "quit_app", "Quit"),
    ]

    @property
    def fa(self) -> FolioApp:
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        yield Static("", id="library-header", markup=False)
        yield DataTable(id="recent-table", cursor_type="row", zebra_stripes=True)
        yield Static(
            "No recent files. Press o to open a PDF.", id="empty-state", markup=False
        )
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#recent-table", DataTable)
        table.add_columns("Name", "Page", "Mode", "Last opened")
        self.refresh_entries()

    def on_screen_resume(self) -> None:
        self.refresh_entries()

    def refresh_entries(self) -> None:
        entries = self.fa.db.list()[: self.fa.config.home_recent_limit]
        table = self.query_one("#recent-table", DataTable)
        table.clear()
        for entry in entries:
            table.add_row(*self._row(entry), key=entry.key)
        table.display = bool(entries)
        self.query_one("#empty-state").set_class(not entries, "visible")
        self.query_one("#library-header", Static).update(
            f"Folio | {len(entries)} recent" if entries else "Folio"
        )
        if entries:
            table.focus()

    @staticmethod
    def _row(entry: RecentEntry) -> tuple[str, str, str, str]:
        page = f"{entry.current_page}/{entry.total_pages}" if entry.total_pages else "-"
        return (
            entry.display_name,
            page,
            entry.mode.label,
            format_last_opened(entry.last_opened),
        )

    def _selected_entry(self) -> RecentEntry | None:
        table = self.query_one("#recent-table", DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return self.fa.db.get(str(row_key.value))

    # ── Actions ──

    @on(DataTable.RowSelected, "#recent-table")
    def _open_selected(self, event: DataTable.RowSelected) -> None:
        entry = self.fa.db.get(str(event.row_key.value))
        if entry is None:
            return
        if not self.fa.open_recent(entry):
            self.refresh_entries()

    def action_open_file(self) -> None:
        self.fa.pick_file()

    def action_resume(self) -> None:
        self.fa.show_reader()

    def action_remove_entry(self) -> None:
        entry = self._selected_entry()
        if entry is None:
            return
        self.fa.db.remove(entry.key)
        self.refresh_entries()
        self.notify(f"Removed {entry.display_name}")

    def action_clear_recent(self) -> None:
        if not self.fa.db.list():
            return

        def cleared(confirmed: bool | None) -> None:
            if confirmed:
                self.fa.db.clear()
                self.refresh_entries()

        self.app.push_screen(
            ConfirmDialog("Forget all recent files?", confirm_label="Clear"), cleared
        )

    async def action_quit_app(self) -> None:
        await self.fa.action_quit()
