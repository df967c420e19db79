"""Folio - terminal PDF reader."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from textual.app import App

from folio.config import AppConfig, load_config
from folio.documents.base import DocumentError
from folio.documents.pdf_document import PdfProvider
from folio.library.database import Database
from folio.library.models import RecentEntry
from folio.reader.models import ReaderState
from folio.reader.state import ReaderStateMachine
from folio.ui.screens.dialogs import ErrorDialog, FilePickerScreen
from folio.ui.screens.library_screen import LibraryScreen
from folio.ui.screens.reader_screen import ReaderScreen
from folio.ui.themes import APP_CSS
from folio.ui.widgets.page_view import PageView

log = logging.getLogger(__name__)


class FolioApp(App):
    """A terminal PDF reader with single, two-page and RTL book modes."""

    TITLE = "Folio"
    CSS = APP_CSS

    def __init__(
        self, config: AppConfig | None = None, open_file: str | None = None
    ) -> None:
        super().__init__()
        self.config = config or load_config()
        self.db = Database(self.config.db_path, max_entries=self.config.max_recent_files)
        self.surface = PageView(native_rtl=self.config.native_rtl, id="page-view")
        self.machine = ReaderStateMachine(
            self.surface,
            store=self.db,
            provider=PdfProvider(),
            mode=self.config.default_mode,
            zoom=self.config.default_zoom,
            on_change=self._on_reader_changed,
        )
        self._reader = ReaderScreen(self.surface)
        self._open_file = open_file

    def on_mount(self) -> None:
        self.install_screen(self._reader, name="reader")
        self.push_screen(LibraryScreen())
        if self._open_file:
            self.open_path(self._open_file)

    def _on_reader_changed(self, state: ReaderState) -> None:
        self._reader.update_header(state)

    def _report(self, error: DocumentError) -> None:
        log.warning("Open failed: %s", error)
        self.push_screen(ErrorDialog(error.message))

    def open_path(self, path: str | Path) -> bool:
        """Open a file in the reader. Called from the screens."""
        try:
            self.machine.open_path(path)
        except DocumentError as e:
            self._report(e)
            return False
        self.show_reader()
        return True

    def open_recent(self, entry: RecentEntry) -> bool:
        try:
            self.machine.open_recent(entry)
        except DocumentError as e:
            self._report(e)
            return False
        self.show_reader()
        return True

    def pick_file(self) -> None:
        """Show the PDF picker, starting next to the most recently opened file."""
        start = Path.home()
        for entry in self.db.list():
            folder = Path(entry.key).parent
            if folder.is_dir():
                start = folder
                break
        self.push_screen(FilePickerScreen(start), self._on_file_picked)

    def _on_file_picked(self, path: Path | None) -> None:
        if path is not None:
            self.open_path(path)

    def show_reader(self) -> None:
        if self.machine.document is None:
            self.notify("No document open", severity="warning")
            return
        if self.screen is not self._reader:
            self.push_screen("reader")

    async def action_quit(self) -> None:
        self.machine.close()
        self.db.close()
        self.exit()


def _setup_logging(config: AppConfig) -> None:
    handler = logging.FileHandler(config.log_path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root = logging.getLogger("folio")
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)


def main() -> None:
    config = load_config()
    _setup_logging(config)

    open_file: str | None = None
    if len(sys.argv) > 1:
        open_file = sys.argv[1]

    app = FolioApp(config=config, open_file=open_file)
    app.run()


if __name__ == "__main__":
    main()
