"""Modal dialogs: PDF picker, error message and yes/no confirmation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Label

from folio.documents.pdf_document import PdfProvider


class PdfDirectoryTree(DirectoryTree):
    """Directory tree showing folders first, then PDF files only."""

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        visible = [
            p
            for p in paths
            if not p.name.startswith(".") and (p.is_dir() or PdfProvider.can_handle(p))
        ]
        return sorted(visible, key=lambda p: (p.is_file(), p.name.casefold()))


class FilePickerScreen(ModalScreen[Path | None]):
    """Browse from `start` and return the chosen PDF, or None."""

    BINDINGS = [Binding("escape", "dismiss(None)", "Cancel")]

    def __init__(self, start: Path) -> None:
        super().__init__()
        self._start = start

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog tall"):
            yield Label("Open PDF", classes="dialog-title")
            yield PdfDirectoryTree(self._start, id="file-tree")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Cancel", id="picker-cancel")

    def on_mount(self) -> None:
        self.query_one(PdfDirectoryTree).focus()

    @on(DirectoryTree.FileSelected)
    def _picked(self, event: DirectoryTree.FileSelected) -> None:
        self.dismiss(Path(event.path))

    @on(Button.Pressed, "#picker-cancel")
    def _cancelled(self) -> None:
        self.dismiss(None)


class ErrorDialog(ModalScreen[None]):
    BINDINGS = [
        Binding("escape", "dismiss(None)", "OK"),
        Binding("enter", "dismiss(None)", "OK", show=False),
    ]

    def __init__(self, message: str, title: str = "Cannot open document") -> None:
        super().__init__()
        self._title = title
        self._message = message

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog error"):
            yield Label(self._title, classes="dialog-title", markup=False)
            yield Label(self._message, classes="dialog-body", markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", variant="primary")

    def on_button_pressed(self) -> None:
        self.dismiss(None)


class ConfirmDialog(ModalScreen[bool]):
    """Ask a yes/no question; dismisses with True only on yes."""

    BINDINGS = [
        Binding("y", "dismiss(True)", "Yes"),
        Binding("n", "dismiss(False)", "No"),
        Binding("escape", "dismiss(False)", "Cancel", show=False),
    ]

    def __init__(self, question: str, confirm_label: str = "Yes") -> None:
        super().__init__()
        self._question = question
        self._confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self._question, classes="dialog-body", markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button(f"{self._confirm_label} (y)", variant="error", id="confirm-yes")
                yield Button("Cancel (n)", id="confirm-no")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-yes")
