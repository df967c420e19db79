"""Textual CSS for folio."""

APP_CSS = """
Screen {
    background: $surface;
}

/* Dialogs share one frame; the border colour marks the kind. */
ModalScreen {
    align: center middle;
}

.dialog {
    width: 64;
    height: auto;
    max-height: 80%;
    padding: 1 2;
    background: $panel;
    border: round $accent;
}

.dialog.error {
    border: round $error;
}

.dialog.tall {
    width: 80%;
    height: 80%;
}

.dialog-title {
    width: 100%;
    text-align: center;
    text-style: bold;
}

.dialog.error .dialog-title {
    color: $error;
}

.dialog-body {
    width: 100%;
    text-align: center;
    padding: 1 0;
}

.dialog-buttons {
    width: 100%;
    height: auto;
    align-horizontal: center;
}

.dialog-buttons Button {
    margin: 0 1;
}

#file-tree {
    height: 1fr;
}

/* Library */
#library-header {
    dock: top;
    height: 1;
    padding: 0 1;
    background: $accent;
    color: $text;
    text-style: bold;
}

#recent-table {
    height: 1fr;
}

#empty-state {
    display: none;
    height: 1fr;
    content-align: center middle;
    color: $text-muted;
}

#empty-state.visible {
    display: block;
}

/* Reader */
#reader-header {
    dock: top;
    height: 1;
    padding: 0 1;
    background: $accent;
    color: $text;
}

#page-bar {
    display: none;
    dock: bottom;
    height: 3;
    padding: 0 1;
}

#page-input {
    width: 30;
}

#page-scroll {
    height: 1fr;
}

#page-view {
    width: 100%;
    padding: 0 2;
}

#page-view.fit-page {
    height: 1fr;
    overflow: hidden;
}
"""
