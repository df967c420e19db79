"""Data models for the recent files list."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from folio.reader.models import ReadingMode, RestoredProgress


@dataclass
class RecentEntry:
    key: str  # resolved file path
    display_name: str
    last_opened: float = field(default_factory=time.time)
    current_page: int = 1
    total_pages: int = 0
    mode: ReadingMode = ReadingMode.SINGLE_PAGE

    @property
    def progress(self) -> RestoredProgress:
        return RestoredProgress(page=self.current_page, mode=self.mode)


def format_last_opened(timestamp: float, now: Optional[float] = None) -> str:
    """Short label for a last-opened time: today's time, "Yesterday", or a date."""
    opened = datetime.fromtimestamp(timestamp)
    today = datetime.fromtimestamp(now if now is not None else time.time()).date()
    days = (today - opened.date()).days
    if days == 0:
        return f"Today {opened:%H:%M}"
    if days == 1:
        return "Yesterday"
    return f"{opened:%Y-%m-%d}"
