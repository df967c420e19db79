"""Reading state models: modes, zoom levels and layout flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReadingMode(Enum):
    SINGLE_PAGE = "single"
    TWO_PAGE_LTR = "dual-ltr"
    TWO_PAGE_RTL = "dual-rtl"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @property
    def is_dual(self) -> bool:
        return self is not ReadingMode.SINGLE_PAGE


_MODE_LABELS = {
    ReadingMode.SINGLE_PAGE: "Single Page",
    ReadingMode.TWO_PAGE_LTR: "Two Pages (LTR)",
    ReadingMode.TWO_PAGE_RTL: "Two Pages (RTL)",
}


class ZoomLevel(Enum):
    FIT_PAGE = "fit-page"
    FIT_WIDTH = "fit-width"
    PERCENT_50 = "50%"
    PERCENT_75 = "75%"
    PERCENT_100 = "100%"
    PERCENT_125 = "125%"
    PERCENT_150 = "150%"
    PERCENT_200 = "200%"

    @property
    def scale(self) -> Optional[float]:
        """Fixed scale factor, or None when computed from the viewport."""
        return _SCALES.get(self)

    @property
    def label(self) -> str:
        if self is ZoomLevel.FIT_PAGE:
            return "Fit Page"
        if self is ZoomLevel.FIT_WIDTH:
            return "Fit Width"
        return self.value

    @classmethod
    def steps(cls) -> list[ZoomLevel]:
        """Percent levels in increasing order, used by zoom in/out."""
        return sorted(_SCALES, key=_SCALES.__getitem__)


_SCALES = {
    ZoomLevel.PERCENT_50: 0.5,
    ZoomLevel.PERCENT_75: 0.75,
    ZoomLevel.PERCENT_100: 1.0,
    ZoomLevel.PERCENT_125: 1.25,
    ZoomLevel.PERCENT_150: 1.5,
    ZoomLevel.PERCENT_200: 2.0,
}


@dataclass(frozen=True)
class LayoutFlags:
    display_mode: str = "single"  # single, dual
    book: bool = False
    native_rtl: bool = False

    @property
    def is_dual(self) -> bool:
        return self.display_mode == "dual"

    @classmethod
    def for_mode(cls, mode: ReadingMode, supports_native_rtl: bool) -> LayoutFlags:
        if not mode.is_dual:
            return cls()
        rtl = mode is ReadingMode.TWO_PAGE_RTL
        return cls(display_mode="dual", book=True, native_rtl=rtl and supports_native_rtl)


@dataclass
class ReaderState:
    current_page: int = 1
    total_pages: int = 0
    mode: ReadingMode = ReadingMode.SINGLE_PAGE
    zoom: ZoomLevel = ZoomLevel.FIT_PAGE
    document_identity: Optional[str] = None


@dataclass(frozen=True)
class RestoredProgress:
    page: int
    mode: ReadingMode = ReadingMode.SINGLE_PAGE
