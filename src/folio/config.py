"""Configuration management via .env file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, TypeVar

from dotenv import load_dotenv

from folio.reader.models import ReadingMode, ZoomLevel

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _xdg_data_home() -> Path:
    return Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def _xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


@dataclass
class AppConfig:
    # Paths
    data_dir: Path = field(default_factory=lambda: _xdg_data_home() / "folio")
    config_dir: Path = field(default_factory=lambda: _xdg_config_home() / "folio")
    db_path: Path = field(init=False)

    # Reading defaults
    default_mode: ReadingMode = ReadingMode.SINGLE_PAGE
    default_zoom: ZoomLevel = ZoomLevel.FIT_PAGE
    # Let the page view lay out right-to-left spreads itself instead of
    # reordering pages.
    native_rtl: bool = False

    # Recent files
    max_recent_files: int = 10
    home_recent_limit: int = 5

    log_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.db_path = self.data_dir / "folio.db"
        self.log_path = self.data_dir / "folio.log"
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.config_dir.mkdir(parents=True, exist_ok=True)


def _env_enum(name: str, enum_cls: type[E], default: E) -> E:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        log.warning("Ignoring %s=%r, using %s", name, raw, default.value)
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("Ignoring %s=%r, using %d", name, raw, default)
        return default
    return value if value > 0 else default


def load_config(env_path: Optional[Path] = None) -> AppConfig:
    """Load config from .env file. Searches CWD then config dir."""
    search_paths = [
        env_path,
        Path.cwd() / ".env",
        _xdg_config_home() / "folio" / ".env",
        Path.home() / ".env",
    ]
    for p in search_paths:
        if p and p.exists():
            load_dotenv(p)
            break

    defaults = AppConfig()
    return AppConfig(
        default_mode=_env_enum("FOLIO_DEFAULT_MODE", ReadingMode, defaults.default_mode),
        default_zoom=_env_enum("FOLIO_DEFAULT_ZOOM", ZoomLevel, defaults.default_zoom),
        native_rtl=_env_bool("FOLIO_NATIVE_RTL", defaults.native_rtl),
        max_recent_files=_env_int("FOLIO_MAX_RECENT", defaults.max_recent_files),
    )
