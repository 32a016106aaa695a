"""Process-wide CLI state: the ``--config`` path and the config loaded from it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import UnifiedConfig


@dataclass
class _Context:
    config_path: Path | None = None
    loaded: UnifiedConfig | None = None


_context = _Context()


def get_config_path() -> Path | None:
    """Get the config path given on the command line, if any."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    """Set the command-line config path and drop any cached config."""
    _context.config_path = path
    _context.loaded = None


def get_loaded_config() -> UnifiedConfig | None:
    """Return the config cached by the last discovery, if any."""
    return _context.loaded


def cache_loaded_config(config: UnifiedConfig | None) -> None:
    """Remember a discovered config for the rest of the process."""
    _context.loaded = config
