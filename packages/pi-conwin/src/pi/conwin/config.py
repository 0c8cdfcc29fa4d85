"""Compositor configuration.

Values come from defaults, then an optional JSON file, then the
environment.  The CLI applies its own flags last.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from pi.conwin.store import ORPHAN_POLICIES, OrphanPolicy

__all__ = ["Config", "LOG_LEVELS", "load_config"]

LOG_LEVELS = ("debug", "info", "warning", "error")

# JSON file keys -> Config field names
_FILE_KEYS = {
    "orphanPolicy": "orphan_policy",
    "clearBeforeDraw": "clear_before_draw",
    "hideCursor": "hide_cursor",
    "logLevel": "log_level",
}


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name)
    if value is None or value == "":
        return None
    return value == "1"


@dataclass
class Config:
    """Compositor settings."""

    orphan_policy: OrphanPolicy = "keep"
    clear_before_draw: bool = True
    hide_cursor: bool = True
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.orphan_policy not in ORPHAN_POLICIES:
            raise ValueError(
                f"orphan_policy must be one of {ORPHAN_POLICIES}, got {self.orphan_policy!r}"
            )
        self.log_level = self.log_level.lower()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}"
            )

    def merged(self, overrides: dict[str, Any]) -> Config:
        """Return a copy with non-``None`` *overrides* applied."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return replace(self, **changes)

    @classmethod
    def from_file(cls, path: str | Path, base: Config | None = None) -> Config:
        """Load camelCase settings from a JSON object file.

        Unknown keys are ignored.
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")
        overrides = {_FILE_KEYS[k]: v for k, v in data.items() if k in _FILE_KEYS}
        return (base or cls()).merged(overrides)

    @classmethod
    def from_env(cls, base: Config | None = None) -> Config:
        """Apply ``PI_CONWIN_*`` environment variables on top of *base*."""
        overrides: dict[str, Any] = {
            "orphan_policy": os.environ.get("PI_CONWIN_ORPHAN_POLICY") or None,
            "clear_before_draw": _env_flag("PI_CONWIN_CLEAR"),
            "hide_cursor": _env_flag("PI_CONWIN_HIDE_CURSOR"),
            "log_level": os.environ.get("PI_CONWIN_LOG_LEVEL") or None,
        }
        return (base or cls()).merged(overrides)


def load_config(path: str | Path | None = None) -> Config:
    """Defaults, then *path* (if given), then the environment."""
    config = Config()
    if path is not None:
        config = Config.from_file(path, config)
    return Config.from_env(config)
