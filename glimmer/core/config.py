# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Persistent application configuration for Glimmer.

Settings are stored as a JSON file in the OS-appropriate config directory
(``~/.config/Glimmer`` on Linux).  The engine only relies on the get/set
contract of :class:`Config`; the file format is private to this module.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any

from PySide6.QtCore import QStandardPaths

log = logging.getLogger(__name__)


# -- Defaults --------------------------------------------------------------

_APP_DIR_NAME = "Glimmer"
_CONFIG_FILE  = "settings.json"


def _config_dir() -> Path:
    """Return (and create) the per-user config directory."""
    base = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppConfigLocation,
    )
    path = Path(base) if base else Path.home() / ".config" / _APP_DIR_NAME
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_path() -> Path:
    return _config_dir() / _CONFIG_FILE


# -- Config data -----------------------------------------------------------

@dataclass
class Config:
    """All user-facing settings.  Serialises to / from JSON."""

    # Decoder
    decoder: str = "auto"                 # module id or "auto"
    audio_backend: str = "auto"           # module id or "auto"
    prefer_hevc: bool = False
    enable_hdr: bool = False
    audio_configuration: str = "stereo"   # stereo / 5.1 / 7.1

    # Debug
    debug_logging: bool = False
    debug_log_level: str = "WARNING"      # DEBUG / INFO / WARNING / ERROR

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load from disk, returning defaults if the file is missing or bad.

        Unknown keys in the JSON (left over from older versions) are
        silently ignored so that adding or removing Config fields never
        causes a crash.
        """
        path = path or config_path()
        if not path.exists():
            return cls()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
            return _safe_dataclass_from_dict(cls, raw)
        except (OSError, ValueError, TypeError) as exc:
            log.warning("Ignoring unreadable settings file %s: %s", path, exc)
            return cls()

    def save(self, path: Path | None = None) -> None:
        """Write current settings to disk atomically."""
        path = path or config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(asdict(self), indent=2, ensure_ascii=False)

        fd, tmp = tempfile.mkstemp(
            suffix=".json", dir=str(path.parent), prefix=".tmp_settings_"
        )
        try:
            os.close(fd)
            Path(tmp).write_text(text, encoding="utf-8")
            Path(tmp).replace(path)
        except BaseException:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise

    # ------------------------------------------------------------------
    # Key access
    # ------------------------------------------------------------------

    @classmethod
    def keys(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def get(self, key: str) -> Any:
        if key not in self.keys():
            raise KeyError(key)
        return getattr(self, key)

    def set(self, key: str, value: Any) -> None:
        if key not in self.keys():
            raise KeyError(key)
        setattr(self, key, value)


def _safe_dataclass_from_dict(dataclass_type: type, value: dict[str, Any]):
    """Build dataclass instance while ignoring unknown serialized keys."""
    known = {f.name for f in fields(dataclass_type)}
    filtered = {k: v for k, v in value.items() if k in known}
    return dataclass_type(**filtered)
