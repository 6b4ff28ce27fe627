# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
The settings the decoder pane edits, bound to the persistent config.

The binding also remembers which modules were actually started with this
process.  Those ids never change after construction; comparing them with
the stored selection is how a pending restart is detected.
"""

from __future__ import annotations

from typing import Any

from glimmer.core.config import Config

BOUND_FIELDS: tuple[str, ...] = (
    "decoder",
    "audio_backend",
    "prefer_hevc",
    "enable_hdr",
    "audio_configuration",
)


class UnknownSettingError(KeyError):
    """Raised for a field name the binding does not expose."""


class ConfigurationBinding:
    """get/set access to the bound fields of a :class:`Config`."""

    def __init__(self, config: Config, active_decoder_id: str, active_audio_id: str) -> None:
        self._config = config
        self._active_decoder_id = active_decoder_id
        self._active_audio_id = active_audio_id

    @property
    def active_decoder_id(self) -> str:
        return self._active_decoder_id

    @property
    def active_audio_id(self) -> str:
        return self._active_audio_id

    @property
    def config(self) -> Config:
        return self._config

    def get(self, field: str) -> Any:
        self._check(field)
        return self._config.get(field)

    def set(self, field: str, value: Any) -> None:
        """Store *value* as-is.

        No check against the current candidate lists: a module that is not
        offered today may be again after the host changes.
        """
        self._check(field)
        self._config.set(field, value)

    def save(self, path=None) -> None:
        self._config.save(path)

    @staticmethod
    def _check(field: str) -> None:
        if field not in BOUND_FIELDS:
            raise UnknownSettingError(field)
