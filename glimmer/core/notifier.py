# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Command handler behind the decoder settings pane.

The presentation layer calls :meth:`SettingsNotifier.set` when the user
changes a control and re-renders from the returned (and emitted)
:class:`SettingsState`.  All work happens synchronously inside ``set``;
``state_changed`` subscribers run on the caller's thread before it returns.
"""

from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from typing import Any

from PySide6.QtCore import QObject, Signal

from glimmer.core.binding import ConfigurationBinding
from glimmer.core.modules import ModuleKind, ModuleRegistry, PlatformFacts
from glimmer.core.resolver import (
    CandidateList, resolve_audio_channels, resolve_by_id, resolve_candidates,
)
from glimmer.core.rules import HDR_HELP_URL, RULE_INPUTS, DerivedState, FieldState, derive_state

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsState:
    """Everything the decoder pane needs to draw itself."""
    video_decoders: CandidateList
    audio_backends: CandidateList
    audio_channels: CandidateList
    hevc: FieldState
    hdr: FieldState
    restart_required: bool
    video_label: str
    audio_label: str


class SettingsNotifier(QObject):
    """Applies setting changes and publishes the derived state."""

    state_changed = Signal(object)   # SettingsState

    def __init__(
        self,
        registry: ModuleRegistry,
        binding: ConfigurationBinding,
        facts: PlatformFacts,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._binding = binding
        self._restart_required = False
        self._load(facts)

    # -- Lifecycle ---------------------------------------------------------

    def _load(self, facts: PlatformFacts) -> None:
        self._facts = facts
        self._video = resolve_candidates(self._registry, ModuleKind.VIDEO, facts)
        self._audio = resolve_candidates(self._registry, ModuleKind.AUDIO, facts)
        self._channels = resolve_audio_channels(self._registry, facts)
        self._derived = self._derive()

    def refresh_facts(self, facts: PlatformFacts) -> SettingsState:
        """Rebuild candidate lists and field states for new host facts.

        The restart flag is kept: it only ever goes from False to True.
        """
        log.debug("Platform facts refreshed: %s", facts)
        self._load(facts)
        return self._publish()

    # -- Queries -----------------------------------------------------------

    @property
    def facts(self) -> PlatformFacts:
        return self._facts

    @property
    def restart_required(self) -> bool:
        return self._restart_required

    def get(self, field: str) -> Any:
        return self._binding.get(field)

    def state(self) -> SettingsState:
        return self._snapshot()

    # -- Commands ----------------------------------------------------------

    def set(self, field: str, value: Any) -> SettingsState:
        """Store *value*, recompute what depends on it and publish.

        The restart check runs on every call, whatever *field* is.  When the
        running audio is provided by the decoder, no selectable backend can
        match it, so the first ``set`` of any field marks a restart.
        """
        self._binding.set(field, value)
        self._update_restart_flag()
        if field in RULE_INPUTS:
            self._derived = self._derive()
        return self._publish()

    def open_hdr_help(self) -> None:
        """Open the HDR documentation page in the user's browser."""
        webbrowser.open(HDR_HELP_URL)

    # -- Internals ---------------------------------------------------------

    def _update_restart_flag(self) -> None:
        if self._restart_required:
            return
        binding = self._binding
        decoder = resolve_by_id(
            self._registry, ModuleKind.VIDEO, binding.get("decoder"), self._facts,
        )
        audio = resolve_by_id(
            self._registry, ModuleKind.AUDIO, binding.get("audio_backend"), self._facts,
        )
        if decoder != binding.active_decoder_id or audio != binding.active_audio_id:
            self._restart_required = True
            log.info(
                "Restart required: running %s/%s, selected %s/%s",
                binding.active_decoder_id, binding.active_audio_id,
                binding.get("decoder"), binding.get("audio_backend"),
            )

    def _derive(self) -> DerivedState:
        name = self._registry.display_name(ModuleKind.VIDEO, self._binding.active_decoder_id)
        derived = derive_state(self._binding.config, self._facts, name)
        log.debug("Dependent fields: hevc=%s hdr=%s", derived.hevc, derived.hdr)
        return derived

    def _snapshot(self) -> SettingsState:
        binding = self._binding
        video_name = self._registry.display_name(ModuleKind.VIDEO, binding.active_decoder_id)
        audio_name = self._registry.display_name(ModuleKind.AUDIO, binding.active_audio_id)
        return SettingsState(
            video_decoders=self._video,
            audio_backends=self._audio,
            audio_channels=self._channels,
            hevc=self._derived.hevc,
            hdr=self._derived.hdr,
            restart_required=self._restart_required,
            video_label=f"Video decoder - using {video_name}",
            audio_label=f"Audio backend - using {audio_name}",
        )

    def _publish(self) -> SettingsState:
        state = self._snapshot()
        self.state_changed.emit(state)
        return state
