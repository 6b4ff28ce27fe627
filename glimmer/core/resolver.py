# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Turn registry catalogs into the candidate lists shown in the settings UI.

Everything here is a pure function of ``(registry, kind, facts)``: no
caching, no counters, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass

from glimmer.core.modules import (
    STEREO, ModuleKind, ModuleRegistry, PlatformFacts,
)

AUTO = "auto"
AUTO_LABEL = "Automatic"


@dataclass(frozen=True)
class CandidateEntry:
    """One selectable row in a dropdown."""
    label: str
    value: str
    is_fallback: bool = False


CandidateList = tuple[CandidateEntry, ...]


def resolve_candidates(
    registry: ModuleRegistry, kind: ModuleKind, facts: PlatformFacts,
) -> CandidateList:
    """Return ``Automatic`` followed by every compatible module of *kind*.

    Modules keep their registry priority order.
    """
    entries = [CandidateEntry(AUTO_LABEL, AUTO, is_fallback=True)]
    for module in registry.enumerate(kind, facts):
        if module.supports(facts):
            entries.append(CandidateEntry(module.name, module.id))
    return tuple(entries)


def supported_channel_count(facts: PlatformFacts) -> int:
    """Channel count the host can play, defaulting to stereo when unknown."""
    return facts.max_audio_channels if facts.max_audio_channels > 0 else STEREO.channels


def resolve_audio_channels(registry: ModuleRegistry, facts: PlatformFacts) -> CandidateList:
    """Return the speaker layouts the host can play.

    Stereo is always present and is the default-selected entry, even when
    the probe reports fewer than two channels.
    """
    supported = supported_channel_count(facts)
    stereo = next((c for c in registry.channel_configs if c.id == STEREO.id), STEREO)
    entries = [CandidateEntry(stereo.name, stereo.id, is_fallback=True)]
    for config in registry.channel_configs:
        if config.id == STEREO.id or config.channels > supported:
            continue
        entries.append(CandidateEntry(config.name, config.id))
    return tuple(entries)


def resolve_auto(
    registry: ModuleRegistry, kind: ModuleKind, facts: PlatformFacts,
) -> str | None:
    """Return the id ``Automatic`` stands for: the first compatible module."""
    for module in registry.enumerate(kind, facts):
        if module.supports(facts):
            return module.id
    return None


def resolve_by_id(
    registry: ModuleRegistry, kind: ModuleKind, module_id: str, facts: PlatformFacts,
) -> str | None:
    """Map a stored selection to the module it would run, or ``None``."""
    if module_id == AUTO:
        return resolve_auto(registry, kind, facts)
    module = registry.by_id(kind, module_id)
    return module.id if module else None


def resolve_running(
    registry: ModuleRegistry, kind: ModuleKind, module_id: str, facts: PlatformFacts,
) -> str | None:
    """Return the module a fresh start would run for the stored *module_id*.

    A stored module the host cannot run falls back to ``Automatic``.
    """
    module = registry.by_id(kind, module_id)
    if module is not None and module.supports(facts):
        return module.id
    return resolve_auto(registry, kind, facts)
