# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Catalog of decoder and audio backend modules.

Each catalog is ordered by priority, most preferred first.  That order is
also the order "Automatic" walks when it picks a concrete module, so keep
it meaningful when adding entries.

A module advertises what it needs from the host through a
:class:`ModuleRequirements` record; :meth:`ModuleRequirements.verify` turns
it into the capability predicate evaluated against :class:`PlatformFacts`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class ModuleKind(Enum):
    VIDEO = "video"
    AUDIO = "audio"


class HdrTier(Enum):
    """How much HDR output the active video decoder can produce."""
    NONE = 0
    PARTIAL = 1
    FULL = 2


@dataclass(frozen=True)
class PlatformFacts:
    """Host capability facts, supplied once at startup by the probe."""
    video_decoder_hevc_support: bool = False
    hdr_support_tier: HdrTier = HdrTier.NONE
    max_audio_channels: int = 0          # 0 = unknown
    os_name: str = ""                    # "webos" / "raspbian" / "linux" ...
    os_version: tuple[int, ...] = ()
    arch: str = ""
    libraries: frozenset[str] = frozenset()


@dataclass(frozen=True)
class ModuleRequirements:
    """Declarative host requirements for one module.

    Empty collections and ``None`` versions mean "no constraint".
    ``max_os_version`` is exclusive.
    """
    os_names: frozenset[str] = frozenset()
    min_os_version: tuple[int, ...] | None = None
    max_os_version: tuple[int, ...] | None = None
    archs: frozenset[str] = frozenset()
    libraries: frozenset[str] = frozenset()

    def verify(self, facts: PlatformFacts) -> bool:
        if self.os_names and facts.os_name not in self.os_names:
            return False
        if self.min_os_version is not None and facts.os_version < self.min_os_version:
            return False
        if self.max_os_version is not None and facts.os_version >= self.max_os_version:
            return False
        if self.archs and facts.arch not in self.archs:
            return False
        return self.libraries <= facts.libraries


@dataclass(frozen=True)
class ModuleDefinition:
    """One pluggable video decoder or audio backend."""
    id: str
    name: str
    kind: ModuleKind
    predicate: Callable[[PlatformFacts], bool] = field(compare=False)

    def supports(self, facts: PlatformFacts) -> bool:
        return bool(self.predicate(facts))


@dataclass(frozen=True)
class AudioChannelConfig:
    """One selectable speaker layout."""
    id: str
    name: str
    channels: int


def _module(
    mid: str,
    name: str,
    kind: ModuleKind,
    *,
    os_names: tuple[str, ...] = (),
    min_os: tuple[int, ...] | None = None,
    max_os: tuple[int, ...] | None = None,
    archs: tuple[str, ...] = (),
    libraries: tuple[str, ...] = (),
) -> ModuleDefinition:
    """Shorthand factory for catalog entries."""
    requirements = ModuleRequirements(
        os_names=frozenset(os_names),
        min_os_version=min_os,
        max_os_version=max_os,
        archs=frozenset(archs),
        libraries=frozenset(libraries),
    )
    return ModuleDefinition(id=mid, name=name, kind=kind, predicate=requirements.verify)


# -- Stock catalogs ----------------------------------------------------------

_ARM = ("armv7l", "aarch64")

VIDEO_DECODERS: tuple[ModuleDefinition, ...] = (
    _module("ndl",    "webOS NDL",      ModuleKind.VIDEO, os_names=("webos",), min_os=(5,)),
    _module("lgnc",   "webOS Legacy",   ModuleKind.VIDEO, os_names=("webos",), max_os=(5,)),
    _module("smp",    "Starfish",       ModuleKind.VIDEO, os_names=("webos",), libraries=("libSDL2",)),
    _module("mmal",   "Raspberry Pi",   ModuleKind.VIDEO, os_names=("raspbian",), archs=_ARM,
            libraries=("libmmal",)),
    _module("ffmpeg", "FFmpeg",         ModuleKind.VIDEO, libraries=("libavcodec",)),
)

AUDIO_BACKENDS: tuple[ModuleDefinition, ...] = (
    _module("ndl",   "webOS NDL",  ModuleKind.AUDIO, os_names=("webos",), min_os=(5,)),
    _module("pulse", "PulseAudio", ModuleKind.AUDIO, libraries=("libpulse",)),
    _module("alsa",  "ALSA",       ModuleKind.AUDIO, libraries=("libasound",)),
    _module("sdl",   "SDL",        ModuleKind.AUDIO, libraries=("libSDL2",)),
)

# Ascending channel count.
AUDIO_CHANNEL_CONFIGS: tuple[AudioChannelConfig, ...] = (
    AudioChannelConfig("stereo", "Stereo",       2),
    AudioChannelConfig("5.1",    "5.1 Surround", 6),
    AudioChannelConfig("7.1",    "7.1 Surround", 8),
)

STEREO = AUDIO_CHANNEL_CONFIGS[0]

# Active audio id used when the video decoder renders audio itself.
AUDIO_DECODER_PROVIDED = "decoder"


class ModuleRegistry:
    """Immutable, priority-ordered catalogs shared by reference."""

    def __init__(
        self,
        video: tuple[ModuleDefinition, ...] = VIDEO_DECODERS,
        audio: tuple[ModuleDefinition, ...] = AUDIO_BACKENDS,
        channels: tuple[AudioChannelConfig, ...] = AUDIO_CHANNEL_CONFIGS,
    ) -> None:
        self._catalogs: dict[ModuleKind, tuple[ModuleDefinition, ...]] = {
            ModuleKind.VIDEO: tuple(video),
            ModuleKind.AUDIO: tuple(audio),
        }
        self._by_id: dict[ModuleKind, dict[str, ModuleDefinition]] = {
            kind: {m.id: m for m in catalog} for kind, catalog in self._catalogs.items()
        }
        self._channels = tuple(channels)

    def enumerate(self, kind: ModuleKind, facts: PlatformFacts) -> tuple[ModuleDefinition, ...]:
        """Return every module of *kind* in priority order.

        *facts* is accepted for symmetry with the resolver; nothing is
        filtered here.
        """
        return self._catalogs[kind]

    def by_id(self, kind: ModuleKind, module_id: str) -> ModuleDefinition | None:
        """Look up a module by id.  Returns ``None`` when it is unknown."""
        return self._by_id[kind].get(module_id)

    def display_name(self, kind: ModuleKind, module_id: str) -> str:
        if kind is ModuleKind.AUDIO and module_id == AUDIO_DECODER_PROVIDED:
            return "Decoder provided"
        module = self.by_id(kind, module_id)
        return module.name if module else module_id

    @property
    def channel_configs(self) -> tuple[AudioChannelConfig, ...]:
        return self._channels


def default_registry() -> ModuleRegistry:
    """Build a registry from the stock catalogs.

    Call once at startup and pass the result around.
    """
    return ModuleRegistry()
