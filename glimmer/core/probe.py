# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Host capability probe.

Collects the :class:`PlatformFacts` the settings engine runs on.  The
engine never calls into this module; the launcher does, once, at startup.
Audio output capabilities come from ``sounddevice`` (PortAudio).
"""

from __future__ import annotations

import ctypes.util
import logging
import platform
from typing import Callable, Iterable

from glimmer.core.modules import HdrTier, PlatformFacts

log = logging.getLogger(__name__)

# Native libraries the stock module catalogs check for.
KNOWN_LIBRARIES: tuple[str, ...] = (
    "libavcodec", "libmmal", "libpulse", "libasound", "libSDL2",
)


def _query_devices() -> Iterable[dict]:
    import sounddevice as sd
    return sd.query_devices()


def query_max_output_channels(
    query_devices: Callable[[], Iterable[dict]] = _query_devices,
) -> int:
    """Return the largest output channel count of any device, 0 if unknown."""
    try:
        devices = list(query_devices())
    except Exception as exc:
        log.warning("Audio device query failed: %s", exc)
        return 0
    channels = [int(dev.get("max_output_channels", 0)) for dev in devices]
    return max(channels, default=0)


def available_libraries(
    names: Iterable[str] = KNOWN_LIBRARIES,
    find_library: Callable[[str], str | None] = ctypes.util.find_library,
) -> frozenset[str]:
    """Return the subset of *names* the dynamic loader can find."""
    found = set()
    for name in names:
        short = name[3:] if name.startswith("lib") else name
        if find_library(short):
            found.add(name)
    return frozenset(found)


def parse_version(text: str) -> tuple[int, ...]:
    """``"5.2.0-rc1"`` -> ``(5, 2, 0)``; stops at the first non-numeric part."""
    parts = []
    for piece in text.split("."):
        digits = ""
        for ch in piece:
            if not ch.isdigit():
                break
            digits += ch
        if not digits:
            break
        parts.append(int(digits))
        if len(digits) != len(piece):
            break
    return tuple(parts)


def _read_os_release() -> dict[str, str]:
    return platform.freedesktop_os_release()


def host_os(
    os_release: Callable[[], dict[str, str]] = _read_os_release,
) -> tuple[str, str]:
    """Return ``(name, version)`` of the host distribution.

    Prefers the os-release ``ID`` / ``VERSION_ID`` pair (``raspbian``,
    ``webos`` ...), which is what the module catalogs match on.  Hosts
    without os-release fall back to the kernel name and release.
    """
    try:
        release = os_release()
    except OSError as exc:
        log.debug("No os-release information: %s", exc)
        release = {}
    name = release.get("ID") or platform.system()
    version = release.get("VERSION_ID") if release.get("ID") else None
    return name.lower(), version or platform.release()


def platform_facts(
    *,
    hevc: bool = False,
    hdr: HdrTier = HdrTier.NONE,
    os_name: str | None = None,
    os_version: str | None = None,
    max_audio_channels: int | None = None,
    libraries: frozenset[str] | None = None,
) -> PlatformFacts:
    """Assemble facts for this host.

    Decoder capabilities (*hevc*, *hdr*) are reported by the running
    decoder, so the caller passes them in.  Anything left as ``None`` is
    probed.
    """
    if os_name is None or os_version is None:
        probed_name, probed_version = host_os()
        os_name = probed_name if os_name is None else os_name
        os_version = probed_version if os_version is None else os_version
    facts = PlatformFacts(
        video_decoder_hevc_support=hevc,
        hdr_support_tier=hdr,
        max_audio_channels=(
            query_max_output_channels() if max_audio_channels is None else max_audio_channels
        ),
        os_name=os_name.lower(),
        os_version=parse_version(os_version),
        arch=platform.machine(),
        libraries=available_libraries() if libraries is None else libraries,
    )
    log.debug("Platform facts: %s", facts)
    return facts
