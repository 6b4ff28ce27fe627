# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Enablement rules for settings that depend on other settings.

The H265 checkbox is usable only when the running decoder can decode H265.
The HDR checkbox is usable whenever the decoder reports any HDR tier; with
H265 off it stays clickable and only the hint changes.  Nothing here writes
to the configuration: a stored ``enable_hdr`` survives every change.
"""

from __future__ import annotations

from dataclasses import dataclass

from glimmer.core.modules import HdrTier, PlatformFacts

HDR_HELP_URL = "https://github.com/mariotaku/moonlight-tv/wiki/HDR-Support"

# Inputs of derive_state that live in the configuration.
RULE_INPUTS: frozenset[str] = frozenset({"decoder", "prefer_hevc"})


@dataclass(frozen=True)
class FieldState:
    enabled: bool
    reason: str


@dataclass(frozen=True)
class DerivedState:
    hevc: FieldState
    hdr: FieldState


def hevc_state(facts: PlatformFacts, decoder_name: str) -> FieldState:
    if not facts.video_decoder_hevc_support:
        return FieldState(False, f"{decoder_name} decoder doesn't support H265 codec.")
    return FieldState(True, "H265 usually has clearer graphics, and is required for using HDR.")


def hdr_state(prefer_hevc: bool, facts: PlatformFacts, decoder_name: str) -> FieldState:
    if facts.hdr_support_tier is HdrTier.NONE:
        return FieldState(False, f"{decoder_name} decoder doesn't support HDR.")
    if not prefer_hevc:
        return FieldState(True, "H265 is required to use HDR.")
    return FieldState(
        True,
        "HDR is only supported on certain games and when connecting to supported monitor.",
    )


def derive_state(config, facts: PlatformFacts, decoder_name: str) -> DerivedState:
    """Compute both dependent field states.

    *config* is anything with a ``prefer_hevc`` attribute.  *decoder_name*
    is the display name of the decoder that is running right now, which is
    the one the facts describe.
    """
    return DerivedState(
        hevc=hevc_state(facts, decoder_name),
        hdr=hdr_state(bool(config.prefer_hevc), facts, decoder_name),
    )
