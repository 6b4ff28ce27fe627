"""Tests for the H265 / HDR dependency rules."""

from dataclasses import replace

from glimmer.core.config import Config
from glimmer.core.modules import HdrTier, PlatformFacts
from glimmer.core.rules import FieldState, derive_state


class TestHevcField:
    def test_unsupported(self, bare_linux: PlatformFacts) -> None:
        state = derive_state(Config(), bare_linux, "FFmpeg")
        assert state.hevc == FieldState(False, "FFmpeg decoder doesn't support H265 codec.")

    def test_supported(self, webos6: PlatformFacts) -> None:
        state = derive_state(Config(), webos6, "webOS NDL")
        assert state.hevc.enabled
        assert "required for using HDR" in state.hevc.reason

    def test_does_not_depend_on_preference(self, webos6: PlatformFacts) -> None:
        on = derive_state(Config(prefer_hevc=True), webos6, "webOS NDL")
        off = derive_state(Config(prefer_hevc=False), webos6, "webOS NDL")
        assert on.hevc == off.hevc


class TestHdrField:
    def test_no_decoder_support(self) -> None:
        facts = PlatformFacts(
            video_decoder_hevc_support=False, hdr_support_tier=HdrTier.NONE, max_audio_channels=2,
        )
        state = derive_state(Config(prefer_hevc=True), facts, "Starfish")
        assert state.hevc == FieldState(False, "Starfish decoder doesn't support H265 codec.")
        assert state.hdr == FieldState(False, "Starfish decoder doesn't support HDR.")

    def test_needs_hevc_stays_enabled(self, webos6: PlatformFacts) -> None:
        state = derive_state(Config(prefer_hevc=False), webos6, "webOS NDL")
        assert state.hdr == FieldState(True, "H265 is required to use HDR.")

    def test_ready(self, webos6: PlatformFacts) -> None:
        state = derive_state(Config(prefer_hevc=True), webos6, "webOS NDL")
        assert state.hdr.enabled
        assert state.hdr.reason.startswith("HDR is only supported on certain games")

    def test_partial_tier_counts_as_supported(self, webos6: PlatformFacts) -> None:
        facts = replace(webos6, hdr_support_tier=HdrTier.PARTIAL)
        assert derive_state(Config(prefer_hevc=True), facts, "x").hdr.enabled

    def test_toggling_hevc_off_keeps_hdr_value(self, webos6: PlatformFacts) -> None:
        cfg = Config(prefer_hevc=True, enable_hdr=True)
        before = derive_state(cfg, webos6, "webOS NDL")
        cfg.prefer_hevc = False
        after = derive_state(cfg, webos6, "webOS NDL")
        assert cfg.enable_hdr is True
        assert before.hdr.enabled and after.hdr.enabled
        assert before.hdr.reason != after.hdr.reason

    def test_derive_never_writes_config(self, bare_linux: PlatformFacts) -> None:
        cfg = Config(prefer_hevc=True, enable_hdr=True)
        derive_state(cfg, bare_linux, "FFmpeg")
        assert cfg == Config(prefer_hevc=True, enable_hdr=True)
