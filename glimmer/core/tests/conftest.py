"""Shared fixtures for the settings engine tests."""

import pytest
from PySide6.QtCore import QCoreApplication

from glimmer.core.modules import HdrTier, PlatformFacts


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Signals work without an event loop, but keep one app instance around."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def webos6() -> PlatformFacts:
    return PlatformFacts(
        video_decoder_hevc_support=True,
        hdr_support_tier=HdrTier.FULL,
        max_audio_channels=6,
        os_name="webos",
        os_version=(6, 0),
        arch="armv7l",
        libraries=frozenset({"libSDL2", "libavcodec"}),
    )


@pytest.fixture
def bare_linux() -> PlatformFacts:
    return PlatformFacts(
        video_decoder_hevc_support=False,
        hdr_support_tier=HdrTier.NONE,
        max_audio_channels=2,
        os_name="linux",
        os_version=(6, 1),
        arch="x86_64",
        libraries=frozenset({"libavcodec", "libpulse"}),
    )
