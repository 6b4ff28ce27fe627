# Copyright (C) 2025-2026 Glimmer Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

import logging
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path

_CACHE_DIR = Path(__file__).resolve().parent / "cache"
_CRASH_LOG = _CACHE_DIR / "latest.log"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _install_crash_hook() -> None:
    """Dump unhandled exceptions to ``cache/latest.log`` before exiting."""
    previous = sys.excepthook

    def hook(exc_type, exc, tb):
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        try:
            _CACHE_DIR.mkdir(parents=True, exist_ok=True)
            with _CRASH_LOG.open("w", encoding="utf-8") as fh:
                fh.write(f"Glimmer crashed at {stamp} (Python {sys.version.split()[0]}, {sys.platform})\n\n")
                traceback.print_exception(exc_type, exc, tb, file=fh)
        except OSError:
            pass
        previous(exc_type, exc, tb)

    sys.excepthook = hook


def _configure_logging(cfg) -> None:
    """WARNING to stderr by default; the debug settings add a log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    level = logging.WARNING
    if cfg.debug_logging:
        level = logging.getLevelName(cfg.debug_log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        _CACHE_DIR.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(_CACHE_DIR / "glimmer_debug.log", encoding="utf-8"))
    logging.basicConfig(level=level, format=_LOG_FORMAT, handlers=handlers, force=True)


def active_modules(registry, cfg, facts) -> tuple[str, str]:
    """Ids of the video decoder and audio backend this process runs."""
    from glimmer.core import ModuleKind
    from glimmer.core.resolver import resolve_running

    decoder = resolve_running(registry, ModuleKind.VIDEO, cfg.decoder, facts)
    audio = resolve_running(registry, ModuleKind.AUDIO, cfg.audio_backend, facts)
    return decoder or "", audio or ""


def _print_state(state) -> None:
    """Dump the decoder pane state, one section per control."""
    print(state.video_label)
    for entry in state.video_decoders:
        print(f"  {entry.value:<8} {entry.label}")
    print(state.audio_label)
    for entry in state.audio_backends:
        print(f"  {entry.value:<8} {entry.label}")
    print("Sound channels")
    for entry in state.audio_channels:
        marker = " (default)" if entry.is_fallback else ""
        print(f"  {entry.value:<8} {entry.label}{marker}")
    print(f"Prefer H265: {'enabled' if state.hevc.enabled else 'disabled'} - {state.hevc.reason}")
    print(f"HDR: {'enabled' if state.hdr.enabled else 'disabled'} - {state.hdr.reason}")


def main():
    _install_crash_hook()
    from glimmer.core import Config, ConfigurationBinding, SettingsNotifier, default_registry
    from glimmer.core.probe import platform_facts

    cfg = Config.load()
    _configure_logging(cfg)

    registry = default_registry()
    facts = platform_facts()
    active_decoder, active_audio = active_modules(registry, cfg, facts)

    binding = ConfigurationBinding(cfg, active_decoder, active_audio)
    notifier = SettingsNotifier(registry, binding, facts)
    _print_state(notifier.state())
    return 0


if __name__ == "__main__":
    sys.exit(main())
