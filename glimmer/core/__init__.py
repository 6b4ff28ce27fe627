"""Module selection and settings consistency for Glimmer.

Typical wiring::

    registry = default_registry()
    binding = ConfigurationBinding(Config.load(), active_decoder_id, active_audio_id)
    notifier = SettingsNotifier(registry, binding, platform_facts(...))
    notifier.state_changed.connect(pane.render)
    notifier.set("prefer_hevc", True)
"""

from .binding import BOUND_FIELDS, ConfigurationBinding, UnknownSettingError
from .config import Config
from .modules import (
    AUDIO_DECODER_PROVIDED, HdrTier, ModuleDefinition, ModuleKind, ModuleRegistry,
    PlatformFacts, default_registry,
)
from .notifier import SettingsNotifier, SettingsState
from .resolver import (
    AUTO, CandidateEntry, resolve_audio_channels, resolve_auto, resolve_by_id,
    resolve_candidates, resolve_running,
)
from .rules import DerivedState, FieldState, derive_state

__all__ = [
    "AUDIO_DECODER_PROVIDED",
    "AUTO",
    "BOUND_FIELDS",
    "CandidateEntry",
    "Config",
    "ConfigurationBinding",
    "DerivedState",
    "FieldState",
    "HdrTier",
    "ModuleDefinition",
    "ModuleKind",
    "ModuleRegistry",
    "PlatformFacts",
    "SettingsNotifier",
    "SettingsState",
    "UnknownSettingError",
    "default_registry",
    "derive_state",
    "resolve_audio_channels",
    "resolve_auto",
    "resolve_by_id",
    "resolve_candidates",
    "resolve_running",
]
