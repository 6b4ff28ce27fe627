"""Tests for the decoder pane's configuration binding."""

import pytest

from glimmer.core.binding import BOUND_FIELDS, ConfigurationBinding, UnknownSettingError
from glimmer.core.config import Config


def _binding(**overrides) -> ConfigurationBinding:
    return ConfigurationBinding(Config(**overrides), "ffmpeg", "pulse")


class TestConfigurationBinding:
    def test_get_reads_config(self) -> None:
        binding = _binding(decoder="mmal")
        assert binding.get("decoder") == "mmal"
        assert binding.get("audio_configuration") == "stereo"

    def test_set_writes_through(self) -> None:
        binding = _binding()
        binding.set("prefer_hevc", True)
        assert binding.config.prefer_hevc is True

    def test_set_accepts_unresolvable_value(self) -> None:
        binding = _binding()
        binding.set("decoder", "not-a-decoder")
        assert binding.get("decoder") == "not-a-decoder"

    def test_active_ids_do_not_follow_selection(self) -> None:
        binding = _binding()
        binding.set("decoder", "mmal")
        binding.set("audio_backend", "alsa")
        assert binding.active_decoder_id == "ffmpeg"
        assert binding.active_audio_id == "pulse"

    def test_active_ids_read_only(self) -> None:
        binding = _binding()
        with pytest.raises(AttributeError):
            binding.active_decoder_id = "mmal"

    @pytest.mark.parametrize("field", ["debug_logging", "volume"])
    def test_unbound_field(self, field: str) -> None:
        binding = _binding()
        with pytest.raises(UnknownSettingError):
            binding.get(field)
        with pytest.raises(KeyError):
            binding.set(field, True)

    def test_every_bound_field_is_a_config_key(self) -> None:
        assert set(BOUND_FIELDS) <= Config.keys()

    def test_save(self, tmp_path) -> None:
        binding = _binding()
        binding.set("enable_hdr", True)
        binding.save(tmp_path / "settings.json")
        assert Config.load(tmp_path / "settings.json").enable_hdr is True
