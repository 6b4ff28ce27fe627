"""Tests for the module catalogs and registry."""

from glimmer.core.modules import (
    AUDIO_DECODER_PROVIDED, ModuleDefinition, ModuleKind, ModuleRegistry,
    ModuleRequirements, PlatformFacts, default_registry,
)


class TestModuleRequirements:
    def test_no_constraints_accepts_anything(self) -> None:
        assert ModuleRequirements().verify(PlatformFacts())

    def test_os_name(self) -> None:
        req = ModuleRequirements(os_names=frozenset({"webos"}))
        assert req.verify(PlatformFacts(os_name="webos"))
        assert not req.verify(PlatformFacts(os_name="linux"))

    def test_min_version_inclusive(self) -> None:
        req = ModuleRequirements(min_os_version=(5,))
        assert req.verify(PlatformFacts(os_version=(5,)))
        assert req.verify(PlatformFacts(os_version=(5, 2)))
        assert not req.verify(PlatformFacts(os_version=(4, 9)))

    def test_max_version_exclusive(self) -> None:
        req = ModuleRequirements(max_os_version=(5,))
        assert req.verify(PlatformFacts(os_version=(4, 10)))
        assert not req.verify(PlatformFacts(os_version=(5,)))

    def test_arch(self) -> None:
        req = ModuleRequirements(archs=frozenset({"aarch64"}))
        assert req.verify(PlatformFacts(arch="aarch64"))
        assert not req.verify(PlatformFacts(arch="x86_64"))

    def test_all_libraries_required(self) -> None:
        req = ModuleRequirements(libraries=frozenset({"libpulse", "libasound"}))
        assert not req.verify(PlatformFacts(libraries=frozenset({"libpulse"})))
        assert req.verify(PlatformFacts(libraries=frozenset({"libpulse", "libasound", "x"})))


class TestModuleRegistry:
    def test_enumerate_returns_whole_catalog_in_order(self, bare_linux: PlatformFacts) -> None:
        registry = default_registry()
        ids = [m.id for m in registry.enumerate(ModuleKind.VIDEO, bare_linux)]
        assert ids == ["ndl", "lgnc", "smp", "mmal", "ffmpeg"]

    def test_enumerate_does_not_filter(self) -> None:
        never = ModuleDefinition("never", "Never", ModuleKind.AUDIO, lambda facts: False)
        registry = ModuleRegistry(video=(), audio=(never,))
        assert registry.enumerate(ModuleKind.AUDIO, PlatformFacts()) == (never,)

    def test_by_id(self) -> None:
        registry = default_registry()
        module = registry.by_id(ModuleKind.AUDIO, "pulse")
        assert module is not None
        assert module.name == "PulseAudio"
        assert module.kind is ModuleKind.AUDIO

    def test_by_id_unknown_is_none(self) -> None:
        registry = default_registry()
        assert registry.by_id(ModuleKind.VIDEO, "vaapi") is None
        # ids are per kind
        assert registry.by_id(ModuleKind.AUDIO, "ffmpeg") is None

    def test_display_name(self) -> None:
        registry = default_registry()
        assert registry.display_name(ModuleKind.VIDEO, "ffmpeg") == "FFmpeg"
        assert registry.display_name(ModuleKind.AUDIO, AUDIO_DECODER_PROVIDED) == "Decoder provided"
        assert registry.display_name(ModuleKind.VIDEO, "mystery") == "mystery"

    def test_channel_configs_start_with_stereo(self) -> None:
        configs = default_registry().channel_configs
        assert configs[0].id == "stereo"
        assert [c.channels for c in configs] == sorted(c.channels for c in configs)
