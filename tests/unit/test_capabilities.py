"""Unit tests for the runtime capability set."""

import pytest

from devswiss.core.capabilities import Capability, CapabilitySet
from devswiss.core.config import DevSwissConfig
from devswiss.core.errors import CapabilityUnavailable


class TestCapability:
    def test_compositors_require_png(self):
        for capability in (Capability.LOGO, Capability.BACKGROUND, Capability.AI_ART):
            assert capability.requires == (Capability.PNG,)

    def test_renderers_have_no_requirements(self):
        for capability in (Capability.TERMINAL, Capability.PNG, Capability.SVG):
            assert capability.requires == ()


class TestCapabilitySet:
    def test_all(self):
        caps = CapabilitySet.all()
        assert caps.names() == ["terminal", "png", "svg", "logo", "background", "ai_art"]

    def test_of_accepts_strings(self):
        caps = CapabilitySet.of("terminal", "svg")
        assert caps.is_enabled(Capability.TERMINAL)
        assert caps.is_enabled("svg")
        assert not caps.is_enabled(Capability.PNG)

    def test_names_in_declaration_order(self):
        assert CapabilitySet.of("svg", "terminal").names() == ["terminal", "svg"]

    def test_unknown_capability_rejected(self):
        with pytest.raises(ValueError):
            CapabilitySet.of("hologram")

    def test_dependency_must_be_enabled(self):
        caps = CapabilitySet.of("logo", "terminal")
        assert not caps.is_enabled(Capability.LOGO)
        assert caps.is_enabled(Capability.TERMINAL)

    def test_require_passes(self):
        CapabilitySet.of("png", "logo").require(Capability.LOGO)

    def test_require_raises(self):
        with pytest.raises(CapabilityUnavailable) as exc_info:
            CapabilitySet.of("terminal").require("png")
        assert exc_info.value.capability == "png"
        assert str(exc_info.value) == "png output is not available in this build"

    def test_require_reports_requested_capability(self):
        with pytest.raises(CapabilityUnavailable) as exc_info:
            CapabilitySet.of("background").require(Capability.BACKGROUND)
        assert exc_info.value.capability == "background"

    def test_contains(self):
        caps = CapabilitySet.of("terminal")
        assert "terminal" in caps
        assert Capability.PNG not in caps
        assert "hologram" not in caps

    def test_from_config(self):
        cfg = DevSwissConfig(_env_file=None, capabilities=["terminal", "png"])
        assert CapabilitySet.from_config(cfg).names() == ["terminal", "png"]

    def test_repr(self):
        assert repr(CapabilitySet.of("svg")) == "CapabilitySet(['svg'])"
