"""Runtime capability set for renderers and compositors.

Image output and AI art generation are optional parts of the toolkit. Rather
than selecting them at install time, the set of available outputs is a
runtime value: a :class:`CapabilitySet` built from configuration. Asking for
a disabled output raises :class:`~devswiss.core.errors.CapabilityUnavailable`
instead of failing somewhere inside a renderer.

Usage Example
-------------
    >>> caps = CapabilitySet.of("terminal", "svg")
    >>> caps.is_enabled(Capability.PNG)
    False
    >>> caps.require(Capability.PNG)
    Traceback (most recent call last):
    ...
    CapabilityUnavailable: png output is not available in this build
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

from .errors import CapabilityUnavailable

if TYPE_CHECKING:
    from .config import DevSwissConfig

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Outputs the pipeline can be asked to produce."""

    TERMINAL = "terminal"
    PNG = "png"
    SVG = "svg"
    LOGO = "logo"
    BACKGROUND = "background"
    AI_ART = "ai_art"

    @property
    def requires(self) -> tuple["Capability", ...]:
        """Capabilities this one builds on.

        Every compositor produces a raster, so it needs PNG output as well.
        """
        if self in (Capability.LOGO, Capability.BACKGROUND, Capability.AI_ART):
            return (Capability.PNG,)
        return ()


class CapabilitySet:
    """Immutable set of enabled capabilities.

    Attributes
    ----------
    enabled : frozenset[Capability]
        Capabilities available to the pipeline
    """

    def __init__(self, enabled: Iterable[Capability | str]) -> None:
        self.enabled: frozenset[Capability] = frozenset(Capability(c) for c in enabled)

    @classmethod
    def all(cls) -> "CapabilitySet":
        """Return a set with every capability enabled."""
        return cls(Capability)

    @classmethod
    def of(cls, *capabilities: Capability | str) -> "CapabilitySet":
        return cls(capabilities)

    @classmethod
    def from_config(cls, config: "DevSwissConfig") -> "CapabilitySet":
        """Build the capability set declared by a configuration object."""
        caps = cls(config.capabilities)
        logger.info(f"Enabled capabilities: {sorted(c.value for c in caps.enabled)}")
        return caps

    def is_enabled(self, capability: Capability | str) -> bool:
        capability = Capability(capability)
        if capability not in self.enabled:
            return False
        return all(dep in self.enabled for dep in capability.requires)

    def require(self, capability: Capability | str) -> None:
        """Raise if ``capability`` (or one it builds on) is disabled.

        Raises:
            CapabilityUnavailable: If the capability is not enabled
        """
        capability = Capability(capability)
        if not self.is_enabled(capability):
            raise CapabilityUnavailable(capability.value)

    def names(self) -> list[str]:
        """Return the enabled capability names in declaration order."""
        return [c.value for c in Capability if c in self.enabled]

    def __contains__(self, capability: object) -> bool:
        try:
            return self.is_enabled(Capability(capability))
        except ValueError:
            return False

    def __repr__(self) -> str:
        return f"CapabilitySet({self.names()!r})"
