"""Random password generation."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
AMBIGUOUS = "0O1lI"


class PasswordError(Exception):
    """Base class for password generation errors."""


class NoCharacterSets(PasswordError):
    def __init__(self) -> None:
        super().__init__("At least one character set must be enabled")


class EmptyCharacterPool(PasswordError):
    def __init__(self) -> None:
        super().__init__("No characters available after applying exclusions")


@dataclass
class PasswordConfig:
    """Options for :func:`generate_password`."""

    length: int = 16
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True
    exclude_ambiguous: bool = False
    exclude_chars: str = ""

    def charset(self) -> str:
        """Characters a password may be drawn from, in a stable order.

        Raises:
            NoCharacterSets: If every character class is disabled
            EmptyCharacterPool: If exclusions remove every character
        """
        enabled = [
            (self.uppercase, UPPERCASE),
            (self.lowercase, LOWERCASE),
            (self.numbers, NUMBERS),
            (self.symbols, SYMBOLS),
        ]
        pool = "".join(chars for flag, chars in enabled if flag)
        if not pool:
            raise NoCharacterSets()

        excluded = set(self.exclude_chars)
        if self.exclude_ambiguous:
            excluded.update(AMBIGUOUS)
        pool = "".join(c for c in pool if c not in excluded)

        if not pool:
            raise EmptyCharacterPool()
        return pool


def generate_password(config: PasswordConfig | None = None) -> str:
    """Generate a password using a cryptographically secure RNG.

    Raises:
        ValueError: If the length is negative
        PasswordError: If no characters are available
    """
    config = config or PasswordConfig()
    if config.length < 0:
        raise ValueError(f"Password length must be non-negative, got {config.length}")
    pool = config.charset()
    return "".join(secrets.choice(pool) for _ in range(config.length))
