"""Unit tests for password generation."""

import pytest

from devswiss.core.password import (
    AMBIGUOUS,
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    EmptyCharacterPool,
    NoCharacterSets,
    PasswordConfig,
    generate_password,
)


class TestCharset:
    def test_default_pool_has_all_classes(self):
        assert PasswordConfig().charset() == UPPERCASE + LOWERCASE + NUMBERS + SYMBOLS

    def test_exclude_ambiguous(self):
        pool = PasswordConfig(exclude_ambiguous=True).charset()
        assert not set(AMBIGUOUS) & set(pool)
        assert "A" in pool

    def test_exclude_chars(self):
        pool = PasswordConfig(exclude_chars="abc!").charset()
        assert not set("abc!") & set(pool)

    def test_no_character_sets(self):
        config = PasswordConfig(uppercase=False, lowercase=False, numbers=False, symbols=False)
        with pytest.raises(NoCharacterSets, match="At least one character set must be enabled"):
            config.charset()

    def test_everything_excluded(self):
        config = PasswordConfig(
            uppercase=False, lowercase=False, symbols=False, exclude_chars=NUMBERS
        )
        with pytest.raises(EmptyCharacterPool):
            config.charset()


class TestGeneratePassword:
    def test_default_length(self):
        assert len(generate_password()) == 16

    def test_custom_length(self):
        assert len(generate_password(PasswordConfig(length=64))) == 64

    def test_zero_length(self):
        assert generate_password(PasswordConfig(length=0)) == ""

    def test_negative_length(self):
        with pytest.raises(ValueError):
            generate_password(PasswordConfig(length=-1))

    def test_only_digits(self):
        config = PasswordConfig(length=50, uppercase=False, lowercase=False, symbols=False)
        assert set(generate_password(config)) <= set(NUMBERS)

    def test_respects_exclusions(self):
        config = PasswordConfig(length=200, exclude_ambiguous=True, exclude_chars="xyz")
        assert not set(generate_password(config)) & set(AMBIGUOUS + "xyz")

    def test_passwords_differ(self):
        passwords = {generate_password(PasswordConfig(length=32)) for _ in range(5)}
        assert len(passwords) == 5
