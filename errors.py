# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every error the machine raises."""


class ConfigurationError(EnigmaError):
    """Unknown wheel type, malformed plug pairs, bad start positions."""


class InvalidCharacterError(EnigmaError):
    """A keystroke that is not a single uppercase Latin letter."""
