# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a machine, wheel or plugboard is built from bad settings."""
