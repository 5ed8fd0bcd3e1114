#!/usr/bin/env python3
"""
KVBIND ERRORS
-------------
Error taxonomy shared by the store and the binder.

I/O failures are not wrapped: they surface as the built-in OSError family.

Author: KvBind Team
Date: 2026-10-18
"""

from typing import Optional


class ConfigError(Exception):
    """Base class for every error raised by kvbind itself."""


class NotFoundError(ConfigError, LookupError):
    """A name is present in neither the loaded values nor the defaults."""

    def __init__(self, name: str):
        super().__init__(f"config value not found: '{name}'")
        self.name = name


class MalformedValueError(ConfigError, ValueError):
    """A value exists but cannot be read as the requested type."""

    def __init__(self, name: str, value: str, expected: str, detail: Optional[str] = None):
        message = f"config value '{name}' = '{value}' is not a valid {expected}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.name = name
        self.value = value
        self.expected = expected


class UnsupportedTypeError(ConfigError, TypeError):
    """The bind target, or one of its fields, has no coercion rule."""
