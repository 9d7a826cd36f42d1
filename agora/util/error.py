"""Errors raised while wiring the application, before any request runs.

These are programming or deployment mistakes. They are never mapped to HTTP
responses.
"""


class UtilError(Exception):
    """Base for wiring errors."""


class ConfigurationError(UtilError):
    """Settings that must not be used in the current environment."""


class DependencyInjectionError(UtilError):
    """A provider the container needs was never registered."""
