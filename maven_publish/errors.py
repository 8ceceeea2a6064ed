"""Exceptions recognized as run failures."""

from __future__ import annotations


class PublishError(RuntimeError):
    """Base class for failures that terminate a publish run."""


class ConfigurationError(PublishError):
    """Raised when the configuration cannot drive a publish run."""
