"""Publish locally built Maven artifacts to a remote repository."""

__version__ = "1.0.0"
