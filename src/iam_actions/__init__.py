"""Discover the permission actions a cloud service exposes."""

__version__ = "0.1.0"
