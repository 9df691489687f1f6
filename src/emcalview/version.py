"""Module which stores the current package version."""

__version__ = "0.3.0"
