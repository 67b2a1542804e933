"""Release window resolution and release-notes generation."""

__version__ = "0.1.0"
