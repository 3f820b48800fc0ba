"""Local snippet catalog with tagging, search and an action log."""

__version__ = "0.1.0"
