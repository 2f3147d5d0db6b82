"""Stateless, token-driven snapshot browser menus."""

__version__ = "0.1.0"
