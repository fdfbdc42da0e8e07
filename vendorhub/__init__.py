"""Vendor Hub API - vendor registration, update and listing behind token auth."""

__version__ = "1.0.0"
