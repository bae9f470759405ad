"""Shopfront API: user and product records over HTTP."""

__version__ = "0.1.0"
