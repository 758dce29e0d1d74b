"""Storefront API: product catalog and user accounts over HTTP."""

__version__ = "0.1.0"
