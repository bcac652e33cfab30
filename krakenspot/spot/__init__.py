"""Kraken spot connector."""
