"""Shared Kraken spot connector constants."""

DEFAULT_BASE_URL = "https://api.kraken.com/0"

DEFAULT_USER_AGENT = "krakenspot-python"

# Total request timeout in seconds when the request context has no deadline
DEFAULT_TIMEOUT = 30.0
