"""
Pluggy API client.

A thin, typed binding for the Pluggy financial-data aggregation API:
connectors, items, accounts, transactions, investments, identity and
categories, with ISO-8601 date revival and classified API errors.
"""

__version__ = "0.1.0"

from .api import (
    PluggyAPIError,
    PluggyClient,
    PluggyClientError,
    PluggyConnectionError,
    PluggyConnectorValidationError,
    PluggyError,
    PluggyServerError,
    PluggyValidationError,
)

__all__ = [
    "PluggyClient",
    "PluggyError",
    "PluggyConnectionError",
    "PluggyAPIError",
    "PluggyClientError",
    "PluggyServerError",
    "PluggyValidationError",
    "PluggyConnectorValidationError",
]
