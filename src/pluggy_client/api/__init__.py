"""
Pluggy API client.

Provides:
- Connectors, items (create/update/MFA/delete), accounts, transactions,
  investments, identity and categories
- Connect token creation for frontend item connection
- ISO-8601 dates revived into datetimes
- Classified errors: connection, client (4xx), server (5xx), validation and
  connector credential validation

Authenticates with the X-API-KEY header.
"""

from .base import (
    BaseApi,
    PluggyAPIError,
    PluggyClientError,
    PluggyConnectionError,
    PluggyConnectorValidationError,
    PluggyError,
    PluggyServerError,
    PluggyValidationError,
    format_query_params,
    sanitize_body,
)
from .client import Parameters, PluggyClient

__all__ = [
    "BaseApi",
    "PluggyClient",
    "Parameters",
    "PluggyError",
    "PluggyConnectionError",
    "PluggyAPIError",
    "PluggyClientError",
    "PluggyServerError",
    "PluggyValidationError",
    "PluggyConnectorValidationError",
    "format_query_params",
    "sanitize_body",
]
