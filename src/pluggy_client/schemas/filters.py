"""
Request-side option objects: search filters and connect token options.

Each serializes to the API's camelCase names, leaving unset fields out.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any


def _format_date(value: date | str | None) -> str | None:
    if isinstance(value, date):
        # datetime is a date subclass; the API filters by day
        return value.strftime("%Y-%m-%d")
    return value


@dataclass
class TransactionFilters:
    """
    Filters for GET /transactions.

    from_date/to_date: bounds of the transaction date (date or yyyy-mm-dd)
    page_size: amount of transactions to retrieve per page
    page: page to retrieve, used to compute the offset
    """

    from_date: date | str | None = None
    to_date: date | str | None = None
    page_size: int | None = None
    page: int | None = None

    def to_params(self) -> dict[str, Any]:
        params = {
            "from": _format_date(self.from_date),
            "to": _format_date(self.to_date),
            "pageSize": self.page_size,
            "page": self.page,
        }
        return {k: v for k, v in params.items() if v is not None}


@dataclass
class ConnectorFilters:
    """
    Filters for GET /connectors.

    name: connector name or alike name
    countries: country codes of the available connectors
    types: connector types to include
    sandbox: also return sandbox connectors
    """

    name: str | None = None
    countries: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)
    sandbox: bool | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.name:
            params["name"] = self.name
        if self.countries:
            params["countries"] = list(self.countries)
        if self.types:
            params["types"] = [getattr(t, "value", t) for t in self.types]
        if self.sandbox is not None:
            params["sandbox"] = self.sandbox
        return params


@dataclass
class ConnectTokenOptions:
    """Options for POST /connect_token."""

    webhook_url: str | None = None
    client_user_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.webhook_url is not None:
            result["webhookUrl"] = self.webhook_url
        if self.client_user_id is not None:
            result["clientUserId"] = self.client_user_id
        return result
