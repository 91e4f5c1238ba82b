"""
Investments of an Item, and transaction categories.
"""

from dataclasses import dataclass
from datetime import datetime

from .common import as_datetime, coerce_enum
from .enums import CurrencyCode, InvestmentType


@dataclass
class Investment:
    """
    Investment position held at the institution.

    date/value/quantity describe the quota at that date. `taxes` are charged
    to the investment, `taxes2` to its owner.
    """

    id: str
    item_id: str
    type: InvestmentType | str
    number: str
    balance: float
    name: str
    currency_code: CurrencyCode | str
    annual_rate: float | None = None
    date: datetime | None = None
    value: float | None = None
    quantity: float | None = None
    taxes: float | None = None
    taxes2: float | None = None
    amount_withdrawal: float | None = None
    amount_profit: float | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Investment":
        return cls(
            id=data["id"],
            item_id=data.get("itemId", ""),
            type=coerce_enum(InvestmentType, data.get("type")),
            number=data.get("number", ""),
            balance=data.get("balance", 0),
            name=data.get("name", ""),
            currency_code=coerce_enum(CurrencyCode, data.get("currencyCode")),
            annual_rate=data.get("annualRate"),
            date=as_datetime(data.get("date")),
            value=data.get("value"),
            quantity=data.get("quantity"),
            taxes=data.get("taxes"),
            taxes2=data.get("taxes2"),
            amount_withdrawal=data.get("amountWithdrawal"),
            amount_profit=data.get("amountProfit"),
        )


@dataclass
class Category:
    """Transaction category, optionally nested under a parent."""

    id: str
    description: str
    parent_id: str | None = None
    parent_description: str | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Category":
        return cls(
            id=data["id"],
            description=data.get("description", ""),
            parent_id=data.get("parentId"),
            parent_description=data.get("parentDescription"),
        )
