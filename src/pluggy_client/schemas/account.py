"""
Accounts of an Item and their transactions.
"""

from dataclasses import dataclass
from datetime import datetime

from .common import as_datetime, coerce_enum
from .enums import AccountSubType, AccountType, CurrencyCode


@dataclass
class BankData:
    """Bank-account specific data."""

    # Identifier of the account to make bank transfers to
    transfer_number: str | None = None
    closing_balance: float | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "BankData":
        return cls(
            transfer_number=data.get("transferNumber"),
            closing_balance=data.get("closingBalance"),
        )


@dataclass
class CreditData:
    """Credit-card specific data."""

    level: str | None = None
    brand: str | None = None
    balance_close_date: datetime | None = None
    balance_due_date: datetime | None = None
    available_credit_limit: float | None = None
    credit_limit: float | None = None
    balance_foreign_currency: float | None = None
    minimum_payment: float | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "CreditData":
        return cls(
            level=data.get("level"),
            brand=data.get("brand"),
            balance_close_date=as_datetime(data.get("balanceCloseDate")),
            balance_due_date=as_datetime(data.get("balanceDueDate")),
            available_credit_limit=data.get("availableCreditLimit"),
            credit_limit=data.get("creditLimit"),
            balance_foreign_currency=data.get("balanceForeignCurrency"),
            minimum_payment=data.get("minimumPayment"),
        )


@dataclass
class Account:
    """
    Bank or credit account retrieved from an Item.

    marketing_name is the name the institution gives the product for the
    client's level; owner/tax_number identify the account holder.
    """

    id: str
    item_id: str
    type: AccountType | str
    subtype: AccountSubType | str | None
    number: str
    balance: float
    name: str
    currency_code: CurrencyCode | str
    marketing_name: str | None = None
    owner: str | None = None
    tax_number: str | None = None
    bank_data: BankData | None = None
    credit_data: CreditData | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Account":
        bank_data = data.get("bankData")
        credit_data = data.get("creditData")
        return cls(
            id=data["id"],
            item_id=data.get("itemId", ""),
            type=coerce_enum(AccountType, data.get("type")),
            subtype=coerce_enum(AccountSubType, data.get("subtype")),
            number=data.get("number", ""),
            balance=data.get("balance", 0),
            name=data.get("name", ""),
            currency_code=coerce_enum(CurrencyCode, data.get("currencyCode")),
            marketing_name=data.get("marketingName"),
            owner=data.get("owner"),
            tax_number=data.get("taxNumber"),
            bank_data=BankData.from_api_response(bank_data) if bank_data else None,
            credit_data=CreditData.from_api_response(credit_data) if credit_data else None,
        )


@dataclass
class Transaction:
    """Movement of an account; `balance` is the account balance after it."""

    id: str
    account_id: str
    date: datetime | None
    description: str
    amount: float
    currency_code: CurrencyCode | str
    balance: float | None = None
    category: str | None = None
    provider_code: str | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Transaction":
        return cls(
            id=data["id"],
            account_id=data.get("accountId", ""),
            date=as_datetime(data.get("date")),
            description=data.get("description", ""),
            amount=data.get("amount", 0),
            currency_code=coerce_enum(CurrencyCode, data.get("currencyCode")),
            balance=data.get("balance"),
            category=data.get("category"),
            provider_code=data.get("providerCode"),
        )
