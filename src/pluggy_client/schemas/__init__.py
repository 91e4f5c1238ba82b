"""
Data-transfer types mirroring the Pluggy API JSON contracts.

Resources are parsed with `from_api_response`; request-side option objects
serialize back to the API's camelCase names.
"""

from .account import Account, BankData, CreditData, Transaction
from .common import (
    ConnectToken,
    ErrorDetail,
    ErrorResponse,
    ListResponse,
    PageResponse,
    as_datetime,
    coerce_enum,
)
from .connector import Connector, ConnectorCredential, ConnectorHealth, CredentialSelectOption
from .enums import (
    ERROR_ITEM_STATUSES,
    FINISHED_ITEM_STATUSES,
    AccountSubType,
    AccountType,
    ConnectorType,
    CredentialType,
    CurrencyCode,
    ExecutionStatus,
    InvestmentType,
    ItemStatus,
)
from .filters import ConnectorFilters, ConnectTokenOptions, TransactionFilters
from .identity import Address, Email, IdentityRelation, IdentityResponse, PhoneNumber
from .investment import Category, Investment
from .item import Item

__all__ = [
    # Resources
    "Account",
    "BankData",
    "CreditData",
    "Transaction",
    "Connector",
    "ConnectorCredential",
    "ConnectorHealth",
    "CredentialSelectOption",
    "Item",
    "Investment",
    "Category",
    "IdentityResponse",
    "PhoneNumber",
    "Email",
    "Address",
    "IdentityRelation",
    "ConnectToken",
    # Envelopes and errors
    "ListResponse",
    "PageResponse",
    "ErrorResponse",
    "ErrorDetail",
    # Enums
    "AccountType",
    "AccountSubType",
    "ConnectorType",
    "CredentialType",
    "CurrencyCode",
    "ExecutionStatus",
    "InvestmentType",
    "ItemStatus",
    "FINISHED_ITEM_STATUSES",
    "ERROR_ITEM_STATUSES",
    # Request options
    "TransactionFilters",
    "ConnectorFilters",
    "ConnectTokenOptions",
    # Helpers
    "as_datetime",
    "coerce_enum",
]
