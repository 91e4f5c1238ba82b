"""
Enumerations of the API's string constants.

Values the API adds later than this module are not rejected: parsers keep
them as plain strings (see `coerce_enum`).
"""

from enum import Enum


class CurrencyCode(str, Enum):
    USD = "USD"
    ARS = "ARS"
    BRL = "BRL"


class AccountType(str, Enum):
    BANK = "BANK"
    CREDIT = "CREDIT"


class AccountSubType(str, Enum):
    SAVINGS_ACCOUNT = "SAVINGS_ACCOUNT"
    CHECKING_ACCOUNT = "CHECKING_ACCOUNT"
    # Older API versions spell it this way
    CHECKINGS_ACCOUNT = "CHECKINGS_ACCOUNT"
    CREDIT_CARD = "CREDIT_CARD"


class InvestmentType(str, Enum):
    MUTUAL_FUND = "MUTUAL_FUND"
    SECURITY = "SECURITY"
    EQUITY = "EQUITY"
    FIXED_INCOME = "FIXED_INCOME"
    ETF = "ETF"
    COE = "COE"
    OTHER = "OTHER"


class ConnectorType(str, Enum):
    PERSONAL_BANK = "PERSONAL_BANK"
    BUSINESS_BANK = "BUSINESS_BANK"
    INVOICE = "INVOICE"
    INVESTMENT = "INVESTMENT"
    TELECOMMUNICATION = "TELECOMMUNICATION"
    DIGITAL_ECONOMY = "DIGITAL_ECONOMY"
    PAYMENT_ACCOUNT = "PAYMENT_ACCOUNT"
    OTHER = "OTHER"


class CredentialType(str, Enum):
    """
    Form input type of a connector credential.

    NUMBER: numeric only data
    TEXT: alpha-numeric data
    PASSWORD: alpha-numeric password, must be obfuscated
    IMAGE: QR code or captcha image to show to the user
    SELECT: one of the credential's `options`
    """

    NUMBER = "number"
    PASSWORD = "password"
    TEXT = "text"
    IMAGE = "image"
    SELECT = "select"


class ItemStatus(str, Enum):
    """Overall status of an Item's connection with its institution."""

    LOGIN_ERROR = "LOGIN_ERROR"
    OUTDATED = "OUTDATED"
    UPDATED = "UPDATED"
    UPDATING = "UPDATING"
    WAITING_USER_INPUT = "WAITING_USER_INPUT"


class ExecutionStatus(str, Enum):
    """
    Fine-grained step of the current Item execution.

    Transitions are driven by the server; the client only reports them.
    """

    CREATING = "CREATING"
    CREATE_ERROR = "CREATE_ERROR"
    CREATED = "CREATED"
    LOGIN_IN_PROGRESS = "LOGIN_IN_PROGRESS"
    WAITING_USER_INPUT = "WAITING_USER_INPUT"
    LOGIN_MFA_IN_PROGRESS = "LOGIN_MFA_IN_PROGRESS"
    ACCOUNTS_IN_PROGRESS = "ACCOUNTS_IN_PROGRESS"
    TRANSACTIONS_IN_PROGRESS = "TRANSACTIONS_IN_PROGRESS"
    CREDITCARDS_IN_PROGRESS = "CREDITCARDS_IN_PROGRESS"
    INVESTMENTS_IN_PROGRESS = "INVESTMENTS_IN_PROGRESS"
    IDENTITY_IN_PROGRESS = "IDENTITY_IN_PROGRESS"
    MERGING = "MERGING"
    SUCCESS = "SUCCESS"
    PARTIAL_SUCCESS = "PARTIAL_SUCCESS"
    ERROR = "ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ALREADY_LOGGED_IN = "ALREADY_LOGGED_IN"
    SITE_NOT_AVAILABLE = "SITE_NOT_AVAILABLE"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"
    ACCOUNT_NEEDS_ACTION = "ACCOUNT_NEEDS_ACTION"
    USER_INPUT_TIMEOUT = "USER_INPUT_TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"


# An Item in one of these statuses is no longer syncing
FINISHED_ITEM_STATUSES = frozenset(
    {ItemStatus.LOGIN_ERROR, ItemStatus.OUTDATED, ItemStatus.UPDATED}
)
ERROR_ITEM_STATUSES = frozenset({ItemStatus.LOGIN_ERROR, ItemStatus.OUTDATED})
