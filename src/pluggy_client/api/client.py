"""
Pluggy API client: one method per REST endpoint.
"""

import logging
from collections.abc import Iterator

from ..schemas import (
    Account,
    AccountType,
    Category,
    Connector,
    ConnectorFilters,
    ConnectToken,
    ConnectTokenOptions,
    IdentityResponse,
    Investment,
    InvestmentType,
    Item,
    ListResponse,
    PageResponse,
    Transaction,
    TransactionFilters,
)
from .base import BaseApi

logger = logging.getLogger(__name__)

# Name and value of each credential, e.g. {"user": "user-ok", "password": "password-ok"}
Parameters = dict[str, str]


class PluggyClient(BaseApi):
    """
    Client for the Pluggy API.

    Every method performs a single request and returns the parsed model.
    Errors surface as the PluggyError hierarchy from `api.base`:
    PluggyClientError for 403/404, PluggyValidationError for invalid
    arguments, PluggyConnectorValidationError for credentials rejected by
    the connector's rules, PluggyServerError for 5xx.
    """

    # Connectors

    def fetch_connectors(
        self,
        filters: ConnectorFilters | None = None,
        include_health: bool = False,
    ) -> ListResponse[Connector]:
        """
        Fetch all available connectors.

        Args:
            filters: Search filters (name, countries, types, sandbox)
            include_health: Include each connector's `health` field
        """
        params = filters.to_params() if filters else {}
        params["includeHealth"] = include_health
        data = self._get("connectors", params)
        return ListResponse.from_api_response(data, Connector.from_api_response)

    def fetch_connector(self, connector_id: int, include_health: bool = False) -> Connector:
        """
        Fetch a single connector.

        Raises:
            PluggyClientError: 404 if the connector does not exist or is not accessible
        """
        data = self._get(f"connectors/{connector_id}", {"includeHealth": include_health})
        return Connector.from_api_response(data)

    # Items

    def fetch_items(self) -> ListResponse[Item]:
        """Fetch all items of the client."""
        data = self._get("items")
        return ListResponse.from_api_response(data, Item.from_api_response)

    def fetch_item(self, item_id: str) -> Item:
        data = self._get(f"items/{item_id}")
        return Item.from_api_response(data)

    def create_item(
        self,
        connector_id: int,
        parameters: Parameters,
        webhook_url: str | None = None,
    ) -> Item:
        """
        Create an item, starting its first sync with the institution.

        Args:
            connector_id: Connector to connect with
            parameters: Name and value of each credential the connector needs
            webhook_url: URL to send item notifications to

        Raises:
            PluggyValidationError: If connector_id or webhook_url are invalid
            PluggyConnectorValidationError: If parameters fail connector validation rules
            PluggyClientError: 404 if the connector is not found, 403 if unauthorized
        """
        logger.info("Creating item for connector %s", connector_id)
        data = self._post(
            "items",
            body={
                "connectorId": connector_id,
                "parameters": parameters,
                "webhookUrl": webhook_url,
            },
            credentials=parameters,
        )
        return Item.from_api_response(data)

    def update_item(
        self,
        item_id: str,
        parameters: Parameters | None = None,
        webhook_url: str | None = None,
    ) -> Item:
        """
        Update an item's credentials or webhook, triggering a new sync.

        Raises:
            PluggyValidationError: If webhook_url is invalid
            PluggyConnectorValidationError: If parameters fail connector validation rules
            PluggyClientError: 404 if the item is not found, 403 if unauthorized
        """
        data = self._patch(
            f"items/{item_id}",
            body={
                "id": item_id,
                "parameters": parameters,
                "webhookUrl": webhook_url,
            },
            credentials=parameters,
        )
        return Item.from_api_response(data)

    def update_item_mfa(self, item_id: str, parameters: Parameters | None = None) -> Item:
        """
        Send the MFA value an item is waiting for.

        Args:
            item_id: Item in WAITING_USER_INPUT status
            parameters: Name of the requested MFA parameter and its value

        Raises:
            PluggyConnectorValidationError: If the MFA value fails connector validation rules
            PluggyClientError: 404 if the item is not waiting for MFA (or it was already sent)
        """
        data = self._post(f"items/{item_id}/mfa", body=parameters, credentials=parameters)
        return Item.from_api_response(data)

    def delete_item(self, item_id: str) -> None:
        """Delete an item and the data retrieved with it."""
        logger.info("Deleting item %s", item_id)
        self._delete(f"items/{item_id}")

    # Accounts & transactions

    def fetch_accounts(
        self,
        item_id: str,
        account_type: AccountType | str | None = None,
    ) -> ListResponse[Account]:
        """Fetch the accounts of an item, optionally only BANK or CREDIT ones."""
        data = self._get("accounts", {"itemId": item_id, "type": account_type})
        return ListResponse.from_api_response(data, Account.from_api_response)

    def fetch_account(self, account_id: str) -> Account:
        data = self._get(f"accounts/{account_id}")
        return Account.from_api_response(data)

    def fetch_transactions(
        self,
        account_id: str,
        filters: TransactionFilters | None = None,
    ) -> PageResponse[Transaction]:
        """
        Fetch one page of an account's transactions.

        Args:
            account_id: Account to list transactions of
            filters: Date range and paging options

        Returns:
            Page with the transactions and total/total_pages/page
        """
        params = filters.to_params() if filters else {}
        params["accountId"] = account_id
        data = self._get("transactions", params)
        return PageResponse.from_api_response(data, Transaction.from_api_response)

    def iter_transactions(
        self,
        account_id: str,
        filters: TransactionFilters | None = None,
    ) -> Iterator[Transaction]:
        """
        Iterate over all transactions of an account, page by page.

        Starts at `filters.page` (or the first page) and keeps the other
        filters for every page.

        Yields:
            Transaction objects
        """
        base = filters or TransactionFilters()
        page = base.page or 1
        while True:
            response = self.fetch_transactions(
                account_id,
                TransactionFilters(
                    from_date=base.from_date,
                    to_date=base.to_date,
                    page_size=base.page_size,
                    page=page,
                ),
            )
            yield from response.results

            if not response.results or page >= response.total_pages:
                break
            page += 1

    def fetch_transaction(self, transaction_id: str) -> Transaction:
        data = self._get(f"transactions/{transaction_id}")
        return Transaction.from_api_response(data)

    # Investments

    def fetch_investments(
        self,
        item_id: str,
        investment_type: InvestmentType | str | None = None,
    ) -> ListResponse[Investment]:
        """Fetch the investments of an item, optionally of a single type."""
        data = self._get("investments", {"itemId": item_id, "type": investment_type})
        return ListResponse.from_api_response(data, Investment.from_api_response)

    def fetch_investment(self, investment_id: str) -> Investment:
        data = self._get(f"investments/{investment_id}")
        return Investment.from_api_response(data)

    # Identity

    def fetch_identity(self, identity_id: str) -> IdentityResponse:
        data = self._get(f"identity/{identity_id}")
        return IdentityResponse.from_api_response(data)

    def fetch_identity_by_item_id(self, item_id: str) -> IdentityResponse:
        """Fetch the identity of the owner of an item."""
        data = self._get("identity", {"itemId": item_id})
        return IdentityResponse.from_api_response(data)

    # Categories

    def fetch_categories(self) -> ListResponse[Category]:
        data = self._get("categories")
        return ListResponse.from_api_response(data, Category.from_api_response)

    def fetch_category(self, category_id: str) -> Category:
        data = self._get(f"categories/{category_id}")
        return Category.from_api_response(data)

    # Connect tokens

    def create_connect_token(
        self,
        item_id: str | None = None,
        options: ConnectTokenOptions | None = None,
    ) -> ConnectToken:
        """
        Create a connect token, usable as API key to connect items from a frontend.

        Args:
            item_id: Restrict the token to updating this item
            options: Webhook URL and client user id for items created with it

        Raises:
            PluggyClientError: 404 if the item does not exist, 403 if unauthorized
        """
        data = self._post("connect_token", body={"itemId": item_id, "options": options})
        return ConnectToken.from_api_response(data)
