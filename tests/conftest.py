"""Test fixtures and utilities."""

from pathlib import Path

import pytest

from pluggy_client.api import PluggyClient

BASE_URL = "http://pluggy.test"
API_KEY = "test-api-key-12345"


def sample_connector_data(connector_id: int = 0) -> dict:
    """Pluggy Bank sandbox connector as returned by the API."""
    return {
        "id": connector_id,
        "name": "Pluggy Bank",
        "institutionUrl": "https://pluggy.ai",
        "imageUrl": "https://cdn.pluggy.ai/assets/connector-icons/sandbox.svg",
        "primaryColor": "ef294b",
        "type": "PERSONAL_BANK",
        "country": "BR",
        "credentials": [
            {
                "validation": "^user-.{2,50}$",
                "validationMessage": "O user deve começar com 'user-'",
                "label": "User",
                "name": "user",
                "type": "text",
                "placeholder": "user-ok",
                "optional": False,
            },
            {
                "validation": "^.{6,30}$",
                "validationMessage": "A senha deve ter entre 6 e 30 caracteres",
                "label": "Password",
                "name": "password",
                "type": "password",
                "optional": False,
            },
        ],
        "health": {"status": "ONLINE", "stage": None},
    }


def sample_item_data(
    item_id: str = "item-123",
    status: str = "UPDATED",
    execution_status: str = "SUCCESS",
) -> dict:
    """Item as returned by the API."""
    return {
        "id": item_id,
        "connector": sample_connector_data(),
        "status": status,
        "executionStatus": execution_status,
        "createdAt": "2020-06-24T21:29:40.300Z",
        "updatedAt": "2020-06-24T21:30:12.000Z",
        "lastUpdatedAt": "2020-06-24T21:30:12.000Z",
        "webhookUrl": None,
        "parameter": None,
        "error": None,
    }


def sample_account_data(account_id: str = "acc-1", account_type: str = "BANK") -> dict:
    data = {
        "id": account_id,
        "itemId": "item-123",
        "type": account_type,
        "subtype": "CHECKING_ACCOUNT" if account_type == "BANK" else "CREDIT_CARD",
        "number": "0001/12345-0",
        "balance": 120950.55,
        "name": "Conta Corrente",
        "marketingName": "GOLD Conta Corrente",
        "owner": "John Doe",
        "taxNumber": "416.799.495-00",
        "currencyCode": "BRL",
        "bankData": {"transferNumber": "0001/12345-0", "closingBalance": 120950.55},
        "creditData": None,
    }
    if account_type == "CREDIT":
        data["bankData"] = None
        data["creditData"] = {
            "level": "BLACK",
            "brand": "MASTERCARD",
            "balanceCloseDate": "2020-07-08",
            "balanceDueDate": "2020-07-17",
            "availableCreditLimit": 2000.0,
            "balanceForeignCurrency": 0,
            "minimumPayment": 500.0,
            "creditLimit": 3000.0,
        }
    return data


def sample_transaction_data(transaction_id: str = "tx-1") -> dict:
    return {
        "id": transaction_id,
        "accountId": "acc-1",
        "date": "2020-06-16T00:00:00.000Z",
        "description": "TED Example",
        "amount": -1500.0,
        "balance": 3000.0,
        "currencyCode": "BRL",
        "category": "Transfer",
        "providerCode": "123",
    }


@pytest.fixture
def client() -> PluggyClient:
    """Client pointed at the mocked API."""
    return PluggyClient(API_KEY, base_url=BASE_URL)


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Minimal YAML config file."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "pluggy:\n"
        f"  api_key: \"{API_KEY}\"\n"
        f"  base_url: \"{BASE_URL}\"\n"
        "  timeout: 10\n"
        "sandbox:\n"
        "  poll_interval_seconds: 0.01\n"
        "  max_polls: 5\n"
    )
    return path


@pytest.fixture(autouse=True)
def clean_pluggy_env(monkeypatch):
    """Keep PLUGGY_* variables of the developer's shell out of the tests."""
    for name in ("PLUGGY_API_KEY", "PLUGGY_API_URL", "PLUGGY_TIMEOUT", "PLUGGY_WEBHOOK_URL"):
        monkeypatch.delenv(name, raising=False)
