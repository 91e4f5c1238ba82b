"""Tests for API response models and request option objects."""

from datetime import date, datetime

import pytest

from conftest import sample_account_data, sample_connector_data, sample_item_data
from pluggy_client.schemas import (
    Account,
    AccountType,
    Connector,
    ConnectorFilters,
    ConnectorType,
    ConnectTokenOptions,
    CredentialType,
    ErrorResponse,
    Item,
    ItemStatus,
    ListResponse,
    PageResponse,
    TransactionFilters,
    as_datetime,
    coerce_enum,
)


class TestCoerceEnum:
    """Test lenient enum parsing."""

    def test_known_value(self):
        assert coerce_enum(ItemStatus, "UPDATED") is ItemStatus.UPDATED

    def test_unknown_value_kept_as_string(self):
        assert coerce_enum(ItemStatus, "NEW_STATUS") == "NEW_STATUS"

    def test_none_and_member_pass_through(self):
        assert coerce_enum(ItemStatus, None) is None
        assert coerce_enum(ItemStatus, ItemStatus.OUTDATED) is ItemStatus.OUTDATED

    def test_members_compare_to_raw_strings(self):
        assert AccountType.CREDIT == "CREDIT"
        assert CredentialType.PASSWORD == "password"


class TestAsDatetime:
    def test_revived_datetime_kept(self):
        value = datetime(2020, 1, 1)
        assert as_datetime(value) is value

    def test_string_parsed(self):
        assert as_datetime("2020-07-08") == datetime(2020, 7, 8)

    @pytest.mark.parametrize("value", [None, "", "soon", "2021-02-31", "9999-12-31T24:00", 12])
    def test_invalid_values(self, value):
        assert as_datetime(value) is None


class TestItemModel:
    """Test Item parsing and status helpers."""

    @pytest.mark.parametrize(
        "status, finished, errored",
        [
            ("UPDATED", True, False),
            ("LOGIN_ERROR", True, True),
            ("OUTDATED", True, True),
            ("UPDATING", False, False),
            ("WAITING_USER_INPUT", False, False),
        ],
    )
    def test_status_helpers(self, status, finished, errored):
        item = Item.from_api_response(sample_item_data(status=status))

        assert item.is_finished is finished
        assert item.is_errored is errored

    def test_parses_unrevived_strings(self):
        """Test parsing also works on raw JSON without date revival."""
        item = Item.from_api_response(sample_item_data())

        assert isinstance(item.created_at, datetime)
        assert item.connector.type == ConnectorType.PERSONAL_BANK

    def test_error_body(self):
        data = sample_item_data(status="LOGIN_ERROR", execution_status="INVALID_CREDENTIALS")
        data["error"] = {"code": "INVALID_CREDENTIALS", "message": "Invalid credentials"}

        item = Item.from_api_response(data)

        assert item.error.message == "Invalid credentials"


class TestEnvelopes:
    """Test list and page envelopes."""

    def test_list_response(self):
        response = ListResponse.from_api_response(
            {"results": [sample_account_data("a"), sample_account_data("b")]},
            Account.from_api_response,
        )

        assert len(response) == 2
        assert [a.id for a in response] == ["a", "b"]

    def test_list_response_missing_results(self):
        assert len(ListResponse.from_api_response({}, Account.from_api_response)) == 0

    def test_page_response(self):
        page = PageResponse.from_api_response(
            {"total": 40, "totalPages": 2, "page": 2, "results": []},
            Account.from_api_response,
        )

        assert (page.total, page.total_pages, page.page) == (40, 2, 2)

    def test_error_response_details(self):
        error = ErrorResponse.from_api_response(
            {
                "code": 400,
                "message": "Invalid",
                "details": [{"code": 1, "message": "bad", "parameter": "user"}, "junk"],
            }
        )

        assert len(error.details) == 1
        assert error.details[0].code == "1"
        assert error.details[0].parameter == "user"


class TestConnectorModel:
    def test_select_options_and_mfa(self):
        data = sample_connector_data()
        data["credentials"].append(
            {
                "label": "Account type",
                "name": "accountType",
                "type": "select",
                "options": [{"value": "pf", "label": "Personal"}],
            }
        )
        data["credentials"].append({"label": "Token", "name": "token", "type": "number", "mfa": True})

        connector = Connector.from_api_response(data)

        assert connector.credentials[2].options[0].label == "Personal"
        assert [c.name for c in connector.mfa_credentials] == ["token"]


class TestFilters:
    """Test request option serialization."""

    def test_transaction_filters(self):
        params = TransactionFilters(
            from_date=datetime(2020, 1, 1, 15, 30), to_date=date(2020, 1, 31), page=3
        ).to_params()

        assert params == {"from": "2020-01-01", "to": "2020-01-31", "page": 3}

    def test_empty_transaction_filters(self):
        assert TransactionFilters().to_params() == {}

    def test_connector_filters(self):
        params = ConnectorFilters(
            name="Itau", countries=["BR"], types=[ConnectorType.PERSONAL_BANK], sandbox=False
        ).to_params()

        assert params == {
            "name": "Itau",
            "countries": ["BR"],
            "types": ["PERSONAL_BANK"],
            "sandbox": False,
        }

    def test_connect_token_options(self):
        assert ConnectTokenOptions().to_dict() == {}
        assert ConnectTokenOptions(client_user_id="u-1").to_dict() == {"clientUserId": "u-1"}
