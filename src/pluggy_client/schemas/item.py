"""
Item: a user's connection to an institution through a connector.
"""

from dataclasses import dataclass
from datetime import datetime

from .common import ErrorResponse, as_datetime, coerce_enum
from .connector import Connector, ConnectorCredential
from .enums import ERROR_ITEM_STATUSES, FINISHED_ITEM_STATUSES, ExecutionStatus, ItemStatus


@dataclass
class Item:
    """
    Connection of a user with an institution.

    status/execution_status are reported by the server as the item syncs.
    When the item waits for user input, `parameter` describes the MFA
    credential to send with `update_item_mfa`.
    """

    id: str
    connector: Connector
    status: ItemStatus | str
    execution_status: ExecutionStatus | str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_updated_at: datetime | None = None
    webhook_url: str | None = None
    parameter: ConnectorCredential | None = None
    error: ErrorResponse | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Item":
        parameter = data.get("parameter")
        error = data.get("error")
        return cls(
            id=data["id"],
            connector=Connector.from_api_response(data["connector"]),
            status=coerce_enum(ItemStatus, data.get("status")),
            execution_status=coerce_enum(ExecutionStatus, data.get("executionStatus")),
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
            last_updated_at=as_datetime(data.get("lastUpdatedAt")),
            webhook_url=data.get("webhookUrl"),
            parameter=ConnectorCredential.from_api_response(parameter) if parameter else None,
            error=ErrorResponse.from_api_response(error) if error else None,
        )

    @property
    def is_finished(self) -> bool:
        return self.status in FINISHED_ITEM_STATUSES

    @property
    def is_errored(self) -> bool:
        return self.status in ERROR_ITEM_STATUSES

    @property
    def is_waiting_user_input(self) -> bool:
        return self.status == ItemStatus.WAITING_USER_INPUT
