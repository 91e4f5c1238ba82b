"""
Shared response shapes: list/page envelopes, error bodies, connect tokens.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from ..dates import is_iso_date_string, parse_iso_date

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: Any) -> E | str | None:
    """Map a raw value to an enum member, keeping unknown values as strings."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def as_datetime(value: Any) -> datetime | None:
    """Accept an already revived datetime or an ISO-8601 string."""
    if value is None or isinstance(value, datetime):
        return value
    if is_iso_date_string(value):
        try:
            return parse_iso_date(value)
        except (ValueError, OverflowError):
            return None
    return None


@dataclass
class ErrorDetail:
    """Single per-field problem reported by a validation error."""

    code: str | None = None
    message: str = ""
    parameter: str | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "ErrorDetail":
        code = data.get("code")
        return cls(
            code=str(code) if code is not None else None,
            message=data.get("message", ""),
            parameter=data.get("parameter"),
        )


@dataclass
class ErrorResponse:
    """
    Structured error body returned by the API.

    `details` is only populated for validation failures, one entry per
    offending field or credential parameter.
    """

    code: int
    message: str
    code_description: str | None = None
    details: list[ErrorDetail] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "ErrorResponse":
        raw_details = data.get("details")
        details = []
        if isinstance(raw_details, list):
            details = [
                ErrorDetail.from_api_response(d) for d in raw_details if isinstance(d, dict)
            ]
        return cls(
            code=data.get("code", 0),
            message=data.get("message", ""),
            code_description=data.get("codeDescription"),
            details=details,
        )


@dataclass
class ListResponse(Generic[T]):
    """Unpaged collection envelope: `{"results": [...]}`."""

    results: list[T] = field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict, parse: Callable[[dict], T]
    ) -> "ListResponse[T]":
        return cls(results=[parse(item) for item in data.get("results", [])])

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


@dataclass
class PageResponse(ListResponse[T]):
    """Paged collection envelope with `total`, `totalPages` and `page`."""

    total: int = 0
    total_pages: int = 1
    page: int = 1

    @classmethod
    def from_api_response(
        cls, data: dict, parse: Callable[[dict], T]
    ) -> "PageResponse[T]":
        results = [parse(item) for item in data.get("results", [])]
        return cls(
            results=results,
            total=data.get("total", len(results)),
            total_pages=data.get("totalPages", 1),
            page=data.get("page", 1),
        )


@dataclass
class ConnectToken:
    """Restricted-access token used as API key to connect items from a frontend."""

    access_token: str

    @classmethod
    def from_api_response(cls, data: dict) -> "ConnectToken":
        return cls(access_token=data["accessToken"])
