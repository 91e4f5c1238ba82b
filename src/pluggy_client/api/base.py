"""
Base request layer shared by every endpoint wrapper.

Handles the API key header, query-string formatting, JSON body
sanitization, ISO-8601 date revival of responses and the classification of
failures into the exception hierarchy below.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from enum import Enum
from typing import Any

import requests

from ..dates import revive_dates
from ..schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


class PluggyError(Exception):
    """Base exception for Pluggy client errors."""

    pass


class PluggyConnectionError(PluggyError):
    """Failed to reach the API (connection refused, DNS failure, timeout)."""

    pass


class PluggyAPIError(PluggyError):
    """API answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response_body: str | None = None,
        code_description: str | None = None,
        details: list[ErrorDetail] | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.response_body = response_body
        self.code_description = code_description
        self.details = details or []

        detail_parts = []
        for detail in self.details:
            if detail.parameter:
                detail_parts.append(f"{detail.parameter}: {detail.message}")
            else:
                detail_parts.append(detail.message)
        detail_str = "; ".join(p for p in detail_parts if p)
        full_message = f"{message} ({detail_str})" if detail_str else message
        super().__init__(f"Pluggy API error {status_code}: {full_message}")

    @property
    def error_response(self) -> ErrorResponse:
        """The error body as the API's ErrorResponse shape."""
        return ErrorResponse(
            code=self.status_code,
            message=self.message,
            code_description=self.code_description,
            details=list(self.details),
        )


class PluggyClientError(PluggyAPIError):
    """Request was rejected (4xx): unauthorized, not found, bad input."""

    pass


class PluggyServerError(PluggyAPIError):
    """API failed to process a valid request (5xx)."""

    pass


class PluggyValidationError(PluggyClientError):
    """Request parameters failed validation; `details` lists each field."""

    @property
    def errors(self) -> dict[str, list[str]]:
        """Messages grouped by the offending field ("" when unnamed)."""
        grouped: dict[str, list[str]] = {}
        for detail in self.details:
            grouped.setdefault(detail.parameter or "", []).append(detail.message)
        return grouped


class PluggyConnectorValidationError(PluggyValidationError):
    """Submitted credential parameters failed the connector's validation rules."""

    @property
    def invalid_parameters(self) -> list[str]:
        return [d.parameter for d in self.details if d.parameter]


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_format_query_value(v) for v in value)
    return str(value)


def format_query_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Format query parameters the way the API expects them.

    None values are dropped, booleans are lowercase, lists are
    comma-separated. An empty result means no query string at all.
    """
    if not params:
        return {}
    return {
        key: _format_query_value(value) for key, value in params.items() if value is not None
    }


def _to_json_value(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {k: _to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    return value


def sanitize_body(body: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """
    Return a JSON-ready copy of a request body.

    Top-level keys holding None are removed so optional arguments are not
    sent at all. The caller's mapping is left untouched.
    """
    if body is None:
        return None
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    return {key: _to_json_value(value) for key, value in body.items() if value is not None}


class BaseApi:
    """
    HTTP plumbing for the Pluggy API.

    Subclasses call `_get`/`_post`/`_patch`/`_put`/`_delete` with an
    endpoint relative to the base URL and receive the decoded JSON, with
    ISO-8601 strings already turned into datetimes.
    """

    DEFAULT_BASE_URL = "https://api.pluggy.ai"
    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        api_key: str,
        base_url: str | None = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the API layer.

        Args:
            api_key: API key, or a connect token, sent as X-API-KEY
            base_url: API root URL (defaults to the production API)
            timeout: Request timeout in seconds

        Raises:
            ValueError: If no API key is given
        """
        if not api_key:
            raise ValueError("Missing authorization for API communication")
        self.api_key = api_key
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._session: requests.Session | None = None

    @property
    def session(self) -> requests.Session:
        """Session carrying the auth and content headers, created on first use."""
        if self._session is None:
            session = requests.Session()
            session.headers.update(
                {
                    "X-API-KEY": self.api_key,
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                }
            )
            self._session = session
        return self._session

    def _get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def _post(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        credentials: Iterable[str] | None = None,
    ) -> Any:
        return self._request("POST", endpoint, params, body, credentials)

    def _put(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        credentials: Iterable[str] | None = None,
    ) -> Any:
        return self._request("PUT", endpoint, params, body, credentials)

    def _patch(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        credentials: Iterable[str] | None = None,
    ) -> Any:
        return self._request("PATCH", endpoint, params, body, credentials)

    def _delete(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._request("DELETE", endpoint, params, body)

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        credentials: Iterable[str] | None = None,
    ) -> Any:
        """
        Make an API request and decode its JSON response.

        Args:
            method: HTTP verb
            endpoint: Path relative to the base URL
            params: Query parameters, formatted with format_query_params
            body: JSON body, sanitized with sanitize_body
            credentials: Names of connector credential parameters submitted
                in the body, used to recognize connector validation errors

        Returns:
            Decoded JSON with dates revived, or None for an empty body

        Raises:
            PluggyConnectionError: If the API could not be reached
            PluggyAPIError: If the API answered with an error status
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        query = format_query_params(params)
        json_data = sanitize_body(body)

        logger.debug("API Request: %s %s %s", method, url, query or "")
        if json_data is not None:
            logger.debug("Request body keys: %s", sorted(json_data))

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=query or None,
                json=json_data,
                timeout=self.timeout,
            )
        except requests.exceptions.ConnectionError as e:
            logger.warning("[API] HTTP request failed: connection error to %s: %s", url, e)
            raise PluggyConnectionError(f"Failed to connect to Pluggy at {self.base_url}: {e}") from e
        except requests.exceptions.Timeout as e:
            logger.warning("[API] HTTP request failed: timeout for %s: %s", url, e)
            raise PluggyConnectionError(f"Request to Pluggy timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.warning("[API] HTTP request failed: %s: %s", url, e)
            raise PluggyError(f"Request failed: {e}") from e

        logger.debug("Response status: %s", response.status_code)

        if not 200 <= response.status_code < 300:
            error = self._classify_error(response, credentials)
            logger.warning(
                "[API] HTTP request failed: %s %s -> %s %s",
                method,
                url,
                error.status_code,
                error.message,
            )
            raise error

        if not response.content:
            return None
        try:
            return response.json(object_hook=revive_dates)
        except ValueError as e:
            raise PluggyAPIError(
                status_code=response.status_code,
                message=f"Invalid JSON in response: {e}",
                response_body=response.text,
            ) from e

    def _classify_error(
        self,
        response: requests.Response,
        credentials: Iterable[str] | None = None,
    ) -> PluggyAPIError:
        """Build the exception matching an error response."""
        status = response.status_code
        error_body = response.text
        error = None
        try:
            payload = response.json()
            if isinstance(payload, dict):
                error = ErrorResponse.from_api_response(payload)
        except ValueError:
            pass

        message = (error.message if error and error.message else None) or response.reason or ""
        details = error.details if error else []
        kwargs: dict[str, Any] = {
            "status_code": status,
            "message": message,
            "response_body": error_body,
            "code_description": error.code_description if error else None,
            "details": details,
        }

        if status in (400, 422) and details:
            submitted = set(credentials or ())
            if submitted and any(d.parameter in submitted for d in details):
                return PluggyConnectorValidationError(**kwargs)
            return PluggyValidationError(**kwargs)
        if 400 <= status < 500:
            return PluggyClientError(**kwargs)
        if status >= 500:
            return PluggyServerError(**kwargs)
        return PluggyAPIError(**kwargs)

    def test_connection(self) -> bool:
        """Test that the API key is accepted by the API."""
        try:
            self._get("connectors")
            return True
        except PluggyError:
            return False
