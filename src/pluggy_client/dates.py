"""
ISO-8601 date revival for decoded API payloads.

The API serializes every timestamp as an ISO-8601 string. Responses are
decoded with `revive_dates` as the JSON object hook, so models receive
`datetime` values instead of strings.
"""

import logging
import re
from datetime import datetime
from typing import Any

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

DATE_ISO_8601_REGEX = re.compile(
    r"^\d{4}-(0[1-9]|1[0-2])-([12]\d|0[1-9]|3[01])"
    r"([T\s](([01]\d|2[0-3]):[0-5]\d|24:00)(:[0-5]\d([.,]\d+)?)?"
    r"([zZ]|([+-])([01]\d|2[0-3]):?([0-5]\d)?)?)?$",
    re.ASCII,
)


def is_iso_date_string(value: object) -> bool:
    """Check whether a value is a string holding an ISO-8601 date."""
    if not isinstance(value, str):
        return False
    return DATE_ISO_8601_REGEX.fullmatch(value) is not None


def parse_iso_date(value: str) -> datetime:
    """
    Parse an ISO-8601 date string.

    Zoned strings give aware datetimes; strings without a zone give naive
    ones. Date-only strings give midnight of that day.

    Raises:
        ValueError: If the string is not a valid calendar date/time
        OverflowError: If the date falls outside the datetime range
    """
    return isoparse(value)


def _revive(value: Any) -> Any:
    if isinstance(value, str):
        if not is_iso_date_string(value):
            return value
        try:
            return parse_iso_date(value)
        except (ValueError, OverflowError):
            logger.debug("Leaving unparsable date-like string as is: %s", value)
            return value
    if isinstance(value, list):
        return [_revive(item) for item in value]
    return value


def revive_dates(obj: dict[str, Any]) -> dict[str, Any]:
    """
    JSON object hook converting ISO-8601 strings to datetimes.

    Nested objects are handled by the decoder calling the hook for each of
    them; strings inside arrays are converted here.
    """
    return {key: _revive(value) for key, value in obj.items()}
