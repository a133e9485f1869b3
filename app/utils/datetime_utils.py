# app/utils/datetime_utils.py
"""
Central date/time helpers.

- every timestamp the API produces is timezone-aware UTC
- textual dates from clients are parsed with python-dateutil
- values are converted to/from the shapes Firestore accepts
"""

import logging
from datetime import datetime, date, timezone, time
from typing import Any
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

# Two defaults that differ in year, month and day; a component missing from the
# text shows up as a difference between the two parses.
_FILL_A = datetime(2000, 1, 1)
_FILL_B = datetime(2001, 2, 2)


class DateTimeUtils:
    """Date/time conversion helpers shared by models, schemas and stores."""

    @staticmethod
    def now() -> datetime:
        """Current time as a UTC-aware datetime."""
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_date_string(date_string: str) -> date:
        """
        Parses free-form date text into a date.

        Supported: 2024-01-15, 2024/01/15, 01-15-2024, full ISO timestamps.
        Year, month and day must all be present in the text; dateutil would
        otherwise fill the gaps ("March", "Monday", "12:30") from today.
        """
        try:
            if not date_string or not date_string.strip():
                raise ValueError("empty string")
            parsed = dateutil_parser.parse(date_string, default=_FILL_A).date()
            if parsed != dateutil_parser.parse(date_string, default=_FILL_B).date():
                raise ValueError("incomplete date")
            return parsed

        except (ValueError, OverflowError) as e:
            logger.warning(f"Failed to parse date string: {date_string!r} - {e}")
            raise ValueError(f"Invalid date: {date_string}")

    @staticmethod
    def for_firestore(obj: Any) -> Any:
        """
        Converts a document before it is written to Firestore.

        - date -> datetime at 00:00 UTC (Firestore has no date type)
        - naive datetime -> UTC-aware datetime
        - dict/list are converted recursively
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, date):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.for_firestore(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.for_firestore(item) for item in obj]
        return obj

    @staticmethod
    def from_firestore(obj: Any) -> Any:
        """Normalizes Firestore timestamps in a document to UTC-aware datetimes."""
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.from_firestore(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.from_firestore(item) for item in obj]
        return obj

    @staticmethod
    def validate_date_field(value: Any, field_name: str = "date") -> date:
        """
        Validates and converts a date value received from an API request.

        Args:
            value: string, date or datetime
            field_name: used in the error message

        Raises:
            ValueError: the value is missing or cannot be parsed
        """
        if value is None:
            raise ValueError(f"{field_name} is required")
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return DateTimeUtils.parse_date_string(value)
        raise ValueError(f"{field_name} must be a date string")
