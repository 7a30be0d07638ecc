# Utility functions for the calendar api

import uuid
import logging
import datetime
from typing import Optional, Dict, Any
from dateutil import parser

logger = logging.getLogger(__name__)

EVENT_COLUMNS = (
    "id, title, date, start_time, end_time, description, location, category, "
    "repeat_type, repeat_interval, repeat_end_date, repeat_id, notification_time"
)


def generate_event_id():
    """Generate a new event id"""
    return str(uuid.uuid4())


def generate_repeat_id():
    """Generate the id shared by every occurrence of one recurring group"""
    return str(uuid.uuid4())


def validate_date_format(date_str) -> Optional[datetime.date]:
    """
    Validate a plain calendar date ('YYYY-MM-DD') and return it as a date object

    Args:
        date_str: Date string to validate

    Returns:
        datetime.date: Parsed date if valid, None otherwise
    """
    try:
        parsed = parser.isoparse(date_str)
    except (ValueError, TypeError, OverflowError):
        logger.warning(f"Invalid date format: {date_str}")
        return None
    # isoparse also takes '2025' or '2025-01-01T10:00', only the bare date is accepted here
    if parsed.time() != datetime.time.min or parsed.date().isoformat() != date_str:
        logger.warning(f"Invalid date format: {date_str}")
        return None
    return parsed.date()


def _iso(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()[:10]
    return str(value)


def row_to_event(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Converts a row of the events table into the api's event shape.

    Args:
        row (Dict[str, Any]): Row fetched with a dictionary cursor.
    Returns:
        Dict[str, Any]: Event with a nested 'repeat' block, keyed by field name.
    """
    return {
        "id": row["id"],
        "title": row["title"],
        "date": _iso(row["date"]),
        "start_time": row["start_time"],
        "end_time": row["end_time"],
        "description": row.get("description") or "",
        "location": row.get("location") or "",
        "category": row.get("category") or "",
        "repeat": {
            "type": row.get("repeat_type") or "none",
            "interval": row.get("repeat_interval") or 1,
            "end_date": _iso(row.get("repeat_end_date")),
            "id": row.get("repeat_id"),
        },
        "notification_time": row.get("notification_time") if row.get("notification_time") is not None else 10,
    }


def event_to_params(event_id: str, form, repeat_id: Optional[str] = None) -> tuple:
    """Build the insert parameters for one event, in EVENT_COLUMNS order"""
    repeat = form.repeat
    return (
        event_id,
        form.title,
        form.date,
        form.start_time,
        form.end_time,
        form.description,
        form.location,
        form.category,
        repeat.type.value,
        repeat.interval,
        repeat.end_date,
        repeat_id,
        form.notification_time,
    )
