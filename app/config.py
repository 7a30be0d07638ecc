# Deployment settings for the calendar api
import os
import utils

# Furthest date any recurrence may reach, regardless of the requested end date
REPEAT_MAX_END_DATE = os.getenv("REPEAT_MAX_END_DATE", "2025-12-31")

# Base URL the event client talks to
CALENDAR_BASE_URL = os.getenv("CALENDAR_BASE_URL", "http://localhost:8000")


def check_repeat_horizon(horizon):
    """
    Make sure a recurrence horizon is a plain 'YYYY-MM-DD' date

    Raises:
        ValueError: If the horizon can not be parsed
    """
    if utils.validate_date_format(horizon) is None:
        raise ValueError(f"Invalid recurrence horizon '{horizon}', expected YYYY-MM-DD")
    return horizon


def get_repeat_horizon():
    """Return the configured recurrence horizon as 'YYYY-MM-DD'"""
    return check_repeat_horizon(REPEAT_MAX_END_DATE)
