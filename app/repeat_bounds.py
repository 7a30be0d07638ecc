# Recurrence bounds: effective end date and form validation of repeat rules

from typing import Optional
import config
import utils
import schemas

MIN_REPEAT_INTERVAL = 1
MAX_REPEAT_INTERVAL = 999

INVALID_DATE_MESSAGE = "유효한 날짜 형식이 아닙니다."
END_BEFORE_START_MESSAGE = "반복 종료일은 시작일 이후여야 합니다."
INTERVAL_TOO_SMALL_MESSAGE = "반복 간격은 1 이상이어야 합니다."
INTERVAL_TOO_LARGE_MESSAGE = "반복 간격은 999 이하여야 합니다."


def _horizon(horizon: Optional[str]) -> str:
    return config.check_repeat_horizon(horizon) if horizon else config.get_repeat_horizon()


def end_after_horizon_message(horizon: str) -> str:
    return f"반복 종료일은 {horizon} 이전이어야 합니다."


def effective_end_date(repeat_end_date: Optional[str] = None, horizon: Optional[str] = None) -> str:
    """
    Resolve the date a recurrence actually stops at.

    A missing end date means "until the horizon". An end date past the horizon
    is clamped down to it. Earlier end dates are returned unchanged.

    Args:
        repeat_end_date: Requested end date 'YYYY-MM-DD', or None
        horizon: System horizon, defaults to config.get_repeat_horizon()

    Returns:
        str: Effective end date 'YYYY-MM-DD'
    """
    horizon = _horizon(horizon)
    if not repeat_end_date:
        return horizon
    return horizon if repeat_end_date > horizon else repeat_end_date


def validate_repeat_end_date(start_date: str, end_date: Optional[str], horizon: Optional[str] = None) -> Optional[str]:
    """
    Check a repeat end date against the event's start date and the horizon

    Returns:
        str: Error message to show next to the field, None if the end date is acceptable
    """
    if not end_date:
        return None

    horizon = _horizon(horizon)
    start = utils.validate_date_format(start_date)
    end = utils.validate_date_format(end_date)
    if start is None or end is None:
        return INVALID_DATE_MESSAGE

    if end < start:
        return END_BEFORE_START_MESSAGE

    if end > utils.validate_date_format(horizon):
        return end_after_horizon_message(horizon)

    return None


def validate_repeat_interval(interval: int) -> Optional[str]:
    """Check that a repeat interval is within 1..999, returns the error message or None"""
    if interval < MIN_REPEAT_INTERVAL:
        return INTERVAL_TOO_SMALL_MESSAGE
    if interval > MAX_REPEAT_INTERVAL:
        return INTERVAL_TOO_LARGE_MESSAGE
    return None


def validate_repeat_rule(form) -> Optional[str]:
    """
    Check an event form before it is saved: its date, and for repeating events
    the interval and the end date. Returns the first error message or None.
    """
    if utils.validate_date_format(form.date) is None:
        return INVALID_DATE_MESSAGE
    if form.repeat.type == schemas.RepeatType.NONE:
        return None
    return validate_repeat_interval(form.repeat.interval) or validate_repeat_end_date(form.date, form.repeat.end_date)
