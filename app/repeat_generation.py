# Expansion of a recurring event into its dated occurrences

import logging
from typing import Callable, Dict, List, Optional
from calendar_math import add_days, date_key, date_parts, days_between, days_in_month, format_iso, is_leap_year, key_to_iso
from repeat_bounds import effective_end_date
from schemas import EventForm, RepeatType

logger = logging.getLogger(__name__)


def _day_stepper(days_per_step: int) -> Callable[[int, int, int, int, int], List[str]]:
    """Fixed stride policy used by daily (1 day) and weekly (7 days) rules"""
    def step(sy, sm, sd, interval, end_key):
        # Count the strides first, the date after the last one may not exist (past 9999-12-31)
        seed = format_iso(sy, sm, sd)
        stride = days_per_step * interval
        steps = days_between(seed, key_to_iso(end_key)) // stride
        return [add_days(seed, i * stride) for i in range(steps + 1)]
    return step


def _monthly_dates(sy, sm, sd, interval, end_key):
    """
    Same day of month every `interval` months.

    Months that do not have the seed's day are skipped, never adjusted, so a
    31st only recurs in 31 day months. The loop runs on the nominal date so it
    keeps advancing through skipped months.
    """
    dates = []
    y, m = sy, sm
    while date_key(y, m, sd) <= end_key:
        if sd <= days_in_month(y, m):
            dates.append(format_iso(y, m, sd))
        m += interval
        while m > 12:
            m -= 12
            y += 1
    return dates


def _yearly_dates(sy, sm, sd, interval, end_key):
    """
    Same month and day every `interval` years.

    Feb 29 only recurs in leap years. Feb 28 seeded in a common year only
    recurs in common years.
    """
    seed_is_feb29 = sm == 2 and sd == 29
    seed_is_common_feb28 = sm == 2 and sd == 28 and not is_leap_year(sy)

    dates = []
    y = sy
    while date_key(y, sm, sd) <= end_key:
        if seed_is_feb29:
            include = is_leap_year(y)
        elif seed_is_common_feb28:
            include = not is_leap_year(y)
        else:
            include = sd <= days_in_month(y, sm)
        if include:
            dates.append(format_iso(y, sm, sd))
        y += interval
    return dates


_POLICIES: Dict[RepeatType, Callable[[int, int, int, int, int], List[str]]] = {
    RepeatType.DAILY: _day_stepper(1),
    RepeatType.WEEKLY: _day_stepper(7),
    RepeatType.MONTHLY: _monthly_dates,
    RepeatType.YEARLY: _yearly_dates,
}


def generate_repeat_events(seed: EventForm, horizon: Optional[str] = None) -> List[EventForm]:
    """
    Expand a seed event into every occurrence of its repeat rule.

    Each occurrence is a copy of the seed with only `date` replaced. Dates are
    ascending, the first one is the seed's own date and none lies past the
    effective end date (the rule's end date clamped to the horizon).

    A non repeating seed, a seed already past the effective end, or a repeat
    type without a stepping policy all yield the seed alone.

    Args:
        seed (EventForm): Event carrying the repeat rule. Not modified.
        horizon (Optional[str]): Recurrence horizon, defaults to the configured one.

    Returns:
        List[EventForm]: Occurrences in date order, never empty.
    """
    repeat = seed.repeat
    if repeat.type == RepeatType.NONE:
        return [seed]

    interval = max(1, repeat.interval or 1)
    end = effective_end_date(repeat.end_date, horizon)
    end_key = date_key(*date_parts(end))
    sy, sm, sd = date_parts(seed.date)

    policy = _POLICIES.get(repeat.type)
    if policy is None or date_key(sy, sm, sd) > end_key:
        logger.debug(f"Seed {seed.date} yields no recurrence (type {repeat.type}, end {end})")
        return [seed]

    dates = policy(sy, sm, sd, interval, end_key)
    logger.debug(f"Generated {len(dates)} {repeat.type.value} occurrences from {seed.date} until {end}")
    return [seed.model_copy(update={"date": d}, deep=True) for d in dates]
