"""Parsing of history filter bounds into transaction timestamps."""

import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from bankledger.utils.clock import parse_timestamp

START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59)

AGO_PATTERN = re.compile(r"^(\d+)\s+(day|week|month|year)s?\s+ago$")


def parse_history_bound(
    text: str, *, end: bool = False, today: Optional[date] = None
) -> datetime:
    """Parse a --start-date/--end-date value into a timestamp bound.

    Accepted forms:
    - A full transaction timestamp, "2024-01-15 10:30:00", used as given
    - "today" and "yesterday"
    - "N days/weeks/months/years ago"
    - Any date dateutil understands, e.g. "2024-01-15" or "Jan 15 2024"

    A bare date covers the whole day: it becomes 00:00:00 for a start
    bound and 23:59:59 for an end bound, matching the second resolution
    of stored timestamps.

    Args:
        text: User input
        end: True when parsing the inclusive upper bound
        today: Reference day for relative forms (defaults to the local date)

    Raises:
        ValueError: If the text is not a recognised date
    """
    cleaned = text.strip()
    if not cleaned:
        raise ValueError("Empty date")

    try:
        return parse_timestamp(cleaned)
    except ValueError:
        pass

    day = _parse_day(cleaned.lower(), today or date.today())
    return datetime.combine(day, END_OF_DAY if end else START_OF_DAY)


def _parse_day(text: str, today: date) -> date:
    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)

    match = AGO_PATTERN.match(text)
    if match:
        count = int(match.group(1))
        unit = match.group(2)
        return today - relativedelta(**{f"{unit}s": count})

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{text}': {e}")
