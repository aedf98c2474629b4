# Parsing of free-text German periods ("August 2025", "28-30.06.2025", ...) into date bounds.
# Author: NEA HR Engineering
# Date: 2025-07-03
# Version: 0.1.0

import calendar
import re
from datetime import datetime, time
from typing import Tuple

from hr_assistant.utils.logger import console

GERMAN_MONTHS = {
    "Januar": 1, "Februar": 2, "März": 3, "April": 4, "Mai": 5, "Juni": 6,
    "Juli": 7, "August": 8, "September": 9, "Oktober": 10, "November": 11, "Dezember": 12,
}
MONTH_NAMES = {number: name for name, number in GERMAN_MONTHS.items()}

INVALID_FORMAT_MESSAGE = (
    "Ungültiges Datumsformat. Bitte verwenden Sie eines der folgenden Formate:\n"
    "- Monat und Jahr (z.B. \"August 2025\")\n"
    "- Einzelnes Datum (z.B. \"29.06.2025\" oder \"2025-06-29\")\n"
    "- Datumsbereich (z.B. \"28.06.2025 - 30.06.2025\" oder \"28-30.06.2025\")"
)

_MONTH_YEAR = re.compile(r"^([A-Za-zÄÖÜäöü]+)\s+(\d{4})$")
_DATE_RANGE = re.compile(r"^(\d{1,2}\.?\d{1,2}\.?\d{4})\s*-\s*(\d{1,2}\.?\d{1,2}\.?\d{4})$")
_SHORT_RANGE = re.compile(r"^(\d{1,2})\s*-\s*(\d{1,2})\.(\d{1,2})\.(\d{4})$")
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_GERMAN_DATE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")

DateRange = Tuple[datetime, datetime]


class DateRangeError(ValueError):
    """Raised with a German, user-presentable message when a period cannot be parsed."""


def _end_of_day(day: datetime) -> datetime:
    return datetime.combine(day.date(), time.max)


def parse_german_date(value: str) -> datetime:
    """Parses 'TT.MM.JJJJ' or 'JJJJ-MM-TT' into a datetime at midnight."""
    value = value.strip()
    for pattern, order in ((_ISO_DATE, (0, 1, 2)), (_GERMAN_DATE, (2, 1, 0))):
        match = pattern.match(value)
        if not match:
            continue
        parts = match.groups()
        year, month, day = (int(parts[i]) for i in order)
        try:
            return datetime(year, month, day)
        except ValueError:
            break

    raise DateRangeError(
        "Ungültiges Datumsformat. Bitte verwenden Sie das Format \"TT.MM.YYYY\" (z.B. \"29.06.2025\") "
        "oder \"YYYY-MM-DD\" (z.B. \"2025-06-29\")"
    )


def parse_german_month(month_year: str) -> DateRange:
    """Returns the first and the last moment of a month given as 'August 2025'."""
    parts = month_year.split()
    if len(parts) != 2:
        raise DateRangeError("Ungültiges Datumsformat. Bitte geben Sie Monat und Jahr an (z.B. \"August 2025\").")

    month_name, year_text = parts
    month = GERMAN_MONTHS.get(month_name.capitalize())
    if month is None:
        raise DateRangeError(
            f"Ungültiger Monatsname \"{month_name}\". Gültige Monate sind: {', '.join(GERMAN_MONTHS)}"
        )
    if not year_text.isdigit():
        raise DateRangeError(f"Ungültiges Jahr \"{year_text}\". Bitte geben Sie eine gültige Jahreszahl an.")

    year = int(year_text)
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime.combine(datetime(year, month, last_day).date(), time.max)


def parse_date_range(period: str) -> DateRange:
    """
    Converts a period into inclusive (start, end) bounds.

    Supported inputs: a German month with year, a full date range, a short
    range within one month, or a single date. Any other input raises
    DateRangeError carrying the list of accepted formats.
    """
    text = period.strip()
    console.info(f"Parsing period '{text}'")

    if _MONTH_YEAR.match(text):
        return parse_german_month(text)

    full_range = _DATE_RANGE.match(text)
    if full_range:
        start = parse_german_date(full_range.group(1))
        end = parse_german_date(full_range.group(2))
        return start, _end_of_day(end)

    short_range = _SHORT_RANGE.match(text)
    if short_range:
        start_day, end_day, month, year = (int(g) for g in short_range.groups())
        try:
            start = datetime(year, month, start_day)
            end = datetime(year, month, end_day)
        except ValueError as e:
            raise DateRangeError(INVALID_FORMAT_MESSAGE) from e
        return start, _end_of_day(end)

    try:
        day = parse_german_date(text)
    except DateRangeError as e:
        console.error(f"Failed to parse period '{text}'")
        raise DateRangeError(INVALID_FORMAT_MESSAGE) from e
    return day, _end_of_day(day)
