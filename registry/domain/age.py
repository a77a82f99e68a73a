from __future__ import annotations

import datetime as dt
import re
import time

from ..errors import ValidationError

DATE_FORMAT = "%Y-%m-%d"
SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_birth_date(birth_date: str) -> dt.datetime:
    """Parse a strict YYYY-MM-DD string as local midnight; raise ValidationError otherwise."""
    if not isinstance(birth_date, str) or not _DATE_RE.fullmatch(birth_date):
        raise ValidationError(f"invalid birth date {birth_date!r}, expected YYYY-MM-DD")
    try:
        return dt.datetime.strptime(birth_date, DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(f"invalid birth date {birth_date!r}: {e}") from e


def calculate_age(birth_date: str, now: float | None = None) -> int:
    """
    Age in whole years: elapsed seconds since local midnight of the birth date,
    divided by an average Julian year and truncated toward zero.

    `now` is epoch seconds; defaults to the current wall-clock time.
    """
    born = parse_birth_date(birth_date)
    try:
        birth_ts = born.timestamp()
    except (OverflowError, OSError) as e:
        raise ValidationError(f"birth date {birth_date!r} is out of range") from e
    if now is None:
        now = time.time()
    return int((now - birth_ts) / SECONDS_PER_YEAR)
