from __future__ import annotations
from datetime import datetime, timezone
import math
from typing import Tuple

# First day of the Gregorian calendar; earlier dates are Julian.
_GREGORIAN_START = (1582, 10, 15)
_JD_GREGORIAN_START = 2299161
_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC


def calendar_to_jd(year: int, month: int, day: float) -> float:
    """
    Calendar date -> JD (Meeus, ch. 7).

    `day` may carry a fraction of a day. Dates before 1582-10-15 are read
    in the Julian calendar, later ones in the Gregorian.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

    gregorian = (year, month, day) >= _GREGORIAN_START
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    b = 0
    if gregorian:
        a = math.floor(y / 100)
        b = 2 - a + math.floor(a / 4)

    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5


def jd_to_calendar(jd: float) -> Tuple[int, int, float]:
    """
    JD -> (year, month, day) with a fractional day (Meeus, ch. 7).
    """
    z = math.floor(jd + 0.5)
    frac = jd + 0.5 - z

    if z < _JD_GREGORIAN_START:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + frac
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return int(year), int(month), float(day)


def datetime_to_jd(dt: datetime) -> float:
    """
    datetime -> JD on the same time scale. Requires a timezone-aware datetime.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    t = dt.astimezone(timezone.utc).timestamp()
    return _JD_UNIX_EPOCH + t / 86400.0
