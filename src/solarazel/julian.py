"""Calendar decomposition and Julian Day conversion."""

import math
from collections.abc import Callable
from datetime import datetime

from pytz import utc

from solarazel.models import UtcFields

J2000_JD = 2451545.0  # 2000-01-01T12:00:00 UTC
ORBITAL_EPOCH_JD = 2451543.5  # 1999-12-31T00:00:00 UTC, day zero of the orbital elements

UtcInstant = UtcFields | datetime | int | float
Decomposer = Callable[[UtcInstant], UtcFields]


def decompose_utc(utc_instant: UtcInstant) -> UtcFields:
    """Split an instant into civil UTC fields at whole-second granularity.

    Args:
        utc_instant: ``UtcFields`` (returned as-is), a POSIX timestamp in
            seconds, or a ``datetime``. Naive datetimes are taken as UTC;
            aware ones are converted to UTC.

    Returns:
        UtcFields for the instant. Sub-second precision is truncated.

    Raises:
        TypeError: For any other input type.
    """
    if isinstance(utc_instant, UtcFields):
        return utc_instant
    if isinstance(utc_instant, bool):
        raise TypeError("bool is not a valid UTC instant")
    if isinstance(utc_instant, (int, float)):
        # floor, not int(): time_t semantics for instants before 1970
        dt = datetime.fromtimestamp(math.floor(utc_instant), tz=utc)
    elif isinstance(utc_instant, datetime):
        dt = utc_instant if utc_instant.tzinfo is None else utc_instant.astimezone(utc)
    else:
        raise TypeError(
            f"Unsupported UTC instant type: {type(utc_instant).__name__}"
        )
    return UtcFields(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
    )


def julian_day(utc_instant: UtcInstant, decompose: Decomposer = decompose_utc) -> float:
    """Julian Day of a UTC instant (Gregorian calendar formula).

    Calendar fields are not validated; out-of-range values flow through the
    arithmetic unchanged.
    """
    f = decompose(utc_instant)

    year = float(f.year)
    month = float(f.month)
    # January and February count as months 13 and 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    century = math.floor(year / 100.0)
    return (
        math.floor(365.25 * (year + 4716.0))
        + math.floor(30.6001 * (month + 1.0))
        + 2.0
        - century
        + math.floor(century / 4.0)
        + f.day
        - 1524.5
        + (f.hour + f.minute / 60 + f.second / 3600) / 24
    )


def days_since_epoch(jd: float) -> float:
    """Days elapsed since the orbital-element epoch (the ``d`` term)."""
    return jd - ORBITAL_EPOCH_JD
