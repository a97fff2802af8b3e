"""Input checking for the host-driver path. The numeric core never validates."""

import math
from datetime import datetime

from pytz import utc

from solarazel.models import Site

_WHEN_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M")

# Deeper than any point on land (Dead Sea shore is about -0.43 km)
_MIN_ALT_KM = -12.0


class QueryError(ValueError):
    """User-supplied time or site is malformed or out of range."""


def parse_when(when: str) -> datetime:
    """Parse a UTC time string into an aware UTC datetime.

    Accepts ``"YYYY-MM-DD HH:MM[:SS]"`` (taken as UTC), ISO 8601 with an
    offset (converted to UTC), or ``"now"``.

    Raises:
        QueryError: If the string matches none of the accepted forms.
    """
    text = when.strip()
    if text.lower() == "now":
        return datetime.now(utc).replace(microsecond=0)

    for fmt in _WHEN_FORMATS:
        try:
            return utc.localize(datetime.strptime(text, fmt))
        except ValueError:
            continue

    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise QueryError(f"Unrecognised time: {when!r}") from None
    if dt.tzinfo is None:
        return utc.localize(dt)
    return dt.astimezone(utc)


def validate_site(lat: float, lng: float, alt_km: float = 0.0) -> Site:
    """Range-check site coordinates and return a Site.

    Raises:
        QueryError: On non-finite values or coordinates outside their domain.
    """
    for name, value in (("latitude", lat), ("longitude", lng), ("altitude", alt_km)):
        if not math.isfinite(value):
            raise QueryError(f"{name} must be finite, got {value!r}")
    if not -90.0 <= lat <= 90.0:
        raise QueryError(f"latitude out of range [-90, 90]: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise QueryError(f"longitude out of range [-180, 180]: {lng}")
    if alt_km <= _MIN_ALT_KM:
        raise QueryError(f"altitude below {_MIN_ALT_KM} km: {alt_km}")
    return Site(lat=float(lat), lng=float(lng), alt_km=float(alt_km))
