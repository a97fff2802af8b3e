"""Solar position computation — Keplerian Sun elements to local azimuth/elevation.

Geocentric low-precision model from Paul Schlyter's "How to compute planetary
positions" (stjarnhimlen.se), with the RA/Dec to Az/El rotation described at
stargazing.net/kepler/altaz.html.
"""

import math

from solarazel.julian import (
    Decomposer,
    UtcInstant,
    decompose_utc,
    days_since_epoch,
    julian_day,
)
from solarazel.logger import get_logger
from solarazel.models import Observation, QueryInput, SolarPosition
from solarazel.validation import parse_when, validate_site

logger = get_logger(__name__)

AU_KM = 149598000.0

# The z-axis ecliptic-to-equatorial rotation uses this fixed obliquity instead
# of the epoch-dependent value. Kept for output compatibility.
FIXED_OBLIQUITY_DEG = 23.4406

_DEG2RAD = math.pi / 180
_RAD2DEG = 180 / math.pi


def deg_to_rad(deg: float) -> float:
    return deg * _DEG2RAD


def rad_to_deg(rad: float) -> float:
    return rad * _RAD2DEG


def normalize_azimuth(az_deg: float) -> float:
    """Wrap an azimuth into [0, 360). Display helper; the core never wraps."""
    return az_deg % 360.0


def _asin(value: float) -> float:
    # libm semantics: NaN outside [-1, 1] instead of raising
    if not -1.0 <= value <= 1.0:
        return math.nan
    return math.asin(value)


def compute_solar_position(
    utc_instant: UtcInstant,
    lat: float,
    lng: float,
    alt_km: float = 0.0,
    decompose: Decomposer = decompose_utc,
) -> SolarPosition:
    """Compute the Sun's azimuth and elevation for one site and instant.

    No input validation is performed and no exception is raised for numeric
    input; out-of-domain coordinates give arithmetically defined output.

    Args:
        utc_instant: Anything ``decompose`` accepts (datetime, POSIX seconds, UtcFields).
        lat: Site latitude in degrees, south negative.
        lng: Site longitude in degrees, west negative.
        alt_km: Site altitude above sea level in kilometres.
        decompose: Calendar decomposition primitive.

    Returns:
        SolarPosition with azimuth (clockwise from north) and elevation in
        degrees, plus the equatorial intermediates.
    """
    fields = decompose(utc_instant)
    jd = julian_day(fields, decompose=decompose_utc)
    d = days_since_epoch(jd)

    # Keplerian elements of the Sun (geocentric), a = 1 AU
    w = 282.9404 + 4.70935e-5 * d  # longitude of perihelion (deg)
    e = 0.016709 - 1.151e-9 * d  # eccentricity
    M = math.fmod(356.0470 + 0.9856002585 * d, 360.0)  # mean anomaly (deg)
    L = w + M  # mean longitude (deg)
    oblecl = 23.4393 - 3.563e-7 * d  # obliquity of the ecliptic (deg)

    # Eccentric anomaly, single-step approximation
    E = M + _RAD2DEG * e * math.sin(deg_to_rad(M)) * (1 + e * math.cos(deg_to_rad(M)))

    # Rectangular coordinates in the ecliptic plane, x towards perihelion
    x = math.cos(deg_to_rad(E)) - e
    y = math.sin(deg_to_rad(E)) * math.sqrt(1 - e**2)

    r = math.sqrt(x**2 + y**2)
    v = rad_to_deg(math.atan2(y, x))  # true anomaly
    lon = v + w

    xeclip = r * math.cos(deg_to_rad(lon))
    yeclip = r * math.sin(deg_to_rad(lon))
    zeclip = 0.0

    xequat = xeclip
    yequat = yeclip * math.cos(deg_to_rad(oblecl)) + zeclip * math.sin(deg_to_rad(oblecl))
    zequat = yeclip * math.sin(deg_to_rad(FIXED_OBLIQUITY_DEG)) + zeclip * math.cos(
        deg_to_rad(oblecl)
    )

    r_equat = math.sqrt(xequat**2 + yequat**2 + zequat**2) - alt_km / AU_KM
    ra = rad_to_deg(math.atan2(yequat, xequat))
    delta = rad_to_deg(_asin(zequat / r_equat))

    # Local sidereal time from the mean longitude
    uth = fields.hour_of_day
    gmst0 = math.fmod(L + 180, 360.0) / 15
    sidtime = gmst0 + uth + lng / 15

    ha = sidtime * 15 - ra

    x = math.cos(deg_to_rad(ha)) * math.cos(deg_to_rad(delta))
    y = math.sin(deg_to_rad(ha)) * math.cos(deg_to_rad(delta))
    z = math.sin(deg_to_rad(delta))

    # Rotate about the east-west axis by the colatitude
    colat = 90 - lat
    xhor = x * math.cos(deg_to_rad(colat)) - z * math.sin(deg_to_rad(colat))
    yhor = y
    zhor = x * math.sin(deg_to_rad(colat)) + z * math.cos(deg_to_rad(colat))

    az = rad_to_deg(math.atan2(yhor, xhor)) + 180
    el = rad_to_deg(_asin(zhor))

    logger.debug(
        "jd=%.6f d=%.6f M=%.6f L=%.6f ra=%.6f dec=%.6f r=%.9f lst=%.6fh ha=%.6f",
        jd, d, M, L, ra, delta, r_equat, sidtime, ha,
    )

    return SolarPosition(
        azimuth_deg=az,
        elevation_deg=el,
        julian_day=jd,
        right_ascension_deg=ra,
        declination_deg=delta,
        distance_au=r_equat,
        hour_angle_deg=ha,
        sidereal_time_h=sidtime,
    )


def solar_az_el(
    utc_instant: UtcInstant,
    lat: float,
    lng: float,
    alt_km: float = 0.0,
    decompose: Decomposer = decompose_utc,
) -> tuple[float, float]:
    """Return ``(azimuth_deg, elevation_deg)`` of the Sun for one site and instant."""
    return compute_solar_position(utc_instant, lat, lng, alt_km, decompose=decompose).az_el


def run(query: QueryInput) -> Observation:
    """Top-level entry point: takes a QueryInput and returns an Observation.

    Args:
        query: User input (time string, site coordinates).

    Returns:
        Fully computed Observation.

    Raises:
        QueryError: If the time string or coordinates are invalid.
    """
    utc_dt = parse_when(query.when)
    site = validate_site(query.lat, query.lng, query.alt_km)
    logger.info(
        "solar position for %s at lat=%s lng=%s alt_km=%s",
        utc_dt.isoformat(), site.lat, site.lng, site.alt_km,
    )
    position = compute_solar_position(utc_dt, site.lat, site.lng, site.alt_km)
    return Observation(site=site, utc_dt=utc_dt, position=position)
