"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UtcFields:
    """Civil UTC calendar fields of a single instant."""

    year: int  # Four-digit year
    month: int  # 1-12
    day: int  # 1-31
    hour: int  # 0-23
    minute: int  # 0-59
    second: int  # 0-59, whole seconds

    @property
    def hour_of_day(self) -> float:
        """Fractional UTC hour (hour + minute/60 + second/3600)."""
        return self.hour + self.minute / 60 + self.second / 3600


@dataclass(frozen=True)
class Site:
    """Observer location on the Earth's surface."""

    lat: float  # Latitude (decimal degrees, south negative)
    lng: float  # Longitude (decimal degrees, west negative)
    alt_km: float = 0.0  # Altitude above sea level (km)


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    when: str  # "YYYY-MM-DD HH:MM[:SS]" UTC string, ISO 8601, or "now"
    lat: float
    lng: float
    alt_km: float = 0.0


@dataclass(frozen=True)
class SolarPosition:
    """Apparent solar position plus the intermediates computed on the way."""

    azimuth_deg: float  # Clockwise from north, not wrapped into [0, 360)
    elevation_deg: float  # Above the horizon, not clamped
    julian_day: float
    right_ascension_deg: float
    declination_deg: float
    distance_au: float  # Altitude-corrected geocentric distance
    hour_angle_deg: float
    sidereal_time_h: float  # Local sidereal time (hours, unreduced)

    @property
    def az_el(self) -> tuple[float, float]:
        return self.azimuth_deg, self.elevation_deg


@dataclass(frozen=True)
class Observation:
    """The sole input to renderers. Fully computed state."""

    site: Site
    utc_dt: datetime  # UTC datetime (with tzinfo=utc)
    position: SolarPosition
