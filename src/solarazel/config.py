"""Environment-driven settings. Entry points call ``load_dotenv()`` first."""

import os
from dataclasses import dataclass

from solarazel.logger import is_level_name
from solarazel.validation import QueryError

# Default site: Co. Wicklow, Ireland
DEFAULT_LAT = 52.975
DEFAULT_LNG = -6.0494
DEFAULT_ALT_KM = 0.0


@dataclass(frozen=True)
class Settings:
    lat: float
    lng: float
    alt_km: float
    log_level: str


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise QueryError(f"{name} is not a number: {raw!r}") from None


def load_settings() -> Settings:
    """Read SOLARAZEL_* variables from the environment.

    Raises:
        QueryError: If a numeric variable cannot be parsed or the log
            level name is unknown.
    """
    log_level = os.environ.get("SOLARAZEL_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if not is_level_name(log_level):
        raise QueryError(f"SOLARAZEL_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        lat=_float_env("SOLARAZEL_LAT", DEFAULT_LAT),
        lng=_float_env("SOLARAZEL_LNG", DEFAULT_LNG),
        alt_km=_float_env("SOLARAZEL_ALT_KM", DEFAULT_ALT_KM),
        log_level=log_level,
    )
