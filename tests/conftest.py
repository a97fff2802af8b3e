from datetime import datetime

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def reference_site():
    # (lat, lng, alt_km), Co. Wicklow, Ireland
    return 52.975, -6.0494, 0.0


@pytest.fixture
def summer_noon():
    return datetime(2020, 6, 21, 12, 0, 0)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No SOLARAZEL_* variables and no stray .env in the working directory."""
    for name in ("SOLARAZEL_LAT", "SOLARAZEL_LNG", "SOLARAZEL_ALT_KM", "SOLARAZEL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handlers/level a test's entry-point call left on the package logger."""
    import logging

    parent = logging.getLogger("solarazel")
    handlers, level = list(parent.handlers), parent.level
    yield
    parent.handlers[:] = handlers
    parent.setLevel(level)
