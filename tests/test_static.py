from datetime import datetime, timezone

from matplotlib.figure import Figure

from solarazel.compute import compute_solar_position
from solarazel.models import Observation, Site
from solarazel.renderers.static import render_static_chart, save_static_chart


def _observation(hour):
    site = Site(52.975, -6.0494, 0.0)
    utc_dt = datetime(2020, 6, 21, hour, tzinfo=timezone.utc)
    return Observation(
        site=site,
        utc_dt=utc_dt,
        position=compute_solar_position(utc_dt, site.lat, site.lng, site.alt_km),
    )


def test_render_returns_figure_with_title():
    fig = render_static_chart(_observation(12))
    assert isinstance(fig, Figure)
    assert "2020-06-21 12:00:00 UTC" in fig.axes[0].get_title()


def test_render_below_horizon_extends_radius():
    obs = _observation(0)
    assert obs.position.elevation_deg < 0
    fig = render_static_chart(obs)
    _, rmax = fig.axes[0].get_ylim()
    assert rmax >= 90.0 - obs.position.elevation_deg


def test_save_static_chart(tmp_path):
    path = save_static_chart(_observation(12), tmp_path / "nested" / "chart.png")
    assert path.exists()
    assert path.stat().st_size > 0
