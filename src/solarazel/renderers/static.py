"""Matplotlib static PNG renderer — sky dome seen from below, north up."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from solarazel.compute import normalize_azimuth
from solarazel.models import Observation

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(observation: Observation, chart_size: int = 6) -> Figure:
    """Render an Observation as a polar azimuth/elevation chart.

    Zenith is at the centre and the horizon at radius 90. Below-horizon
    positions are drawn as a hollow marker at their true zenith distance.

    Args:
        observation: Fully computed solar position.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    pos = observation.position
    az = normalize_azimuth(pos.azimuth_deg)
    zenith_dist = 90.0 - pos.elevation_deg

    fig = plt.figure(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("#0d1b35")
    ax = fig.add_subplot(projection="polar")
    ax.set_facecolor("#0d1b35")
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)
    ax.set_rlim(0, max(90.0, zenith_dist + 5.0))

    theta = np.linspace(0, 2 * np.pi, 361)
    ax.plot(theta, np.full_like(theta, 90.0), color="#c9a96e", linewidth=1.0, zorder=1)

    above = pos.elevation_deg >= 0
    ax.scatter(
        [np.radians(az)],
        [zenith_dist],
        s=300,
        facecolors="#ffd54f" if above else "none",
        edgecolors="#ffd54f",
        linewidths=1.5,
        zorder=3,
    )

    ax.set_xticks(np.radians([0, 90, 180, 270]))
    ax.set_xticklabels(["N", "E", "S", "W"], color="#aaaaaa")
    ax.set_yticks([30, 60, 90])
    ax.set_yticklabels(["60°", "30°", "0°"], color="#667799")
    ax.grid(color="#334466", linewidth=0.5)

    ctx = observation.utc_dt.strftime("%Y-%m-%d %H:%M:%S UTC")
    ax.set_title(
        f"{ctx}\nAz {az:.2f}°  El {pos.elevation_deg:.2f}°",
        color="#e8e8e8",
        pad=18,
    )
    return fig


def save_static_chart(observation: Observation, output_path: Path | None = None) -> Path:
    """Save an Observation as a PNG file.

    Args:
        observation: Fully computed solar position.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        site = observation.site
        when_str = observation.utc_dt.strftime("%Y_%m_%d_%H_%M_%S")
        filename = f"sun_{site.lat:+.4f}_{site.lng:+.4f}__{when_str}.png"
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(observation)
    fig.savefig(output_path, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path
