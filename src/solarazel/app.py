"""Sun Position — Streamlit viewer for a site at a UTC instant."""

import datetime
import html

import matplotlib.pyplot as plt
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from solarazel.compute import normalize_azimuth, run  # noqa: E402
from solarazel.config import load_settings  # noqa: E402
from solarazel.i18n import t  # noqa: E402
from solarazel.logger import set_level  # noqa: E402
from solarazel.models import QueryInput  # noqa: E402
from solarazel.renderers.static import render_static_chart  # noqa: E402
from solarazel.validation import QueryError  # noqa: E402

_settings = load_settings()
set_level(_settings.log_level)

if "lang" not in st.session_state:
    st.session_state.lang = "en"
_lang: str = st.session_state.lang

st.set_page_config(page_title=t("page_title", _lang), page_icon="☀", layout="centered")

# --- Session state initialization ---
if "observation" not in st.session_state:
    st.session_state.observation = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

st.title(t("page_title", _lang))

_now = datetime.datetime.now(datetime.timezone.utc)

# --- Input form ---
with st.form("query"):
    col1, col2 = st.columns(2)
    with col1:
        date_val = st.date_input(t("label_date", _lang), value=_now.date())
    with col2:
        time_val = st.time_input(
            t("label_time", _lang), value=_now.time().replace(microsecond=0), step=60
        )
    col3, col4, col5 = st.columns(3)
    with col3:
        lat = st.number_input(
            t("label_lat", _lang), value=_settings.lat, format="%.4f"
        )
    with col4:
        lng = st.number_input(
            t("label_lng", _lang), value=_settings.lng, format="%.4f"
        )
    with col5:
        alt_km = st.number_input(
            t("label_alt", _lang), value=_settings.alt_km, format="%.3f"
        )
    submitted = st.form_submit_button(t("btn_compute", _lang))

# --- Form submission handler ---
if submitted:
    when_str = f"{date_val.strftime('%Y-%m-%d')} {time_val.strftime('%H:%M:%S')}"
    st.session_state.error_msg = None
    try:
        st.session_state.observation = run(
            QueryInput(when=when_str, lat=lat, lng=lng, alt_km=alt_km)
        )
    except QueryError as e:
        st.session_state.observation = None
        st.session_state.error_msg = t("error_input", _lang).format(
            error=html.escape(str(e))
        )

# --- Error message ---
if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

# --- Result ---
if st.session_state.observation is not None:
    pos = st.session_state.observation.position
    mcol1, mcol2 = st.columns(2)
    mcol1.metric(t("metric_azimuth", _lang), f"{normalize_azimuth(pos.azimuth_deg):.4f}°")
    mcol2.metric(t("metric_elevation", _lang), f"{pos.elevation_deg:.4f}°")
    if pos.elevation_deg < 0:
        st.caption(t("below_horizon", _lang))

    fig = render_static_chart(st.session_state.observation)
    st.pyplot(fig)
    plt.close(fig)

# --- Language toggle ---
_choice = st.radio(
    "Language",
    ["en", "ko"],
    index=0 if _lang == "en" else 1,
    horizontal=True,
    label_visibility="collapsed",
)
if _choice != _lang:
    st.session_state.lang = _choice
    st.rerun()
