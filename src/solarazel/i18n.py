"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "태양 위치",
        "en": "Sun Position",
    },
    "label_date": {
        "ko": "날짜 (UTC)",
        "en": "Date (UTC)",
    },
    "label_time": {
        "ko": "시각 (UTC)",
        "en": "Time (UTC)",
    },
    "label_lat": {
        "ko": "위도 (°, 남위는 음수)",
        "en": "Latitude (°, south negative)",
    },
    "label_lng": {
        "ko": "경도 (°, 서경은 음수)",
        "en": "Longitude (°, west negative)",
    },
    "label_alt": {
        "ko": "고도 (km)",
        "en": "Altitude (km)",
    },
    "btn_compute": {
        "ko": "☀ 계산하기",
        "en": "☀ Compute",
    },
    "metric_azimuth": {
        "ko": "방위각",
        "en": "Azimuth",
    },
    "metric_elevation": {
        "ko": "고도각",
        "en": "Elevation",
    },
    "below_horizon": {
        "ko": "태양이 지평선 아래에 있어요.",
        "en": "The Sun is below the horizon.",
    },
    "error_input": {
        "ko": "입력값을 확인해 주세요. ({error})",
        "en": "Please check your input. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
