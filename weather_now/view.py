from __future__ import annotations

from typing import List, Literal, Tuple

from .viewmodel import UIState
from .weather import WeatherSnapshot


View = Literal["loading", "error", "weather", "empty"]


def select_view(state: UIState) -> View:
    """Pick the single view to render: loading > error > weather > empty."""
    if state.is_loading:
        return "loading"
    if state.error_text is not None:
        return "error"
    if state.snapshot is not None:
        return "weather"
    return "empty"


def icon_url(snapshot: WeatherSnapshot) -> str:
    # The API sends protocol-relative URLs ("//cdn.weatherapi.com/...").
    url = snapshot.condition_icon_url
    if url.startswith("//"):
        return f"https:{url}"
    return url


def location_title(snapshot: WeatherSnapshot) -> str:
    return f"{snapshot.location_name}, {snapshot.country_name}"


def detail_items(snapshot: WeatherSnapshot) -> List[Tuple[str, str]]:
    return [
        ("Feels like", f"{snapshot.feels_like_c}°C"),
        ("Humidity", f"{snapshot.humidity_pct}%"),
        ("Wind", f"{snapshot.wind_kph} km/h"),
    ]
