from __future__ import annotations

import asyncio
import logging

import streamlit as st

from weather_now.config import settings
from weather_now.view import detail_items, icon_url, location_title, select_view
from weather_now.viewmodel import UIState, WeatherViewModel


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def render(state: UIState) -> None:
    view = select_view(state)
    if view == "loading":
        st.info("Loading weather...")
    elif view == "error":
        st.error(f"**Error!**\n\n{state.error_text}")
    elif view == "weather":
        snapshot = state.snapshot
        st.subheader(location_title(snapshot))
        st.image(icon_url(snapshot), width=100, caption=snapshot.condition_text)
        st.metric("Temperature", f"{snapshot.temperature_c}°C")
        st.divider()
        for column, (label, value) in zip(st.columns(3), detail_items(snapshot)):
            column.metric(label, value)
    else:
        st.info("Enter a city and press the button to see the current weather.")


def show(state: UIState) -> None:
    # Redraws the placeholder of the current script run on every transition.
    with st.session_state["content"].container():
        render(state)


def run_request(view_model: WeatherViewModel, city: str) -> None:
    """Fire one request and block this script run until it completes."""

    async def _request() -> None:
        await view_model.request_weather(city)

    asyncio.run(_request())


def main() -> None:
    st.set_page_config(page_title="Weather", page_icon="☁️")
    st.title("Weather forecast")

    first_display = "view_model" not in st.session_state
    if first_display:
        view_model = WeatherViewModel()
        view_model.add_listener(show)
        st.session_state["view_model"] = view_model
    view_model = st.session_state["view_model"]

    city = st.text_input("Enter a city", value=settings.default_city)
    submitted = st.button("Search weather")

    st.session_state["content"] = st.empty()
    if first_display:
        run_request(view_model, settings.default_city)
    elif submitted:
        run_request(view_model, city)
    else:
        show(view_model.state)


if __name__ == "__main__":
    main()
