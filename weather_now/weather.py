from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import requests

from .config import settings


logger = logging.getLogger(__name__)


class WeatherAPIError(Exception):
    """Raised when the weather API call fails."""


class HTTPStatusError(WeatherAPIError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Weather API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class EmptyBodyError(WeatherAPIError):
    """A successful response carried no usable weather payload."""


class TransportError(WeatherAPIError):
    """The request never produced a response (DNS, timeout, reset...)."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for one location at fetch time."""

    location_name: str
    country_name: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_kph: float
    condition_text: str
    condition_icon_url: str

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "WeatherSnapshot":
        """Decode a ``current.json`` body.

        Raises ``EmptyBodyError`` when the payload does not have the expected
        shape, so callers only ever deal with the client error types.
        """
        try:
            location = payload["location"]
            current = payload["current"]
            condition = current["condition"]
            return cls(
                location_name=str(location["name"]),
                country_name=str(location["country"]),
                temperature_c=float(current["temp_c"]),
                feels_like_c=float(current["feelslike_c"]),
                humidity_pct=int(current["humidity"]),
                wind_kph=float(current["wind_kph"]),
                condition_text=str(condition["text"]),
                condition_icon_url=str(condition["icon"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise EmptyBodyError(f"unexpected payload shape: {exc!r}") from exc


def _api_error_detail(response: requests.Response) -> str | None:
    # WeatherAPI reports failures as {"error": {"code": ..., "message": ...}}
    try:
        return str(response.json()["error"]["message"])
    except (ValueError, KeyError, TypeError):
        return None


@dataclass
class WeatherClient:
    """Simple WeatherAPI.com client for current conditions."""

    base_url: str | None = None
    timeout: float = 10

    def fetch_current(self, city: str) -> WeatherSnapshot:
        if not settings.weatherapi_key:
            # Let the API reject the request so the error flows like any other.
            logger.warning("WEATHERAPI_KEY is not set; request will likely be rejected.")

        url = self.base_url or settings.weatherapi_base_url
        params = {
            "key": settings.weatherapi_key,
            "q": city,
            "aqi": "no",
        }
        logger.debug("GET %s q=%r", url, city)
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Weather request for %r failed: %s", city, exc)
            raise TransportError(str(exc)) from exc

        if not 200 <= response.status_code < 300:
            message = str(response.reason or "")
            logger.warning(
                "Weather API returned %s %s for %r: %s",
                response.status_code,
                message,
                city,
                _api_error_detail(response),
            )
            raise HTTPStatusError(response.status_code, message)

        if not response.content:
            raise EmptyBodyError("empty body")
        try:
            payload = response.json()
        except ValueError as exc:
            raise EmptyBodyError("body is not valid JSON") from exc
        if not payload:
            raise EmptyBodyError("null body")
        return WeatherSnapshot.from_api(payload)
