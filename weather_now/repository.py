from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Union

from .weather import (
    EmptyBodyError,
    HTTPStatusError,
    TransportError,
    WeatherClient,
    WeatherSnapshot,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    snapshot: WeatherSnapshot


@dataclass(frozen=True)
class Failure:
    reason: str


FetchOutcome = Union[Success, Failure]


@dataclass
class WeatherRepository:
    """Turns client calls into a ``FetchOutcome``.

    Every client error is converted into a ``Failure`` carrying a message
    that can be shown to the user as-is.
    """

    client: WeatherClient = field(default_factory=WeatherClient)

    async def get_weather_for_city(self, city: str) -> FetchOutcome:
        try:
            # The client blocks on I/O; keep it off the event loop thread.
            snapshot = await asyncio.to_thread(self.client.fetch_current, city)
        except HTTPStatusError as e:
            outcome = Failure(f"fetch error: {e.status_code} {e.message}")
        except EmptyBodyError:
            outcome = Failure("empty response from API")
        except TransportError as e:
            outcome = Failure(f"network error: {e.detail}")
        else:
            return Success(snapshot)

        logger.warning("Weather fetch for %r failed: %s", city, outcome.reason)
        return outcome
