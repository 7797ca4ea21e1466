from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Callable, List

from .repository import FetchOutcome, Success, WeatherRepository
from .weather import WeatherSnapshot


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UIState:
    """What the display layer renders."""

    snapshot: WeatherSnapshot | None = None
    is_loading: bool = False
    error_text: str | None = None


Listener = Callable[[UIState], None]


class WeatherViewModel:
    """Owns the UI state and the single ``request_weather`` action.

    Each call spawns its own task on the running event loop. Calls are
    neither cancelled nor sequenced: if responses arrive out of order, the
    last one to complete wins. Listeners registered with ``add_listener``
    receive every new ``UIState``.
    """

    def __init__(self, repository: WeatherRepository | None = None) -> None:
        self._repository = repository or WeatherRepository()
        self._state = UIState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> UIState:
        return self._state

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def request_weather(self, city: str) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        # The stale snapshot stays; only the error is reset.
        self._set_state(replace(self._state, error_text=None, is_loading=True))
        return loop.create_task(self._load(city))

    async def _load(self, city: str) -> None:
        outcome = await self._repository.get_weather_for_city(city)
        self._apply(outcome)

    def _apply(self, outcome: FetchOutcome) -> None:
        if isinstance(outcome, Success):
            self._set_state(
                replace(self._state, snapshot=outcome.snapshot, is_loading=False, error_text=None)
            )
        else:
            # Snapshot is left as it was (last good data, if any).
            self._set_state(
                replace(self._state, error_text=outcome.reason or "unknown error", is_loading=False)
            )

    def _set_state(self, state: UIState) -> None:
        logger.debug("UI state -> %s", state)
        self._state = state
        for listener in self._listeners:
            listener(state)
