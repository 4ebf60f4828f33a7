# ABOUTME: Dashboard state and the controller that composes the fetcher with the metrics pipeline.
# ABOUTME: A generation counter makes concurrent loads last-write-wins.

import logging
from collections.abc import Awaitable, Callable, Sequence
from enum import Enum

import httpx
from pydantic import BaseModel

from weather_dashboard.catalog import CITIES, DEFAULT_CITY
from weather_dashboard.errors import DashboardError
from weather_dashboard.metrics import build_dashboard
from weather_dashboard.models import DashboardData, Location, RawObservationSet
from weather_dashboard.weather_service import fetch_hourly_forecast

logger = logging.getLogger(__name__)

Fetcher = Callable[[httpx.AsyncClient, Location], Awaitable[RawObservationSet]]


class LoadStatus(str, Enum):
    """Lifecycle of one dashboard load: idle, loading, then loaded or failed."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class DashboardState(BaseModel):
    """What the dashboard currently shows. Only DashboardController writes to it."""

    location: Location = DEFAULT_CITY
    status: LoadStatus = LoadStatus.IDLE
    data: DashboardData | None = None
    generation: int = 0

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.LOADING


class DashboardController:
    """Loads forecasts into a DashboardState, discarding superseded results.

    Every load takes a new generation number. A load that finishes after a newer
    one has started leaves the state untouched, whether it succeeded or failed.
    In-flight requests are never cancelled.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        state: DashboardState | None = None,
        fetcher: Fetcher = fetch_hourly_forecast,
        catalog: Sequence[Location] = CITIES,
    ):
        if not catalog:
            raise ValueError("catalog must contain at least one location")
        self.client = client
        self.catalog = tuple(catalog)
        self.state = state if state is not None else DashboardState(location=self.catalog[0])
        self._fetcher = fetcher

    def find_location(self, name: str) -> Location | None:
        for location in self.catalog:
            if location.name == name:
                return location
        return None

    async def select(self, location: Location) -> DashboardState:
        return await self.load(location)

    async def refresh(self) -> DashboardState:
        return await self.load(self.state.location)

    async def load(self, location: Location) -> DashboardState:
        self.state.generation += 1
        generation = self.state.generation
        self.state.location = location
        # Previous data stays visible until this load resolves
        self.state.status = LoadStatus.LOADING

        try:
            raw = await self._fetcher(self.client, location)
            data = build_dashboard(raw)
        except DashboardError:
            logger.exception("Loading forecast for %s failed (generation %d)", location.name, generation)
            if self._is_current(generation):
                self.state.status = LoadStatus.FAILED
                self.state.data = None
            return self.state

        if self._is_current(generation):
            self.state.data = data
            self.state.status = LoadStatus.LOADED
        return self.state

    def _is_current(self, generation: int) -> bool:
        if generation == self.state.generation:
            return True
        logger.debug(
            "Discarding result of generation %d; generation %d is newer", generation, self.state.generation
        )
        return False
