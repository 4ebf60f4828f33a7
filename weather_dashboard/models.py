# ABOUTME: Pydantic BaseModels for locations, raw Open-Meteo observations and derived dashboard values.
# ABOUTME: Defines the data passed between the fetcher, the metrics pipeline and the dashboard state.

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

COLD_BELOW = 20.0
HOT_ABOVE = 30.0


class Location(BaseModel):
    """A selectable city with its coordinates in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class RawObservationSet(BaseModel):
    """Column-oriented hourly readings for one local day, as delivered by the provider.

    Columns are indexed 1:1 by hour. Equal lengths are guaranteed by the fetcher and
    re-checked by the metrics pipeline, not by this model.
    """

    time: list[datetime] = []
    temperature_2m: list[float] = []
    relative_humidity_2m: list[float] = []
    windspeed_10m: list[float] = []


class HourlySample(BaseModel):
    """One row of the normalized time series."""

    model_config = ConfigDict(frozen=True)

    time: str
    temp: float
    humidity: float
    wind: float


class SummaryMetrics(BaseModel):
    """KPI values shown on the dashboard cards, rounded to one decimal."""

    model_config = ConfigDict(frozen=True)

    current: float
    min: float
    max: float
    avg_humidity: float


class DistributionBucket(Enum):
    """Temperature ranges used by the distribution chart, in display order."""

    COLD = "Cold (<20°C)"
    MODERATE = "Moderate (20–30°C)"
    HOT = "Hot (>30°C)"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def classify(cls, temperature: float) -> "DistributionBucket":
        """Return the bucket a temperature falls in; 20 and 30 are both moderate."""
        if temperature < COLD_BELOW:
            return cls.COLD
        if temperature > HOT_ABOVE:
            return cls.HOT
        return cls.MODERATE


class DashboardData(BaseModel):
    """Everything the rendering layer needs for one successful load."""

    model_config = ConfigDict(frozen=True)

    series: list[HourlySample] = []
    summary: SummaryMetrics | None = None
    distribution: list[int] = [0, 0, 0]
