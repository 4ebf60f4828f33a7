# ABOUTME: Service layer for the Open-Meteo hourly forecast call and payload parsing.
# ABOUTME: Makes exactly one request per call and wraps every failure in FetchError.

import logging
from datetime import datetime

import httpx
from pydantic import ValidationError

from weather_dashboard import config
from weather_dashboard.errors import FetchError
from weather_dashboard.models import Location, RawObservationSet

logger = logging.getLogger(__name__)

HOURLY_COLUMNS = ("temperature_2m", "relative_humidity_2m", "windspeed_10m")
HOURLY_PARAMS = ",".join(HOURLY_COLUMNS)


async def fetch_hourly_forecast(client: httpx.AsyncClient, location: Location) -> RawObservationSet:
    """Fetch today's hourly temperature, humidity and wind speed for a location.

    The provider resolves the location's local time zone (``timezone=auto``), so the
    returned timestamps are local wall-clock times.
    """
    try:
        resp = await client.get(
            config.FORECAST_URL,
            params={
                "latitude": location.latitude,
                "longitude": location.longitude,
                "hourly": HOURLY_PARAMS,
                "forecast_days": 1,
                "timezone": "auto",
            },
        )
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPError as e:
        logger.warning("Forecast request for %s failed: %s", location.name, e)
        raise FetchError(f"Forecast API failed for '{location.name}': {e}") from e
    except ValueError as e:
        logger.warning("Forecast response for %s is not JSON: %s", location.name, e)
        raise FetchError(f"Forecast API returned invalid JSON for '{location.name}'") from e

    if not isinstance(data, dict) or not isinstance(data.get("hourly"), dict):
        raise FetchError(f"Forecast response for '{location.name}' has no hourly block")
    return parse_hourly_observations(data["hourly"])


def parse_hourly_observations(raw: dict) -> RawObservationSet:
    """Parse the Open-Meteo ``hourly`` object into a RawObservationSet.

    Missing columns, null readings, ragged columns, non-string or mixed-offset
    timestamps and out-of-order timestamps raise FetchError; nothing partial is returned.
    """
    missing = [key for key in ("time", *HOURLY_COLUMNS) if key not in raw]
    if missing:
        raise FetchError(f"Hourly data is missing columns: {', '.join(missing)}")

    # Pydantic would otherwise accept epoch numbers as UTC datetimes
    if not isinstance(raw["time"], list) or not all(isinstance(t, str) for t in raw["time"]):
        raise FetchError("Hourly timestamps must be ISO-8601 strings")

    try:
        observations = RawObservationSet(
            time=raw["time"],
            temperature_2m=raw["temperature_2m"],
            relative_humidity_2m=raw["relative_humidity_2m"],
            windspeed_10m=raw["windspeed_10m"],
        )
    except ValidationError as e:
        raise FetchError(f"Hourly data could not be parsed: {e.error_count()} invalid value(s)") from e

    lengths = {
        len(observations.time),
        len(observations.temperature_2m),
        len(observations.relative_humidity_2m),
        len(observations.windspeed_10m),
    }
    if len(lengths) > 1:
        raise FetchError(f"Hourly columns have unequal lengths: {sorted(lengths)}")

    if len({t.tzinfo is None for t in observations.time}) > 1:
        raise FetchError("Hourly timestamps mix local and offset-qualified times")

    if not _strictly_increasing(observations.time):
        raise FetchError("Hourly timestamps are not strictly increasing")

    return observations


def _strictly_increasing(times: list[datetime]) -> bool:
    return all(earlier < later for earlier, later in zip(times, times[1:]))
