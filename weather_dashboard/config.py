# ABOUTME: Runtime configuration read from the environment (and an optional .env file).
# ABOUTME: Also owns logging setup for the ASGI entry point.

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_LOG_LEVEL = "INFO"

FORECAST_URL = os.environ.get("WEATHER_DASHBOARD_FORECAST_URL", DEFAULT_FORECAST_URL)
LOG_LEVEL = os.environ.get("WEATHER_DASHBOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL)

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; later calls only adjust the level.

    An unknown level name falls back to INFO with a warning instead of failing startup.
    """
    level_name = (level or LOG_LEVEL).upper()
    valid = level_name in logging.getLevelNamesMapping()
    if not valid:
        level_name = DEFAULT_LOG_LEVEL
    logging.basicConfig(
        level=level_name,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level_name)
    if not valid:
        logger.warning("Unknown log level %r, using %s", level or LOG_LEVEL, DEFAULT_LOG_LEVEL)
