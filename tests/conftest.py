# ABOUTME: Shared test fixtures for the weather dashboard test suite.
# ABOUTME: Provides a canned Open-Meteo hourly forecast payload.

import pytest


@pytest.fixture
def hourly_payload() -> dict:
    """A five-hour Open-Meteo forecast response for Delhi."""
    return {
        "latitude": 28.625,
        "longitude": 77.25,
        "timezone": "Asia/Kolkata",
        "hourly": {
            "time": [
                "2025-05-01T00:00",
                "2025-05-01T01:00",
                "2025-05-01T02:00",
                "2025-05-01T03:00",
                "2025-05-01T04:00",
            ],
            "temperature_2m": [15.0, 22.0, 31.0, 19.0, 30.0],
            "relative_humidity_2m": [50, 55, 60, 65, 70],
            "windspeed_10m": [3.2, 4.1, 5.0, 6.4, 2.8],
        },
    }
