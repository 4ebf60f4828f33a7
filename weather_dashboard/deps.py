# ABOUTME: Factory for the shared httpx.AsyncClient used by the forecast fetcher.
# ABOUTME: One attempt per request; no retry transport is mounted.

import httpx

USER_AGENT = "weather-dashboard/0.1"


def create_http_client() -> httpx.AsyncClient:
    """Create the httpx client the dashboard controller fetches forecasts with."""
    return httpx.AsyncClient(headers={"User-Agent": USER_AGENT})
