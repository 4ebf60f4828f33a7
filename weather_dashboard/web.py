# ABOUTME: ASGI web entry point serving the weather dashboard as JSON.
# ABOUTME: Creates a Starlette app wired to a single DashboardController (run with `uvicorn weather_dashboard.web:app`).

import contextlib
import json
import logging
from collections.abc import Sequence

import httpx
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from weather_dashboard.catalog import CITIES
from weather_dashboard.config import configure_logging
from weather_dashboard.deps import create_http_client
from weather_dashboard.models import Location
from weather_dashboard.state import DashboardController, LoadStatus
from weather_dashboard.views import build_dashboard_view

logger = logging.getLogger(__name__)


def extract_city_name(body: bytes) -> str | None:
    """Extract the ``city`` field from a select request body."""
    try:
        data = json.loads(body)
        city = data.get("city")
        return city if isinstance(city, str) else None
    except (ValueError, AttributeError):
        return None


def create_app(
    http_client: httpx.AsyncClient | None = None,
    catalog: Sequence[Location] = CITIES,
) -> Starlette:
    """Build the dashboard app around one controller and one HTTP client."""
    controller = DashboardController(http_client or create_http_client(), catalog=catalog)
    city_names = [location.name for location in controller.catalog]

    def render() -> JSONResponse:
        return JSONResponse(build_dashboard_view(controller.state, city_names))

    async def list_cities(request: Request) -> JSONResponse:
        return JSONResponse([location.model_dump() for location in controller.catalog])

    async def get_dashboard(request: Request) -> JSONResponse:
        # First visit loads the default city
        if controller.state.status is LoadStatus.IDLE:
            await controller.load(controller.state.location)
        return render()

    async def select_city(request: Request) -> JSONResponse:
        name = extract_city_name(await request.body())
        if name is None:
            return JSONResponse({"error": "Request body must be JSON with a 'city' string"}, status_code=400)
        location = controller.find_location(name)
        if location is None:
            return JSONResponse({"error": f"Unknown city: {name}"}, status_code=404)
        logger.info("Dashboard city changed to %s", location.name)
        await controller.select(location)
        return render()

    async def refresh(request: Request) -> JSONResponse:
        await controller.refresh()
        return render()

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await controller.client.aclose()

    app = Starlette(
        routes=[
            Route("/api/cities", list_cities, methods=["GET"]),
            Route("/api/dashboard", get_dashboard, methods=["GET"]),
            Route("/api/dashboard/select", select_city, methods=["POST"]),
            Route("/api/dashboard/refresh", refresh, methods=["POST"]),
        ],
        lifespan=lifespan,
    )
    app.state.controller = controller
    return app


def __getattr__(name: str):
    # `uvicorn weather_dashboard.web:app` builds the app on first lookup, not at import
    if name == "app":
        configure_logging()
        app = create_app()
        globals()["app"] = app
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
