# ABOUTME: Builds the JSON view model the browser renders: KPI cards plus line, bar and pie charts.
# ABOUTME: Reads DashboardState and the static catalog; performs no I/O.

from weather_dashboard.catalog import (
    EMPTY_MESSAGE,
    KPI_CARDS,
    PALETTE,
    TEMPERATURE_LINE_COLOR,
    WIND_BAR_COLOR,
    X_TICK_INTERVAL,
)
from weather_dashboard.models import DashboardData, DistributionBucket, SummaryMetrics
from weather_dashboard.state import DashboardState


def build_kpi_cards(summary: SummaryMetrics | None) -> list[dict]:
    """One card per KPI; values are None when no summary is available."""
    return [
        {"label": label, "value": getattr(summary, field) if summary is not None else None, "color": color}
        for field, label, color in KPI_CARDS
    ]


def build_distribution_slices(distribution: list[int]) -> list[dict]:
    """Pie slices in bucket order, colored from the palette."""
    return [
        {"name": bucket.label, "value": count, "color": PALETTE[i % len(PALETTE)]}
        for i, (bucket, count) in enumerate(zip(DistributionBucket, distribution))
    ]


def build_charts(data: DashboardData) -> dict:
    """Line, bar and pie chart payloads for a loaded dashboard."""
    return {
        "temperature_chart": {
            "type": "line",
            "title": "Temperature Variation",
            "points": [{"time": s.time, "temp": s.temp} for s in data.series],
            "color": TEMPERATURE_LINE_COLOR,
            "tick_interval": X_TICK_INTERVAL,
        },
        "wind_chart": {
            "type": "bar",
            "title": "Wind Speed (km/h)",
            "points": [{"time": s.time, "wind": s.wind} for s in data.series],
            "color": WIND_BAR_COLOR,
            "tick_interval": X_TICK_INTERVAL,
        },
        "distribution_chart": {
            "type": "pie",
            "title": "Temperature Distribution",
            "slices": build_distribution_slices(data.distribution),
        },
    }


def build_dashboard_view(state: DashboardState, city_names: list[str]) -> dict:
    """Assemble the full dashboard payload for the current state.

    Failed and idle states both render as the empty placeholder; the view does not
    distinguish why data is missing.
    """
    view = {
        "city": state.location.name,
        "cities": city_names,
        "status": state.status.value,
        "loading": state.loading,
        "kpis": build_kpi_cards(state.data.summary if state.data else None),
        "message": None,
        "temperature_chart": None,
        "wind_chart": None,
        "distribution_chart": None,
    }
    if state.data is None:
        view["message"] = EMPTY_MESSAGE
    else:
        view.update(build_charts(state.data))
    return view
