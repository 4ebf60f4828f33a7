# ABOUTME: Static configuration table for the dashboard: city catalog and color palettes.
# ABOUTME: Plain constants; nothing here is computed.

from weather_dashboard.models import Location

CITIES: tuple[Location, ...] = (
    Location(name="Delhi", latitude=28.6139, longitude=77.2090),
    Location(name="Mumbai", latitude=19.0760, longitude=72.8777),
    Location(name="Bengaluru", latitude=12.9716, longitude=77.5946),
    Location(name="Kolkata", latitude=22.5726, longitude=88.3639),
)

DEFAULT_CITY = CITIES[0]

# Pie slices cycle through this palette
PALETTE = ("#3b82f6", "#22c55e", "#f59e0b", "#ef4444")

TEMPERATURE_LINE_COLOR = "#3b82f6"
WIND_BAR_COLOR = "#22c55e"

# (summary field, card label, card color)
KPI_CARDS = (
    ("current", "Current (°C)", "#3b82f6"),
    ("min", "Min (°C)", "#22c55e"),
    ("max", "Max (°C)", "#f59e0b"),
    ("avg_humidity", "Avg Humidity (%)", "#14b8a6"),
)

# Label every other hour on chart x-axes
X_TICK_INTERVAL = 2

EMPTY_MESSAGE = "Pick a city to load data."
