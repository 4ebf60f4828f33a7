# ABOUTME: Exception types raised by the forecast fetcher and metrics pipeline.
# ABOUTME: Both are terminal for the current dashboard load and surface as "no data".


class DashboardError(Exception):
    """Base class for failures that end a dashboard load."""


class FetchError(DashboardError):
    """The forecast provider could not be reached or returned an unusable payload."""


class MalformedInputError(DashboardError):
    """Raw observations violate the parallel-column contract."""
