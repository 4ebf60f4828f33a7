# ABOUTME: Pure metrics pipeline turning raw hourly observations into dashboard values.
# ABOUTME: Provides normalize, summarize and distribute, plus build_dashboard to run all three.

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from weather_dashboard.errors import MalformedInputError
from weather_dashboard.models import (
    DashboardData,
    DistributionBucket,
    HourlySample,
    RawObservationSet,
    SummaryMetrics,
)


def normalize(raw: RawObservationSet) -> list[HourlySample]:
    """Zip the provider's parallel columns into row-oriented HourlySample records.

    Hour labels come from the local timestamps as delivered, formatted ``"H:00"``.
    """
    columns = (raw.time, raw.temperature_2m, raw.relative_humidity_2m, raw.windspeed_10m)
    lengths = [len(col) for col in columns]
    if len(set(lengths)) > 1:
        raise MalformedInputError(f"Hourly columns have unequal lengths: {lengths}")

    return [
        HourlySample(time=f"{t.hour}:00", temp=temp, humidity=humidity, wind=wind)
        for t, temp, humidity, wind in zip(*columns)
    ]


def summarize(series: Sequence[HourlySample]) -> SummaryMetrics | None:
    """Compute the KPI values, or None when there is nothing to summarize.

    ``current`` is the first sample in the series, not the present wall-clock hour.
    """
    if not series:
        return None

    temps = [sample.temp for sample in series]
    avg_humidity = sum(sample.humidity for sample in series) / len(series)
    return SummaryMetrics(
        current=_round1(temps[0]),
        min=_round1(min(temps)),
        max=_round1(max(temps)),
        avg_humidity=_round1(avg_humidity),
    )


def _round1(value: float) -> float:
    """Round to one decimal, ties away from zero (60.25 -> 60.3)."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def distribute(series: Sequence[HourlySample] | None) -> list[int]:
    """Count samples per temperature bucket as ``[cold, moderate, hot]``."""
    counts = dict.fromkeys(DistributionBucket, 0)
    for sample in series or ():
        counts[DistributionBucket.classify(sample.temp)] += 1
    return [counts[bucket] for bucket in DistributionBucket]


def build_dashboard(raw: RawObservationSet) -> DashboardData:
    """Run the whole pipeline over one fetch result."""
    series = normalize(raw)
    return DashboardData(series=series, summary=summarize(series), distribution=distribute(series))
