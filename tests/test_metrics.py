# ABOUTME: Contract tests for the metrics pipeline.
# ABOUTME: Covers normalization, KPI summaries and the three-bucket temperature distribution.

from datetime import datetime, timedelta

import pytest

from weather_dashboard.errors import MalformedInputError
from weather_dashboard.metrics import build_dashboard, distribute, normalize, summarize
from weather_dashboard.models import HourlySample, RawObservationSet

MIDNIGHT = datetime(2025, 5, 1, 0, 0)


def _raw(temps, humidity=None, wind=None) -> RawObservationSet:
    """Build a RawObservationSet starting at midnight with one reading per hour."""
    n = len(temps)
    return RawObservationSet(
        time=[MIDNIGHT + timedelta(hours=i) for i in range(n)],
        temperature_2m=temps,
        relative_humidity_2m=humidity if humidity is not None else [50.0] * n,
        windspeed_10m=wind if wind is not None else [5.0] * n,
    )


def _series(temps, humidity=None) -> list[HourlySample]:
    return normalize(_raw(temps, humidity))


class TestNormalize:
    def test_one_sample_per_hour_in_order(self):
        """normalize emits one HourlySample per index, preserving input order.

        Implementation: Normalizes a full 24-hour day.
        Passing implies: Labels run 0:00..23:00 and readings stay aligned with their hour.
        """
        temps = [float(t) for t in range(24)]
        wind = [t * 0.5 for t in temps]
        series = normalize(_raw(temps, wind=wind))

        assert len(series) == 24
        assert [s.time for s in series] == [f"{h}:00" for h in range(24)]
        assert series[7].temp == 7.0
        assert series[7].wind == 3.5

    def test_hour_label_has_no_leading_zero(self):
        """Hour labels use the bare hour number.

        Implementation: Normalizes a single 09:00 reading.
        Passing implies: Labels look like "9:00", not "09:00".
        """
        raw = RawObservationSet(
            time=[datetime(2025, 5, 1, 9, 0)],
            temperature_2m=[21.5],
            relative_humidity_2m=[40.0],
            windspeed_10m=[7.2],
        )
        [sample] = normalize(raw)

        assert sample.time == "9:00"
        assert sample.humidity == 40.0

    def test_unequal_lengths_raise(self):
        """normalize refuses ragged columns.

        Implementation: Builds 24 timestamps but only 23 temperatures.
        Passing implies: A broken provider contract is reported, not silently truncated.
        """
        raw = RawObservationSet(
            time=[MIDNIGHT + timedelta(hours=i) for i in range(24)],
            temperature_2m=[20.0] * 23,
            relative_humidity_2m=[50.0] * 24,
            windspeed_10m=[5.0] * 24,
        )
        with pytest.raises(MalformedInputError):
            normalize(raw)

    def test_empty_input_gives_empty_series(self):
        assert normalize(RawObservationSet()) == []


class TestSummarize:
    def test_empty_series_returns_none(self):
        """summarize has nothing to report for an empty series.

        Implementation: Summarizes an empty list.
        Passing implies: The dashboard shows placeholders instead of KPIs.
        """
        assert summarize([]) is None

    def test_current_is_first_sample(self):
        """current is the first sample's temperature, not the hottest or latest.

        Implementation: Summarizes a series whose first value is neither min nor max.
        Passing implies: current follows first-element semantics.
        """
        summary = summarize(_series([18.0, 12.0, 25.0]))

        assert summary.current == 18.0
        assert summary.min == 12.0
        assert summary.max == 25.0

    def test_average_humidity(self):
        """avg_humidity is the arithmetic mean over all samples.

        Implementation: Humidity readings 50, 60, 70.
        Passing implies: The mean is 60.0.
        """
        summary = summarize(_series([20.0, 21.0, 22.0], humidity=[50.0, 60.0, 70.0]))
        assert summary.avg_humidity == 60.0

    def test_values_rounded_to_one_decimal(self):
        """KPIs are rounded after full-precision computation.

        Implementation: Temperatures with two decimals and a humidity mean of 50.333...
        Passing implies: Each KPI carries at most one decimal place.
        """
        summary = summarize(_series([21.26, 19.94, 30.04], humidity=[50.0, 50.0, 51.0]))

        assert summary.current == 21.3
        assert summary.min == 19.9
        assert summary.max == 30.0
        assert summary.avg_humidity == 50.3

    def test_exact_ties_round_up(self):
        """Exact .x5 values round away from zero, matching the browser dashboard.

        Implementation: Humidity 60, 60, 60, 61 averages to exactly 60.25; temperatures are exact quarter values.
        Passing implies: KPIs use half-up rounding, not Python's half-to-even.
        """
        summary = summarize(_series([-2.25, -2.75, 20.25], humidity=[60.0, 60.0, 60.0]))
        assert summary.current == -2.3
        assert summary.min == -2.8
        assert summary.max == 20.3

        summary = summarize(_series([20.0, 20.0, 20.0, 20.0], humidity=[60.0, 60.0, 60.0, 61.0]))
        assert summary.avg_humidity == 60.3

    def test_bounds_hold_for_every_sample(self):
        """min <= current <= max, and every temperature lies within [min, max].

        Implementation: Summarizes a mixed series including negatives.
        Passing implies: min and max really bound the series.
        """
        temps = [4.5, -3.2, 17.8, 9.1, 0.0, 12.4]
        series = _series(temps)
        summary = summarize(series)

        assert summary.min <= summary.current <= summary.max
        assert all(summary.min <= s.temp <= summary.max for s in series)


class TestDistribute:
    def test_example_buckets(self):
        """Temperatures 15, 22, 31, 19, 30 split into 2 cold, 2 moderate, 1 hot.

        Implementation: Distributes the example series.
        Passing implies: Counts come back in [cold, moderate, hot] order.
        """
        assert distribute(_series([15.0, 22.0, 31.0, 19.0, 30.0])) == [2, 2, 1]

    def test_boundaries_are_moderate(self):
        """Exactly 20.0 and exactly 30.0 both count as moderate.

        Implementation: Distributes values at and just beyond each threshold.
        Passing implies: Both boundaries are inclusive to the moderate bucket.
        """
        assert distribute(_series([20.0, 30.0])) == [0, 2, 0]
        assert distribute(_series([19.9, 30.1])) == [1, 0, 1]

    def test_counts_partition_the_series(self):
        """The three counts always sum to the series length.

        Implementation: Distributes a spread of temperatures across all buckets.
        Passing implies: Every sample lands in exactly one bucket.
        """
        temps = [-5.0, 0.0, 19.99, 20.0, 25.0, 30.0, 30.01, 44.0, 12.0]
        counts = distribute(_series(temps))

        assert sum(counts) == len(temps)
        assert counts == [4, 3, 2]

    def test_empty_or_absent_series(self):
        assert distribute([]) == [0, 0, 0]
        assert distribute(None) == [0, 0, 0]


class TestBuildDashboard:
    def test_runs_all_stages(self):
        """build_dashboard bundles series, summary and distribution.

        Implementation: Builds dashboard data from the example temperatures.
        Passing implies: The rendering layer gets all three outputs from one call.
        """
        data = build_dashboard(_raw([15.0, 22.0, 31.0, 19.0, 30.0]))

        assert len(data.series) == 5
        assert data.summary.current == 15.0
        assert data.summary.max == 31.0
        assert data.distribution == [2, 2, 1]

    def test_empty_raw_set(self):
        """An empty observation set produces an empty, well-formed dashboard.

        Implementation: Builds dashboard data from zero-length columns.
        Passing implies: No KPIs and a degenerate [0, 0, 0] distribution.
        """
        data = build_dashboard(RawObservationSet())

        assert data.series == []
        assert data.summary is None
        assert data.distribution == [0, 0, 0]
