"""Nested Web Vitals summary produced by the aggregation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import polars as pl

from web_vitals_report.domain.models import METRICS

SegmentValues = Dict[str, List[float]]

VALUES_FRAME_SCHEMA: Dict[str, Any] = {
    "metric": pl.Utf8,
    "segment": pl.Utf8,
    "date": pl.Utf8,
    "country": pl.Utf8,
    "page": pl.Utf8,
    "value": pl.Float64,
}


def segment_template(segment_names: Sequence[str]) -> SegmentValues:
    return {name: [] for name in segment_names}


def segment_values(segments: SegmentValues, segment: str) -> List[float]:
    return segments.setdefault(segment, [])


@dataclass
class MetricSummary:
    values: List[float] = field(default_factory=list)
    segments: SegmentValues = field(default_factory=dict)
    dates: Dict[str, SegmentValues] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": list(self.values),
            "segments": {name: list(values) for name, values in self.segments.items()},
            "dates": {
                date: {name: list(values) for name, values in segments.items()}
                for date, segments in self.dates.items()
            },
        }


@dataclass
class BreakdownBucket:
    """Per-page or per-country values, split by metric then segment."""

    metrics: Dict[str, SegmentValues]
    count: int = 0

    @classmethod
    def create(cls, segment_names: Sequence[str]) -> "BreakdownBucket":
        return cls(metrics={metric: segment_template(segment_names) for metric in METRICS})

    def add(self, metric: str, segment: str, value: float) -> None:
        segment_values(self.metrics[metric], segment).append(value)
        self.count += 1

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            metric: {name: list(values) for name, values in segments.items()}
            for metric, segments in self.metrics.items()
        }
        payload["count"] = self.count
        return payload


@dataclass
class WebVitalsSummary:
    segment_names: List[str]
    metrics: Dict[str, MetricSummary]
    countries: Dict[str, BreakdownBucket] = field(default_factory=dict)
    pages: Dict[str, BreakdownBucket] = field(default_factory=dict)
    observations: pl.DataFrame = field(
        default_factory=lambda: pl.DataFrame(schema=VALUES_FRAME_SCHEMA), repr=False, compare=False
    )

    @classmethod
    def empty(cls, segment_names: Sequence[str]) -> "WebVitalsSummary":
        names = list(segment_names)
        return cls(
            segment_names=names,
            metrics={metric: MetricSummary(segments=segment_template(names)) for metric in METRICS},
        )

    def add(self, metric: str, segment: str, date: str, country: str, page: str, value: float) -> None:
        metric_summary = self.metrics[metric]
        metric_summary.values.append(value)
        segment_values(metric_summary.segments, segment).append(value)

        if date not in metric_summary.dates:
            metric_summary.dates[date] = segment_template(self.segment_names)
        segment_values(metric_summary.dates[date], segment).append(value)

        self._bucket(self.pages, page).add(metric, segment, value)
        self._bucket(self.countries, country).add(metric, segment, value)

    def _bucket(self, buckets: Dict[str, BreakdownBucket], key: str) -> BreakdownBucket:
        if key not in buckets:
            buckets[key] = BreakdownBucket.create(self.segment_names)
        return buckets[key]

    def rank_by_count(self) -> None:
        """Reorder pages and countries by descending count; ties keep first-seen order."""
        self.countries = _sorted_by_count(self.countries)
        self.pages = _sorted_by_count(self.pages)

    def values_frame(self) -> pl.DataFrame:
        """Normalized observations in row order, one row per value."""
        return self.observations.select(list(VALUES_FRAME_SCHEMA))

    @property
    def row_count(self) -> int:
        return sum(len(summary.values) for summary in self.metrics.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metrics": {metric: summary.to_dict() for metric, summary in self.metrics.items()},
            "countries": {country: bucket.to_dict() for country, bucket in self.countries.items()},
            "pages": {page: bucket.to_dict() for page, bucket in self.pages.items()},
        }


def _sorted_by_count(buckets: Dict[str, BreakdownBucket]) -> Dict[str, BreakdownBucket]:
    ordered = sorted(buckets.items(), key=lambda item: -item[1].count)
    return dict(ordered)
