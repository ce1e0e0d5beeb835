"""Aggregation of Web Vitals report rows into the nested chart/table summary."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Sequence

import polars as pl

from web_vitals_report.application.report_request import raw_segment_ids
from web_vitals_report.domain.models import CLS_SCALE, METRICS, ReportRequest, ReportRow
from web_vitals_report.domain.summary import VALUES_FRAME_SCHEMA, WebVitalsSummary
from web_vitals_report.errors import NoWebVitalsDataError, UnexpectedMetricError
from web_vitals_report.infrastructure.report_rows import rows_to_frame

logger = logging.getLogger(__name__)

SegmentNameResolver = Callable[[str], str]


class _SegmentNames:
    """Resolves each distinct segment id once per aggregation run."""

    def __init__(self, resolve: SegmentNameResolver) -> None:
        self._resolve = resolve
        self._names: Dict[str, str] = {}

    def __call__(self, segment_id: str) -> str:
        if segment_id not in self._names:
            self._names[segment_id] = self._resolve(segment_id)
        return self._names[segment_id]

    def mapping(self, segment_ids: Sequence[str]) -> Dict[str, str]:
        return {segment_id: self(segment_id) for segment_id in segment_ids}


def _canonical_metric_expr(metric_name_map: Mapping[str, str]) -> pl.Expr:
    return pl.col("metric_label").replace_strict(dict(metric_name_map), default=None, return_dtype=pl.Utf8)


def _rescaled_value_expr() -> pl.Expr:
    # CLS is sent at 1000x so it survives integer event values upstream.
    return pl.when(pl.col("metric") == "CLS").then(pl.col("value") / CLS_SCALE).otherwise(pl.col("value"))


def _validate_metrics(df: pl.DataFrame) -> None:
    # Reports past the API row cap fold the tail into an "(other)" bucket,
    # which would silently skew every breakdown.
    unexpected = df.filter(pl.col("metric").is_null() | ~pl.col("metric").is_in(list(METRICS)))
    if not unexpected.is_empty():
        raise UnexpectedMetricError(str(unexpected.select("metric_label").to_series(0)[0]))


def normalize_rows(
    rows: Sequence[ReportRow],
    metric_name_map: Mapping[str, str],
    segment_names: Mapping[str, str],
) -> pl.DataFrame:
    """Map labels to canonical metrics, ids to segment names, and rescale CLS."""
    frame = rows_to_frame(rows)
    normalized = frame.with_columns(
        _canonical_metric_expr(metric_name_map).alias("metric"),
        pl.col("segment_id").replace_strict(dict(segment_names), return_dtype=pl.Utf8).alias("segment"),
    )
    _validate_metrics(normalized)
    return normalized.with_columns(_rescaled_value_expr().alias("value"))


def aggregate_report(
    request: ReportRequest,
    rows: Sequence[ReportRow],
    resolve_segment_name: SegmentNameResolver,
) -> WebVitalsSummary:
    """Aggregate report rows into per-metric, per-date, per-page and per-country values.

    Rows are consumed in the order returned by the API so every value list
    keeps that order. Pages and countries are ranked by observation count.

    Raises:
        NoWebVitalsDataError: the report returned no rows.
        UnexpectedMetricError: a metric label is not one of the view's aliases.
    """
    if not rows:
        raise NoWebVitalsDataError()

    names = _SegmentNames(resolve_segment_name)
    segment_names: List[str] = [names(segment_id) for segment_id in raw_segment_ids(request)]
    row_segment_ids = list(dict.fromkeys(row.segment_id for row in rows))
    normalized = normalize_rows(rows, request.options.metric_name_map(), names.mapping(row_segment_ids))

    summary = WebVitalsSummary.empty(segment_names)
    for row in normalized.select(["metric", "segment", "date", "country", "page", "value"]).iter_rows(named=True):
        summary.add(**row)
    summary.rank_by_count()
    summary.observations = normalized.select(list(VALUES_FRAME_SCHEMA))

    logger.info(
        "Aggregated %d report row(s) for view %s into %d page(s) and %d country bucket(s)",
        summary.row_count,
        request.view_id,
        len(summary.pages),
        len(summary.countries),
    )
    return summary
