"""Decoding of reporting API rows into domain rows and Polars frames."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence

import polars as pl

from web_vitals_report.domain.models import ReportRow
from web_vitals_report.errors import ReportProcessingError

logger = logging.getLogger(__name__)

ROW_DIMENSIONS: List[str] = ["segment_id", "date", "metric_label", "country", "page"]
ROW_COLUMNS: List[str] = [*ROW_DIMENSIONS, "metric_id", "value"]
ROW_SCHEMA: Dict[str, Any] = {column: pl.Utf8 for column in ROW_COLUMNS}


def decode_report_row(raw: Mapping[str, Any]) -> ReportRow:
    try:
        dimensions = list(raw["dimensions"])
        value = raw["metrics"][0]["values"][0]
    except (KeyError, IndexError, TypeError) as exc:
        raise ReportProcessingError(f"Malformed report row: {raw!r}") from exc

    if len(dimensions) < len(ROW_DIMENSIONS):
        raise ReportProcessingError(
            f"Report row has {len(dimensions)} dimension(s), expected at least {len(ROW_DIMENSIONS)}: {raw!r}"
        )
    segment_id, date, metric_label, country, page = (str(item) for item in dimensions[: len(ROW_DIMENSIONS)])
    metric_id = str(dimensions[len(ROW_DIMENSIONS)]) if len(dimensions) > len(ROW_DIMENSIONS) else ""
    return ReportRow(
        segment_id=segment_id,
        date=date,
        metric_label=metric_label,
        country=country,
        page=page,
        value=str(value),
        metric_id=metric_id,
    )


def decode_report_rows(raw_rows: Iterable[Mapping[str, Any]]) -> List[ReportRow]:
    rows = [decode_report_row(raw) for raw in raw_rows]
    logger.debug("Decoded %d report row(s)", len(rows))
    return rows


def _value_text_expr() -> pl.Expr:
    return pl.col("value").str.strip_chars()


def _value_parsed_expr() -> pl.Expr:
    return _value_text_expr().cast(pl.Float64, strict=False)


def _validate_value_parse_errors(df: pl.DataFrame) -> None:
    failed = df.filter(_value_parsed_expr().is_null())
    if failed.is_empty():
        return
    samples = failed.select("value").to_series(0).head(3).to_list()
    raise ReportProcessingError(
        f"Data quality check failed: {failed.height}/{df.height} report value(s) are not numeric (e.g. {samples})"
    )


def rows_to_frame(rows: Sequence[ReportRow]) -> pl.DataFrame:
    """Build a row-ordered frame with ``value`` parsed to Float64."""
    frame = pl.DataFrame(
        {column: [str(getattr(row, column)) for row in rows] for column in ROW_COLUMNS},
        schema=ROW_SCHEMA,
    )
    _validate_value_parse_errors(frame)
    return frame.with_columns(_value_parsed_expr().alias("value"))
