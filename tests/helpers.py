from __future__ import annotations

from typing import Any, Dict

from web_vitals_report.application.report_request import build_report_request
from web_vitals_report.domain.models import ReportParams, ReportRequest, ReportRow, ViewOptions

SEGMENT_NAMES: Dict[str, str] = {
    "-1": "All Users",
    "-14": "Mobile Traffic",
    "-15": "Tablet Traffic",
}


def resolve_segment_name(segment_id: str) -> str:
    return SEGMENT_NAMES[segment_id]


def make_params(options: ViewOptions | None = None, **overrides: Any) -> ReportParams:
    values: Dict[str, Any] = {
        "view_id": "123456",
        "start_date": "2020-10-01",
        "end_date": "2020-10-28",
        "segment_a": "-1",
        "segment_b": "-14",
        "options": options or ViewOptions(),
    }
    values.update(overrides)
    return ReportParams(**values)


def make_request(options: ViewOptions | None = None) -> ReportRequest:
    return build_report_request(make_params(options))


def make_row(
    metric: str = "LCP",
    value: Any = "1200",
    segment_id: str = "-1",
    date: str = "20201001",
    country: str = "United States",
    page: str = "/",
    metric_id: str = "v1-1601510400000-1234",
) -> ReportRow:
    return ReportRow(
        segment_id=segment_id,
        date=date,
        metric_label=metric,
        country=country,
        page=page,
        value=str(value),
        metric_id=metric_id,
    )


def api_row(
    metric: str = "LCP",
    value: Any = "1200",
    segment_id: str = "-1",
    date: str = "20201001",
    country: str = "United States",
    page: str = "/",
    metric_id: str = "v1-1601510400000-1234",
) -> Dict[str, Any]:
    return {
        "dimensions": [segment_id, date, metric, country, page, metric_id],
        "metrics": [{"values": [str(value)]}],
    }
