"""Web Vitals report package."""

from .application import aggregate_report, build_report_request, get_web_vitals_data, parse_filters
from .config import default_view_options, params_from_state, resolve_view_options
from .domain import FilterClause, FilterOperator, ReportParams, ReportRequest, ReportRow, ViewOptions, WebVitalsSummary
from .errors import (
    FilterFormatError,
    NoWebVitalsDataError,
    ReportError,
    ReportProcessingError,
    UnexpectedMetricError,
    WebVitalsError,
)

__all__ = [
    "aggregate_report",
    "build_report_request",
    "get_web_vitals_data",
    "parse_filters",
    "default_view_options",
    "params_from_state",
    "resolve_view_options",
    "FilterClause",
    "FilterOperator",
    "ReportParams",
    "ReportRequest",
    "ReportRow",
    "ViewOptions",
    "WebVitalsSummary",
    "FilterFormatError",
    "NoWebVitalsDataError",
    "ReportError",
    "ReportProcessingError",
    "UnexpectedMetricError",
    "WebVitalsError",
]
