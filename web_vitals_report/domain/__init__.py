"""Domain layer package."""

from .models import METRICS, FilterClause, FilterOperator, ReportParams, ReportRequest, ReportRow, ViewOptions
from .summary import BreakdownBucket, MetricSummary, WebVitalsSummary

__all__ = [
    "METRICS",
    "FilterClause",
    "FilterOperator",
    "ReportParams",
    "ReportRequest",
    "ReportRow",
    "ViewOptions",
    "BreakdownBucket",
    "MetricSummary",
    "WebVitalsSummary",
]
