"""Application layer package."""

from .aggregation import aggregate_report, normalize_rows
from .filters import parse_filters
from .report_request import build_report_request
from .web_vitals_service import get_web_vitals_data, get_web_vitals_data_for_state

__all__ = [
    "aggregate_report",
    "normalize_rows",
    "parse_filters",
    "build_report_request",
    "get_web_vitals_data",
    "get_web_vitals_data_for_state",
]
