"""Domain models for Web Vitals report requests and rows."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple

METRICS: Tuple[str, ...] = ("LCP", "FID", "CLS")
CLS_SCALE = 1000
SEGMENT_ID_PREFIX = "gaid::"
METRIC_EXPRESSION = "ga:eventValue"
MAX_PAGE_SIZE = 100_000

# Persisted option keys (camelCase) -> ViewOptions field names.
_OPTION_KEYS: Dict[str, str] = {
    "active": "active",
    "metricNameDim": "metric_name_dim",
    "metricIdDim": "metric_id_dim",
    "lcpName": "lcp_name",
    "fidName": "fid_name",
    "clsName": "cls_name",
    "filters": "filters",
}


@dataclass(frozen=True)
class ViewOptions:
    """Per-view metric aliases and dimension bindings."""

    active: bool = False
    metric_name_dim: str = "ga:eventAction"
    metric_id_dim: str = "ga:eventLabel"
    lcp_name: str = "LCP"
    fid_name: str = "FID"
    cls_name: str = "CLS"
    filters: str = ""

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ViewOptions":
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in raw.items():
            name = _OPTION_KEYS.get(key, key)
            if name in known and value is not None:
                values[name] = bool(value) if name == "active" else str(value)
        return cls(**values)

    def metric_aliases(self) -> List[str]:
        return [self.lcp_name, self.fid_name, self.cls_name]

    def metric_name_map(self) -> Dict[str, str]:
        return {
            self.lcp_name: "LCP",
            self.fid_name: "FID",
            self.cls_name: "CLS",
        }


class FilterOperator(str, Enum):
    EXACT = "EXACT"
    PARTIAL = "PARTIAL"
    REGEXP = "REGEXP"
    IN_LIST = "IN_LIST"


@dataclass(frozen=True)
class FilterClause:
    dimension_name: str
    operator: FilterOperator
    expressions: Tuple[str, ...]
    negated: bool = False

    def to_api(self) -> Dict[str, Any]:
        return {
            "dimensionName": self.dimension_name,
            "operator": self.operator.value,
            "expressions": list(self.expressions),
            "not": self.negated,
        }


@dataclass(frozen=True)
class ReportParams:
    """Run parameters for one report: view, date range and the two compared segments."""

    view_id: str
    start_date: str
    end_date: str
    segment_a: str
    segment_b: str
    options: ViewOptions = field(default_factory=ViewOptions)


@dataclass(frozen=True)
class ReportRow:
    """One metric observation, dimensions in request order."""

    segment_id: str
    date: str
    metric_label: str
    country: str
    page: str
    value: str
    metric_id: str = ""


@dataclass(frozen=True)
class ReportRequest:
    """Query descriptor sent to the reporting API.

    The dimension order is positional: rows come back with their dimension
    values in exactly this order and are decoded by position.
    """

    view_id: str
    start_date: str
    end_date: str
    segment_ids: Tuple[str, str]
    options: ViewOptions
    filters: Tuple[FilterClause, ...]
    page_size: int = MAX_PAGE_SIZE
    include_empty_rows: bool = True

    def segment_descriptors(self) -> List[Dict[str, str]]:
        return [{"segmentId": f"{SEGMENT_ID_PREFIX}{segment_id}"} for segment_id in self.segment_ids]

    def dimension_names(self) -> List[str]:
        return [
            "ga:segment",
            "ga:date",
            self.options.metric_name_dim,
            "ga:country",
            "ga:pagePath",
            self.options.metric_id_dim,
        ]

    def to_api(self) -> Dict[str, Any]:
        return {
            "viewId": self.view_id,
            "pageSize": self.page_size,
            "includeEmptyRows": self.include_empty_rows,
            "dateRanges": [{"startDate": self.start_date, "endDate": self.end_date}],
            "segments": self.segment_descriptors(),
            "metrics": [{"expression": METRIC_EXPRESSION}],
            "dimensions": [{"name": name} for name in self.dimension_names()],
            "dimensionFilterClauses": {
                "operator": "AND",
                "filters": [clause.to_api() for clause in self.filters],
            },
            "orderBys": [
                {"fieldName": METRIC_EXPRESSION, "sortOrder": "ASCENDING"},
                {"fieldName": "ga:date", "sortOrder": "ASCENDING"},
            ],
        }
