"""Builds the Web Vitals report request for one view and date range."""

from __future__ import annotations

import logging
from typing import List, Tuple

from web_vitals_report.application.filters import parse_filters
from web_vitals_report.config import REPORT_PAGE_SIZE
from web_vitals_report.domain.models import (
    MAX_PAGE_SIZE,
    SEGMENT_ID_PREFIX,
    FilterClause,
    FilterOperator,
    ReportParams,
    ReportRequest,
    ViewOptions,
)

logger = logging.getLogger(__name__)


def metric_name_clause(options: ViewOptions) -> FilterClause:
    return FilterClause(
        dimension_name=options.metric_name_dim,
        operator=FilterOperator.IN_LIST,
        expressions=tuple(options.metric_aliases()),
    )


def build_filters(options: ViewOptions) -> List[FilterClause]:
    filters = [metric_name_clause(options)]
    if options.filters:
        filters.extend(parse_filters(options.filters))
    return filters


def build_report_request(params: ReportParams, page_size: int = REPORT_PAGE_SIZE) -> ReportRequest:
    """Combine view options, date range, segments and filters into one request.

    The metric-name clause always comes first; user filters from the view
    options are appended after it and combined with AND.
    """
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be in [1, {MAX_PAGE_SIZE}], got {page_size}")
    filters = build_filters(params.options)
    logger.debug(
        "Built report request for view %s (%s..%s) with %d filter clause(s)",
        params.view_id,
        params.start_date,
        params.end_date,
        len(filters),
    )
    return ReportRequest(
        view_id=params.view_id,
        start_date=params.start_date,
        end_date=params.end_date,
        segment_ids=(params.segment_a, params.segment_b),
        options=params.options,
        filters=tuple(filters),
        page_size=page_size,
    )


def raw_segment_ids(request: ReportRequest) -> Tuple[str, str]:
    """Segment ids as the name resolver expects them, without the ``gaid::`` prefix."""
    first, second = (
        descriptor["segmentId"].removeprefix(SEGMENT_ID_PREFIX) for descriptor in request.segment_descriptors()
    )
    return first, second
