"""Application service for the Web Vitals report use case."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, Sequence

from web_vitals_report.application.aggregation import SegmentNameResolver, aggregate_report
from web_vitals_report.application.report_request import build_report_request
from web_vitals_report.config import params_from_state
from web_vitals_report.domain.models import ReportParams
from web_vitals_report.domain.summary import WebVitalsSummary
from web_vitals_report.infrastructure.report_rows import decode_report_rows

logger = logging.getLogger(__name__)

ReportFetcher = Callable[[Mapping[str, Any]], Awaitable[Sequence[Mapping[str, Any]]]]


async def get_web_vitals_data(
    params: ReportParams,
    fetch_report: ReportFetcher,
    resolve_segment_name: SegmentNameResolver,
) -> WebVitalsSummary:
    """Build the report request, fetch its rows once and aggregate them.

    Errors raised by ``fetch_report`` propagate unchanged.
    """
    request = build_report_request(params)
    raw_rows = await fetch_report(request.to_api())
    logger.debug("Fetched %d row(s) for view %s", len(raw_rows), params.view_id)
    rows = decode_report_rows(raw_rows)
    return aggregate_report(request, rows, resolve_segment_name)


async def get_web_vitals_data_for_state(
    state: Mapping[str, Any],
    fetch_report: ReportFetcher,
    resolve_segment_name: SegmentNameResolver,
) -> WebVitalsSummary:
    return await get_web_vitals_data(params_from_state(state), fetch_report, resolve_segment_name)
