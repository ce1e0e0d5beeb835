"""View option resolution and environment-driven report settings."""

from __future__ import annotations

import os
from typing import Any, Mapping

from web_vitals_report.domain.models import MAX_PAGE_SIZE, ReportParams, ViewOptions


def _parse_page_size() -> int:
    raw = os.getenv("WEB_VITALS_PAGE_SIZE", str(MAX_PAGE_SIZE))
    try:
        page_size = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid WEB_VITALS_PAGE_SIZE: {raw}") from exc
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValueError(f"WEB_VITALS_PAGE_SIZE must be in [1, {MAX_PAGE_SIZE}], got {page_size}")
    return page_size


REPORT_PAGE_SIZE = _parse_page_size()


def default_view_options() -> ViewOptions:
    return ViewOptions()


def resolve_view_options(state: Mapping[str, Any], view_id: str) -> ViewOptions:
    """Return the stored options for ``view_id`` when active, else the defaults."""
    stored = state.get(f"opts:{view_id}")
    if not isinstance(stored, Mapping):
        return default_view_options()
    options = ViewOptions.from_mapping(stored)
    return options if options.active else default_view_options()


def params_from_state(state: Mapping[str, Any]) -> ReportParams:
    view_id = str(state["viewId"])
    return ReportParams(
        view_id=view_id,
        start_date=str(state["startDate"]),
        end_date=str(state["endDate"]),
        segment_a=str(state["segmentA"]),
        segment_b=str(state["segmentB"]),
        options=resolve_view_options(state, view_id),
    )
