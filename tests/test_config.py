import pytest

from web_vitals_report import config
from web_vitals_report.config import default_view_options, params_from_state, resolve_view_options
from web_vitals_report.domain.models import ViewOptions


def _stored_options(**overrides):
    stored = {
        "active": True,
        "metricNameDim": "ga:dimension2",
        "metricIdDim": "ga:dimension3",
        "lcpName": "lcp",
        "fidName": "fid",
        "clsName": "cls",
        "filters": "ga:country==Japan",
    }
    stored.update(overrides)
    return stored


def test_default_view_options():
    options = default_view_options()
    assert options == ViewOptions(
        active=False,
        metric_name_dim="ga:eventAction",
        metric_id_dim="ga:eventLabel",
        lcp_name="LCP",
        fid_name="FID",
        cls_name="CLS",
        filters="",
    )
    assert options.metric_name_map() == {"LCP": "LCP", "FID": "FID", "CLS": "CLS"}


def test_from_mapping_reads_camel_case_and_fills_defaults():
    options = ViewOptions.from_mapping({"active": 1, "lcpName": "largest"})
    assert options.active is True
    assert options.lcp_name == "largest"
    assert options.fid_name == "FID"
    assert options.metric_name_dim == "ga:eventAction"


def test_from_mapping_ignores_unknown_keys_and_nulls():
    options = ViewOptions.from_mapping({"unknown": "x", "clsName": None})
    assert options == ViewOptions()


def test_from_mapping_stringifies_stored_values():
    options = ViewOptions.from_mapping({"active": True, "lcpName": 5, "metricNameDim": "ga:dimension2"})
    assert options.lcp_name == "5"
    assert options.metric_name_map() == {"5": "LCP", "FID": "FID", "CLS": "CLS"}


def test_resolve_uses_active_stored_options():
    state = {"opts:123": _stored_options()}
    options = resolve_view_options(state, "123")
    assert options.metric_name_dim == "ga:dimension2"
    assert options.metric_name_map() == {"lcp": "LCP", "fid": "FID", "cls": "CLS"}


def test_resolve_falls_back_when_inactive_or_missing():
    state = {"opts:123": _stored_options(active=False)}
    assert resolve_view_options(state, "123") == default_view_options()
    assert resolve_view_options(state, "999") == default_view_options()
    assert resolve_view_options({}, "123") == default_view_options()


def test_params_from_state():
    state = {
        "viewId": 123,
        "startDate": "2020-10-01",
        "endDate": "2020-10-28",
        "segmentA": "-1",
        "segmentB": "-14",
        "opts:123": _stored_options(),
    }
    params = params_from_state(state)
    assert params.view_id == "123"
    assert (params.segment_a, params.segment_b) == ("-1", "-14")
    assert params.options.filters == "ga:country==Japan"


def test_page_size_defaults_to_max(monkeypatch):
    monkeypatch.delenv("WEB_VITALS_PAGE_SIZE", raising=False)
    assert config._parse_page_size() == 100000


def test_page_size_from_environment(monkeypatch):
    monkeypatch.setenv("WEB_VITALS_PAGE_SIZE", "2500")
    assert config._parse_page_size() == 2500


@pytest.mark.parametrize("raw", ["abc", "0", "100001"])
def test_page_size_rejects_invalid_values(monkeypatch, raw):
    monkeypatch.setenv("WEB_VITALS_PAGE_SIZE", raw)
    with pytest.raises(ValueError, match="WEB_VITALS_PAGE_SIZE"):
        config._parse_page_size()
