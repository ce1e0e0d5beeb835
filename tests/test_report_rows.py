import polars as pl
import pytest

from web_vitals_report.domain.models import ReportRow
from web_vitals_report.errors import ReportProcessingError
from web_vitals_report.infrastructure.report_rows import decode_report_row, decode_report_rows, rows_to_frame

from .helpers import api_row, make_row


def test_decode_row_by_position():
    row = decode_report_row(api_row(metric="CLS", value="37", country="Japan", page="/blog"))
    assert row == ReportRow(
        segment_id="-1",
        date="20201001",
        metric_label="CLS",
        country="Japan",
        page="/blog",
        value="37",
        metric_id="v1-1601510400000-1234",
    )


def test_decode_row_without_metric_id():
    raw = {"dimensions": ["-1", "20201001", "LCP", "Japan", "/"], "metrics": [{"values": ["900"]}]}
    assert decode_report_row(raw).metric_id == ""


@pytest.mark.parametrize(
    "raw",
    [
        {"dimensions": ["-1", "20201001", "LCP", "Japan", "/"]},
        {"dimensions": ["-1", "20201001", "LCP", "Japan", "/"], "metrics": []},
        {"metrics": [{"values": ["1"]}]},
    ],
)
def test_decode_malformed_rows(raw):
    with pytest.raises(ReportProcessingError, match="Malformed report row"):
        decode_report_row(raw)


def test_decode_rejects_short_dimension_list():
    with pytest.raises(ReportProcessingError, match="expected at least 5"):
        decode_report_row({"dimensions": ["-1", "20201001", "LCP"], "metrics": [{"values": ["1"]}]})


def test_decode_rows_keeps_order():
    rows = decode_report_rows([api_row(value="1"), api_row(value="2"), api_row(value="3")])
    assert [row.value for row in rows] == ["1", "2", "3"]


def test_rows_to_frame_parses_values():
    frame = rows_to_frame([make_row(value="1200"), make_row(value=" 35.5 ")])
    assert frame.schema["value"] == pl.Float64
    assert frame["value"].to_list() == [1200.0, 35.5]
    assert frame.columns == ["segment_id", "date", "metric_label", "country", "page", "metric_id", "value"]


def test_rows_to_frame_rejects_non_numeric_values():
    with pytest.raises(ReportProcessingError, match="1/2 report value"):
        rows_to_frame([make_row(value="1200"), make_row(value="n/a")])
