"""Infrastructure layer package."""

from .report_rows import decode_report_row, decode_report_rows, rows_to_frame

__all__ = ["decode_report_row", "decode_report_rows", "rows_to_frame"]
