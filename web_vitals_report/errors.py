"""Exceptions raised while building and aggregating Web Vitals reports."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for all report errors."""


class FilterFormatError(ReportError, ValueError):
    """Raised when a user filter expression cannot be parsed."""

    def __init__(self, message: str, expression: str) -> None:
        super().__init__(message)
        self.expression = expression


class WebVitalsError(ReportError):
    """User-facing condition with a title and an explanatory message.

    These are expected outcomes (for example an account that never sent any
    Web Vitals events), not programming faults, so renderers show ``title``
    and ``message`` as-is.
    """

    def __init__(self, title: str, message: str) -> None:
        super().__init__(f"{title} {message}")
        self.title = title
        self.message = message


class NoWebVitalsDataError(WebVitalsError):
    def __init__(self) -> None:
        super().__init__(
            title="No Web Vitals events found...",
            message=" ".join(
                [
                    "It looks like no Web Vitals data has been sent to this Google",
                    "Analytics account. You can learn how to measure and send Web Vitals",
                    "data here: https://github.com/GoogleChrome/web-vitals",
                ]
            ),
        )


class ReportProcessingError(ReportError, RuntimeError):
    """Raised when report rows break the assumptions the aggregation relies on."""


class UnexpectedMetricError(ReportProcessingError):
    def __init__(self, metric: str) -> None:
        super().__init__(f"Error: unexpected metric '{metric}' found.")
        self.metric = metric
