"""Parser for semicolon-separated (AND) dimension filter expressions."""

from __future__ import annotations

import re
from typing import Dict, List

from web_vitals_report.domain.models import FilterClause, FilterOperator
from web_vitals_report.errors import FilterFormatError

_UNESCAPED_COMMA = re.compile(r"(?<!\\),")
_FILTER_PATTERN = re.compile(r"(ga:\w+)([!=][=@~])(.+)")
_MATCH_OPERATORS: Dict[str, FilterOperator] = {
    "=": FilterOperator.EXACT,
    "@": FilterOperator.PARTIAL,
    "~": FilterOperator.REGEXP,
}


def _parse_clause(expression: str) -> FilterClause:
    match = _FILTER_PATTERN.fullmatch(expression.lstrip())
    if match is None:
        raise FilterFormatError(f"Invalid filter expression '{expression}'", expression)

    dimension_name, comparator, value = match.groups()
    return FilterClause(
        dimension_name=dimension_name,
        operator=_MATCH_OPERATORS[comparator[1]],
        expressions=(value,),
        negated=comparator[0] == "!",
    )


def parse_filters(filters_expression: str) -> List[FilterClause]:
    """Parse ``ga:dim==value;ga:other=@value`` into filter clauses, in order.

    Supported comparators are ``==``/``!=`` (exact), ``=@``/``!@`` (partial) and
    ``=~``/``!~`` (regular expression). Semicolons cannot be escaped, so a value
    can never contain one.
    """
    if _UNESCAPED_COMMA.search(filters_expression):
        raise FilterFormatError(
            " ".join(
                [
                    "OR based filter expressions (using a comma) are not supported.",
                    "Only AND based filter expressions (using a semicolon) are allowed.",
                ]
            ),
            filters_expression,
        )
    return [_parse_clause(expression) for expression in filters_expression.split(";")]
