"""Domain layer: query filters and the query-parameter sink."""

from .filters import (
    ExclusionFilter,
    Filter,
    FilterModifier,
    LabelSelector,
    TimestampFilter,
    TimestampFilterList,
    format_rfc3339,
)
from .query_values import QueryValues

__all__ = [
    "ExclusionFilter",
    "Filter",
    "FilterModifier",
    "LabelSelector",
    "QueryValues",
    "TimestampFilter",
    "TimestampFilterList",
    "format_rfc3339",
]
