"""Cloud Foundry v3 API client package."""

from .domain import (
    ExclusionFilter,
    Filter,
    FilterModifier,
    LabelSelector,
    QueryValues,
    TimestampFilter,
    TimestampFilterList,
)

__version__ = "0.1.0"
__all__ = [
    "ExclusionFilter",
    "Filter",
    "FilterModifier",
    "LabelSelector",
    "QueryValues",
    "TimestampFilter",
    "TimestampFilterList",
]
