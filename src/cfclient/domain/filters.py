"""Typed query filters for list calls.

Every filter writes itself into a QueryValues sink with ``serialize(values, tag)``,
where ``tag`` is the query parameter name (``states``, ``created_ats``, ...).
An unpopulated filter contributes nothing.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, Field

from .query_values import QueryValues


class FilterModifier(str, Enum):
    """Comparison operators, encoded as the bracket suffix on a tag."""

    NONE = ""
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    GREATER_THAN_OR_EQUAL = "gte"
    LESS_THAN_OR_EQUAL = "lte"

    def __str__(self) -> str:
        return self.value


def format_rfc3339(ts: datetime) -> str:
    """Second-precision RFC 3339; UTC renders as ``Z``, naive is taken as UTC."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    stamp = ts.replace(tzinfo=None, microsecond=0).isoformat()
    offset = ts.utcoffset()
    if offset == timedelta(0):
        return stamp + "Z"
    # Offsets carry minutes only; sub-minute parts of historical zones are dropped.
    sign = "-" if offset < timedelta(0) else "+"
    minutes = int(abs(offset).total_seconds()) // 60
    hours, minutes = divmod(minutes, 60)
    return f"{stamp}{sign}{hours:02d}:{minutes:02d}"


class Filter(BaseModel):
    """Equal to any of ``values``."""

    values: list[str] = Field(default_factory=list, description="Accepted values, in wire order")

    def equal_to(self, *values: str) -> Filter:
        self.values = list(values)
        return self

    def serialize(self, query: QueryValues, tag: str) -> None:
        if self.values:
            query.add(tag, ",".join(self.values))


class ExclusionFilter(Filter):
    """Filter that can be negated, written as ``tag[not]``."""

    negate: bool = Field(default=False, description="Match anything except values")

    def equal_to(self, *values: str) -> ExclusionFilter:
        """Match ``values``; clears any earlier negation so a reused filter is plain equality again."""
        self.values = list(values)
        self.negate = False
        return self

    def not_equal_to(self, *values: str) -> ExclusionFilter:
        self.values = list(values)
        self.negate = True
        return self

    def serialize(self, query: QueryValues, tag: str) -> None:
        if not self.values:
            return
        if self.negate:
            tag = tag + "[not]"
        query.add(tag, ",".join(self.values))


class TimestampFilter(BaseModel):
    """One timestamp predicate: equal to any of, or a single bound."""

    timestamps: list[datetime] = Field(default_factory=list)
    modifier: FilterModifier = Field(default=FilterModifier.NONE)

    def serialize(self, query: QueryValues, tag: str) -> None:
        if not self.timestamps:
            return
        if self.modifier is not FilterModifier.NONE:
            tag = f"{tag}[{self.modifier}]"
        query.add(tag, ",".join(format_rfc3339(ts) for ts in self.timestamps))


class TimestampFilterList(BaseModel):
    """Ordered timestamp predicates sharing one tag.

    Each helper appends a predicate, so ``after(a).before(b)`` expresses a range.
    """

    filters: list[TimestampFilter] = Field(default_factory=list)

    def _append(self, timestamps: list[datetime], modifier: FilterModifier) -> TimestampFilterList:
        self.filters.append(TimestampFilter(timestamps=timestamps, modifier=modifier))
        return self

    def equal_to(self, *timestamps: datetime) -> TimestampFilterList:
        return self._append(list(timestamps), FilterModifier.NONE)

    def before(self, ts: datetime) -> TimestampFilterList:
        return self._append([ts], FilterModifier.LESS_THAN)

    def before_or_equal_to(self, ts: datetime) -> TimestampFilterList:
        return self._append([ts], FilterModifier.LESS_THAN_OR_EQUAL)

    def after(self, ts: datetime) -> TimestampFilterList:
        return self._append([ts], FilterModifier.GREATER_THAN)

    def after_or_equal_to(self, ts: datetime) -> TimestampFilterList:
        return self._append([ts], FilterModifier.GREATER_THAN_OR_EQUAL)

    def serialize(self, query: QueryValues, tag: str) -> None:
        for predicate in self.filters:
            predicate.serialize(query, tag)

    def __len__(self) -> int:
        return len(self.filters)


class LabelSelector(BaseModel):
    """Label key -> requirement, combined into one ``label_selector`` value.

    Keys keep insertion order; setting a key again replaces its requirement.
    """

    requirements: dict[str, ExclusionFilter] = Field(default_factory=dict)

    def exists(self, key: str) -> LabelSelector:
        self.requirements[key] = ExclusionFilter()
        return self

    def not_exists(self, key: str) -> LabelSelector:
        self.requirements[key] = ExclusionFilter(negate=True)
        return self

    def equal_to(self, key: str, *values: str) -> LabelSelector:
        self.requirements[key] = ExclusionFilter(values=list(values))
        return self

    def not_equal_to(self, key: str, *values: str) -> LabelSelector:
        self.requirements[key] = ExclusionFilter(values=list(values), negate=True)
        return self

    @staticmethod
    def _clause(key: str, requirement: ExclusionFilter) -> str:
        values = requirement.values
        if not values:
            return "!" + key if requirement.negate else key
        if len(values) == 1:
            op = "!=" if requirement.negate else "="
            return key + op + values[0]
        op = " notin (" if requirement.negate else " in ("
        return key + op + ",".join(values) + ")"

    def serialize(self, query: QueryValues, tag: str) -> None:
        if not self.requirements:
            return
        query.add(tag, ",".join(self._clause(k, v) for k, v in self.requirements.items()))

    def __len__(self) -> int:
        return len(self.requirements)
