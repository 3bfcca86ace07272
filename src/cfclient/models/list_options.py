"""List query options; field names double as query parameter names."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..domain.filters import Filter, LabelSelector, TimestampFilterList
from ..domain.query_values import QueryValues

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 50


class ListOptions(BaseModel):
    """Paging, ordering, labels and timestamps shared by every list call."""

    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Page to fetch")
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=5000, description="Results per page")
    order_by: str | None = Field(default=None, description="Sort field, '-' prefix for descending")
    label_selector: LabelSelector = Field(default_factory=LabelSelector)
    created_ats: TimestampFilterList = Field(default_factory=TimestampFilterList)
    updated_ats: TimestampFilterList = Field(default_factory=TimestampFilterList)

    def to_query_values(self) -> QueryValues:
        """Serialize every populated field, in declaration order."""
        query = QueryValues()
        for name in type(self).model_fields:
            value = getattr(self, name)
            if hasattr(value, "serialize"):
                value.serialize(query, name)
            elif isinstance(value, int):
                if value != 0:
                    query.add(name, str(value))
            elif isinstance(value, str):
                if value:
                    query.add(name, value)
        return query


class BuildListOptions(ListOptions):
    states: Filter = Field(default_factory=Filter)
    app_guids: Filter = Field(default_factory=Filter)
    package_guids: Filter = Field(default_factory=Filter)


class DeploymentListOptions(ListOptions):
    app_guids: Filter = Field(default_factory=Filter)
    states: Filter = Field(default_factory=Filter)
    status_reasons: Filter = Field(default_factory=Filter)
    status_values: Filter = Field(default_factory=Filter)


class ProcessListOptions(ListOptions):
    guids: Filter = Field(default_factory=Filter)
    types: Filter = Field(default_factory=Filter)
    app_guids: Filter = Field(default_factory=Filter)
    space_guids: Filter = Field(default_factory=Filter)
    organization_guids: Filter = Field(default_factory=Filter)
