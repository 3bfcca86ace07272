"""Shared v3 resource building blocks."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class Link(BaseModel):
    href: str = Field(..., description="Absolute URL")
    method: str | None = Field(default=None, description="HTTP method, when not GET")


class Resource(BaseModel):
    """Fields every v3 resource carries."""

    guid: str = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")
    links: dict[str, Link] = Field(default_factory=dict, description="Related endpoints")


class Metadata(BaseModel):
    """User-defined labels and annotations."""

    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)

    def set_label(self, key: str, value: str) -> Metadata:
        self.labels[key] = value
        return self

    def set_annotation(self, key: str, value: str) -> Metadata:
        self.annotations[key] = value
        return self


class Relationship(BaseModel):
    guid: str


class ToOneRelationship(BaseModel):
    data: Relationship | None = None


class AppRelationship(BaseModel):
    app: ToOneRelationship = Field(default_factory=ToOneRelationship)


class Pagination(BaseModel):
    total_results: int = 0
    total_pages: int = 0
    first: Link | None = None
    last: Link | None = None
    next: Link | None = None
    previous: Link | None = None


class Lifecycle(BaseModel):
    """Buildpack, docker, or cnb lifecycle with its type-specific data."""

    type: str = Field(..., description="Lifecycle type, e.g. buildpack or docker")
    data: dict[str, Any] = Field(default_factory=dict)
