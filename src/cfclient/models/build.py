"""Build resource models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .common import AppRelationship, Lifecycle, Metadata, Pagination, Relationship, Resource


class BuildState(str, Enum):
    """The three build lifecycle states."""

    STAGING = "STAGING"
    STAGED = "STAGED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


class CreatedBy(BaseModel):
    guid: str = ""
    name: str = ""
    email: str = ""


class Build(Resource):
    state: BuildState
    error: str | None = None

    staging_memory_in_mb: int = 0
    staging_disk_in_mb: int = 0
    staging_log_rate_limit_bytes_per_second: int = 0

    lifecycle: Lifecycle | None = None
    package: Relationship
    droplet: Relationship | None = None
    created_by: CreatedBy = Field(default_factory=CreatedBy)
    relationships: AppRelationship = Field(default_factory=AppRelationship)
    metadata: Metadata | None = None


class BuildCreate(BaseModel):
    package: Relationship
    lifecycle: Lifecycle | None = None
    staging_memory_in_mb: int | None = None
    staging_disk_in_mb: int | None = None
    staging_log_rate_limit_bytes_per_second: int | None = None
    metadata: Metadata | None = None

    @classmethod
    def new(cls, package_guid: str) -> BuildCreate:
        return cls(package=Relationship(guid=package_guid))


class BuildUpdate(BaseModel):
    metadata: Metadata | None = None
    lifecycle: Lifecycle | None = None
    state: str | None = None


class BuildList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    resources: list[Build] = Field(default_factory=list)
