"""Deployment resource models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .common import AppRelationship, Metadata, Pagination, Relationship, Resource, ToOneRelationship


class DeploymentRevision(BaseModel):
    guid: str
    version: int | None = None


class ProcessReference(BaseModel):
    guid: str
    type: str


class DeploymentStatus(BaseModel):
    value: str = ""
    reason: str = ""
    details: dict[str, str] = Field(default_factory=dict)


class Deployment(Resource):
    status: DeploymentStatus = Field(default_factory=DeploymentStatus)
    strategy: str = ""
    droplet: Relationship | None = None
    previous_droplet: Relationship | None = None
    new_processes: list[ProcessReference] = Field(default_factory=list)
    revision: DeploymentRevision | None = None
    metadata: Metadata | None = None
    relationships: AppRelationship = Field(default_factory=AppRelationship)


class DeploymentCreate(BaseModel):
    """Deploy an app's current droplet, or a specific droplet or revision."""

    relationships: AppRelationship
    droplet: Relationship | None = None
    revision: DeploymentRevision | None = None
    strategy: str | None = Field(default=None, description="rolling or canary")
    metadata: Metadata | None = None

    @classmethod
    def new(
        cls,
        app_guid: str,
        *,
        droplet_guid: str | None = None,
        revision_guid: str | None = None,
        strategy: str | None = None,
    ) -> DeploymentCreate:
        if droplet_guid and revision_guid:
            raise ValueError("a deployment targets either a droplet or a revision, not both")
        return cls(
            relationships=AppRelationship(app=ToOneRelationship(data=Relationship(guid=app_guid))),
            droplet=Relationship(guid=droplet_guid) if droplet_guid else None,
            revision=DeploymentRevision(guid=revision_guid) if revision_guid else None,
            strategy=strategy,
        )


class DeploymentUpdate(BaseModel):
    metadata: Metadata | None = None


class DeploymentList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    resources: list[Deployment] = Field(default_factory=list)
