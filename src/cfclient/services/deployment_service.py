"""DeploymentService: rolling and canary deployments of an app."""

from __future__ import annotations

from ..models.deployment import Deployment, DeploymentCreate, DeploymentList, DeploymentUpdate
from ..models.list_options import DeploymentListOptions
from .base import ResourceService


class DeploymentService(ResourceService):
    collection = "deployments"

    def list(self, opts: DeploymentListOptions | None = None) -> DeploymentList:
        return DeploymentList.model_validate(self._list(opts or DeploymentListOptions()))

    def get(self, guid: str) -> Deployment:
        return Deployment.model_validate(self._get(guid))

    def create(self, body: DeploymentCreate) -> Deployment:
        response = self._transport.request(
            "POST", self._path(), json=body.model_dump(mode="json", exclude_none=True)
        )
        return Deployment.model_validate(response.body)

    def update(self, guid: str, body: DeploymentUpdate) -> Deployment:
        response = self._transport.request(
            "PATCH", self._path(guid), json=body.model_dump(mode="json", exclude_none=True)
        )
        return Deployment.model_validate(response.body)

    def cancel(self, guid: str) -> None:
        self._transport.request("POST", self._path(guid, "actions", "cancel"))
