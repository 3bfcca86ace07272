"""BuildService: staging builds from packages."""

from __future__ import annotations

from ..models.build import Build, BuildCreate, BuildList, BuildUpdate
from ..models.list_options import BuildListOptions
from .base import ResourceService, job_guid


class BuildService(ResourceService):
    collection = "builds"

    def list(self, opts: BuildListOptions | None = None) -> BuildList:
        return BuildList.model_validate(self._list(opts or BuildListOptions()))

    def get(self, guid: str) -> Build:
        return Build.model_validate(self._get(guid))

    def create(self, body: BuildCreate) -> Build:
        response = self._transport.request(
            "POST", self._path(), json=body.model_dump(mode="json", exclude_none=True)
        )
        return Build.model_validate(response.body)

    def update(self, guid: str, body: BuildUpdate) -> Build:
        response = self._transport.request(
            "PATCH", self._path(guid), json=body.model_dump(mode="json", exclude_none=True)
        )
        return Build.model_validate(response.body)

    def delete(self, guid: str) -> str:
        """Delete a build; returns the GUID of the async delete job."""
        return job_guid(self._transport.request("DELETE", self._path(guid)))
