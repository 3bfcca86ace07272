"""ProcessService: inspect, update and scale app processes."""

from __future__ import annotations

from ..models.list_options import ProcessListOptions
from ..models.process import Process, ProcessList, ProcessScale, ProcessStats, ProcessUpdate
from .base import ResourceService


class ProcessService(ResourceService):
    collection = "processes"

    def list(self, opts: ProcessListOptions | None = None) -> ProcessList:
        return ProcessList.model_validate(self._list(opts or ProcessListOptions()))

    def get(self, guid: str) -> Process:
        return Process.model_validate(self._get(guid))

    def update(self, guid: str, body: ProcessUpdate) -> Process:
        response = self._transport.request(
            "PATCH",
            self._path(guid),
            json=body.model_dump(mode="json", exclude_none=True, by_alias=True),
        )
        return Process.model_validate(response.body)

    def scale(self, guid: str, body: ProcessScale) -> Process:
        response = self._transport.request(
            "POST",
            self._path(guid, "actions", "scale"),
            json=body.model_dump(mode="json", exclude_none=True),
        )
        return Process.model_validate(response.body)

    def get_stats(self, guid: str) -> ProcessStats:
        return ProcessStats.model_validate(self._transport.request("GET", self._path(guid, "stats")).body)
