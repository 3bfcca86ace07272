"""CloudFoundryClient: the three resource services over one transport."""

from __future__ import annotations

from typing import Any

from .ports.transport import Transport
from .services.build_service import BuildService
from .services.deployment_service import DeploymentService
from .services.process_service import ProcessService


class CloudFoundryClient:
    """Entry point: ``client.builds.list(opts)``, ``client.processes.get(guid)``, ..."""

    def __init__(self, transport: Transport, logger: Any = None) -> None:
        self.transport = transport
        self.builds = BuildService(transport, logger=logger)
        self.deployments = DeploymentService(transport, logger=logger)
        self.processes = ProcessService(transport, logger=logger)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> CloudFoundryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
