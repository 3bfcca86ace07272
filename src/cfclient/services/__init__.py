"""Resource services: one request per call, no retries."""

from .build_service import BuildService
from .deployment_service import DeploymentService
from .process_service import ProcessService

__all__ = ["BuildService", "DeploymentService", "ProcessService"]
