"""Resource models and list options."""

from .build import Build, BuildCreate, BuildList, BuildState, BuildUpdate, CreatedBy
from .common import (
    AppRelationship,
    Lifecycle,
    Link,
    Metadata,
    Pagination,
    Relationship,
    Resource,
    ToOneRelationship,
)
from .deployment import (
    Deployment,
    DeploymentCreate,
    DeploymentList,
    DeploymentRevision,
    DeploymentStatus,
    DeploymentUpdate,
    ProcessReference,
)
from .list_options import (
    BuildListOptions,
    DeploymentListOptions,
    ListOptions,
    ProcessListOptions,
)
from .process import (
    Process,
    ProcessHealthCheck,
    ProcessHealthCheckData,
    ProcessList,
    ProcessReadinessCheck,
    ProcessReadinessCheckData,
    ProcessRelationships,
    ProcessScale,
    ProcessStat,
    ProcessStats,
    ProcessUpdate,
    ProcessUsage,
)

__all__ = [
    # Common
    "AppRelationship",
    "Lifecycle",
    "Link",
    "Metadata",
    "Pagination",
    "Relationship",
    "Resource",
    "ToOneRelationship",
    # Builds
    "Build",
    "BuildCreate",
    "BuildList",
    "BuildState",
    "BuildUpdate",
    "CreatedBy",
    # Deployments
    "Deployment",
    "DeploymentCreate",
    "DeploymentList",
    "DeploymentRevision",
    "DeploymentStatus",
    "DeploymentUpdate",
    "ProcessReference",
    # Processes
    "Process",
    "ProcessHealthCheck",
    "ProcessHealthCheckData",
    "ProcessList",
    "ProcessReadinessCheck",
    "ProcessReadinessCheckData",
    "ProcessRelationships",
    "ProcessScale",
    "ProcessStat",
    "ProcessStats",
    "ProcessUpdate",
    "ProcessUsage",
    # List options
    "BuildListOptions",
    "DeploymentListOptions",
    "ListOptions",
    "ProcessListOptions",
]
