"""Process resource models, including scale and stats."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .common import Metadata, Pagination, Resource, ToOneRelationship


class ProcessHealthCheckData(BaseModel):
    timeout: int | None = Field(default=None, description="Seconds health checks may fail before restart")
    invocation_timeout: int | None = Field(default=None, description="Per-request timeout for http/port checks")
    interval: int | None = Field(default=None, description="Seconds between checks")
    endpoint: str | None = Field(default=None, description="Path probed by http checks")


class ProcessHealthCheck(BaseModel):
    type: str | None = Field(default=None, description="http, port, or process")
    data: ProcessHealthCheckData = Field(default_factory=ProcessHealthCheckData)


class ProcessReadinessCheckData(BaseModel):
    invocation_timeout: int | None = None
    interval: int | None = None
    endpoint: str | None = None


class ProcessReadinessCheck(BaseModel):
    type: str | None = Field(default=None, description="http, port, or process")
    data: ProcessReadinessCheckData = Field(default_factory=ProcessReadinessCheckData)


class ProcessRelationships(BaseModel):
    app: ToOneRelationship = Field(default_factory=ToOneRelationship)
    revision: ToOneRelationship = Field(default_factory=ToOneRelationship)


class Process(Resource):
    type: str = Field(..., description="Unique per app, e.g. web or worker")
    command: str | None = None
    instances: int = 0
    memory_in_mb: int = 0
    disk_in_mb: int = 0
    log_rate_limit_in_bytes_per_second: int = 0

    health_check: ProcessHealthCheck = Field(default_factory=ProcessHealthCheck)
    readiness_check: ProcessReadinessCheck = Field(
        default_factory=ProcessReadinessCheck, alias="readiness_health_check"
    )
    relationships: ProcessRelationships = Field(default_factory=ProcessRelationships)
    metadata: Metadata | None = None

    model_config = {"populate_by_name": True}


class ProcessList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    resources: list[Process] = Field(default_factory=list)


class ProcessUpdate(BaseModel):
    """Partial process update; unset fields are left untouched server-side."""

    command: str | None = None
    health_check: ProcessHealthCheck | None = None
    readiness_check: ProcessReadinessCheck | None = Field(default=None, alias="readiness_health_check")
    metadata: Metadata | None = None

    model_config = {"populate_by_name": True}

    def _health(self) -> ProcessHealthCheck:
        if self.health_check is None:
            self.health_check = ProcessHealthCheck()
        return self.health_check

    def _readiness(self) -> ProcessReadinessCheck:
        if self.readiness_check is None:
            self.readiness_check = ProcessReadinessCheck()
        return self.readiness_check

    def with_command(self, command: str) -> ProcessUpdate:
        self.command = command
        return self

    def with_health_check_type(self, check_type: str) -> ProcessUpdate:
        self._health().type = check_type
        return self

    def with_health_check_timeout(self, timeout: int) -> ProcessUpdate:
        self._health().data.timeout = timeout
        return self

    def with_health_check_invocation_timeout(self, timeout: int) -> ProcessUpdate:
        self._health().data.invocation_timeout = timeout
        return self

    def with_health_check_interval(self, interval: int) -> ProcessUpdate:
        self._health().data.interval = interval
        return self

    def with_health_check_endpoint(self, endpoint: str) -> ProcessUpdate:
        self._health().data.endpoint = endpoint
        return self

    def with_readiness_check_type(self, check_type: str) -> ProcessUpdate:
        self._readiness().type = check_type
        return self

    def with_readiness_check_invocation_timeout(self, timeout: int) -> ProcessUpdate:
        self._readiness().data.invocation_timeout = timeout
        return self

    def with_readiness_check_interval(self, interval: int) -> ProcessUpdate:
        self._readiness().data.interval = interval
        return self

    def with_readiness_check_endpoint(self, endpoint: str) -> ProcessUpdate:
        self._readiness().data.endpoint = endpoint
        return self


class ProcessScale(BaseModel):
    instances: int | None = None
    memory_in_mb: int | None = None
    disk_in_mb: int | None = None
    log_rate_limit_in_bytes_per_second: int | None = None

    def with_instances(self, count: int) -> ProcessScale:
        self.instances = count
        return self

    def with_memory_in_mb(self, mb: int) -> ProcessScale:
        self.memory_in_mb = mb
        return self

    def with_disk_in_mb(self, mb: int) -> ProcessScale:
        self.disk_in_mb = mb
        return self

    def with_log_rate_limit_in_bytes_per_second(self, rate: int) -> ProcessScale:
        self.log_rate_limit_in_bytes_per_second = rate
        return self


class _StatsModel(BaseModel):
    """Stats payloads send null for whatever a down instance cannot report."""

    model_config = {"populate_by_name": True}

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ProcessUsage(_StatsModel):
    time: datetime | None = None
    cpu: float = 0.0
    cpu_entitlement: float = 0.0
    memory: int = Field(default=0, alias="mem")
    disk: int = 0
    log_rate: int = 0


class ProcessStat(_StatsModel):
    """Runtime stats for one process instance."""

    type: str = ""
    index: int = 0
    state: str = Field(default="", description="RUNNING, CRASHED, STARTING, or DOWN")
    usage: ProcessUsage = Field(default_factory=ProcessUsage)
    host: str = ""
    instance_ports: list[dict[str, int]] = Field(default_factory=list)
    uptime: int = 0
    memory_quota: int = Field(default=0, alias="mem_quota")
    disk_quota: int = 0
    file_descriptor_quota: int = Field(default=0, alias="fds_quota")
    isolation_segment: str | None = None
    details: str | None = None


class ProcessStats(BaseModel):
    stats: list[ProcessStat] = Field(default_factory=list, alias="resources")

    model_config = {"populate_by_name": True}
