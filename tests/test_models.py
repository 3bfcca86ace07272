"""Resource model tests: parsing v3 payloads and building request bodies."""

import pytest

from cfclient.models import (
    Build,
    BuildCreate,
    BuildState,
    Deployment,
    DeploymentCreate,
    Metadata,
    Process,
    ProcessScale,
    ProcessStats,
    ProcessUpdate,
)

BUILD_JSON = {
    "guid": "585bc3c1-3743-497d-88b0-403ad6b56d16",
    "created_at": "2016-03-28T23:39:34Z",
    "updated_at": "2016-06-08T16:41:26Z",
    "created_by": {"guid": "3cb4e243", "name": "bill", "email": "bill@example.com"},
    "state": "STAGING",
    "staging_memory_in_mb": 1024,
    "staging_disk_in_mb": 1024,
    "error": None,
    "lifecycle": {"type": "buildpack", "data": {"buildpacks": ["ruby_buildpack"], "stack": "cflinuxfs4"}},
    "package": {"guid": "8e4da443-f255-499c-8b47-b3729b5b7432"},
    "droplet": None,
    "relationships": {"app": {"data": {"guid": "7b34f1cf-7e73-428a-bb5a-8a17a8058396"}}},
    "metadata": {"labels": {}, "annotations": {}},
    "links": {"self": {"href": "https://api.example.org/v3/builds/585bc3c1"}},
}

PROCESS_JSON = {
    "guid": "6a901b7c-9417-4dc1-8189-d3234aa0ab82",
    "created_at": "2016-03-23T18:48:22Z",
    "updated_at": "2016-03-23T18:48:42Z",
    "type": "web",
    "command": "rackup",
    "instances": 5,
    "memory_in_mb": 256,
    "disk_in_mb": 1024,
    "log_rate_limit_in_bytes_per_second": 1024,
    "health_check": {"type": "port", "data": {"timeout": None, "invocation_timeout": None}},
    "readiness_health_check": {"type": "process", "data": {"invocation_timeout": None}},
    "relationships": {"app": {"data": {"guid": "app-1"}}, "revision": {"data": {"guid": "rev-1"}}},
    "metadata": {"labels": {"env": "prod"}, "annotations": {}},
    "links": {},
    "version": "ignored-unknown-field",
}


class TestBuild:
    def test_parse(self):
        build = Build.model_validate(BUILD_JSON)
        assert build.state is BuildState.STAGING
        assert build.package.guid == "8e4da443-f255-499c-8b47-b3729b5b7432"
        assert build.relationships.app.data.guid == "7b34f1cf-7e73-428a-bb5a-8a17a8058396"
        assert build.lifecycle.data["stack"] == "cflinuxfs4"
        assert build.droplet is None
        assert build.created_at.year == 2016

    def test_create_body(self):
        body = BuildCreate.new("pkg-1")
        body.staging_memory_in_mb = 512
        assert body.model_dump(mode="json", exclude_none=True) == {
            "package": {"guid": "pkg-1"},
            "staging_memory_in_mb": 512,
        }

    def test_state_string(self):
        assert str(BuildState.STAGED) == "STAGED"


class TestDeployment:
    def test_create_for_app(self):
        body = DeploymentCreate.new("app-1", strategy="rolling")
        assert body.model_dump(mode="json", exclude_none=True) == {
            "relationships": {"app": {"data": {"guid": "app-1"}}},
            "strategy": "rolling",
        }

    def test_create_with_revision(self):
        body = DeploymentCreate.new("app-1", revision_guid="rev-1")
        dumped = body.model_dump(mode="json", exclude_none=True)
        assert dumped["revision"] == {"guid": "rev-1"}
        assert "droplet" not in dumped

    def test_droplet_and_revision_are_exclusive(self):
        with pytest.raises(ValueError):
            DeploymentCreate.new("app-1", droplet_guid="d-1", revision_guid="r-1")

    def test_parse_status(self):
        deployment = Deployment.model_validate(
            {
                "guid": "dep-1",
                "created_at": "2018-04-25T22:42:10Z",
                "status": {"value": "ACTIVE", "reason": "DEPLOYING", "details": {"last_successful_healthcheck": "2018-04-25T22:42:10Z"}},
                "strategy": "rolling",
                "droplet": {"guid": "d-1"},
                "new_processes": [{"guid": "p-1", "type": "web"}],
                "revision": {"guid": "rev-1", "version": 1},
            }
        )
        assert deployment.status.reason == "DEPLOYING"
        assert deployment.new_processes[0].type == "web"
        assert deployment.revision.version == 1


class TestProcess:
    def test_parse_readiness_alias(self):
        process = Process.model_validate(PROCESS_JSON)
        assert process.readiness_check.type == "process"
        assert process.health_check.type == "port"
        assert process.metadata.labels == {"env": "prod"}

    def test_update_builds_nested_checks_lazily(self):
        body = (
            ProcessUpdate()
            .with_command("bundle exec rackup")
            .with_health_check_type("http")
            .with_health_check_endpoint("/health")
            .with_health_check_timeout(60)
            .with_readiness_check_interval(5)
        )
        assert body.model_dump(mode="json", exclude_none=True, by_alias=True) == {
            "command": "bundle exec rackup",
            "health_check": {"type": "http", "data": {"timeout": 60, "endpoint": "/health"}},
            "readiness_health_check": {"data": {"interval": 5}},
        }

    def test_empty_update_dumps_nothing(self):
        assert ProcessUpdate().model_dump(mode="json", exclude_none=True, by_alias=True) == {}

    def test_scale(self):
        body = ProcessScale().with_instances(3).with_memory_in_mb(512)
        assert body.model_dump(exclude_none=True) == {"instances": 3, "memory_in_mb": 512}

    def test_stats_aliases(self):
        stats = ProcessStats.model_validate(
            {
                "resources": [
                    {
                        "type": "web",
                        "index": 0,
                        "state": "RUNNING",
                        "usage": {"time": "2016-03-23T23:17:30Z", "cpu": 0.5, "mem": 1024, "disk": 2048, "log_rate": 0},
                        "host": "10.0.0.1",
                        "instance_ports": [{"external": 61000, "internal": 8080}],
                        "uptime": 9042,
                        "mem_quota": 268435456,
                        "disk_quota": 1073741824,
                        "fds_quota": 16384,
                        "isolation_segment": None,
                        "details": None,
                    }
                ]
            }
        )
        stat = stats.stats[0]
        assert stat.usage.memory == 1024
        assert stat.memory_quota == 268435456
        assert stat.file_descriptor_quota == 16384
        assert stat.instance_ports[0]["external"] == 61000

    def test_stats_down_instance_nulls_become_defaults(self):
        stats = ProcessStats.model_validate(
            {
                "resources": [
                    {
                        "type": "web",
                        "index": 1,
                        "state": "DOWN",
                        "usage": {"time": None, "cpu": None, "mem": None, "disk": None, "log_rate": None},
                        "host": None,
                        "instance_ports": None,
                        "uptime": 0,
                        "mem_quota": None,
                        "disk_quota": None,
                        "fds_quota": None,
                        "details": "insufficient resources",
                    }
                ]
            }
        )
        stat = stats.stats[0]
        assert stat.state == "DOWN"
        assert stat.host == ""
        assert stat.instance_ports == []
        assert stat.memory_quota == 0
        assert stat.disk_quota == 0
        assert stat.file_descriptor_quota == 0
        assert stat.usage.memory == 0
        assert stat.usage.cpu == 0.0
        assert stat.usage.time is None
        assert stat.details == "insufficient resources"

    def test_stats_null_usage(self):
        stats = ProcessStats.model_validate({"resources": [{"state": "DOWN", "usage": None}]})
        assert stats.stats[0].usage.disk == 0


class TestMetadata:
    def test_fluent_labels(self):
        md = Metadata().set_label("env", "prod").set_annotation("owner", "team-a")
        assert md.labels == {"env": "prod"}
        assert md.annotations == {"owner": "team-a"}
