import logging
from pathlib import Path
from typing import List, Optional, Sequence

import httpx
import pytest

from maven_publish.errors import ConfigurationError
from maven_publish.modules.publish import MavenPublishService
from maven_publish.modules.publish.deploy import DeployCommandError, MavenDeployExecutor, MavenSettingsWriter
from maven_publish.modules.publish.domain import CommandResult, DeployInvocation, DeployStatus
from maven_publish.modules.publish.fileget import ArtifactExistenceProbe
from maven_publish.secrets import SecretRegistry

from conftest import build_settings, write_family


class FakeExecutor(MavenDeployExecutor):
    def __init__(self, results: Optional[List[CommandResult]] = None) -> None:
        super().__init__("mvn")
        self.results = list(results or [])
        self.calls: List[tuple] = []

    def run(self, invocation: DeployInvocation, *, username=None, password=None) -> CommandResult:
        self.calls.append((invocation, username, password))
        if self.results:
            return self.results.pop(0)
        return CommandResult(exit_status=0, stdout="BUILD SUCCESS")


class RecordingCache:
    def __init__(self, hit: Optional[str] = None, fail_save: bool = False) -> None:
        self.hit = hit
        self.fail_save = fail_save
        self.restored: List[str] = []
        self.saved: List[str] = []

    def restore(self, paths: Sequence[Path], key: str) -> Optional[str]:
        self.restored.append(key)
        return self.hit

    def save(self, paths: Sequence[Path], key: str) -> None:
        if self.fail_save:
            raise OSError("cache storage unavailable")
        self.saved.append(key)


def build_probe(status: int, seen: Optional[list] = None) -> ArtifactExistenceProbe:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(str(request.url))
        return httpx.Response(status)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    return ArtifactExistenceProbe("deployer", "s3cr3t-pa55", client=client)


def build_service(tmp_path, executor, probe=None, cache=None, **overrides) -> MavenPublishService:
    settings = build_settings(tmp_path, **overrides)
    return MavenPublishService(
        settings,
        settings_writer=MavenSettingsWriter(settings.resolved_temp_dir()),
        executor=executor,
        probe=probe or build_probe(404),
        cache=cache or RecordingCache(),
        secrets=SecretRegistry(),
    )


REJECTED = CommandResult(exit_status=1, stdout="[ERROR] status: 400 Bad Request")


def test_publish_deploys_every_family(tmp_path, repo_root):
    write_family(repo_root / "a", "alpha-1.0", ["alpha-1.0.jar", "alpha-1.0-sources.jar"])
    write_family(repo_root / "b", "beta-2.0", ["beta-2.0.jar"])
    executor = FakeExecutor()
    cache = RecordingCache(hit="maven-publish-Linux")
    service = build_service(tmp_path, executor, cache=cache)

    report = service.publish()

    assert report.count(DeployStatus.DEPLOYED) == 2
    assert report.cache_hit_key == "maven-publish-Linux"
    assert cache.restored == ["maven-publish-Linux"]
    assert cache.saved == ["maven-publish-Linux"]
    invocation, username, password = executor.calls[0]
    assert invocation.family.base_name == "alpha-1.0"
    assert (username, password) == ("deployer", "s3cr3t-pa55")
    assert invocation.settings_file == tmp_path / "tmp" / "maven-settings.xml"
    assert invocation.settings_file.is_file()


def test_missing_main_artifact_is_skipped_and_run_continues(tmp_path, repo_root):
    write_family(repo_root / "a", "alpha", ["alpha-sources.jar"])
    write_family(repo_root / "b", "beta", ["beta.jar"])
    executor = FakeExecutor()

    report = build_service(tmp_path, executor).publish()

    assert report.count(DeployStatus.SKIPPED) == 1
    assert report.count(DeployStatus.DEPLOYED) == 1
    assert [call[0].family.base_name for call in executor.calls] == ["beta"]


def test_rejected_but_present_artifact_is_downgraded(tmp_path, repo_root, caplog):
    write_family(repo_root / "lib", "my-lib-1.0.0", ["my-lib-1.0.0.jar"], group="com.example", artifact="my-lib")
    write_family(repo_root / "other", "other", ["other.jar"])
    seen: list = []
    executor = FakeExecutor([REJECTED])
    service = build_service(tmp_path, executor, probe=build_probe(200, seen))

    with caplog.at_level(logging.WARNING):
        report = service.publish()

    assert report.count(DeployStatus.ALREADY_PRESENT) == 1
    assert report.count(DeployStatus.DEPLOYED) == 1
    assert seen == ["https://repo.example.com/releases/com/example/my-lib/1.0.0/my-lib-1.0.0.jar"]
    assert "Artifact already exists in the repository" in caplog.text


def test_rejected_and_absent_artifact_fails_run(tmp_path, repo_root):
    write_family(repo_root / "lib", "my-lib-1.0.0", ["my-lib-1.0.0.jar"])
    executor = FakeExecutor([REJECTED])
    cache = RecordingCache()
    service = build_service(tmp_path, executor, probe=build_probe(404), cache=cache)

    with pytest.raises(DeployCommandError) as excinfo:
        service.publish()

    assert excinfo.value.result is REJECTED
    assert cache.saved == ["maven-publish-Linux"]


def test_probe_transport_error_does_not_mask_failure(tmp_path, repo_root):
    write_family(repo_root / "lib", "my-lib-1.0.0", ["my-lib-1.0.0.jar"])

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    probe = ArtifactExistenceProbe(client=httpx.Client(transport=httpx.MockTransport(handler)))
    service = build_service(tmp_path, FakeExecutor([REJECTED]), probe=probe)

    with pytest.raises(DeployCommandError):
        service.publish()


def test_other_failures_are_fatal_without_probe(tmp_path, repo_root):
    write_family(repo_root / "a", "alpha", ["alpha.jar"])
    write_family(repo_root / "b", "beta", ["beta.jar"])
    seen: list = []
    executor = FakeExecutor([CommandResult(exit_status=1, stderr="status: 401 Unauthorized")])
    service = build_service(tmp_path, executor, probe=build_probe(200, seen))

    with pytest.raises(DeployCommandError, match="exit status 1"):
        service.publish()

    assert seen == []
    assert len(executor.calls) == 1


def test_cache_save_failure_does_not_hide_deploy_failure(tmp_path, repo_root, caplog):
    write_family(repo_root / "a", "alpha", ["alpha.jar"])
    service = build_service(
        tmp_path,
        FakeExecutor([CommandResult(exit_status=1)]),
        cache=RecordingCache(fail_save=True),
    )

    with pytest.raises(DeployCommandError):
        service.publish()

    assert "cache storage unavailable" in caplog.text


def test_cache_save_failure_fails_successful_run(tmp_path, repo_root):
    write_family(repo_root / "a", "alpha", ["alpha.jar"])
    service = build_service(tmp_path, FakeExecutor(), cache=RecordingCache(fail_save=True))

    with pytest.raises(OSError):
        service.publish()


def test_dry_run_plans_without_executing(tmp_path, repo_root):
    write_family(repo_root / "a", "alpha", ["alpha.jar", "alpha-javadoc.jar"])
    executor = FakeExecutor()

    report = build_service(tmp_path, executor).publish(dry_run=True)

    assert executor.calls == []
    planned = report.by_status(DeployStatus.PLANNED)
    assert len(planned) == 1
    assert planned[0].message.startswith("mvn --batch-mode")
    assert "-Dclassifiers=javadoc" in planned[0].message


def test_missing_remote_url_is_configuration_error(tmp_path, repo_root):
    service = build_service(tmp_path, FakeExecutor(), remote_repository_url="")

    with pytest.raises(ConfigurationError):
        service.publish()


def test_missing_root_is_configuration_error(tmp_path):
    service = build_service(tmp_path, FakeExecutor(), local_repository_path=str(tmp_path / "nope"))

    with pytest.raises(ConfigurationError):
        service.publish()


def test_password_is_registered_as_secret(tmp_path, repo_root):
    service = build_service(tmp_path, FakeExecutor())

    service.publish()

    assert "s3cr3t-pa55" in service.secrets
