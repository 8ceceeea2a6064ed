"""Publish every artifact family found under the local repository path."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from maven_publish.modules.publish.cache import CacheBackend
from maven_publish.modules.publish.deploy import (
    DeployCommandError,
    MavenDeployExecutor,
    MavenSettingsWriter,
    is_bad_request_rejection,
)
from maven_publish.modules.publish.discovery import (
    ArtifactSetBuilder,
    FamilyPlan,
    read_coordinates,
)
from maven_publish.modules.publish.domain import (
    DeployInvocation,
    DeployStatus,
    PublishReport,
)
from maven_publish.modules.publish.fileget import ArtifactExistenceProbe
from maven_publish.secrets import SecretRegistry, registry as default_registry
from maven_publish.settings import Settings


class MavenPublishService:
    """Drive one publish run: settings file, cache restore, deploy loop, cache save."""

    def __init__(
        self,
        settings: Settings,
        *,
        settings_writer: MavenSettingsWriter,
        executor: MavenDeployExecutor,
        probe: ArtifactExistenceProbe,
        cache: CacheBackend,
        secrets: Optional[SecretRegistry] = None,
    ) -> None:
        self.settings = settings
        self.settings_writer = settings_writer
        self.executor = executor
        self.probe = probe
        self.cache = cache
        self.secrets = secrets or default_registry
        self.log = logging.getLogger(self.__class__.__name__)

    @property
    def cache_paths(self) -> List[Path]:
        return self.settings.resolved_cache_paths()

    def publish(self, *, dry_run: bool = False) -> PublishReport:
        self.settings.validate_for_publish()
        self.secrets.register(
            self.settings.remote_repository_password,
            github_actions=self.settings.github_actions,
        )

        settings_file = self.settings_writer.write()
        builder = ArtifactSetBuilder(
            settings_file=settings_file,
            remote_url=self.settings.remote_repository_url,
            binary_type=self.settings.binary_type,
            retry_count=self.settings.deploy_retry_count,
        )

        report = PublishReport()
        cache_key = self.settings.cache_key()
        report.cache_hit_key = self.cache.restore(self.cache_paths, cache_key)
        if report.cache_hit_key:
            self.log.info("Cache restored from key: %s", report.cache_hit_key)
        else:
            self.log.info("Maven cache was not found")

        try:
            root = Path(self.settings.local_repository_path)
            for plan in builder.discover(root):
                self._publish_family(plan, report, dry_run=dry_run)
        except Exception:
            self._save_cache_after_failure(cache_key)
            raise

        self.cache.save(self.cache_paths, cache_key)
        self.log.info("Cache saved with the key: %s", cache_key)
        self.log.info("Publish finished: %s", report.summary())
        return report

    def _publish_family(self, plan: FamilyPlan, report: PublishReport, *, dry_run: bool) -> None:
        descriptor = plan.family.descriptor
        if plan.skipped:
            report.add(descriptor, DeployStatus.SKIPPED, plan.skip_reason or "")
            return

        invocation = plan.invocation
        if dry_run:
            command = " ".join(invocation.command(self.executor.executable))
            self.log.info("Dry run, would execute %s cwd=%s", command, invocation.folder)
            report.add(descriptor, DeployStatus.PLANNED, command)
            return

        result = self.executor.run(
            invocation,
            username=self.settings.remote_repository_username,
            password=self.settings.remote_repository_password,
        )
        if result.succeeded:
            report.add(descriptor, DeployStatus.DEPLOYED)
            return

        if is_bad_request_rejection(result) and self._already_published(invocation):
            self.log.warning("Artifact already exists in the repository: %s", descriptor)
            report.add(descriptor, DeployStatus.ALREADY_PRESENT, "Artifact already exists in the repository")
            return
        raise DeployCommandError(invocation, result)

    def _already_published(self, invocation: DeployInvocation) -> bool:
        coords = read_coordinates(invocation.descriptor, extension=self.settings.binary_type)
        if coords is None:
            return False
        return self.probe.exists(coords, self.settings.remote_repository_url)

    def _save_cache_after_failure(self, cache_key: str) -> None:
        try:
            self.cache.save(self.cache_paths, cache_key)
        except Exception as exc:  # noqa: BLE001
            self.log.error("Saving cache with the key %s failed: %s", cache_key, exc)
        else:
            self.log.info("Cache saved with the key: %s", cache_key)
