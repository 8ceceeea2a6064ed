"""Wire the publish collaborators from shared settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from maven_publish.modules.publish import MavenPublishService
from maven_publish.modules.publish.cache import (
    ArchiveCacheBackend,
    CacheBackend,
    DisabledCacheBackend,
)
from maven_publish.modules.publish.deploy import MavenDeployExecutor, MavenSettingsWriter
from maven_publish.modules.publish.fileget import ArtifactExistenceProbe
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that builds every collaborator of a publish run."""

    settings: Settings
    settings_writer: MavenSettingsWriter = field(init=False)
    executor: MavenDeployExecutor = field(init=False)
    probe: ArtifactExistenceProbe = field(init=False)
    cache: CacheBackend = field(init=False)
    publisher: MavenPublishService = field(init=False)

    def __post_init__(self) -> None:
        self.settings_writer = MavenSettingsWriter(self.settings.resolved_temp_dir())
        self.executor = MavenDeployExecutor(self.settings.maven_executable)
        self.probe = ArtifactExistenceProbe(
            self.settings.remote_repository_username,
            self.settings.remote_repository_password,
            timeout=self.settings.http_timeout,
        )
        if self.settings.cache_enabled:
            self.cache = ArchiveCacheBackend(Path(self.settings.cache_dir).expanduser())
        else:
            self.cache = DisabledCacheBackend()
        self.publisher = MavenPublishService(
            self.settings,
            settings_writer=self.settings_writer,
            executor=self.executor,
            probe=self.probe,
            cache=self.cache,
        )
        log.debug(
            "Container ready root=%s url=%s cache=%s",
            self.settings.local_repository_path,
            self.settings.remote_repository_url,
            type(self.cache).__name__,
        )

    def close(self) -> None:
        self.probe.close()
