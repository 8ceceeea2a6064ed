"""Runtime configuration for the Maven publisher."""

from __future__ import annotations

import logging
import os
import platform
import tempfile
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


def _default_cache_dir() -> str:
    return str(Path.home() / ".cache" / "maven-publish")


def _running_on_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


class Settings(BaseSettings):
    """Configuration values mapped from ``MAVEN_PUBLISH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAVEN_PUBLISH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Source and target
    local_repository_path: str = Field(".")
    remote_repository_url: str = Field("")
    remote_repository_username: Optional[str] = Field(None)
    remote_repository_password: Optional[str] = Field(None)
    temp_dir: Optional[str] = Field(None)

    # Deploy tool
    maven_executable: str = Field("mvn")
    deploy_retry_count: int = Field(3, ge=0)
    binary_type: str = Field("jar")
    http_timeout: float = Field(30.0, gt=0)

    # Dependency cache
    cache_enabled: bool = Field(True)
    cache_dir: str = Field(default_factory=_default_cache_dir)
    cache_key_prefix: str = Field("maven-publish")
    runner_os: Optional[str] = Field(None)
    maven_local_repository: Optional[str] = Field(None)

    # Logging
    log_level: str = Field("INFO")
    github_actions: bool = Field(default_factory=_running_on_github_actions)

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    def resolved_temp_dir(self) -> Path:
        return Path(self.temp_dir or tempfile.gettempdir())

    def resolved_cache_paths(self) -> List[Path]:
        if self.maven_local_repository:
            return [Path(self.maven_local_repository)]
        return [Path.home() / ".m2" / "repository"]

    def cache_key(self) -> str:
        runner_os = self.runner_os or os.environ.get("RUNNER_OS") or platform.system()
        return f"{self.cache_key_prefix}-{runner_os}"

    def validate_for_publish(self) -> None:
        """Check the values a publish run cannot do without."""
        if not self.remote_repository_url:
            raise ConfigurationError("remote repository URL is not configured")
        root = Path(self.local_repository_path)
        if not root.is_dir():
            raise ConfigurationError(f"local repository path does not exist: {root}")
