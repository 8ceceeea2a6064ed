from pathlib import Path
from typing import Iterable

import pytest

from maven_publish.settings import Settings

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>{group}</groupId>
  <artifactId>{artifact}</artifactId>
  <version>{version}</version>
  <dependencies>
    <dependency>
      <groupId>org.example.dep</groupId>
      <artifactId>dep</artifactId>
      <version>9.9</version>
    </dependency>
  </dependencies>
</project>
"""


def write_family(
    folder: Path,
    base_name: str,
    siblings: Iterable[str] = (),
    *,
    group: str = "com.example",
    artifact: str = "my-lib",
    version: str = "1.0.0",
) -> Path:
    folder.mkdir(parents=True, exist_ok=True)
    pom = folder / f"{base_name}.pom"
    pom.write_text(POM_TEMPLATE.format(group=group, artifact=artifact, version=version), encoding="utf-8")
    for name in siblings:
        (folder / name).write_bytes(b"content")
    return pom


def build_settings(tmp_path: Path, **overrides) -> Settings:
    defaults = {
        "local_repository_path": str(tmp_path / "repo"),
        "remote_repository_url": "https://repo.example.com/releases",
        "remote_repository_username": "deployer",
        "remote_repository_password": "s3cr3t-pa55",
        "temp_dir": str(tmp_path / "tmp"),
        "cache_dir": str(tmp_path / "cache"),
        "maven_local_repository": str(tmp_path / "m2"),
        "runner_os": "Linux",
        "github_actions": False,
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root
