"""Invocation, command and result records for a publish run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .artifact import ArtifactFamily, ExtraArtifact
from .constants import CHECKSUM_ALGORITHMS, DEFAULT_RETRY_COUNT, DEPLOY_GOAL


@dataclass
class DeployInvocation:
    """Everything the deploy tool needs to publish one artifact family."""

    family: ArtifactFamily
    main_artifact: Path
    settings_file: Path
    remote_url: str
    extras: List[ExtraArtifact] = field(default_factory=list)
    retry_count: int = DEFAULT_RETRY_COUNT
    checksum_algorithms: Tuple[str, ...] = CHECKSUM_ALGORITHMS

    @property
    def folder(self) -> Path:
        return self.family.folder

    @property
    def descriptor(self) -> Path:
        return self.family.descriptor

    def arguments(self) -> List[str]:
        args = [
            "--batch-mode",
            "--color",
            "always",
            "-Dorg.slf4j.simpleLogger.showDateTime=true",
            "-Dorg.slf4j.simpleLogger.dateTimeFormat=HH:mm:ss,SSS",
            "--settings",
            str(self.settings_file),
            DEPLOY_GOAL,
            f"-Daether.checksums.algorithms={','.join(self.checksum_algorithms)}",
            f"-DretryFailedDeploymentCount={self.retry_count}",
            f"-Durl={self.remote_url}",
            f"-DpomFile={self.descriptor}",
            f"-Dfile={self.main_artifact}",
        ]
        if self.extras:
            args.extend(
                [
                    f"-Dfiles={','.join(extra.file for extra in self.extras)}",
                    f"-Dtypes={','.join(extra.type for extra in self.extras)}",
                    f"-Dclassifiers={','.join(extra.classifier for extra in self.extras)}",
                ]
            )
        return args

    def command(self, executable: str) -> List[str]:
        return [executable, *self.arguments()]


@dataclass
class CommandResult:
    """Exit status and captured output of one external command."""

    exit_status: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0

    def contains(self, text: str) -> bool:
        return text in self.stdout or text in self.stderr


class DeployStatus(str, Enum):
    DEPLOYED = "deployed"
    SKIPPED = "skipped"
    ALREADY_PRESENT = "already_present"
    PLANNED = "planned"


@dataclass
class FamilyDeployRecord:
    descriptor: Path
    status: DeployStatus
    message: str = ""


@dataclass
class PublishReport:
    """Outcome of every family processed in one run."""

    records: List[FamilyDeployRecord] = field(default_factory=list)
    cache_hit_key: Optional[str] = None

    def add(self, descriptor: Path, status: DeployStatus, message: str = "") -> FamilyDeployRecord:
        record = FamilyDeployRecord(descriptor=descriptor, status=status, message=message)
        self.records.append(record)
        return record

    def count(self, status: DeployStatus) -> int:
        return sum(1 for record in self.records if record.status == status)

    def by_status(self, status: DeployStatus) -> Sequence[FamilyDeployRecord]:
        return [record for record in self.records if record.status == status]

    def summary(self) -> str:
        return ", ".join(f"{status.value}={self.count(status)}" for status in DeployStatus)
