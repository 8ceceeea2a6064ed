"""Domain objects describing what gets published."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .constants import DESCRIPTOR_EXTENSION


@dataclass
class ArtifactCoordinates:
    """Represents a Maven artifact coordinate."""

    groupid: str
    artifactid: str
    version: str
    extension: str = "jar"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.groupid.replace(".", "/")
        filename = f"{self.artifactid}-{self.version}.{self.extension}"
        return [group_path, self.artifactid, self.version, filename]

    @property
    def relative_path(self) -> str:
        return "/".join(self.path_segments)

    def __str__(self) -> str:
        return f"{self.groupid}:{self.artifactid}:{self.version}"


@dataclass(frozen=True)
class ArtifactFamily:
    """All files in one folder sharing the base name of a descriptor."""

    folder: Path
    base_name: str

    @classmethod
    def from_descriptor(cls, descriptor: Path) -> "ArtifactFamily":
        return cls(folder=descriptor.parent, base_name=descriptor.stem)

    @property
    def descriptor(self) -> Path:
        return self.folder / f"{self.base_name}{DESCRIPTOR_EXTENSION}"

    def binary(self, binary_type: str) -> Path:
        return self.folder / f"{self.base_name}.{binary_type}"


@dataclass(frozen=True)
class ExtraArtifact:
    """A classified or differently typed companion of the main binary."""

    file: str
    type: str
    classifier: str = ""
