"""Turn a tree of loose build outputs into one deploy invocation per descriptor."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from maven_publish.modules.publish.domain import ArtifactFamily, DeployInvocation, ExtraArtifact
from maven_publish.modules.publish.domain.constants import (
    CHECKSUM_ALGORITHMS,
    CLASSIFIER_SEPARATOR,
    DEFAULT_BINARY_TYPE,
    DEFAULT_RETRY_COUNT,
    DESCRIPTOR_EXTENSION,
    IGNORED_EXTENSIONS,
)


class SiblingKind(str, Enum):
    FOREIGN = "foreign"
    IGNORED = "ignored"
    MAIN = "main"
    EXTRA = "extra"


@dataclass(frozen=True)
class SiblingClassification:
    kind: SiblingKind
    type: str = ""
    classifier: str = ""


_FOREIGN = SiblingClassification(SiblingKind.FOREIGN)
_IGNORED = SiblingClassification(SiblingKind.IGNORED)


def classify_sibling(
    file_name: str,
    base_name: str,
    binary_type: str = DEFAULT_BINARY_TYPE,
    ignored_extensions: Sequence[str] = IGNORED_EXTENSIONS,
) -> SiblingClassification:
    """Decide what role ``file_name`` plays in the family named ``base_name``.

    The rules are applied in order and the first match wins:

    * a stem that does not start with the base name belongs to another family;
    * descriptor and checksum extensions are ignored;
    * extensionless files are ignored;
    * a remainder that does not begin with ``-`` is a different family sharing
      a prefix (``foobar.jar`` is not a variant of ``foo``);
    * ``<base>.<binary_type>`` is the main binary itself;
    * anything else is an extra artifact with the derived classifier and type.
    """
    stem, ext = os.path.splitext(file_name)
    if not stem.startswith(base_name):
        return _FOREIGN
    if ext in ignored_extensions:
        return _IGNORED
    # a trailing dot yields no usable type either
    if ext in ("", "."):
        return _IGNORED

    classifier = stem[len(base_name):]
    if classifier and not classifier.startswith(CLASSIFIER_SEPARATOR):
        return _FOREIGN
    if classifier:
        classifier = classifier[len(CLASSIFIER_SEPARATOR):]

    artifact_type = ext[1:]
    if artifact_type == binary_type and not classifier:
        return SiblingClassification(SiblingKind.MAIN, artifact_type, classifier)
    return SiblingClassification(SiblingKind.EXTRA, artifact_type, classifier)


@dataclass
class FamilyPlan:
    """Result of building one family: an invocation, or the reason there is none."""

    family: ArtifactFamily
    invocation: Optional[DeployInvocation] = None
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.invocation is None


class ArtifactSetBuilder:
    """Discover artifact families under a root path and assemble their deploy invocations."""

    def __init__(
        self,
        *,
        settings_file: Path,
        remote_url: str,
        binary_type: str = DEFAULT_BINARY_TYPE,
        retry_count: int = DEFAULT_RETRY_COUNT,
        checksum_algorithms: Tuple[str, ...] = CHECKSUM_ALGORITHMS,
    ) -> None:
        self.settings_file = settings_file
        self.remote_url = remote_url
        self.binary_type = binary_type
        self.retry_count = retry_count
        self.checksum_algorithms = checksum_algorithms
        self.log = logging.getLogger(self.__class__.__name__)

    def find_descriptors(self, root: Path) -> List[Path]:
        """Return every descriptor below ``root``, skipping hidden files and directories."""
        if not root.is_dir():
            raise FileNotFoundError(f"local repository path does not exist: {root}")
        root = root.resolve()
        found = []
        for path in root.rglob(f"*{DESCRIPTOR_EXTENSION}"):
            relative = path.relative_to(root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file():
                found.append(path)
        found.sort()
        self.log.debug("Found descriptor files: %s", [str(path) for path in found])
        return found

    def discover(self, root: Path) -> Iterator[FamilyPlan]:
        for descriptor in self.find_descriptors(root):
            yield self.build(ArtifactFamily.from_descriptor(descriptor))

    def build(self, family: ArtifactFamily) -> FamilyPlan:
        main_artifact = family.binary(self.binary_type)
        if not main_artifact.is_file():
            reason = f"Main artifact not found: {main_artifact}"
            self.log.warning(reason)
            return FamilyPlan(family=family, skip_reason=reason)

        invocation = DeployInvocation(
            family=family,
            main_artifact=main_artifact,
            settings_file=self.settings_file,
            remote_url=self.remote_url,
            extras=self.collect_extras(family),
            retry_count=self.retry_count,
            checksum_algorithms=self.checksum_algorithms,
        )
        return FamilyPlan(family=family, invocation=invocation)

    def collect_extras(self, family: ArtifactFamily) -> List[ExtraArtifact]:
        extras: List[ExtraArtifact] = []
        for entry in sorted(family.folder.iterdir(), key=lambda path: path.name):
            if not entry.is_file():
                continue
            result = classify_sibling(entry.name, family.base_name, self.binary_type)
            if result.kind != SiblingKind.EXTRA:
                continue
            extras.append(ExtraArtifact(file=entry.name, type=result.type, classifier=result.classifier))
        if extras:
            self.log.debug(
                "Extra artifacts for %s: %s",
                family.base_name,
                ", ".join(extra.file for extra in extras),
            )
        return extras
