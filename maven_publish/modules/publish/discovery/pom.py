"""Read artifact coordinates out of a POM descriptor."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Optional

from maven_publish.modules.publish.domain import ArtifactCoordinates

log = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _direct_children(element: ET.Element) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for child in element:
        if not isinstance(child.tag, str):
            continue
        values.setdefault(_local_name(child.tag), (child.text or "").strip())
    return values


def read_coordinates(pom_path: Path, extension: str = "jar") -> Optional[ArtifactCoordinates]:
    """Return the project's coordinates, or None when they cannot be determined.

    ``groupId`` and ``version`` are inherited from ``<parent>`` when the
    project does not declare its own.
    """
    try:
        root = ET.parse(pom_path).getroot()
    except ET.ParseError as exc:
        log.warning("Cannot parse descriptor %s: %s", pom_path, exc)
        return None

    project = _direct_children(root)
    parent: Dict[str, str] = {}
    for child in root:
        if isinstance(child.tag, str) and _local_name(child.tag) == "parent":
            parent = _direct_children(child)
            break

    groupid = project.get("groupId") or parent.get("groupId")
    artifactid = project.get("artifactId")
    version = project.get("version") or parent.get("version")
    if not (groupid and artifactid and version):
        log.warning(
            "Descriptor %s lacks coordinates group=%s artifact=%s version=%s",
            pom_path,
            groupid or "-",
            artifactid or "-",
            version or "-",
        )
        return None
    return ArtifactCoordinates(
        groupid=groupid,
        artifactid=artifactid,
        version=version,
        extension=extension,
    )
