"""Dependency cache backends restoring and saving the local Maven repository."""

from __future__ import annotations

import logging
import os
import re
import tarfile
import tempfile
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence


class CacheBackend(Protocol):
    """Restore/save pair keyed by a string."""

    def restore(self, paths: Sequence[Path], key: str) -> Optional[str]:  # pragma: no cover - interface
        ...

    def save(self, paths: Sequence[Path], key: str) -> None:  # pragma: no cover - interface
        ...


class DisabledCacheBackend:
    def __init__(self) -> None:
        self.log = logging.getLogger(self.__class__.__name__)

    def restore(self, paths: Sequence[Path], key: str) -> Optional[str]:
        self.log.info("Maven cache disabled, skip restore for key %s", key)
        return None

    def save(self, paths: Sequence[Path], key: str) -> None:
        self.log.info("Maven cache disabled, skip save for key %s", key)


class ArchiveCacheBackend:
    """Keep one gzip tarball per key under ``cache_dir``.

    Each cached path is stored under its index in ``paths`` so it can be
    extracted back to the same location on restore.
    """

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = cache_dir
        self.log = logging.getLogger(self.__class__.__name__)

    def archive_path(self, key: str) -> Path:
        safe_key = re.sub(r"[^A-Za-z0-9._-]", "_", key)
        return self.cache_dir / f"{safe_key}.tar.gz"

    def restore(self, paths: Sequence[Path], key: str) -> Optional[str]:
        archive = self.archive_path(key)
        if not archive.is_file():
            return None
        restored = 0
        with tarfile.open(archive, "r:gz") as tar:
            grouped: Dict[int, List[tarfile.TarInfo]] = defaultdict(list)
            for member in tar.getmembers():
                head, sep, rest = member.name.partition("/")
                if not sep or not rest or not head.isdigit():
                    continue
                member.name = rest
                grouped[int(head)].append(member)
            for index, target in enumerate(paths):
                members = grouped.get(index)
                if not members:
                    continue
                target.mkdir(parents=True, exist_ok=True)
                tar.extractall(target, members=members, filter="data")
                restored += len(members)
                self.log.debug("Restored %d entries into %s", len(members), target)
        if not restored:
            self.log.debug("Cache archive %s holds nothing to restore", archive)
            return None
        return key

    def save(self, paths: Sequence[Path], key: str) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        archive = self.archive_path(key)
        fd, tmp_name = tempfile.mkstemp(prefix=".cache-", suffix=".tar.gz", dir=self.cache_dir)
        os.close(fd)
        tmp_path = Path(tmp_name)
        try:
            with tarfile.open(tmp_path, "w:gz") as tar:
                for index, source in enumerate(paths):
                    if not source.exists():
                        self.log.debug("Cache path %s does not exist, skipping", source)
                        continue
                    tar.add(source, arcname=str(index))
            tmp_path.replace(archive)
        finally:
            tmp_path.unlink(missing_ok=True)
        self.log.debug("Saved cache archive %s", archive)
