"""HTTP client used to check whether an artifact is already published."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from maven_publish.modules.publish.domain import ArtifactCoordinates


class ArtifactExistenceProbe:
    """Issue a single authenticated GET against the repository layout path."""

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        auth = None
        if username and password:
            auth = (username, password)
        self._auth = auth
        self._client = client or httpx.Client(timeout=timeout, verify=True, follow_redirects=True)
        self.log = logging.getLogger(self.__class__.__name__)

    def build_url(self, coords: ArtifactCoordinates, repository_url: str) -> str:
        return f"{repository_url.rstrip('/')}/{coords.relative_path}"

    def exists(self, coords: ArtifactCoordinates, repository_url: str) -> bool:
        """Return True only when the repository answers with a 2xx status.

        A 404 means the artifact is absent. Any other status or a transport
        error cannot confirm presence and is reported as a warning.
        """
        url = self.build_url(coords, repository_url)
        self.log.info("Checking existence of artifact: %s", url)
        try:
            # the body is never read, streaming avoids downloading the binary
            with self._client.stream("GET", url, auth=self._auth) as response:
                status = response.status_code
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self.log.warning("Failed to check artifact existence: %s", exc)
            return False

        if 200 <= status < 300:
            self.log.info("Artifact exists: %s", url)
            return True
        if status == 404:
            self.log.info("Artifact does not exist: %s", url)
            return False
        self.log.warning("Failed to check artifact existence: %s answered HTTP %s", url, status)
        return False

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ArtifactExistenceProbe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
