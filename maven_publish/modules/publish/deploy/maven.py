"""Run the Maven deploy plugin for one artifact family."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Dict, Optional

from maven_publish.errors import PublishError

from maven_publish.modules.publish.domain import CommandResult, DeployInvocation
from maven_publish.modules.publish.domain.constants import BAD_REQUEST_SIGNATURE, PASSWORD_ENV, USERNAME_ENV


class DeployCommandError(PublishError):
    """Raised when the deploy tool fails for a reason that cannot be recovered."""

    def __init__(self, invocation: DeployInvocation, result: CommandResult) -> None:
        super().__init__(
            f"Deploy of {invocation.descriptor} failed with exit status {result.exit_status}"
        )
        self.invocation = invocation
        self.result = result


def is_bad_request_rejection(result: CommandResult) -> bool:
    """True when the remote repository answered the upload with HTTP 400."""
    return result.contains(BAD_REQUEST_SIGNATURE)


class MavenDeployExecutor:
    """Executes ``deploy-file`` invocations via the Maven executable."""

    def __init__(self, executable: str = "mvn") -> None:
        self.executable = executable
        self.log = logging.getLogger(self.__class__.__name__)

    def run(
        self,
        invocation: DeployInvocation,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> CommandResult:
        command = invocation.command(self.executable)
        self.log.info("Executing %s cwd=%s", " ".join(command), invocation.folder)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                cwd=str(invocation.folder),
                env=self._build_env(username, password),
                stdin=subprocess.DEVNULL,
            )
        except FileNotFoundError as exc:
            raise PublishError(f"Maven executable not found: {self.executable}") from exc
        result = CommandResult(
            exit_status=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if result.stdout:
            self.log.info("mvn stdout: %s", result.stdout.strip())
        if result.stderr:
            self.log.warning("mvn stderr: %s", result.stderr.strip())
        return result

    def _build_env(self, username: Optional[str], password: Optional[str]) -> Dict[str, str]:
        env = dict(os.environ)
        env[USERNAME_ENV] = username or ""
        env[PASSWORD_ENV] = password or ""
        return env
