"""Logging setup: every handler formats through the secret registry."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

from .secrets import SecretRegistry, registry as default_registry

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
GITHUB_FORMAT = "%(message)s"


class RedactingFormatter(logging.Formatter):
    """Formatter that scrubs registered secrets from the final log line."""

    def __init__(
        self,
        fmt: Optional[str] = LOG_FORMAT,
        datefmt: Optional[str] = None,
        *,
        secrets: Optional[SecretRegistry] = None,
    ) -> None:
        super().__init__(fmt, datefmt)
        self.secrets = secrets or default_registry

    def format(self, record: logging.LogRecord) -> str:
        return self.secrets.redact(super().format(record))


class GithubActionsFormatter(RedactingFormatter):
    """Render warnings and errors as workflow commands so they surface as annotations."""

    PREFIXES = {
        logging.DEBUG: "::debug::",
        logging.WARNING: "::warning::",
        logging.ERROR: "::error::",
        logging.CRITICAL: "::error::",
    }

    def __init__(self, *, secrets: Optional[SecretRegistry] = None) -> None:
        super().__init__(GITHUB_FORMAT, secrets=secrets)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        prefix = self.PREFIXES.get(record.levelno, "")
        if not prefix:
            return text
        # workflow commands are single line
        return prefix + text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


_installed_handler: Optional[logging.Handler] = None


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    github_actions: bool = False,
    stream: Optional[TextIO] = None,
    secrets: Optional[SecretRegistry] = None,
) -> logging.Handler:
    """Install the redacting stream handler on the root logger."""
    global _installed_handler

    root = logging.getLogger()
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    if github_actions:
        handler.setFormatter(GithubActionsFormatter(secrets=secrets))
    else:
        handler.setFormatter(RedactingFormatter(secrets=secrets))
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    # quiet the HTTP client's per-request chatter
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _installed_handler = handler
    return handler
