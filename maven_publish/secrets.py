"""Process-wide registry of values that must never reach the logs."""

from __future__ import annotations

import sys
import threading
from typing import List, Optional, TextIO

MASK = "***"


class SecretRegistry:
    """Remember secret values and scrub them from any text handed over."""

    def __init__(self) -> None:
        self._values: List[str] = []
        self._lock = threading.Lock()

    def register(
        self,
        value: Optional[str],
        *,
        github_actions: bool = False,
        stream: Optional[TextIO] = None,
    ) -> None:
        if not value:
            return
        with self._lock:
            if value in self._values:
                return
            self._values.append(value)
            # longest first so a secret containing another one is masked whole
            self._values.sort(key=len, reverse=True)
        if github_actions:
            out = stream or sys.stdout
            out.write(f"::add-mask::{value}\n")
            out.flush()

    def redact(self, text: str) -> str:
        if not text:
            return text
        with self._lock:
            values = list(self._values)
        for value in values:
            text = text.replace(value, MASK)
        return text

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._values


registry = SecretRegistry()
