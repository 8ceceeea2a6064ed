"""Generate the Maven settings file holding the remote server entry."""

from __future__ import annotations

import logging
from pathlib import Path

from maven_publish.modules.publish.domain.constants import PASSWORD_ENV, SERVER_ID, SETTINGS_FILE_NAME, USERNAME_ENV

# Credentials stay as environment references, Maven substitutes them at run time.
SETTINGS_TEMPLATE = f"""<settings>
  <servers>
    <server>
      <id>{SERVER_ID}</id>
      <username>${{env.{USERNAME_ENV}}}</username>
      <password>${{env.{PASSWORD_ENV}}}</password>
    </server>
  </servers>
</settings>
"""


class MavenSettingsWriter:
    def __init__(self, temp_dir: Path) -> None:
        self.temp_dir = temp_dir
        self.log = logging.getLogger(self.__class__.__name__)

    @property
    def path(self) -> Path:
        return self.temp_dir / SETTINGS_FILE_NAME

    def write(self) -> Path:
        self.temp_dir.mkdir(parents=True, exist_ok=True)
        target = self.path
        target.write_text(SETTINGS_TEMPLATE, encoding="utf-8")
        self.log.info("Wrote Maven settings to %s", target)
        return target
