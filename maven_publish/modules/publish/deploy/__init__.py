from .maven import DeployCommandError, MavenDeployExecutor, is_bad_request_rejection
from .settings_file import SETTINGS_TEMPLATE, MavenSettingsWriter

__all__ = [
    "DeployCommandError",
    "MavenDeployExecutor",
    "MavenSettingsWriter",
    "SETTINGS_TEMPLATE",
    "is_bad_request_rejection",
]
