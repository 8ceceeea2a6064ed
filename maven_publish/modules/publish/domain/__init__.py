from .artifact import ArtifactCoordinates, ArtifactFamily, ExtraArtifact
from .models import (
    CommandResult,
    DeployInvocation,
    DeployStatus,
    FamilyDeployRecord,
    PublishReport,
)

__all__ = [
    "ArtifactCoordinates",
    "ArtifactFamily",
    "ExtraArtifact",
    "CommandResult",
    "DeployInvocation",
    "DeployStatus",
    "FamilyDeployRecord",
    "PublishReport",
]
