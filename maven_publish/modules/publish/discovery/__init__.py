from .artifact_set import (
    ArtifactSetBuilder,
    FamilyPlan,
    SiblingClassification,
    SiblingKind,
    classify_sibling,
)
from .pom import read_coordinates

__all__ = [
    "ArtifactSetBuilder",
    "FamilyPlan",
    "SiblingClassification",
    "SiblingKind",
    "classify_sibling",
    "read_coordinates",
]
