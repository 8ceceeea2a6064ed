from .nexus_client import ArtifactExistenceProbe

__all__ = ["ArtifactExistenceProbe"]
