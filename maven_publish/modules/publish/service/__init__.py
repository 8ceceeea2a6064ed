from .publisher import MavenPublishService

__all__ = ["MavenPublishService"]
