"""Maven artifact publishing module exports."""

from .service import MavenPublishService

__all__ = ["MavenPublishService"]
