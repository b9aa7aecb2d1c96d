"""Generation collaborators behind the ContentProvider contract."""

from .base import ContentProvider, ProviderStatus
from .procedural import ProceduralProvider
from .replay import ReplayProvider

__all__ = ["ContentProvider", "ProviderStatus", "ProceduralProvider", "ReplayProvider"]
