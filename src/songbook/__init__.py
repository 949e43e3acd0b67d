"""
Songbook GraphQL gateway
Read-only query layer for users, songs with lyrics, and playlists
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
