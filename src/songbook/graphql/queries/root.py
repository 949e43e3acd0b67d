"""
Root GraphQL query definitions
"""

import strawberry

from ..types.playlist import Playlist
from ..types.song import Song
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type.

    Every field is nullable so a failing field is reported in ``errors``
    without nulling its siblings.
    """

    @strawberry.field
    async def songs(self, info: strawberry.Info) -> list[Song] | None:
        """Get all songs."""
        from ..resolvers.song import resolve_songs

        return await resolve_songs(info)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User] | None:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def user(self, info: strawberry.Info, id: str) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    @strawberry.field
    async def playlists(self, info: strawberry.Info) -> list[Playlist] | None:
        """Get all playlists."""
        from ..resolvers.playlist import resolve_playlists

        return await resolve_playlists(info)

    @strawberry.field
    async def playlist(self, info: strawberry.Info, id: str) -> Playlist | None:
        """Get a playlist by ID."""
        from ..resolvers.playlist import resolve_playlist_by_id

        return await resolve_playlist_by_id(info, id)

    @strawberry.field
    async def song(self, info: strawberry.Info, id: str) -> Song | None:
        """Get a song by ID."""
        from ..resolvers.song import resolve_song_by_id

        return await resolve_song_by_id(info, id)

    @strawberry.field
    async def songs_by_user(self, info: strawberry.Info, id: str) -> list[Song] | None:
        """Get the songs entered by a user."""
        from ..resolvers.song import resolve_songs_by_user

        return await resolve_songs_by_user(info, id)
