"""
Playlist GraphQL type definitions
"""

import strawberry

from ...models import PlaylistItemRecord, PlaylistRecord


@strawberry.type
class PlaylistItem:
    """A song reference at a caller-supplied position in a playlist."""

    order: int
    song_id: str

    @classmethod
    def from_record(cls, record: PlaylistItemRecord) -> "PlaylistItem":
        return cls(order=record.order, song_id=record.song_id)


@strawberry.type
class Playlist:
    """Playlist type for GraphQL API."""

    id: strawberry.ID
    name: str | None
    created_by: str | None
    songs: list[PlaylistItem | None] | None

    @classmethod
    def from_record(cls, record: PlaylistRecord) -> "Playlist":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            created_by=record.created_by,
            songs=(
                [
                    PlaylistItem.from_record(item) if item is not None else None
                    for item in record.songs
                ]
                if record.songs is not None
                else None
            ),
        )
