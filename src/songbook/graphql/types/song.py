"""
Song and lyric GraphQL type definitions
"""

import strawberry

from ...models import LyricRecord, SongRecord


@strawberry.type
class Lyric:
    """One lyric line in its original script with translation and transliteration."""

    original: str | None
    translation: str | None
    transliteration: str | None

    @classmethod
    def from_record(cls, record: LyricRecord) -> "Lyric":
        return cls(
            original=record.original,
            translation=record.translation,
            transliteration=record.transliteration,
        )


@strawberry.type
class Song:
    """Song type for GraphQL API."""

    id: strawberry.ID
    name: str
    language: str
    entered_by: str
    lyrics: list[Lyric | None] | None

    @classmethod
    def from_record(cls, record: SongRecord) -> "Song":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            language=record.language,
            entered_by=record.entered_by,
            lyrics=(
                [
                    Lyric.from_record(lyric) if lyric is not None else None
                    for lyric in record.lyrics
                ]
                if record.lyrics is not None
                else None
            ),
        )
