"""
Typed shapes of the documents held in the store.

Raw documents are validated against these models before they are exposed
through GraphQL. Unknown fields are ignored; missing or mistyped fields raise
``pydantic.ValidationError``.
"""

from pydantic import BaseModel, ConfigDict, Field

USERS_COLLECTION = "users"
SONGS_COLLECTION = "songs"
PLAYLISTS_COLLECTION = "playlists"


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class UserRecord(_Record):
    id: str
    name: str
    last_name: str = Field(alias="lastName")
    username: str
    email: str


class LyricRecord(_Record):
    original: str | None = None
    translation: str | None = None
    transliteration: str | None = None


class SongRecord(_Record):
    id: str
    name: str
    language: str
    entered_by: str = Field(alias="enteredBy")
    lyrics: list[LyricRecord | None] | None = None


class PlaylistItemRecord(_Record):
    order: int
    song_id: str = Field(alias="songId")


class PlaylistRecord(_Record):
    id: str
    name: str | None = None
    created_by: str | None = Field(default=None, alias="createdBy")
    songs: list[PlaylistItemRecord | None] | None = None
