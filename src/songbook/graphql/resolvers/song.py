from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...models import SONGS_COLLECTION, SongRecord
from ...store.base import FieldFilter
from ..context import get_store_from_info
from .lookup import lookup_document, scan_collection, unwrap

if TYPE_CHECKING:
    from ..types.song import Song

logger = get_logger(__name__)


async def resolve_songs(info: strawberry.Info) -> list[Song]:
    from ..types.song import Song as SongType

    store = get_store_from_info(info)
    records = await scan_collection(store, SONGS_COLLECTION, SongRecord)
    return [SongType.from_record(record) for record in records]


async def resolve_song_by_id(info: strawberry.Info, id: str) -> Song:
    from ..types.song import Song as SongType

    store = get_store_from_info(info)
    result = await lookup_document(store, SONGS_COLLECTION, id, SongRecord)
    return SongType.from_record(unwrap(result, "Song"))


async def resolve_songs_by_user(info: strawberry.Info, user_id: str) -> list[Song]:
    """
    Resolve songs contributed by a user.

    An unknown user simply has no songs; this never reports not-found.
    """
    from ..types.song import Song as SongType

    store = get_store_from_info(info)
    records = await scan_collection(
        store, SONGS_COLLECTION, SongRecord, FieldFilter("enteredBy", user_id)
    )
    logger.debug("Resolved songs by user", user_id=user_id, count=len(records))
    return [SongType.from_record(record) for record in records]
