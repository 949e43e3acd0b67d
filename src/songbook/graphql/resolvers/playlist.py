from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...models import PLAYLISTS_COLLECTION, PlaylistRecord
from ..context import get_store_from_info
from .lookup import lookup_document, scan_collection, unwrap

if TYPE_CHECKING:
    from ..types.playlist import Playlist


async def resolve_playlists(info: strawberry.Info) -> list[Playlist]:
    from ..types.playlist import Playlist as PlaylistType

    store = get_store_from_info(info)
    records = await scan_collection(store, PLAYLISTS_COLLECTION, PlaylistRecord)
    return [PlaylistType.from_record(record) for record in records]


async def resolve_playlist_by_id(info: strawberry.Info, id: str) -> Playlist:
    from ..types.playlist import Playlist as PlaylistType

    store = get_store_from_info(info)
    result = await lookup_document(store, PLAYLISTS_COLLECTION, id, PlaylistRecord)
    return PlaylistType.from_record(unwrap(result, "Playlist"))
