from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...models import USERS_COLLECTION, UserRecord
from ..context import get_store_from_info
from .lookup import lookup_document, scan_collection, unwrap

if TYPE_CHECKING:
    from ..types.user import User


async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    records = await scan_collection(store, USERS_COLLECTION, UserRecord)
    return [UserType.from_record(record) for record in records]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User:
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    result = await lookup_document(store, USERS_COLLECTION, id, UserRecord)
    return UserType.from_record(unwrap(result, "User"))
