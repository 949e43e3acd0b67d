"""
User GraphQL type definitions
"""

import strawberry

from ...models import UserRecord


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    last_name: str
    username: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            last_name=record.last_name,
            username=record.username,
            email=record.email,
        )
