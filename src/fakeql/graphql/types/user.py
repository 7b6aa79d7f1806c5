"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ..resolvers.user import resolve_user_albums, resolve_user_attribute

if TYPE_CHECKING:
    from .album import Album


@strawberry.type
class User:
    """User type for GraphQL API.

    The source of every field is a data.User record; each resolver checks that
    before reading from it.
    """

    @strawberry.field
    def id(self) -> int:
        return resolve_user_attribute(self, "id")

    @strawberry.field
    def name(self) -> str:
        return resolve_user_attribute(self, "name")

    @strawberry.field
    def username(self) -> str:
        return resolve_user_attribute(self, "username")

    @strawberry.field
    def email(self) -> str:
        return resolve_user_attribute(self, "email")

    @strawberry.field
    def password_hash(self) -> str:
        return resolve_user_attribute(self, "password_hash")

    @strawberry.field
    def albums(
        self, info: strawberry.Info, limit: int | None = None
    ) -> list[Annotated["Album", strawberry.lazy(".album")]]:
        """Get albums owned by this user."""
        return resolve_user_albums(self, info, limit)
