"""
Album GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ..resolvers.album import resolve_album_attribute, resolve_album_photos

if TYPE_CHECKING:
    from .photo import Photo


@strawberry.type
class Album:
    """Album type for GraphQL API."""

    @strawberry.field
    def id(self) -> int:
        return resolve_album_attribute(self, "id")

    @strawberry.field
    def userid(self) -> int:
        return resolve_album_attribute(self, "userid")

    @strawberry.field
    def description(self) -> str:
        return resolve_album_attribute(self, "description")

    @strawberry.field
    def photos(
        self, info: strawberry.Info, limit: int | None = None
    ) -> list[Annotated["Photo", strawberry.lazy(".photo")]]:
        """Get photos in this album."""
        return resolve_album_photos(self, info, limit)
