"""
Root GraphQL query definitions
"""

import strawberry

from ..types.album import Album
from ..types.photo import Photo
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type.

    Single-entity fields never return null for a missing id; they return the
    empty record. They are nullable so that a field error stays on that field.
    """

    @strawberry.field
    def user(self, info: strawberry.Info, id: int) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return resolve_user_by_id(info, id)

    @strawberry.field
    def users(self, info: strawberry.Info, limit: int | None = None) -> list[User]:
        """Get all users, optionally limited."""
        from ..resolvers.user import resolve_users

        return resolve_users(info, limit)

    @strawberry.field
    def album(self, info: strawberry.Info, id: int) -> Album | None:
        """Get an album by ID."""
        from ..resolvers.album import resolve_album_by_id

        return resolve_album_by_id(info, id)

    @strawberry.field
    def albums(
        self,
        info: strawberry.Info,
        userid: int | None = None,
        limit: int | None = None,
    ) -> list[Album]:
        """Get albums, optionally filtered by owner and limited."""
        from ..resolvers.album import resolve_albums

        return resolve_albums(info, userid, limit)

    @strawberry.field
    def photo(self, info: strawberry.Info, id: int) -> Photo | None:
        """Get a photo by ID."""
        from ..resolvers.photo import resolve_photo_by_id

        return resolve_photo_by_id(info, id)

    @strawberry.field
    def photos(
        self,
        info: strawberry.Info,
        albumid: int | None = None,
        limit: int | None = None,
    ) -> list[Photo]:
        """Get photos, optionally filtered by album and limited."""
        from ..resolvers.photo import resolve_photos

        return resolve_photos(info, albumid, limit)
