from __future__ import annotations

from typing import Any

import strawberry

from ...data import Album, EntityKind, Photo
from .base import resolve_attribute, resolve_children, resolve_collection, resolve_single


# Query resolvers
def resolve_album_by_id(info: strawberry.Info, id: int) -> Album:
    return resolve_single(info, EntityKind.ALBUM, id)  # type: ignore[return-value]


def resolve_albums(
    info: strawberry.Info, userid: int | None = None, limit: int | None = None
) -> list[Album]:
    """Resolve albums in id order, optionally only those owned by userid."""
    return resolve_collection(info, EntityKind.ALBUM, fk_value=userid, limit=limit)  # type: ignore[return-value]


# Field resolvers
def resolve_album_attribute(album: object, attribute: str) -> Any:
    return resolve_attribute(album, EntityKind.ALBUM, attribute)


def resolve_album_photos(album: object, info: strawberry.Info, limit: int | None = None) -> list[Photo]:
    return resolve_children(album, EntityKind.ALBUM, EntityKind.PHOTO, info, limit)  # type: ignore[return-value]
