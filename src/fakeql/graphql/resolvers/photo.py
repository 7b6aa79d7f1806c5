from __future__ import annotations

from typing import Any

import strawberry

from ...data import EntityKind, Photo
from .base import resolve_attribute, resolve_collection, resolve_single


# Query resolvers
def resolve_photo_by_id(info: strawberry.Info, id: int) -> Photo:
    return resolve_single(info, EntityKind.PHOTO, id)  # type: ignore[return-value]


def resolve_photos(
    info: strawberry.Info, albumid: int | None = None, limit: int | None = None
) -> list[Photo]:
    """Resolve photos in id order, optionally only those in albumid."""
    return resolve_collection(info, EntityKind.PHOTO, fk_value=albumid, limit=limit)  # type: ignore[return-value]


# Field resolvers
def resolve_photo_attribute(photo: object, attribute: str) -> Any:
    return resolve_attribute(photo, EntityKind.PHOTO, attribute)
