from __future__ import annotations

from typing import Any

import strawberry

from ...data import Album, EntityKind, User
from .base import resolve_attribute, resolve_children, resolve_collection, resolve_single


# Query resolvers
def resolve_user_by_id(info: strawberry.Info, id: int) -> User:
    return resolve_single(info, EntityKind.USER, id)  # type: ignore[return-value]


def resolve_users(info: strawberry.Info, limit: int | None = None) -> list[User]:
    return resolve_collection(info, EntityKind.USER, limit=limit)  # type: ignore[return-value]


# Field resolvers
def resolve_user_attribute(user: object, attribute: str) -> Any:
    return resolve_attribute(user, EntityKind.USER, attribute)


def resolve_user_albums(user: object, info: strawberry.Info, limit: int | None = None) -> list[Album]:
    return resolve_children(user, EntityKind.USER, EntityKind.ALBUM, info, limit)  # type: ignore[return-value]
