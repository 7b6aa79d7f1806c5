"""
Entity records for the fake dataset.

Records are immutable value objects. Relationship fields (User.albums,
Album.photos) are not stored here; they are computed per query.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class User:
    id: int = 0
    name: str = ""
    username: str = ""
    email: str = ""
    password_hash: str = ""


@dataclass(frozen=True)
class Album:
    id: int = 0
    userid: int = 0
    description: str = ""


@dataclass(frozen=True)
class Photo:
    id: int = 0
    albumid: int = 0
    description: str = ""


Entity = User | Album | Photo


class EntityKind(Enum):
    """The three entity kinds, each bound to its record class."""

    USER = "User"
    ALBUM = "Album"
    PHOTO = "Photo"

    @property
    def record_class(self) -> type[Entity]:
        return _RECORD_CLASSES[self]

    @property
    def foreign_key(self) -> str | None:
        """Name of the attribute referencing the parent entity, if any."""
        return _FOREIGN_KEYS.get(self)

    @property
    def parent(self) -> "EntityKind | None":
        return _PARENTS.get(self)

    def empty(self) -> Entity:
        """Return the not-found record for this kind.

        Always the same instance, so it stays distinguishable from a stored
        record whose fields happen to be all zero.
        """
        return _EMPTY_RECORDS[self]

    def is_empty(self, record: object) -> bool:
        """Whether record is the not-found record of this kind."""
        return record is _EMPTY_RECORDS[self]

    def matches(self, value: object) -> bool:
        """Whether value is a record of this kind."""
        return isinstance(value, self.record_class)


_RECORD_CLASSES: dict[EntityKind, type[Entity]] = {
    EntityKind.USER: User,
    EntityKind.ALBUM: Album,
    EntityKind.PHOTO: Photo,
}

_FOREIGN_KEYS: dict[EntityKind, str] = {
    EntityKind.ALBUM: "userid",
    EntityKind.PHOTO: "albumid",
}

_PARENTS: dict[EntityKind, EntityKind] = {
    EntityKind.ALBUM: EntityKind.USER,
    EntityKind.PHOTO: EntityKind.ALBUM,
}

_EMPTY_RECORDS: dict[EntityKind, Entity] = {kind: cls() for kind, cls in _RECORD_CLASSES.items()}
