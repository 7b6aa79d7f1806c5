"""
In-memory, read-only data source.

Each entity kind is held in a SortedCollection: an ascending array of ids plus
a lookup table, so iteration order is always by id regardless of insertion
order. Foreign-key indexes are built once when the source is constructed.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, Protocol, TypeVar

from ..logging import get_logger
from ..sequences import transform, where
from .models import Album, Entity, EntityKind, Photo, User

logger = get_logger(__name__)

E = TypeVar("E", User, Album, Photo)


class DataIntegrityError(ValueError):
    """Raised when a dataset violates id uniqueness or foreign-key references."""

    pass


class UnknownForeignKeyError(KeyError):
    """Raised when a foreign-key lookup names an attribute the kind does not have."""

    pass


class DataSource(Protocol):
    """Lookup capabilities the resolvers need from a dataset."""

    def get_by_id(self, kind: EntityKind, id: int) -> Entity | None: ...

    def get_all_ordered(self, kind: EntityKind) -> list[Entity]: ...

    def get_by_foreign_key(self, kind: EntityKind, fk_name: str, fk_value: int) -> list[Entity]: ...

    def count(self, kind: EntityKind) -> int: ...


class SortedCollection(Generic[E]):
    """Records keyed by integer id, iterated in ascending id order."""

    def __init__(self, records: Iterable[E] = ()):
        self._ids: list[int] = []
        self._records: dict[int, E] = {}
        for record in records:
            self.add(record)

    def add(self, record: E) -> None:
        if record.id in self._records:
            raise DataIntegrityError(
                f"duplicate {type(record).__name__} id {record.id}"
            )
        bisect.insort(self._ids, record.id)
        self._records[record.id] = record

    def get(self, id: int) -> E | None:
        return self._records.get(id)

    def __contains__(self, id: object) -> bool:
        return id in self._records

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[E]:
        for id in self._ids:
            yield self._records[id]

    def values(self) -> list[E]:
        return list(self)


class InMemoryDataSource:
    """Read-only DataSource over three sorted collections."""

    def __init__(
        self,
        users: Iterable[User] = (),
        albums: Iterable[Album] = (),
        photos: Iterable[Photo] = (),
    ):
        self._collections: dict[EntityKind, SortedCollection] = {
            EntityKind.USER: SortedCollection(users),
            EntityKind.ALBUM: SortedCollection(albums),
            EntityKind.PHOTO: SortedCollection(photos),
        }
        self._check_references()
        self._fk_index = {kind: self._build_fk_index(kind) for kind in self._child_kinds()}

        logger.debug(
            "Data source initialized",
            users=self.count(EntityKind.USER),
            albums=self.count(EntityKind.ALBUM),
            photos=self.count(EntityKind.PHOTO),
        )

    @staticmethod
    def _child_kinds() -> list[EntityKind]:
        return [kind for kind in EntityKind if kind.foreign_key is not None]

    def _check_references(self) -> None:
        for kind in self._child_kinds():
            parents = self._collections[kind.parent]  # type: ignore[index]
            fk_name: str = kind.foreign_key  # type: ignore[assignment]
            dangling = where(self._collections[kind], lambda r: getattr(r, fk_name) not in parents)
            if dangling:
                record = dangling[0]
                raise DataIntegrityError(
                    f"{kind.value} {record.id} references missing "
                    f"{kind.parent.value} {getattr(record, fk_name)}"  # type: ignore[union-attr]
                )

    def _build_fk_index(self, kind: EntityKind) -> dict[int, list[int]]:
        # ids are appended in ascending order, so each bucket stays sorted
        index: dict[int, list[int]] = {}
        for record in self._collections[kind]:
            fk_value = getattr(record, kind.foreign_key)  # type: ignore[arg-type]
            index.setdefault(fk_value, []).append(record.id)
        return index

    def get_by_id(self, kind: EntityKind, id: int) -> Entity | None:
        return self._collections[kind].get(id)

    def get_all_ordered(self, kind: EntityKind) -> list[Entity]:
        return self._collections[kind].values()

    def get_by_foreign_key(self, kind: EntityKind, fk_name: str, fk_value: int) -> list[Entity]:
        if fk_name != kind.foreign_key:
            raise UnknownForeignKeyError(f"{kind.value} has no foreign key {fk_name!r}")

        collection = self._collections[kind]
        ids: Sequence[int] = self._fk_index[kind].get(fk_value, [])
        return transform(ids, collection.get)  # type: ignore[arg-type]

    def count(self, kind: EntityKind) -> int:
        return len(self._collections[kind])
