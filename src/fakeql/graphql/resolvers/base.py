"""
Kind-generic resolver engine.

Every field resolver validates its source first (ensure_source) and only then
reads from the data source. Nothing here keeps state between calls.
"""

from __future__ import annotations

from typing import Any

import strawberry

from ...data import DataSource, Entity, EntityKind, get_data_source
from ...logging import get_logger
from ...sequences import take
from ..errors import TypeMismatchError

logger = get_logger(__name__)


def get_data_source_from_info(info: strawberry.Info) -> DataSource:
    """Return the data source placed in the GraphQL context, or the process-wide one."""
    context = info.context
    if isinstance(context, dict) and context.get("data_source") is not None:
        return context["data_source"]
    return get_data_source()


def ensure_source(source: object, kind: EntityKind) -> Entity:
    """Return source if it is a record of kind, otherwise raise TypeMismatchError."""
    if not kind.matches(source):
        logger.warning(
            "Resolver source type mismatch",
            expected=kind.value,
            actual=type(source).__name__,
        )
        raise TypeMismatchError(kind, source)
    return source  # type: ignore[return-value]


def resolve_attribute(source: object, kind: EntityKind, attribute: str) -> Any:
    """Read a scalar attribute off a validated source record."""
    return getattr(ensure_source(source, kind), attribute)


def resolve_single(info: strawberry.Info, kind: EntityKind, id: int) -> Entity:
    """
    Resolve one entity by id.

    Unknown ids (including negative ones) are not an error: the empty record
    of the kind is returned instead.
    """
    record = get_data_source_from_info(info).get_by_id(kind, id)
    if record is None:
        logger.debug("Entity not found, returning empty record", kind=kind.value, id=id)
        return kind.empty()
    return record


def resolve_collection(
    info: strawberry.Info,
    kind: EntityKind,
    fk_value: int | None = None,
    limit: int | None = None,
) -> list[Entity]:
    """
    Resolve an id-ordered list of entities.

    Args:
        fk_value: If given, keep only entities whose foreign key equals it
        limit: If given, keep at most this many from the front (negative means 0)
    """
    data_source = get_data_source_from_info(info)

    if fk_value is None:
        records = data_source.get_all_ordered(kind)
    else:
        if kind.foreign_key is None:
            raise ValueError(f"{kind.value} has no foreign key to filter on")
        records = data_source.get_by_foreign_key(kind, kind.foreign_key, fk_value)

    return take(records, limit)


def resolve_children(
    parent: object,
    parent_kind: EntityKind,
    child_kind: EntityKind,
    info: strawberry.Info,
    limit: int | None = None,
) -> list[Entity]:
    """
    Resolve a relationship field: the children of parent, optionally limited.

    Equivalent to resolve_collection with the parent's id as the filter. The
    not-found record owns no children; a stored record with zero-valued fields
    still has its own.
    """
    record = ensure_source(parent, parent_kind)
    if parent_kind.is_empty(record):
        return []
    return resolve_collection(info, child_kind, fk_value=record.id, limit=limit)
