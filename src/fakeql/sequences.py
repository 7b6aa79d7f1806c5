"""
Generic sequence helpers shared by the data source and the resolvers.

All helpers are pure: they never mutate their input and always return a new list.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def transform(items: Iterable[T], fn: Callable[[T], U]) -> list[U]:
    """Apply fn to every item, preserving order."""
    return [fn(item) for item in items]


def where(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the items matching predicate, preserving order."""
    return [item for item in items if predicate(item)]


def take(items: Iterable[T], limit: int | None = None) -> list[T]:
    """Return at most limit items from the front of items.

    None returns every item; a negative limit is treated as 0.
    """
    if limit is None:
        return list(items)
    if limit <= 0:
        return []

    result: list[T] = []
    for item in items:
        result.append(item)
        if len(result) == limit:
            break
    return result
