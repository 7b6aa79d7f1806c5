"""
Field-scoped GraphQL errors
"""

from ..data.models import EntityKind


class TypeMismatchError(Exception):
    """Raised by a field resolver whose source is not the entity kind the field belongs to.

    The execution engine attaches it to the failing field only; sibling root
    fields keep resolving. ``extensions`` is copied onto the GraphQL error.
    """

    def __init__(self, expected: EntityKind, actual: object):
        self.expected = expected
        self.actual_type = type(actual).__name__
        self.extensions = {"code": "TYPE_MISMATCH", "expectedType": expected.value}
        super().__init__(f"source is not of type {expected.value}")
