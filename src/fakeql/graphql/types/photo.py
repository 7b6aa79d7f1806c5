"""
Photo GraphQL type definitions
"""

import strawberry

from ..resolvers.photo import resolve_photo_attribute


@strawberry.type
class Photo:
    """Photo type for GraphQL API."""

    @strawberry.field
    def id(self) -> int:
        return resolve_photo_attribute(self, "id")

    @strawberry.field
    def albumid(self) -> int:
        return resolve_photo_attribute(self, "albumid")

    @strawberry.field
    def description(self) -> str:
        return resolve_photo_attribute(self, "description")
