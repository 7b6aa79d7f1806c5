"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..config import settings
from ..data import DataSource, get_data_source
from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)


class FakeQLSchema(strawberry.Schema):
    """Strawberry schema that reports execution errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        # Field errors are expected results (e.g. type mismatches), so warn, not error
        for error in errors:
            logger.warning(
                "GraphQL field error",
                message=error.message,
                path=error.path,
                extensions=error.extensions,
            )


schema = FakeQLSchema(query=Query)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        # Underlying graphql-core schema
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # GraphiQL relies on introspection; make sure it resolves
        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    data_source: DataSource | None = None,
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Args:
        data_source: Dataset to serve; defaults to the process-wide one
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        # Resolvers read the dataset from here (see get_data_source_from_info)
        return {
            "request": request,
            "data_source": data_source or get_data_source(),
        }

    # graphql_ide=None serves only the API; browsers get a 404 instead of the IDE
    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
