"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

# Only named queries; the API has no mutations or subscriptions
_OPERATION_RE = re.compile(r"\bquery\s+(\w+)")


def operation_name_from_query(query: str) -> str:
    """Derive a loggable operation name from a raw GraphQL query string."""
    # GraphiQL polls the schema; keep those requests recognisable in logs
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"
    match = _OPERATION_RE.search(query)
    if match:
        return match.group(1)
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != settings.graphql_path:
        return None

    # GET /graphql: operationName or query in the query string
    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if op:
            return op
        q = params.get("query", "")
        return operation_name_from_query(q) if q else None

    # POST /graphql: JSON body. Starlette caches the body, so the router can still read it.
    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            op = data.get("operationName")
            if isinstance(op, str) and op:
                return op
            q = data.get("query", "")
            if not isinstance(q, str) or not q:
                return None
            return operation_name_from_query(q)
        except (json.JSONDecodeError, TypeError, AttributeError):
            # Malformed bodies are reported by the GraphQL router, not here
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Set the logging context for each request and log its start and end."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        graphql_operation = await extract_graphql_operation_name(request)

        # Reuse the caller's id so logs can be joined across services
        request_id = set_request_context(
            request.headers.get("x-request-id"),
            graphql_operation=graphql_operation,
        )

        try:
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
