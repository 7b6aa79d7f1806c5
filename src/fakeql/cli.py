#!/usr/bin/env python3
"""
Main CLI entry point for FakeQL.
"""

import json
import os
import sys

import click
import uvicorn

from fakeql import __version__
from fakeql.config import settings
from fakeql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="fakeql")
def cli() -> None:
    """FakeQL CLI - serve and query the fake Users/Albums/Photos GraphQL API."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible dataset")
def serve(host: str, port: int, reload: bool, log_level: str, seed: int | None) -> None:
    """Start the FakeQL API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting FakeQL API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        seed=seed,
    )

    # Same-process startup reads the settings object; a reload worker re-reads env
    settings.debug = log_level == "debug"
    settings.log_level = log_level.upper()
    os.environ["FAKEQL_DEBUG"] = "true" if settings.debug else "false"
    os.environ["FAKEQL_LOG_LEVEL"] = log_level
    if seed is not None:
        settings.data_seed = seed
        os.environ["FAKEQL_DATA_SEED"] = str(seed)

    try:
        uvicorn.run(
            "fakeql.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.argument("query", required=False)
@click.option(
    "--file",
    "query_file",
    type=click.File("r"),
    help="Read the query from a file ('-' for stdin)",
)
@click.option("--variables", default=None, help="Query variables as a JSON object")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible dataset")
def query(query: str | None, query_file, variables: str | None, seed: int | None) -> None:
    """Run a GraphQL QUERY against a freshly generated dataset and print the result."""
    from fakeql.data import generate_dataset
    from fakeql.graphql.schema import schema

    configure_logging(debug=False, stream=sys.stderr)

    if query_file is not None:
        query = query_file.read()
    if not query:
        raise click.UsageError("Provide a QUERY argument or --file")

    try:
        variable_values = json.loads(variables) if variables else None
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--variables")

    data_source = generate_dataset(
        user_count=settings.user_count,
        albums_per_user=settings.albums_per_user,
        photos_per_album=settings.photos_per_album,
        seed=seed if seed is not None else settings.data_seed,
    )

    result = schema.execute_sync(
        query,
        variable_values=variable_values,
        context_value={"data_source": data_source},
    )

    output: dict = {"data": result.data}
    if result.errors:
        output["errors"] = [error.formatted for error in result.errors]

    click.echo(json.dumps(output, indent=2))
    if result.errors:
        sys.exit(1)


@cli.command("schema")
def print_schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from fakeql.graphql.schema import schema

    click.echo(schema.as_str())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
