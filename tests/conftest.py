"""
Shared pytest fixtures and configuration for all tests.
"""

import dataclasses
import os
from collections.abc import Callable, Generator
from typing import Any

import pytest
import strawberry

from fakeql.data import InMemoryDataSource, generate_dataset, reset_data_source
from fakeql.graphql.schema import schema

USER_COUNT = 10
ALBUMS_PER_USER = 3
PHOTOS_PER_ALBUM = 4


@pytest.fixture(scope="session")
def data_source() -> InMemoryDataSource:
    """A small reproducible dataset: users 0..9, 30 albums, 120 photos."""
    return generate_dataset(
        user_count=USER_COUNT,
        albums_per_user=ALBUMS_PER_USER,
        photos_per_album=PHOTOS_PER_ALBUM,
        seed=1234,
    )


@pytest.fixture
def execute(data_source: InMemoryDataSource) -> Callable[..., Any]:
    """Execute a query against the main schema and the test dataset."""

    def _execute(
        query: str,
        variables: dict[str, Any] | None = None,
        schema_: strawberry.Schema = schema,
    ):
        return schema_.execute_sync(
            query,
            variable_values=variables,
            context_value={"data_source": data_source},
        )

    return _execute


def record_to_graphql(record: Any) -> dict[str, Any]:
    """Render a data record the way the schema exposes its scalar fields."""
    data = dataclasses.asdict(record)
    if "password_hash" in data:
        data["passwordHash"] = data.pop("password_hash")
    return data


@pytest.fixture
def to_graphql() -> Callable[[Any], dict[str, Any]]:
    return record_to_graphql


@pytest.fixture(autouse=True)
def reset_process_data_source() -> Generator[None, None, None]:
    """Never let a generated process-wide dataset leak between tests."""
    reset_data_source()
    yield
    reset_data_source()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
