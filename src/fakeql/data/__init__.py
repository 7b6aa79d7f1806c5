"""
Process-wide dataset management.

The dataset is generated once per process from settings and is read-only
afterwards, so it can be shared across concurrent requests without locking.
"""

import threading

from ..config import settings
from ..logging import get_logger
from .generator import generate_dataset
from .models import Album, Entity, EntityKind, Photo, User
from .store import DataIntegrityError, DataSource, InMemoryDataSource, UnknownForeignKeyError

logger = get_logger(__name__)

_data_source: DataSource | None = None
_init_lock = threading.Lock()


def init_data_source(data_source: DataSource | None = None) -> DataSource:
    """Install data_source, or generate one from settings if None."""
    global _data_source

    with _init_lock:
        if data_source is None:
            data_source = generate_dataset(
                user_count=settings.user_count,
                albums_per_user=settings.albums_per_user,
                photos_per_album=settings.photos_per_album,
                seed=settings.data_seed,
            )
        _data_source = data_source

    return data_source


def get_data_source() -> DataSource:
    """Return the process-wide data source, generating it on first use."""
    if _data_source is None:
        return init_data_source()
    return _data_source


def reset_data_source() -> None:
    """Drop the process-wide data source (for tests)."""
    global _data_source
    _data_source = None


__all__ = [
    "Album",
    "DataIntegrityError",
    "DataSource",
    "Entity",
    "EntityKind",
    "InMemoryDataSource",
    "Photo",
    "UnknownForeignKeyError",
    "User",
    "generate_dataset",
    "get_data_source",
    "init_data_source",
    "reset_data_source",
]
