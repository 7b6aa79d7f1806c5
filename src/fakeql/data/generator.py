"""
Fake dataset generation using Faker.
"""

import hashlib

from faker import Faker

from ..logging import get_logger
from .models import Album, Photo, User
from .store import InMemoryDataSource

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    """Return the hex SHA-256 digest stored as a user's password hash."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def generate_users(fake: Faker, count: int) -> list[User]:
    return [
        User(
            id=i,
            name=fake.name(),
            username=fake.unique.user_name(),
            email=fake.unique.email(),
            password_hash=hash_password(fake.password(length=16)),
        )
        for i in range(count)
    ]


def generate_albums(fake: Faker, users: list[User], albums_per_user: int) -> list[Album]:
    """Generate albums, assigning owners round-robin across users."""
    if not users:
        return []

    return [
        Album(
            id=i,
            userid=users[i % len(users)].id,
            description=fake.sentence(nb_words=6),
        )
        for i in range(len(users) * albums_per_user)
    ]


def generate_photos(fake: Faker, albums: list[Album], photos_per_album: int) -> list[Photo]:
    """Generate photos, assigning albums round-robin."""
    if not albums:
        return []

    return [
        Photo(
            id=i,
            albumid=albums[i % len(albums)].id,
            description=fake.sentence(nb_words=8),
        )
        for i in range(len(albums) * photos_per_album)
    ]


def generate_dataset(
    user_count: int = 10,
    albums_per_user: int = 5,
    photos_per_album: int = 10,
    seed: int | None = None,
    fake: Faker | None = None,
) -> InMemoryDataSource:
    """Build a fresh read-only dataset with dense ids starting at 0.

    Args:
        user_count: Number of users to create
        albums_per_user: Albums owned by each user
        photos_per_album: Photos held by each album
        seed: Optional Faker seed; the same seed yields the same dataset
        fake: Optional Faker instance to draw from

    Returns:
        InMemoryDataSource holding the generated records
    """
    fake = fake or Faker()
    if seed is not None:
        fake.seed_instance(seed)

    users = generate_users(fake, user_count)
    albums = generate_albums(fake, users, albums_per_user)
    photos = generate_photos(fake, albums, photos_per_album)

    logger.info(
        "Generated fake dataset",
        users=len(users),
        albums=len(albums),
        photos=len(photos),
        seed=seed,
    )

    return InMemoryDataSource(users=users, albums=albums, photos=photos)
