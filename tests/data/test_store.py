"""
Tests for the in-memory data source
"""

import pytest

from fakeql.data import (
    Album,
    DataIntegrityError,
    EntityKind,
    InMemoryDataSource,
    Photo,
    UnknownForeignKeyError,
    User,
)
from fakeql.data.store import SortedCollection


@pytest.fixture
def small_source():
    """Records deliberately supplied out of id order."""
    users = [User(id=2, name="c"), User(id=0, name="a"), User(id=1, name="b")]
    albums = [
        Album(id=3, userid=0, description="a3"),
        Album(id=1, userid=1, description="a1"),
        Album(id=0, userid=0, description="a0"),
        Album(id=2, userid=0, description="a2"),
    ]
    photos = [
        Photo(id=1, albumid=2, description="p1"),
        Photo(id=0, albumid=0, description="p0"),
    ]
    return InMemoryDataSource(users=users, albums=albums, photos=photos)


class TestSortedCollection:
    def test_iterates_in_ascending_id_order(self):
        collection = SortedCollection([User(id=i) for i in (5, 1, 3, 0)])

        assert [user.id for user in collection.values()] == [0, 1, 3, 5]
        assert [user.id for user in collection] == [0, 1, 3, 5]

    def test_get_and_contains(self):
        collection = SortedCollection([User(id=7, name="seven")])

        assert collection.get(7) == User(id=7, name="seven")
        assert collection.get(8) is None
        assert 7 in collection
        assert 8 not in collection
        assert len(collection) == 1

    def test_rejects_duplicate_ids(self):
        with pytest.raises(DataIntegrityError, match="duplicate User id 1"):
            SortedCollection([User(id=1), User(id=1, name="other")])

    def test_values_is_a_fresh_list(self):
        collection = SortedCollection([User(id=0)])

        first = collection.values()
        first.clear()

        assert collection.values() == [User(id=0)]


class TestInMemoryDataSource:
    def test_get_by_id(self, small_source):
        assert small_source.get_by_id(EntityKind.USER, 1) == User(id=1, name="b")
        assert small_source.get_by_id(EntityKind.ALBUM, 3).description == "a3"

    @pytest.mark.parametrize("missing_id", [-1, 3, 1000])
    def test_get_by_id_missing(self, small_source, missing_id):
        assert small_source.get_by_id(EntityKind.USER, missing_id) is None

    def test_get_all_ordered(self, small_source):
        assert [u.id for u in small_source.get_all_ordered(EntityKind.USER)] == [0, 1, 2]
        assert [a.id for a in small_source.get_all_ordered(EntityKind.ALBUM)] == [0, 1, 2, 3]

    def test_get_all_ordered_does_not_alias_store(self, small_source):
        albums = small_source.get_all_ordered(EntityKind.ALBUM)
        albums.clear()

        assert small_source.count(EntityKind.ALBUM) == 4
        assert len(small_source.get_all_ordered(EntityKind.ALBUM)) == 4

    def test_get_by_foreign_key_is_id_ordered(self, small_source):
        albums = small_source.get_by_foreign_key(EntityKind.ALBUM, "userid", 0)

        assert [a.id for a in albums] == [0, 2, 3]

    def test_get_by_foreign_key_no_matches(self, small_source):
        assert small_source.get_by_foreign_key(EntityKind.ALBUM, "userid", 2) == []
        assert small_source.get_by_foreign_key(EntityKind.PHOTO, "albumid", -5) == []

    def test_unknown_foreign_key(self, small_source):
        with pytest.raises(UnknownForeignKeyError):
            small_source.get_by_foreign_key(EntityKind.PHOTO, "userid", 0)

    def test_users_have_no_foreign_key(self, small_source):
        with pytest.raises(UnknownForeignKeyError):
            small_source.get_by_foreign_key(EntityKind.USER, "userid", 0)

    def test_count(self, small_source):
        assert small_source.count(EntityKind.USER) == 3
        assert small_source.count(EntityKind.ALBUM) == 4
        assert small_source.count(EntityKind.PHOTO) == 2

    def test_rejects_album_with_missing_user(self):
        with pytest.raises(DataIntegrityError, match="Album 0 references missing User 9"):
            InMemoryDataSource(users=[User(id=0)], albums=[Album(id=0, userid=9)])

    def test_rejects_photo_with_missing_album(self):
        with pytest.raises(DataIntegrityError, match="Photo 4 references missing Album 1"):
            InMemoryDataSource(
                users=[User(id=0)],
                albums=[Album(id=0, userid=0)],
                photos=[Photo(id=4, albumid=1)],
            )

    def test_empty_source(self):
        source = InMemoryDataSource()

        assert source.get_all_ordered(EntityKind.PHOTO) == []
        assert source.get_by_id(EntityKind.USER, 0) is None


class TestEntityKind:
    def test_foreign_keys(self):
        assert EntityKind.USER.foreign_key is None
        assert EntityKind.ALBUM.foreign_key == "userid"
        assert EntityKind.PHOTO.foreign_key == "albumid"

    def test_parents(self):
        assert EntityKind.USER.parent is None
        assert EntityKind.ALBUM.parent is EntityKind.USER
        assert EntityKind.PHOTO.parent is EntityKind.ALBUM

    def test_empty_records(self):
        assert EntityKind.USER.empty() == User()
        assert EntityKind.PHOTO.is_empty(EntityKind.PHOTO.empty())
        assert not EntityKind.PHOTO.is_empty(Photo(id=0, albumid=0, description="x"))

    def test_empty_record_is_shared(self):
        assert EntityKind.ALBUM.empty() is EntityKind.ALBUM.empty()

    def test_zero_valued_record_is_not_empty(self):
        assert User(id=0) == EntityKind.USER.empty()
        assert not EntityKind.USER.is_empty(User(id=0))
        assert not EntityKind.ALBUM.is_empty(EntityKind.PHOTO.empty())

    def test_matches_checks_record_class(self):
        assert EntityKind.ALBUM.matches(Album())
        assert not EntityKind.ALBUM.matches(Photo())
        assert not EntityKind.ALBUM.matches({"id": 0, "userid": 0, "description": ""})
