"""
Tests for the generic sequence helpers
"""

from fakeql.sequences import take, transform, where


class TestTransform:
    def test_transforms_each_element_in_order(self):
        assert transform(range(5), str) == ["0", "1", "2", "3", "4"]

    def test_returns_new_list(self):
        items = [1, 2, 3]

        result = transform(items, lambda i: i)

        assert result == items
        assert result is not items


class TestWhere:
    def test_filters_and_preserves_order(self):
        assert where([5, 1, 4, 2, 3], lambda i: i < 4) == [1, 2, 3]

    def test_returns_new_list(self):
        items = [1, 2, 3]

        result = where(items, lambda _: True)

        assert result == items
        assert result is not items


class TestTake:
    items = list(range(5))

    def test_none_returns_everything(self):
        result = take(self.items)

        assert result == self.items
        assert result is not self.items

    def test_limit_below_size(self):
        assert take(self.items, 3) == [0, 1, 2]

    def test_limit_equal_to_size(self):
        assert take(self.items, 5) == self.items

    def test_limit_above_size_is_not_padded(self):
        assert take(self.items, 50) == self.items

    def test_zero_limit(self):
        assert take(self.items, 0) == []

    def test_negative_limit_behaves_like_zero(self):
        assert take(self.items, -1) == []

    def test_works_with_iterators(self):
        assert take(iter(self.items), 2) == [0, 1]
