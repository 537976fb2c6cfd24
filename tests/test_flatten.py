"""Tests for the join-and-flatten helpers."""

from starlist.flatten import flatten_record, join_entry


class TestFlattenRecord:
    def test_embedded_restaurant(self):
        row = {"id": 7, "comment": None, "restaurants": {"id": "r1", "name": "Pho Place"}}
        assert flatten_record(row) == {"id": 7, "comment": None, "name": "Pho Place"}

    def test_outer_fields_win(self):
        row = {"id": "s1", "comment": "mine", "restaurant": {"id": "r1", "comment": "theirs"}}
        flat = flatten_record(row)
        assert flat["id"] == "s1"
        assert flat["comment"] == "mine"

    def test_deeply_nested(self):
        row = {"id": 1, "a": {"b": {"c": 3}, "d": 4}}
        assert flatten_record(row) == {"id": 1, "c": 3, "d": 4}

    def test_first_nested_sibling_wins(self):
        row = {"first": {"x": 1}, "second": {"x": 2, "y": 3}}
        assert flatten_record(row) == {"x": 1, "y": 3}

    def test_lists_kept_as_values(self):
        row = {"id": 1, "restaurant": {"tags": ["pho", "soup"]}}
        assert flatten_record(row) == {"id": 1, "tags": ["pho", "soup"]}

    def test_no_nested_mappings_remain(self):
        row = {"id": 1, "restaurant": {"name": "x", "address": {"city": "NYC"}}}
        flat = flatten_record(row)
        assert not any(isinstance(v, dict) for v in flat.values())
        assert flat["city"] == "NYC"


class TestJoinEntry:
    def test_merges_restaurant_fields(self):
        entry = {"id": "s1", "restaurant_id": "r2", "comment": None}
        restaurant = {"id": "r2", "name": "Taqueria Sol", "cuisine": "Mexican"}

        assert join_entry(entry, restaurant) == {
            "id": "s1",
            "comment": None,
            "name": "Taqueria Sol",
            "cuisine": "Mexican",
        }

    def test_reference_column_not_presented(self):
        entry = {"id": "s1", "restaurantId": "r1", "comment": "Great!"}
        record = join_entry(entry, {"id": "r1", "name": "Pho Place"})
        assert "restaurantId" not in record
        assert record["comment"] == "Great!"
