"""Unit tests for ObjectId coercion helpers."""

import pytest
from bson import ObjectId

from infrastructure.persistence.object_ids import normalize_criteria, to_object_id


class TestToObjectId:
    def test_object_id_passes_through(self):
        object_id = ObjectId()
        assert to_object_id(object_id) is object_id

    def test_hex_string_is_converted(self):
        object_id = ObjectId()
        assert to_object_id(str(object_id)) == object_id

    @pytest.mark.parametrize("value", [None, "nope", 42.5, ["x"]])
    def test_unconvertible_values_give_none(self, value):
        assert to_object_id(value) is None


class TestNormalizeCriteria:
    def test_none_gives_empty_filter(self):
        assert normalize_criteria(None) == {}

    def test_hex_string_id_is_converted_without_touching_input(self):
        object_id = ObjectId()
        criteria = {"_id": str(object_id), "role": "USER"}

        assert normalize_criteria(criteria) == {"_id": object_id, "role": "USER"}
        assert criteria["_id"] == str(object_id)

    def test_malformed_id_is_left_as_given(self):
        assert normalize_criteria({"_id": "nope"}) == {"_id": "nope"}
