"""Unit tests for field selector projections."""

import pytest

from infrastructure.persistence.projection import apply_projection, build_projection

DOCUMENT = {"_id": 1, "name": "Ada", "email": "ada@example.com", "password": "hash"}


class TestBuildProjection:
    def test_none_selector(self):
        assert build_projection(None) is None
        assert build_projection("") is None

    def test_inclusion_string(self):
        assert build_projection("name email") == {"name": 1, "email": 1}

    def test_exclusion_string(self):
        assert build_projection("-password") == {"password": 0}

    def test_list_selector(self):
        assert build_projection(["name", "email"]) == {"name": 1, "email": 1}

    def test_plus_prefix_selects_field(self):
        assert build_projection("+password") == {"password": 1}

    def test_id_may_be_excluded_from_inclusion(self):
        assert build_projection("-_id name") == {"_id": 0, "name": 1}

    def test_mixed_selector_raises(self):
        with pytest.raises(ValueError):
            build_projection("name -password")


class TestApplyProjection:
    def test_no_projection_returns_document(self):
        assert apply_projection(DOCUMENT, None) == DOCUMENT

    def test_inclusion_keeps_id(self):
        assert apply_projection(DOCUMENT, {"name": 1}) == {"_id": 1, "name": "Ada"}

    def test_inclusion_without_id(self):
        assert apply_projection(DOCUMENT, {"_id": 0, "name": 1}) == {"name": "Ada"}

    def test_exclusion(self):
        projected = apply_projection(DOCUMENT, {"password": 0})

        assert "password" not in projected
        assert projected["email"] == "ada@example.com"

    def test_missing_included_field_is_skipped(self):
        assert apply_projection(DOCUMENT, {"avatar": 1}) == {"_id": 1}
