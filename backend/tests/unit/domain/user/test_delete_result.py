"""Unit tests for DeleteResult value object."""

from domain.user.core.value_objects.delete_result import DeleteResult


def test_not_found_result():
    result = DeleteResult.not_found()

    assert result.deleted_count == 0
    assert result.message == "No user found with that ID."


def test_deleted_result():
    result = DeleteResult.deleted()

    assert result.deleted_count == 1
    assert result.message == "User was deleted successfully."


def test_to_dict_uses_camel_case_keys():
    assert DeleteResult.not_found().to_dict() == {
        "deletedCount": 0,
        "message": "No user found with that ID.",
    }
