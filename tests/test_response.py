# tests/test_response.py

from core.response import ErrorCode, Response


def test_not_found_sets_code_and_status():
    response = Response.not_found("No student with ID A9999999Z found in the class list.")

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404
    assert response.data == {}


def test_to_dict_then_from_dict_restores_error_code():
    response = Response.fail(detail="bad grade", error=ErrorCode.INVALID_FIELD_VALUE)

    restored = Response.from_dict(response.to_dict())

    assert restored.error is ErrorCode.INVALID_FIELD_VALUE
    assert restored.detail == "bad grade"
    assert str(restored) == "Error: INVALID_FIELD_VALUE"


def test_string_error_passes_through():
    restored = Response.from_dict({"success": False, "error": "CUSTOM"})

    assert restored.error == "CUSTOM"
