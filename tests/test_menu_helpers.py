# tests/test_menu_helpers.py

from cli.menu_helpers import display_response_failure
from core.response import ErrorCode, Response


def failed_save():
    return Response.fail(
        detail="Failed to write data to disk: denied",
        error=ErrorCode.INTERNAL_ERROR,
        trace="Traceback (most recent call last): ...",
    )


def test_failure_is_printed_with_error_name(capsys):
    display_response_failure(failed_save())

    out = capsys.readouterr().out
    assert "[ERROR: INTERNAL_ERROR] Failed to write data to disk: denied" in out
    assert "Debug Trace" not in out


def test_debug_prints_trace(capsys):
    display_response_failure(failed_save(), debug=True)

    assert "Debug Trace: Traceback" in capsys.readouterr().out


def test_success_prints_nothing(capsys):
    display_response_failure(Response.succeed(detail="ok"), debug=True)

    assert capsys.readouterr().out == ""
