# tests/test_formatters.py

import logging

import pytest

import core.formatters as formatters
from cli.model_formatters import (
    format_grade_distribution,
    format_student_multiline,
    format_student_oneline,
)
from core.logs import LOG_FILE_NAME, parse_level, setup_logging
from models.student import Grade
from typical_students import BENSON, CARL

# === text formatters ===


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], ""),
        (["a"], "a"),
        (["a", "b"], "a and b"),
        (["a", "b", "c"], "a, b, and c"),
    ],
)
def test_format_list_with_and(items, expected):
    assert formatters.format_list_with_and(items) == expected


def test_truncate():
    assert formatters.truncate("short", 10) == "short"
    assert formatters.truncate("a much longer line", 10) == "a much ..."


def test_format_bar_scales_to_total():
    assert formatters.format_bar("A", 2, 4, width=10) == "A    | #####      |  2"
    assert formatters.format_bar("F", 0, 0, width=4) == "F    |      |  0"


# === student formatters ===


def test_oneline_marks_weak_students():
    line = format_student_oneline(CARL, is_weak=True, width=200)

    assert line.startswith("A0000002C | Carl Kurz")
    assert "[NO GROUPS]" in line
    assert line.endswith("[WEAK]")


def test_multiline_shows_remark():
    text = format_student_multiline(BENSON)

    assert "... Groups: [Group 1] [Group 2]" in text
    assert "... Remark: Needs help with recursion" in text
    assert "[NO REMARK]" in format_student_multiline(CARL)


def test_grade_distribution_lists_every_grade():
    distribution = {grade: 0 for grade in Grade}
    distribution[Grade.A] = 3

    text = format_grade_distribution(distribution, width=40)
    lines = text.splitlines()

    assert len(lines) == len(Grade) + 2
    assert lines[-1] == "Total: 3"


# === logging ===


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield root

    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parse_level():
    assert parse_level(" debug ") == logging.DEBUG

    with pytest.raises(ValueError):
        parse_level("LOUD")


def test_setup_logging_writes_to_file(tmp_path, restore_root_logger):
    setup_logging(str(tmp_path), "DEBUG")
    setup_logging(str(tmp_path), "DEBUG")

    assert len(restore_root_logger.handlers) == 2

    logging.getLogger("teachstack.test").info("hello log")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert "hello log" in (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
