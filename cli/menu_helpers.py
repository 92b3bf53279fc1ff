# cli/menu_helpers.py

"""
Helper functions for the TeachStack terminal front end.

This module provides utilities for:
- Rendering the filtered class list and archive
- Showing the help listing and the grade summary "popup"
- Prompting for user input and confirmation
- Displaying standard system messages and error feedback
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.response import Response
from logic.commands.types import COMMAND_TYPES
from models.model import Model
from models.student import Grade

# === display methods ===


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_class_list(model: Model) -> None:
    """
    Renders the filtered class list with one-based indexes, the same indexes `remark` accepts.
    """
    width = model.gui_settings.width
    students = model.filtered_students

    print(f"\n{formatters.format_banner_text('Class List', width)}")

    if not students:
        print("No students to display.")
        return

    if len(students) == 1:
        student = students[0]
        print(model_formatters.format_student_multiline(student, model.is_weak(student)))
        return

    display_results(
        students,
        show_index=True,
        formatter=lambda s: model_formatters.format_student_oneline(
            s, model.is_weak(s), width - 4
        ),
    )


def display_archive(model: Model) -> None:
    width = model.gui_settings.width
    students = model.filtered_archived

    print(f"\n{formatters.format_banner_text('Archive', width)}")

    if not students:
        print("The archive is empty.")
        return

    display_results(
        students,
        show_index=True,
        formatter=lambda s: model_formatters.format_student_oneline(s, width=width - 4),
    )


def display_help(width: int = 80) -> None:
    print(f"\n{formatters.format_banner_text('Help', width)}")

    for command_type in COMMAND_TYPES.values():
        print(f"\n{command_type.MESSAGE_USAGE}")


def display_summary(distribution: dict[Grade, int], width: int = 80) -> None:
    print(f"\n{formatters.format_banner_text('Grade Summary', width)}")
    print(model_formatters.format_grade_distribution(distribution, width))


def display_response_failure(response: Response, debug: bool = False) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.
        debug (bool, optional): If True, prints the trace field when present. Defaults to False.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

    if debug and response.trace:
        print(f"\nDebug Trace: {response.trace}")


# === prompt user input methods ===


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_command() -> str:
    return input("\n  >> ").strip()
