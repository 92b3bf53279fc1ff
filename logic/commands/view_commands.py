# logic/commands/view_commands.py

"""
Commands that change what the class list shows, adjust settings, or signal the front end.

Apart from `clear` and `config`, none of these mutate student records; they swap the predicate on the
filtered view or return a `CommandResult` whose flags the front end acts on.
"""

from __future__ import annotations

from typing import Iterable

from core.response import Response
from logic.commands.command_result import CommandResult
from models.model import Model
from models.roster import show_all_students
from models.student import Grade, Student


class NameContainsKeywordsPredicate:
    """
    Matches students whose name contains any of the keywords as a whole word, ignoring case.
    """

    def __init__(self, keywords: Iterable[str]):
        self._keywords = [k.lower() for k in keywords]

    @property
    def keywords(self) -> list[str]:
        return list(self._keywords)

    def __call__(self, student: Student) -> bool:
        words = student.name.lower().split()
        return any(keyword in words for keyword in self._keywords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameContainsKeywordsPredicate):
            return NotImplemented
        return self._keywords == other._keywords

    def __repr__(self) -> str:
        return f"NameContainsKeywordsPredicate({self._keywords})"


# === filtering ===


class FindCommand:

    COMMAND_WORD = "find"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all students whose names contain any of the given keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    MESSAGE_SUCCESS = "{} students listed!"

    def __init__(self, predicate: NameContainsKeywordsPredicate):
        self._predicate = predicate

    def execute(self, model: Model) -> Response:
        model.update_filtered_student_list(self._predicate)
        count = len(model.filtered_students)
        return CommandResult(self.MESSAGE_SUCCESS.format(count)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FindCommand):
            return NotImplemented
        return self._predicate == other._predicate

    def __repr__(self) -> str:
        return f"FindCommand({self._predicate!r})"


class ListCommand:

    COMMAND_WORD = "list"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows every student in the class list."

    MESSAGE_SUCCESS = "Listed all students"

    def execute(self, model: Model) -> Response:
        model.update_filtered_student_list(show_all_students)
        return CommandResult(self.MESSAGE_SUCCESS).to_response()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListCommand)

    def __repr__(self) -> str:
        return "ListCommand()"


class WeakCommand:

    COMMAND_WORD = "weak"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows the students whose grade is at or below the weak threshold "
        "(change it with config gd/GRADE)."
    )

    MESSAGE_SUCCESS = "{} weak students listed (grade {} or below)."

    def execute(self, model: Model) -> Response:
        # reads the threshold on every check so a later config change applies to this view
        model.update_filtered_student_list(model.is_weak)
        count = len(model.filtered_students)
        return CommandResult(
            self.MESSAGE_SUCCESS.format(count, model.weak_threshold.value)
        ).to_response()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, WeakCommand)

    def __repr__(self) -> str:
        return "WeakCommand()"


class FocusCommand:

    COMMAND_WORD = "focus"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows only the student with the given ID, with full details.\n"
        "Parameters: STUDENT_ID\n"
        f"Example: {COMMAND_WORD} A0123456X"
    )

    MESSAGE_SUCCESS = "Focused on Student: {}"

    def __init__(self, student_id: str):
        self._student_id = student_id

    @property
    def student_id(self) -> str:
        return self._student_id

    def execute(self, model: Model) -> Response:
        lookup_response = model.get_student(self._student_id)

        if not lookup_response.success:
            return lookup_response

        student: Student = lookup_response.data["record"]
        student_id = student.student_id
        model.update_filtered_student_list(lambda s: s.student_id == student_id)

        return CommandResult(self.MESSAGE_SUCCESS.format(student)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FocusCommand):
            return NotImplemented
        return self._student_id == other._student_id

    def __repr__(self) -> str:
        return f"FocusCommand({self._student_id})"


# === summaries and settings ===


class SummaryCommand:

    COMMAND_WORD = "summary"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows the grade distribution of the class list."

    MESSAGE_SUCCESS = "Summary of grades for {} students."

    def execute(self, model: Model) -> Response:
        distribution = model.get_grade_distribution()
        total = sum(distribution.values())

        return CommandResult(
            self.MESSAGE_SUCCESS.format(total),
            show_summary=True,
            attachment=distribution,
        ).to_response()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SummaryCommand)

    def __repr__(self) -> str:
        return "SummaryCommand()"


class ConfigCommand:

    COMMAND_WORD = "config"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Sets the grade at or below which a student counts as weak.\n"
        "Parameters: gd/GRADE\n"
        f"Example: {COMMAND_WORD} gd/C+"
    )

    def __init__(self, grade: Grade):
        self._grade = grade

    @property
    def grade(self) -> Grade:
        return self._grade

    def execute(self, model: Model) -> Response:
        config_response = model.set_weak_threshold(self._grade)

        if not config_response.success:
            return config_response

        return CommandResult(config_response.detail or "").to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigCommand):
            return NotImplemented
        return self._grade == other._grade

    def __repr__(self) -> str:
        return f"ConfigCommand({self._grade.value})"


class ClearCommand:

    COMMAND_WORD = "clear"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Removes every student from the class list and the archive."

    MESSAGE_SUCCESS = "Class list and archive have been cleared!"

    def execute(self, model: Model) -> Response:
        reset_response = model.reset_data([], [])

        if not reset_response.success:
            return reset_response

        model.update_filtered_student_list(show_all_students)
        model.update_filtered_archived_list(show_all_students)

        return CommandResult(self.MESSAGE_SUCCESS).to_response()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ClearCommand)

    def __repr__(self) -> str:
        return "ClearCommand()"


# === front end signals ===


class HelpCommand:

    COMMAND_WORD = "help"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions."

    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, model: Model) -> Response:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True).to_response()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HelpCommand)

    def __repr__(self) -> str:
        return "HelpCommand()"


class ExitCommand:

    COMMAND_WORD = "exit"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Saves and exits the program."

    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting TeachStack as requested ..."

    def execute(self, model: Model) -> Response:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True).to_response()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExitCommand)

    def __repr__(self) -> str:
        return "ExitCommand()"
