# logic/commands/archive_commands.py

"""
Commands that move students between the class list and the archive, and display the archive.
"""

from __future__ import annotations

from core.response import Response
from logic.commands.command_result import CommandResult
from models.model import Model
from models.roster import show_all_students
from models.student import Student


class ArchiveCommand:

    COMMAND_WORD = "archive"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Moves the student with the given ID from the class list to the archive. "
        "Parameters: STUDENT_ID\n"
        f"Example: {COMMAND_WORD} A0123456X"
    )

    MESSAGE_SUCCESS = "Archived Student: {}"

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
        archive_response = model.archive_student(student)

        if not archive_response.success:
            return archive_response

        return CommandResult(self.MESSAGE_SUCCESS.format(student)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArchiveCommand):
            return NotImplemented
        return self._student_id == other._student_id

    def __repr__(self) -> str:
        return f"ArchiveCommand({self._student_id})"


class UnarchiveCommand:

    COMMAND_WORD = "unarchive"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Moves the student with the given ID from the archive back to the class list. "
        "Parameters: STUDENT_ID\n"
        f"Example: {COMMAND_WORD} A0123456X"
    )

    MESSAGE_SUCCESS = "Unarchived Student: {}"

    def __init__(self, student_id: str):
        self._student_id = student_id

    @property
    def student_id(self) -> str:
        return self._student_id

    def execute(self, model: Model) -> Response:
        lookup_response = model.get_archived_student(self._student_id)

        if not lookup_response.success:
            return lookup_response

        student: Student = lookup_response.data["record"]
        unarchive_response = model.unarchive_student(student)

        if not unarchive_response.success:
            return unarchive_response

        return CommandResult(self.MESSAGE_SUCCESS.format(student)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnarchiveCommand):
            return NotImplemented
        return self._student_id == other._student_id

    def __repr__(self) -> str:
        return f"UnarchiveCommand({self._student_id})"


class ListArchiveCommand:

    COMMAND_WORD = "listarchive"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows every archived student."

    MESSAGE_SUCCESS = "Listed all archived students"

    def execute(self, model: Model) -> Response:
        model.update_filtered_archived_list(show_all_students)
        return CommandResult(self.MESSAGE_SUCCESS, show_archived=True).to_response()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListArchiveCommand)

    def __repr__(self) -> str:
        return "ListArchiveCommand()"
