# logic/commands/student_commands.py

"""
Commands that create, edit, and delete students in the active class list.

Every command is a single-shot value object: it is built by the parser with already-validated arguments and
exposes one `execute(model) -> Response` method. A successful Response carries the `CommandResult` under
`data["result"]`; a failed one carries the user-facing message in `detail`.
"""

from __future__ import annotations

import logging
from typing import Iterable

import core.formatters as formatters
from core.response import ErrorCode, Response
from logic.commands.command_result import CommandResult
from models.group import Group
from models.model import Model
from models.roster import show_all_students
from models.student import Grade, Student

logger = logging.getLogger(__name__)

# === add ===


class AddCommand:

    COMMAND_WORD = "add"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a student to the class list. "
        "Parameters: id/STUDENT_ID n/NAME e/EMAIL gd/GRADE [g/GROUP]...\n"
        f"Example: {COMMAND_WORD} id/A0123456X n/John Doe e/johnd@example.com gd/B+ g/Group 1"
    )

    MESSAGE_SUCCESS = "New student added: {}"
    MESSAGE_DUPLICATE_ID = "This student ID already exists in the class list or the archive."
    MESSAGE_DUPLICATE_EMAIL = "This email already exists in the class list or the archive."

    def __init__(self, student: Student):
        self._student = student

    @property
    def student(self) -> Student:
        return self._student

    def execute(self, model: Model) -> Response:
        student = self._student

        if model.has_id(student) or model.has_archived_id(student):
            return Response.fail(
                detail=self.MESSAGE_DUPLICATE_ID,
                error=ErrorCode.VALIDATION_FAILED,
            )

        if model.has_email(student) or model.has_archived_email(student):
            return Response.fail(
                detail=self.MESSAGE_DUPLICATE_EMAIL,
                error=ErrorCode.VALIDATION_FAILED,
            )

        add_response = model.add_student(student)

        if not add_response.success:
            return add_response

        return CommandResult(self.MESSAGE_SUCCESS.format(student)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddCommand):
            return NotImplemented
        return self._student == other._student

    def __repr__(self) -> str:
        return f"AddCommand({self._student!r})"


# === edit ===


class EditStudentDescriptor:
    """
    The fields to change on a student. A field left as None keeps the student's current value.
    """

    def __init__(
        self,
        student_id: str | None = None,
        name: str | None = None,
        email: str | None = None,
        grade: Grade | None = None,
        groups: Iterable[Group] | None = None,
    ):
        self.student_id = student_id
        self.name = name
        self.email = email
        self.grade = grade
        self.groups = frozenset(groups) if groups is not None else None

    def is_any_field_edited(self) -> bool:
        return any(
            field is not None
            for field in (self.student_id, self.name, self.email, self.grade, self.groups)
        )

    def apply_to(self, student: Student) -> Student:
        return student.copy_with(
            student_id=self.student_id,
            name=self.name,
            email=self.email,
            grade=self.grade,
            groups=self.groups,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditStudentDescriptor):
            return NotImplemented
        return (
            self.student_id == other.student_id
            and self.name == other.name
            and self.email == other.email
            and self.grade == other.grade
            and self.groups == other.groups
        )

    def __repr__(self) -> str:
        return (
            f"EditStudentDescriptor(id={self.student_id}, name={self.name}, email={self.email}, "
            f"grade={self.grade}, groups={self.groups})"
        )


class EditCommand:

    COMMAND_WORD = "edit"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the student identified by their student ID. "
        "Existing values will be overwritten by the input values. "
        "Parameters: STUDENT_ID [id/STUDENT_ID] [n/NAME] [e/EMAIL] [gd/GRADE] [g/GROUP]...\n"
        f"Example: {COMMAND_WORD} A0123456X e/johndoe@example.com gd/A"
    )

    MESSAGE_SUCCESS = "Edited Student: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_ID = "This student ID already exists in the class list or the archive."
    MESSAGE_DUPLICATE_EMAIL = "This email already exists in the class list or the archive."

    def __init__(self, student_id: str, descriptor: EditStudentDescriptor):
        self._student_id = student_id
        self._descriptor = descriptor

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def descriptor(self) -> EditStudentDescriptor:
        return self._descriptor

    def execute(self, model: Model) -> Response:
        if not self._descriptor.is_any_field_edited():
            return Response.fail(
                detail=self.MESSAGE_NOT_EDITED,
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        lookup_response = model.get_student(self._student_id)

        if not lookup_response.success:
            return lookup_response

        target: Student = lookup_response.data["record"]

        try:
            edited = self._descriptor.apply_to(target)

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        if edited.student_id != target.student_id and (
            model.has_id(edited) or model.has_archived_id(edited)
        ):
            return Response.fail(
                detail=self.MESSAGE_DUPLICATE_ID,
                error=ErrorCode.VALIDATION_FAILED,
            )

        if edited.email != target.email and (
            model.has_email(edited) or model.has_archived_email(edited)
        ):
            return Response.fail(
                detail=self.MESSAGE_DUPLICATE_EMAIL,
                error=ErrorCode.VALIDATION_FAILED,
            )

        set_response = model.set_student(target, edited)

        if not set_response.success:
            return set_response

        model.update_filtered_student_list(show_all_students)

        return CommandResult(self.MESSAGE_SUCCESS.format(edited)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditCommand):
            return NotImplemented
        return (
            self._student_id == other._student_id
            and self._descriptor == other._descriptor
        )

    def __repr__(self) -> str:
        return f"EditCommand({self._student_id}, {self._descriptor!r})"


# === delete ===


class DeleteCommand:

    COMMAND_WORD = "delete"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the students identified by their student IDs. "
        "Parameters: STUDENT_ID [STUDENT_ID]...\n"
        f"Example: {COMMAND_WORD} A0123456X A0123457Y"
    )

    MESSAGE_SUCCESS = "Deleted Student(s): {}"
    MESSAGE_NOT_FOUND = "The following IDs were not found (no students were deleted): "

    def __init__(self, student_ids: Iterable[str]):
        # keeps the order the ids were given in, minus repeats
        self._student_ids = list(dict.fromkeys(student_ids))

    @property
    def student_ids(self) -> list[str]:
        return list(self._student_ids)

    def execute(self, model: Model) -> Response:
        targets: list[Student] = []
        missing_ids = ""

        for student_id in self._student_ids:
            lookup_response = model.get_student(student_id)

            if lookup_response.success:
                targets.append(lookup_response.data["record"])
            else:
                missing_ids += student_id + " "

        if missing_ids:
            return Response.not_found(self.MESSAGE_NOT_FOUND + missing_ids)

        for target in targets:
            delete_response = model.delete_student(target)

            if not delete_response.success:
                return delete_response

        deleted = formatters.format_list_with_and(
            [f"{s.name} ({s.student_id})" for s in targets]
        )

        return CommandResult(self.MESSAGE_SUCCESS.format(deleted)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeleteCommand):
            return NotImplemented
        return self._student_ids == other._student_ids

    def __repr__(self) -> str:
        return f"DeleteCommand({self._student_ids})"


# === group ===


class GroupCommand:
    """
    Adds every listed student to one group, editing each through `EditCommand`.

    Ids that are not in the class list are collected rather than aborting the loop. If any were missing the
    command fails with all of them listed, but the students that were found stay in the group.
    """

    COMMAND_WORD = "group"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds the students with the given IDs to a group. "
        "Parameters: g/GROUP_NAME id/STUDENT_ID [id/STUDENT_ID]...\n"
        f"Example: {COMMAND_WORD} g/Group 3 id/A0123456X id/A0123456H"
    )

    MESSAGE_SUCCESS = "All students were added!"
    MESSAGE_NOT_FOUND = "The following IDs were not found (and not added to the group): "

    def __init__(self, group: Group, student_ids: Iterable[str]):
        self._group = group
        self._student_ids = list(dict.fromkeys(student_ids))

    @property
    def group(self) -> Group:
        return self._group

    @property
    def student_ids(self) -> list[str]:
        return list(self._student_ids)

    def execute(self, model: Model) -> Response:
        missing_ids = ""

        for student_id in self._student_ids:
            lookup_response = model.get_student(student_id)

            if not lookup_response.success:
                missing_ids += student_id + " "
                continue

            student: Student = lookup_response.data["record"]
            groups = set(student.groups) | {self._group}

            edit_command = EditCommand(student_id, EditStudentDescriptor(groups=groups))
            edit_response = edit_command.execute(model)

            if not edit_response.success:
                missing_ids += student_id + " "

        if missing_ids:
            logger.info("Group %s: ids not found: %s", self._group.name, missing_ids.strip())
            return Response.not_found(self.MESSAGE_NOT_FOUND + missing_ids)

        return CommandResult(self.MESSAGE_SUCCESS).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupCommand):
            return NotImplemented
        return (
            self._group == other._group
            and set(self._student_ids) == set(other._student_ids)
        )

    def __repr__(self) -> str:
        return f"GroupCommand({self._group!r}, {self._student_ids})"


# === remark ===


class RemarkCommand:

    COMMAND_WORD = "remark"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the remark of the student at the given index of the displayed list. "
        "Existing remark will be overwritten by the input; an empty remark removes it.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        f"Example: {COMMAND_WORD} 1 r/Likes to swim."
    )

    MESSAGE_ADD_REMARK_SUCCESS = "Added remark to Student: {}"
    MESSAGE_DELETE_REMARK_SUCCESS = "Removed remark from Student: {}"

    def __init__(self, index: int, remark: str):
        self._index = index
        self._remark = remark

    @property
    def index(self) -> int:
        return self._index

    @property
    def remark(self) -> str:
        return self._remark

    def execute(self, model: Model) -> Response:
        lookup_response = model.get_displayed_student(self._index)

        if not lookup_response.success:
            return lookup_response

        target: Student = lookup_response.data["record"]
        edited = target.copy_with(remark=self._remark)

        set_response = model.set_student(target, edited)

        if not set_response.success:
            return set_response

        message = (
            self.MESSAGE_ADD_REMARK_SUCCESS
            if self._remark
            else self.MESSAGE_DELETE_REMARK_SUCCESS
        )

        return CommandResult(message.format(edited)).to_response()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemarkCommand):
            return NotImplemented
        return self._index == other._index and self._remark == other._remark

    def __repr__(self) -> str:
        return f"RemarkCommand({self._index}, {self._remark!r})"
