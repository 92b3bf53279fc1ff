# models/model.py

"""
The Model is the central data object of the program and the "source of truth" for all student records.

It owns two rosters: the active class list and the archive. Each roster has a filtered view that the front end
renders. Commands never touch the rosters directly; they go through the manipulators below, which keep both
rosters sorted, enforce uniqueness, and mark the model dirty so the caller knows to persist it.

Lookups return a `Response` rather than `None` on a miss, so a caller cannot forget to handle the absent case.
Moving a student between rosters (archive/unarchive) is a single all-or-nothing mutation.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from core.response import ErrorCode, Response
from models.roster import FilteredView, Roster, StudentPredicate, show_all_students
from models.student import Grade, Student
from models.user_prefs import GuiSettings, UserPrefs

logger = logging.getLogger(__name__)


class Model:

    def __init__(
        self,
        students: Iterable[Student] | None = None,
        archived: Iterable[Student] | None = None,
        user_prefs: UserPrefs | None = None,
        starting_filter: StudentPredicate = show_all_students,
    ):
        logger.debug("Initializing model with user prefs %r", user_prefs)

        self._roster = Roster(students or [])
        self._archive = Roster(archived or [])
        Model._require_disjoint(self._roster, self._archive)
        self._user_prefs: UserPrefs = user_prefs or UserPrefs()
        self._filtered_students = FilteredView(self._roster, starting_filter)
        self._filtered_archived = FilteredView(self._archive)
        self._unsaved_changes: bool = False

    # === properties ===

    # --- core data structures ---

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def archive(self) -> Roster:
        return self._archive

    @property
    def students(self) -> list[Student]:
        return self._roster.students

    @property
    def archived_students(self) -> list[Student]:
        return self._archive.students

    # --- user prefs ---

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.gui_settings = gui_settings

    @property
    def weak_threshold(self) -> Grade:
        return self._user_prefs.weak_threshold

    # --- status markers ---

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    def mark_saved(self) -> None:
        self._unsaved_changes = False

    # === data accessors ===

    # --- membership checks ---

    def has_student(self, student: Student) -> bool:
        return self._roster.has_student(student)

    def has_id(self, student: Student) -> bool:
        return self._roster.has_id(student.student_id)

    def has_email(self, student: Student) -> bool:
        return self._roster.has_email(student.email)

    def has_archived_student(self, student: Student) -> bool:
        return self._archive.has_student(student)

    def has_archived_id(self, student: Student) -> bool:
        return self._archive.has_id(student.student_id)

    def has_archived_email(self, student: Student) -> bool:
        return self._archive.has_email(student.email)

    # --- find student by id ---

    def _find_by_id(self, student_id: str, roster: Roster, roster_name: str) -> Response:
        student = roster.find_by_id(student_id)

        if student is None:
            return Response.not_found(
                f"No student with ID {student_id} found in the {roster_name}."
            )

        return Response.succeed(
            data={
                "record": student,
            },
        )

    def get_student(self, student_id: str) -> Response:
        """
        Finds a `Student` in the active roster by student ID.

        Args:
            student_id (str): The normalized student ID to look up.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.

        Notes:
            - This method is read-only and does not raise.
        """
        return self._find_by_id(student_id, self._roster, "class list")

    def get_archived_student(self, student_id: str) -> Response:
        """
        Finds a `Student` in the archive by student ID. Same contract as `get_student()`.
        """
        return self._find_by_id(student_id, self._archive, "archive")

    def get_displayed_student(self, index: int) -> Response:
        """
        Finds the `Student` at a one-based index of the currently filtered class list.

        Returns:
            Response: "record" (Student) on success; `ErrorCode.INVALID_INDEX` if the index is out of range.
        """
        try:
            student = self._filtered_students.get(index)

        except IndexError:
            return Response.fail(
                detail="The student index provided is invalid.",
                error=ErrorCode.INVALID_INDEX,
            )

        else:
            return Response.succeed(
                data={
                    "record": student,
                },
            )

    # --- derived views ---

    def get_weak(self) -> list[Student]:
        threshold = self.weak_threshold
        return [s for s in self._roster if s.is_weak(threshold)]

    def is_weak(self, student: Student) -> bool:
        return student.is_weak(self.weak_threshold)

    def get_grade_distribution(self) -> dict[Grade, int]:
        counts = Counter(s.grade for s in self._roster)
        return {grade: counts.get(grade, 0) for grade in Grade}

    # --- filtered views ---

    @property
    def filtered_students(self) -> list[Student]:
        return self._filtered_students.students

    @property
    def filtered_archived(self) -> list[Student]:
        return self._filtered_archived.students

    def update_filtered_student_list(self, predicate: StudentPredicate) -> None:
        self._filtered_students.set_predicate(predicate)

    def update_filtered_archived_list(self, predicate: StudentPredicate) -> None:
        self._filtered_archived.set_predicate(predicate)

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        """
        Marks the model as having unsaved changes.
        """
        self._unsaved_changes = True

    @staticmethod
    def _require_disjoint(roster: Roster, archive: Roster) -> None:
        """
        Raises:
            ValueError: If any active student shares an ID or email with an archived student.
        """
        for student in roster:
            archive.require_unique(student)

    # --- active roster ---

    def add_student(self, student: Student) -> Response:
        """
        Adds a `Student` to the active roster and resets the class list filter to show everyone.

        Args:
            student (Student): The student to be added.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added.
                    - False if another student with the same ID or email is already in the class list.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if the ID or email is not unique.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.

        Notes:
            - This method mutates `Model` state and calls `_mark_dirty()` if successful.
            - The roster is re-sorted after insertion.
        """
        try:
            self._roster.add(student)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            self._mark_dirty()
            self.update_filtered_student_list(show_all_students)
            logger.debug("Added student %s", student.student_id)

            return Response.succeed(
                detail="Student successfully added to the class list.",
                data={
                    "record": student,
                },
            )

    def set_student(self, target: Student, edited: Student) -> Response:
        """
        Replaces `target` with `edited` in the active roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the replacement was made.
                    - False if `target` is not in the class list or `edited` collides with another student.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if `target` is absent.
                    - `ErrorCode.VALIDATION_FAILED` if the ID or email of `edited` belongs to another student.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The `edited` student.

        Notes:
            - This method mutates `Model` state and calls `_mark_dirty()` if successful.
            - Re-applying the same edit (`set_student(edited, edited)`) leaves the roster unchanged.
        """
        try:
            self._roster.set(target, edited)

        except KeyError:
            return Response.not_found(
                f"No matching student could be found for editing: {target.student_id}."
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            self._mark_dirty()
            logger.debug("Replaced student %s", target.student_id)

            return Response.succeed(
                detail="Student successfully updated.",
                data={
                    "record": edited,
                },
            )

    def delete_student(self, target: Student) -> Response:
        try:
            self._roster.remove(target)

        except KeyError:
            return Response.not_found(
                f"No matching student could be found for deletion: {target.student_id}."
            )

        else:
            self._mark_dirty()
            logger.debug("Deleted student %s", target.student_id)

            return Response.succeed(detail="Student successfully removed from the class list.")

    # --- archive roster ---

    def set_archived_student(self, target: Student, edited: Student) -> Response:
        try:
            self._archive.set(target, edited)

        except KeyError:
            return Response.not_found(
                f"No matching archived student could be found for editing: {target.student_id}."
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            self._mark_dirty()

            return Response.succeed(
                detail="Archived student successfully updated.",
                data={
                    "record": edited,
                },
            )

    def delete_archived_student(self, target: Student) -> Response:
        try:
            self._archive.remove(target)

        except KeyError:
            return Response.not_found(
                f"No matching archived student could be found for deletion: {target.student_id}."
            )

        else:
            self._mark_dirty()
            logger.debug("Deleted archived student %s", target.student_id)

            return Response.succeed(detail="Student successfully removed from the archive.")

    # --- moving between rosters ---

    def _move(self, student: Student, source: Roster, destination: Roster) -> None:
        """
        Removes `student` from `source` and inserts it into `destination` as one mutation.

        Both preconditions are checked before either roster is touched, and the removal is undone if the
        insertion fails, so the student always ends up in exactly one of the two rosters.

        Raises:
            KeyError: If `student` is not in `source`.
            ValueError: If `destination` already holds a student with the same ID or email.
        """
        if not source.has_student(student):
            raise KeyError(f"No matching student found: {student.student_id}")

        destination.require_unique(student)

        source.remove(student)
        try:
            destination.add(student)
        except Exception:
            source.add(student)
            raise

    def archive_student(self, student: Student) -> Response:
        """
        Moves a `Student` from the class list to the archive.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student now sits in the archive and no longer in the class list.
                    - False if the student is not in the class list or clashes with an archived record.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student is not in the class list.
                    - `ErrorCode.VALIDATION_FAILED` if the archive already has the same ID or email.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The archived `Student` object.

        Notes:
            - All-or-nothing: on failure neither roster is modified.
        """
        try:
            self._move(student, self._roster, self._archive)

        except KeyError:
            return Response.not_found(
                f"No matching student could be found for archiving: {student.student_id}."
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            self._mark_dirty()
            logger.info("Archived student %s", student.student_id)

            return Response.succeed(
                detail="Student successfully archived.",
                data={
                    "record": student,
                },
            )

    def unarchive_student(self, student: Student) -> Response:
        """
        Moves a `Student` from the archive back to the class list. Inverse of `archive_student()`.

        Notes:
            - All-or-nothing: on failure neither roster is modified.
            - On success the class list filter is reset to show everyone.
        """
        try:
            self._move(student, self._archive, self._roster)

        except KeyError:
            return Response.not_found(
                f"No matching student could be found in the archive: {student.student_id}."
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            self._mark_dirty()
            self.update_filtered_student_list(show_all_students)
            logger.info("Unarchived student %s", student.student_id)

            return Response.succeed(
                detail="Student successfully unarchived.",
                data={
                    "record": student,
                },
            )

    # --- bulk and settings ---

    def reset_data(
        self, students: Iterable[Student], archived: Iterable[Student]
    ) -> Response:
        """
        Replaces the contents of both rosters.

        Returns:
            Response: `ErrorCode.VALIDATION_FAILED` if either collection breaks the uniqueness invariant,
            in which case neither roster is modified.
        """
        try:
            staged_roster = Roster(students)
            staged_archive = Roster(archived)
            Model._require_disjoint(staged_roster, staged_archive)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            self._roster.reset(staged_roster)
            self._archive.reset(staged_archive)
            self._mark_dirty()

            return Response.succeed(detail="Student records successfully replaced.")

    def set_weak_threshold(self, grade: Grade) -> Response:
        if grade == self.weak_threshold:
            return Response.succeed(
                detail=f"The weak threshold is already {grade.value}. No changes made.",
            )

        self._user_prefs.weak_threshold = grade
        self._mark_dirty()

        return Response.succeed(
            detail=f"Weak threshold successfully updated to: {grade.value}.",
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._roster == other._roster
            and self._archive == other._archive
            and self._user_prefs == other._user_prefs
            and self.filtered_students == other.filtered_students
            and self.filtered_archived == other.filtered_archived
        )

    def __repr__(self) -> str:
        return f"Model({len(self._roster)} active, {len(self._archive)} archived)"
