# models/roster.py

"""
An ordered collection of `Student` records, unique by student ID and by email.

The Model owns two rosters: the active class list and the archive. A roster enforces its own uniqueness
invariant and re-sorts after every insert, replacement, or reset, so iteration always follows the
comparator (ascending student ID). Because IDs are unique, the order is total and repeated sorts are stable.

`FilteredView` is the read side: a predicate-restricted projection of a roster that is recomputed on every
read, so it never lags behind the roster or the current predicate.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from core.utils import normalize
from models.student import Student

StudentPredicate = Callable[[Student], bool]


def show_all_students(student: Student) -> bool:
    return True


class Roster:

    def __init__(self, students: Iterable[Student] | None = None):
        self._students: list[Student] = []
        if students is not None:
            self.reset(students)

    # === data accessors ===

    @property
    def students(self) -> list[Student]:
        return list(self._students)

    def has_student(self, student: Student) -> bool:
        return student in self._students

    def has_id(self, student_id: str) -> bool:
        return any(s.student_id == student_id for s in self._students)

    def has_email(self, email: str) -> bool:
        normalized = normalize(email)
        return any(s.email == normalized for s in self._students)

    def find_by_id(self, student_id: str) -> Student | None:
        return next((s for s in self._students if s.student_id == student_id), None)

    # === data manipulators ===

    def add(self, student: Student) -> None:
        """
        Inserts a student and re-sorts the roster.

        Raises:
            ValueError: If another student already has the same ID or email.
        """
        self.require_unique(student)
        self._students.append(student)
        self.sort()

    def set(self, target: Student, edited: Student) -> None:
        """
        Replaces `target` with `edited` in the same logical slot and re-sorts the roster.

        Raises:
            KeyError: If `target` is not in the roster.
            ValueError: If `edited` collides with the ID or email of any student other than `target`.
        """
        try:
            index = self._students.index(target)
        except ValueError:
            raise KeyError(f"No matching student found: {target.student_id}")

        self.require_unique(edited, ignore=self._students[index])
        self._students[index] = edited
        self.sort()

    def remove(self, target: Student) -> None:
        """
        Raises:
            KeyError: If `target` is not in the roster.
        """
        try:
            self._students.remove(target)
        except ValueError:
            raise KeyError(f"No matching student found: {target.student_id}")

    def reset(self, students: Iterable[Student]) -> None:
        """
        Replaces the entire contents of the roster.

        Raises:
            ValueError: If the incoming students contain duplicate IDs or emails. The roster is left unchanged.
        """
        staged = Roster()
        for student in students:
            staged.require_unique(student)
            staged._students.append(student)

        self._students = staged._students
        self.sort()

    def sort(self) -> None:
        self._students.sort(key=lambda s: s.sort_key)

    # === data validators ===

    def require_unique(self, student: Student, ignore: Student | None = None) -> None:
        """
        Validates that no student other than `ignore` shares the given student's ID or email.

        Raises:
            ValueError: If a conflicting student exists.
        """
        for existing in self._students:
            if ignore is not None and existing is ignore:
                continue

            if existing.student_id == student.student_id:
                raise ValueError(
                    f"A student with the ID '{student.student_id}' already exists."
                )

            if existing.email == student.email:
                raise ValueError(
                    f"A student with the email '{student.email}' already exists."
                )

    # === dunder methods ===

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    def __len__(self) -> int:
        return len(self._students)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        return self._students == other._students

    def __repr__(self) -> str:
        return f"Roster({len(self._students)} students)"


class FilteredView:

    def __init__(self, roster: Roster, predicate: StudentPredicate = show_all_students):
        self._roster = roster
        self._predicate = predicate

    @property
    def predicate(self) -> StudentPredicate:
        return self._predicate

    def set_predicate(self, predicate: StudentPredicate) -> None:
        self._predicate = predicate

    @property
    def students(self) -> list[Student]:
        return [s for s in self._roster if self._predicate(s)]

    def get(self, index: int) -> Student:
        """
        Returns the student at a one-based display index.

        Raises:
            IndexError: If the index is outside the current projection.
        """
        students = self.students
        if index < 1 or index > len(students):
            raise IndexError(f"Index {index} is outside the displayed list of {len(students)}.")
        return students[index - 1]

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def __len__(self) -> int:
        return len(self.students)
