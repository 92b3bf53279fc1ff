# models/student.py

"""
Represents a student on the course roster.

Stores core identifying information such as the student ID, name, and email, along with the
student's current grade, the groups they belong to, and a free-text remark.

Includes functionality for:
- Validating and normalizing student ID, name, email, and grade input
- Classifying a student as weak against a configurable grade threshold
- Serializing to and from JSON-compatible dictionaries
- Producing edited copies via `copy_with()`

Students are immutable. Every edit produces a new `Student` that replaces the old one in its roster,
which keeps the roster's uniqueness and ordering checks in one place.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable

from models.group import Group


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    D_PLUS = "D+"
    D = "D"
    F = "F"

    @property
    def rank(self) -> int:
        # 0 is the best grade
        return list(Grade).index(self)

    @classmethod
    def from_input(cls, grade: Grade | str) -> Grade:
        if isinstance(grade, Grade):
            return grade

        try:
            return cls(grade.strip().upper())
        except (ValueError, AttributeError):
            raise ValueError(
                f"Grade must be one of {', '.join(g.value for g in cls)}, got '{grade}'."
            )


class Student:

    def __init__(
        self,
        student_id: str,
        name: str,
        email: str,
        grade: Grade | str,
        groups: Iterable[Group] | None = None,
        remark: str = "",
    ):
        self._student_id: str = Student.validate_student_id_input(student_id)
        self._name: str = Student.validate_name_input(name)
        self._email: str = Student.validate_email_input(email)
        self._grade: Grade = Grade.from_input(grade)
        self._groups: frozenset[Group] = frozenset(groups or ())
        self._remark: str = Student.validate_remark_input(remark)

    # === properties ===

    @property
    def id(self) -> str:
        return self._student_id

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def grade(self) -> Grade:
        return self._grade

    @property
    def groups(self) -> frozenset[Group]:
        return self._groups

    @property
    def sorted_groups(self) -> list[Group]:
        return sorted(self._groups)

    @property
    def remark(self) -> str:
        return self._remark

    @property
    def sort_key(self) -> str:
        return self._student_id

    def is_weak(self, threshold: Grade) -> bool:
        return self._grade.rank >= threshold.rank

    def is_same_student(self, other: Student) -> bool:
        return self._student_id == other._student_id

    def copy_with(
        self,
        student_id: str | None = None,
        name: str | None = None,
        email: str | None = None,
        grade: Grade | str | None = None,
        groups: Iterable[Group] | None = None,
        remark: str | None = None,
    ) -> Student:
        """
        Returns a new `Student` with the given fields replaced and every other field carried over.

        Raises:
            ValueError: If any replacement value fails validation.
        """
        return Student(
            student_id=student_id if student_id is not None else self._student_id,
            name=name if name is not None else self._name,
            email=email if email is not None else self._email,
            grade=grade if grade is not None else self._grade,
            groups=groups if groups is not None else self._groups,
            remark=remark if remark is not None else self._remark,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "student_id": self._student_id,
            "name": self._name,
            "email": self._email,
            "grade": self._grade.value,
            "groups": [group.name for group in self.sorted_groups],
            "remark": self._remark,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Student:
        return cls(
            student_id=data["student_id"],
            name=data["name"],
            email=data["email"],
            grade=data["grade"],
            groups=[Group(name) for name in data.get("groups", [])],
            remark=data.get("remark", ""),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (
            self._student_id == other._student_id
            and self._name == other._name
            and self._email == other._email
            and self._grade == other._grade
            and self._groups == other._groups
            and self._remark == other._remark
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._student_id,
                self._name,
                self._email,
                self._grade,
                self._groups,
                self._remark,
            )
        )

    def __repr__(self) -> str:
        return f"Student({self._student_id}, {self._name}, {self._email}, {self._grade.value})"

    def __str__(self) -> str:
        groups = " ".join(str(g) for g in self.sorted_groups)
        return (
            f"STUDENT: name: {self._name}, id: {self._student_id}, email: {self._email}, "
            f"grade: {self._grade.value}, groups: {groups}"
        )

    # === data validators ===

    @staticmethod
    def validate_student_id_input(student_id: str) -> str:
        """
        Validates and normalizes a student ID.

        Normalizes the input by stripping whitespace and converting to uppercase.
        Ensures the ID is the letter 'A', followed by exactly seven digits, followed by one letter
        (e.g. A0123456X).

        Raises:
            ValueError: If the ID does not conform to the expected format.
        """
        student_id = student_id.strip().upper()
        if not re.fullmatch(r"A\d{7}[A-Z]", student_id):
            raise ValueError(
                "Invalid input. Student ID must be 'A', seven digits, and a letter (e.g. A0123456X)."
            )
        return student_id

    @staticmethod
    def validate_name_input(name: str) -> str:
        name = " ".join(name.split())
        if not re.fullmatch(r"[A-Za-z0-9][A-Za-z0-9 ]*", name):
            raise ValueError(
                "Invalid input. Names should only contain alphanumeric characters and spaces, and should not be blank."
            )
        return name

    @staticmethod
    def validate_email_input(email: str) -> str:
        """
        Validates and normalizes a Student email address.

        Normalizes the input by stripping whitespace and converting to lowercase.
        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Args:
            email: The input email string to validate.

        Returns:
            A normalized, lowercase version of the email if valid.

        Raises:
            ValueError: If the email does not conform to the expected format.
        """
        email = email.strip().lower()
        if not re.fullmatch(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", email):
            raise ValueError(
                "Invalid input. Email must be a valid address with one @ and a domain."
            )
        return email

    @staticmethod
    def validate_remark_input(remark: str) -> str:
        # every string is a valid remark, including the empty string
        if not isinstance(remark, str):
            raise TypeError(f"Remark must be a string, got {type(remark).__name__}.")
        return remark
