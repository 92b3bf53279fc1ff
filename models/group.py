# models/group.py

"""
Represents a named tutorial or project group that students can belong to.

Groups are plain value objects: two `Group` instances with the same name are equal and hash alike,
so a student's memberships can be held in a set and unioned without duplicates.
"""

from __future__ import annotations

import re


class Group:

    MESSAGE_CONSTRAINTS = (
        "Group names should only contain alphanumeric characters and spaces, and should not be blank."
    )

    def __init__(self, name: str):
        self._name = Group.validate_name_input(name)

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __lt__(self, other: Group) -> bool:
        return self._name < other._name

    def __repr__(self) -> str:
        return f"Group({self._name})"

    def __str__(self) -> str:
        return f"[{self._name}]"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: str) -> str:
        """
        Validates and normalizes a group name.

        Collapses runs of internal whitespace to a single space and strips the ends, so that
        "Group  99 " and "Group 99" name the same group.

        Raises:
            ValueError: If the name is blank or contains characters other than letters, digits, and spaces.
        """
        name = " ".join(name.split())
        if not re.fullmatch(r"[A-Za-z0-9][A-Za-z0-9 ]*", name):
            raise ValueError(Group.MESSAGE_CONSTRAINTS)
        return name

    @staticmethod
    def is_valid_name(name: str) -> bool:
        try:
            Group.validate_name_input(name)
        except ValueError:
            return False
        return True
