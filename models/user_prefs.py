# models/user_prefs.py

"""
Per-user preferences that persist across sessions.

Holds the terminal window geometry used by the front end (`GuiSettings`), the locations of the active and
archived roster files, and the grade threshold at or below which a student is classified as weak.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from core.response import ErrorCode, Response
from core.utils import read_json, write_json
from models.student import Grade

logger = logging.getLogger(__name__)

DEFAULT_STUDENTS_FILE = "students.json"
DEFAULT_ARCHIVE_FILE = "archive.json"
DEFAULT_WEAK_THRESHOLD = Grade.C


class GuiSettings:

    MIN_WIDTH = 40
    MIN_HEIGHT = 10

    def __init__(
        self,
        width: int = 80,
        height: int = 24,
        x: int | None = None,
        y: int | None = None,
    ):
        if width < GuiSettings.MIN_WIDTH or height < GuiSettings.MIN_HEIGHT:
            raise ValueError(
                f"Window must be at least {GuiSettings.MIN_WIDTH}x{GuiSettings.MIN_HEIGHT}, got {width}x{height}."
            )

        self._width = width
        self._height = height
        self._x = x
        self._y = y

    # === properties ===

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def position(self) -> tuple[int, int] | None:
        if self._x is None or self._y is None:
            return None
        return (self._x, self._y)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "width": self._width,
            "height": self._height,
            "x": self._x,
            "y": self._y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GuiSettings:
        return cls(
            width=int(data.get("width", 80)),
            height=int(data.get("height", 24)),
            x=data.get("x"),
            y=data.get("y"),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GuiSettings):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"GuiSettings({self._width}x{self._height} at {self.position})"


class UserPrefs:

    def __init__(
        self,
        students_file_path: str = DEFAULT_STUDENTS_FILE,
        archive_file_path: str = DEFAULT_ARCHIVE_FILE,
        gui_settings: GuiSettings | None = None,
        weak_threshold: Grade | str = DEFAULT_WEAK_THRESHOLD,
    ):
        self._students_file_path = students_file_path
        self._archive_file_path = archive_file_path
        self._gui_settings = gui_settings or GuiSettings()
        self._weak_threshold = Grade.from_input(weak_threshold)

    @classmethod
    def in_directory(cls, data_dir: str) -> UserPrefs:
        return cls(
            students_file_path=os.path.join(data_dir, DEFAULT_STUDENTS_FILE),
            archive_file_path=os.path.join(data_dir, DEFAULT_ARCHIVE_FILE),
        )

    # === properties ===

    @property
    def students_file_path(self) -> str:
        return self._students_file_path

    @students_file_path.setter
    def students_file_path(self, path: str) -> None:
        self._students_file_path = path

    @property
    def archive_file_path(self) -> str:
        return self._archive_file_path

    @archive_file_path.setter
    def archive_file_path(self, path: str) -> None:
        self._archive_file_path = path

    @property
    def gui_settings(self) -> GuiSettings:
        return self._gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._gui_settings = gui_settings

    @property
    def weak_threshold(self) -> Grade:
        return self._weak_threshold

    @weak_threshold.setter
    def weak_threshold(self, grade: Grade | str) -> None:
        self._weak_threshold = Grade.from_input(grade)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "students_file_path": self._students_file_path,
            "archive_file_path": self._archive_file_path,
            "gui_settings": self._gui_settings.to_dict(),
            "weak_threshold": self._weak_threshold.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserPrefs:
        return cls(
            students_file_path=data.get("students_file_path", DEFAULT_STUDENTS_FILE),
            archive_file_path=data.get("archive_file_path", DEFAULT_ARCHIVE_FILE),
            gui_settings=GuiSettings.from_dict(data.get("gui_settings", {})),
            weak_threshold=data.get("weak_threshold", DEFAULT_WEAK_THRESHOLD),
        )

    @classmethod
    def load(cls, file_path: str, default: UserPrefs | None = None) -> Response:
        """
        Reads `UserPrefs` from disk.

        Args:
            file_path (str): Path to the JSON preferences file.
            default (UserPrefs | None): Preferences to use if the file does not exist.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read, or was missing and the default was used.
                    - False if the file exists but cannot be parsed or validated.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the file is not a JSON object.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a stored value is invalid.
                    - `ErrorCode.INTERNAL_ERROR` if the file cannot be read.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "prefs" (UserPrefs): The loaded preferences.
        """
        if not os.path.exists(file_path):
            logger.info("Preferences file %s not found, using defaults.", file_path)
            return Response.succeed(data={"prefs": default or cls()})

        try:
            data = read_json(file_path)

            if not isinstance(data, dict):
                raise TypeError(f"Expected {file_path} to contain an object.")

            prefs = cls.from_dict(data)

        except (json.JSONDecodeError, TypeError) as e:
            return Response.fail(
                detail=f"Failed to parse preferences: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid preference value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read preferences: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(data={"prefs": prefs})

    def save(self, file_path: str) -> Response:
        try:
            write_json(file_path, self.to_dict())

        except OSError as e:
            return Response.fail(
                detail=f"Failed to write preferences: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(detail="Preferences successfully saved to disk.")

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserPrefs):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"UserPrefs({self._students_file_path}, {self._archive_file_path}, {self._weak_threshold.value})"
