# models/storage.py

"""
Reads and writes the two student rosters and the user preferences as JSON.

The active class list is written to `students.json` and the archive to `archive.json`; each file holds a list
of student dictionaries produced by `Student.to_dict()`. Preferences go to their own file so a corrupt roster
never costs the user their window layout, and vice versa.
"""

from __future__ import annotations

import json
import logging
import os
import traceback
from typing import Any

from core.response import ErrorCode, Response
from core.utils import read_json, write_json
from models.model import Model
from models.student import Student
from models.user_prefs import UserPrefs

logger = logging.getLogger(__name__)


class Storage:

    def __init__(self, students_file_path: str, archive_file_path: str, prefs_file_path: str):
        self._students_file_path = students_file_path
        self._archive_file_path = archive_file_path
        self._prefs_file_path = prefs_file_path

    @classmethod
    def from_prefs(cls, user_prefs: UserPrefs, prefs_file_path: str) -> Storage:
        return cls(
            user_prefs.students_file_path,
            user_prefs.archive_file_path,
            prefs_file_path,
        )

    # === properties ===

    @property
    def students_file_path(self) -> str:
        return self._students_file_path

    @property
    def archive_file_path(self) -> str:
        return self._archive_file_path

    @property
    def prefs_file_path(self) -> str:
        return self._prefs_file_path

    # === persistence and import ===

    def read_rosters(self) -> Response:
        """
        Loads previously serialized students from both roster files.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if both files were read, or are missing (a missing file is an empty roster).
                    - False for JSON deserialization issues or invalid records.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if a file is not valid JSON or not a list.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record fails validation.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if a record lacks a required key.
                    - `ErrorCode.INTERNAL_ERROR` if a file cannot be read.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "students" (list[Student]): The active roster.
                        - "archived" (list[Student]): The archived roster.

        Notes:
            - This method fails fast: a single bad record aborts the whole read.
        """

        def load_students(file_path: str) -> list[Student]:
            if not os.path.exists(file_path):
                logger.info("Data file %s not found, starting with an empty roster.", file_path)
                return []

            data = read_json(file_path)
            if not isinstance(data, list):
                raise TypeError(f"Expected {file_path} to contain a list.")

            return [self._deserialize(record, file_path) for record in data]

        try:
            students = load_students(self._students_file_path)
            archived = load_students(self._archive_file_path)

        except json.JSONDecodeError as e:
            return Response.fail(
                detail=f"Failed to parse JSON data: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except TypeError as e:
            return Response.fail(
                detail=f"Malformed data file: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except KeyError as e:
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read data from disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
                trace=traceback.format_exc(),
            )

        else:
            return Response.succeed(
                data={
                    "students": students,
                    "archived": archived,
                },
            )

    def _deserialize(self, record: Any, file_path: str) -> Student:
        if not isinstance(record, dict):
            raise TypeError(f"Expected student records in {file_path} to be objects: {record}")

        try:
            return Student.from_dict(record)
        except (ValueError, AttributeError, TypeError) as e:
            # wrong JSON types surface from the validators as AttributeError or TypeError
            raise ValueError(f"Failed to deserialize student in {file_path}: {record} - {e}")

    def load_model(self, user_prefs: UserPrefs, **model_kwargs: Any) -> Response:
        """
        Reads both rosters and builds a `Model` from them.

        Returns:
            Response: "model" (Model) on success; otherwise the failure from `read_rosters()`, or
            `ErrorCode.VALIDATION_FAILED` if an ID or email repeats within a roster or across both.
        """
        read_response = self.read_rosters()

        if not read_response.success:
            return read_response

        try:
            model = Model(
                read_response.data["students"],
                read_response.data["archived"],
                user_prefs,
                **model_kwargs,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            return Response.succeed(data={"model": model})

    def save_model(self, model: Model) -> Response:
        """
        Serializes both rosters and the model's preferences to disk.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every file was written.
                    - False if any write fails.
                - detail (str | None):
                    - On success: "Student records successfully saved to disk."
                    - On failure: Description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` if an OSError is raised.

        Notes:
            - Calls `model.mark_saved()` only if every write succeeds.
        """
        try:
            write_json(self._students_file_path, [s.to_dict() for s in model.students])
            write_json(
                self._archive_file_path, [s.to_dict() for s in model.archived_students]
            )
            write_json(self._prefs_file_path, model.user_prefs.to_dict())

        except OSError as e:
            logger.warning("Failed to save student records: %s", e)
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
                trace=traceback.format_exc(),
            )

        else:
            model.mark_saved()
            logger.debug(
                "Saved %d active and %d archived students",
                len(model.students),
                len(model.archived_students),
            )

            return Response.succeed(detail="Student records successfully saved to disk.")
