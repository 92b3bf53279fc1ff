# core/config.py

"""
Application-level configuration, read once at startup from `config.json`.

The configuration file is optional; any key that is absent falls back to its default. Values that are
stored here describe how the program runs (log level, where preferences live, which view to open with),
whereas per-user data such as window geometry and roster file locations live in `UserPrefs`.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from core.logs import parse_level
from core.response import ErrorCode, Response
from core.utils import read_json, write_json

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"
DEFAULT_PREFS_FILE = "preferences.json"

STARTING_VIEWS = ("all", "weak")


class Config:

    def __init__(
        self,
        log_level: str = "INFO",
        user_prefs_file_path: str = DEFAULT_PREFS_FILE,
        starting_view: str = "all",
    ):
        # all fields use property setters for validation
        self.log_level = log_level
        self.user_prefs_file_path = user_prefs_file_path
        self.starting_view = starting_view

    # === properties ===

    @property
    def log_level(self) -> str:
        return self._log_level

    @log_level.setter
    def log_level(self, log_level: str) -> None:
        parse_level(log_level)
        self._log_level = log_level.strip().upper()

    @property
    def user_prefs_file_path(self) -> str:
        return self._user_prefs_file_path

    @user_prefs_file_path.setter
    def user_prefs_file_path(self, path: str) -> None:
        if not path or not path.strip():
            raise ValueError("Preferences file path cannot be blank.")
        self._user_prefs_file_path = path.strip()

    @property
    def starting_view(self) -> str:
        return self._starting_view

    @starting_view.setter
    def starting_view(self, starting_view: str) -> None:
        starting_view = starting_view.strip().lower()
        if starting_view not in STARTING_VIEWS:
            raise ValueError(
                f"Starting view must be one of {', '.join(STARTING_VIEWS)}, got '{starting_view}'."
            )
        self._starting_view = starting_view

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "log_level": self._log_level,
            "user_prefs_file_path": self._user_prefs_file_path,
            "starting_view": self._starting_view,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        return cls(
            log_level=data.get("log_level", "INFO"),
            user_prefs_file_path=data.get("user_prefs_file_path", DEFAULT_PREFS_FILE),
            starting_view=data.get("starting_view", "all"),
        )

    @classmethod
    def load(cls, file_path: str) -> Response:
        """
        Reads a `Config` from disk, falling back to defaults if the file does not exist.

        Args:
            file_path (str): Path to the JSON configuration file.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read, or was missing and defaults were used.
                    - False if the file exists but is malformed.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the file is not valid JSON or not an object.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a value fails validation.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "config" (Config): The loaded configuration.
        """
        if not os.path.exists(file_path):
            logger.info("Config file %s not found, using defaults.", file_path)
            return Response.succeed(data={"config": cls()})

        try:
            data = read_json(file_path)

            if not isinstance(data, dict):
                raise TypeError(f"Expected {file_path} to contain an object.")

            config = cls.from_dict(data)

        except (json.JSONDecodeError, TypeError) as e:
            return Response.fail(
                detail=f"Failed to parse config file: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid config value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read config file: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(data={"config": config})

    def save(self, file_path: str) -> Response:
        try:
            write_json(file_path, self.to_dict())

        except OSError as e:
            return Response.fail(
                detail=f"Failed to write config file: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(detail="Config successfully saved to disk.")

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Config({self._log_level}, {self._user_prefs_file_path}, {self._starting_view})"
