# logic/logic.py

"""
The façade the front end talks to: parse a line, execute it against the Model, and persist the result.
"""

from __future__ import annotations

import logging

from core.response import ErrorCode, Response
from logic.parser import ParseError, parse_command
from models.model import Model
from models.storage import Storage
from models.student import Student
from models.user_prefs import GuiSettings

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_FORMAT = "Could not save data due to the following error: {}"


class Logic:

    def __init__(self, model: Model, storage: Storage | None = None):
        self._model = model
        self._storage = storage

    # === properties ===

    @property
    def model(self) -> Model:
        return self._model

    @property
    def filtered_students(self) -> list[Student]:
        return self._model.filtered_students

    @property
    def filtered_archived(self) -> list[Student]:
        return self._model.filtered_archived

    @property
    def gui_settings(self) -> GuiSettings:
        return self._model.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._model.gui_settings = gui_settings

    # === command execution ===

    def execute(self, command_text: str) -> Response:
        """
        Executes one line of user input.

        Args:
            command_text (str): The command as entered by the user.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the command parsed, executed, and any changes were saved.
                    - False otherwise.
                - detail (str | None):
                    - The user-facing feedback or error message, verbatim.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the text could not be parsed.
                    - The command's own error code if execution failed.
                    - `ErrorCode.INTERNAL_ERROR` if the changes could not be saved.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "result" (CommandResult): The outcome of the command.

        Notes:
            - Parse errors never reach the Model.
            - The model is saved whenever it has unsaved changes after execution, including after a
              command that failed partway through having already changed some records.
        """
        logger.info("[USER COMMAND] %s", command_text)

        try:
            command = parse_command(command_text)

        except ParseError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INVALID_INPUT,
            )

        response = command.execute(self._model)

        if not response.success:
            logger.info("Command failed: %s", response.detail)

        if self._storage is not None and self._model.has_unsaved_changes:
            save_response = self._storage.save_model(self._model)

            if not save_response.success:
                return Response.fail(
                    detail=FILE_OPS_ERROR_FORMAT.format(save_response.detail),
                    error=ErrorCode.INTERNAL_ERROR,
                    trace=save_response.trace,
                )

        return response

    def save(self) -> Response:
        if self._storage is None:
            return Response.succeed(detail="No storage configured. Nothing saved.")

        return self._storage.save_model(self._model)
