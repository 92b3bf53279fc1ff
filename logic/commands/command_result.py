# logic/commands/command_result.py

"""
The outcome of a successfully executed command.

Carries the feedback text shown to the user and the flags that tell the front end what else to do:
open the help listing, exit, pop up the grade summary (with the distribution attached), or show the archive.
"""

from __future__ import annotations

from typing import Any

from core.response import Response


class CommandResult:

    def __init__(
        self,
        feedback_to_user: str,
        show_help: bool = False,
        exit: bool = False,
        show_summary: bool = False,
        show_archived: bool = False,
        attachment: Any = None,
    ):
        self._feedback_to_user = feedback_to_user
        self._show_help = show_help
        self._exit = exit
        self._show_summary = show_summary
        self._show_archived = show_archived
        self._attachment = attachment

    # === properties ===

    @property
    def feedback_to_user(self) -> str:
        return self._feedback_to_user

    @property
    def show_help(self) -> bool:
        return self._show_help

    @property
    def exit(self) -> bool:
        return self._exit

    @property
    def show_summary(self) -> bool:
        return self._show_summary

    @property
    def show_archived(self) -> bool:
        return self._show_archived

    @property
    def attachment(self) -> Any:
        return self._attachment

    def to_response(self) -> Response:
        return Response.succeed(
            detail=self._feedback_to_user,
            data={
                "result": self,
            },
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandResult):
            return NotImplemented
        return (
            self._feedback_to_user == other._feedback_to_user
            and self._show_help == other._show_help
            and self._exit == other._exit
            and self._show_summary == other._show_summary
            and self._show_archived == other._show_archived
            and self._attachment == other._attachment
        )

    def __repr__(self) -> str:
        return (
            f"CommandResult({self._feedback_to_user!r}, help={self._show_help}, exit={self._exit}, "
            f"summary={self._show_summary}, archived={self._show_archived})"
        )
