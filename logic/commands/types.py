# logic/commands/types.py

"""
Holds the Command union and the registry of command classes, keyed by command word.
"""

from typing import Union

from .archive_commands import ArchiveCommand, ListArchiveCommand, UnarchiveCommand
from .student_commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    GroupCommand,
    RemarkCommand,
)
from .view_commands import (
    ClearCommand,
    ConfigCommand,
    ExitCommand,
    FindCommand,
    FocusCommand,
    HelpCommand,
    ListCommand,
    SummaryCommand,
    WeakCommand,
)

Command = Union[
    AddCommand,
    EditCommand,
    DeleteCommand,
    GroupCommand,
    RemarkCommand,
    ArchiveCommand,
    UnarchiveCommand,
    ListArchiveCommand,
    FindCommand,
    ListCommand,
    WeakCommand,
    FocusCommand,
    SummaryCommand,
    ConfigCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
]

COMMAND_TYPES: dict[str, type] = {
    command_type.COMMAND_WORD: command_type
    for command_type in (
        AddCommand,
        EditCommand,
        DeleteCommand,
        GroupCommand,
        RemarkCommand,
        ArchiveCommand,
        UnarchiveCommand,
        ListArchiveCommand,
        FindCommand,
        ListCommand,
        WeakCommand,
        FocusCommand,
        SummaryCommand,
        ConfigCommand,
        ClearCommand,
        HelpCommand,
        ExitCommand,
    )
}
