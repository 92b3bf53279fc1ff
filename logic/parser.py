# logic/parser.py

"""
Turns a line of user input into a Command.

Input is a command word followed by arguments. Most arguments are introduced by a prefix such as `n/` or
`id/`; a prefix only counts when it starts the input or follows whitespace, so an email like
`tim@ex.com` never triggers the `e/` prefix. Text before the first prefix is the preamble.

Every problem with the text is reported by raising `ParseError`. The parser never touches the Model,
so a parse failure cannot change any state.
"""

from __future__ import annotations

import re
from typing import Iterable

from logic.commands.archive_commands import (
    ArchiveCommand,
    ListArchiveCommand,
    UnarchiveCommand,
)
from logic.commands.student_commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditStudentDescriptor,
    GroupCommand,
    RemarkCommand,
)
from logic.commands.types import Command
from logic.commands.view_commands import (
    ClearCommand,
    ConfigCommand,
    ExitCommand,
    FindCommand,
    FocusCommand,
    HelpCommand,
    ListCommand,
    NameContainsKeywordsPredicate,
    SummaryCommand,
    WeakCommand,
)
from models.group import Group
from models.student import Grade, Student

PREFIX_STUDENT_ID = "id/"
PREFIX_NAME = "n/"
PREFIX_EMAIL = "e/"
PREFIX_GRADE = "gd/"
PREFIX_GROUP = "g/"
PREFIX_REMARK = "r/"

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_DUPLICATE_PREFIXES = "Multiple values specified for the following single-valued field(s): {}"


class ParseError(ValueError):
    pass


# === tokenizing ===


class ArgumentMultimap:
    """
    Maps each prefix to every value given for it, in input order, plus the preamble.
    """

    def __init__(self, preamble: str, values: dict[str, list[str]]):
        self._preamble = preamble
        self._values = values

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: str) -> str | None:
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: str) -> bool:
        return prefix in self._values

    def verify_no_duplicate_prefixes(self, *prefixes: str) -> None:
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]

        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_PREFIXES.format(" ".join(duplicated)))


def tokenize(arguments: str, *prefixes: str) -> ArgumentMultimap:
    if not prefixes:
        return ArgumentMultimap(arguments.strip(), {})

    # longest prefixes first so "gd/" is never read as "g/"
    alternatives = "|".join(
        re.escape(p) for p in sorted(prefixes, key=len, reverse=True)
    )
    pattern = re.compile(rf"(?:^|(?<=\s))({alternatives})")

    matches = list(pattern.finditer(arguments))

    if not matches:
        return ArgumentMultimap(arguments.strip(), {})

    preamble = arguments[: matches[0].start()].strip()
    values: dict[str, list[str]] = {}

    for current, following in zip(matches, matches[1:] + [None]):
        end = following.start() if following is not None else len(arguments)
        value = arguments[current.end() : end].strip()
        values.setdefault(current.group(1), []).append(value)

    return ArgumentMultimap(preamble, values)


# === field parsers ===


def parse_student_id(text: str) -> str:
    try:
        return Student.validate_student_id_input(text)
    except ValueError as e:
        raise ParseError(str(e))


def parse_student_ids(texts: Iterable[str]) -> list[str]:
    return [parse_student_id(t) for t in texts]


def parse_index(text: str) -> int:
    text = text.strip()

    # ASCII digits only
    if not (text.isascii() and text.isdecimal()) or int(text) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)

    return int(text)


def parse_name(text: str) -> str:
    try:
        return Student.validate_name_input(text)
    except ValueError as e:
        raise ParseError(str(e))


def parse_email(text: str) -> str:
    try:
        return Student.validate_email_input(text)
    except ValueError as e:
        raise ParseError(str(e))


def parse_grade(text: str) -> Grade:
    try:
        return Grade.from_input(text)
    except ValueError as e:
        raise ParseError(str(e))


def parse_group(text: str) -> Group:
    try:
        return Group(text)
    except ValueError as e:
        raise ParseError(str(e))


def parse_groups(texts: Iterable[str]) -> set[Group]:
    return {parse_group(t) for t in texts}


def invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


# === command parsers ===


def parse_add(arguments: str) -> AddCommand:
    args = tokenize(
        arguments, PREFIX_STUDENT_ID, PREFIX_NAME, PREFIX_EMAIL, PREFIX_GRADE, PREFIX_GROUP
    )

    required = (PREFIX_STUDENT_ID, PREFIX_NAME, PREFIX_EMAIL, PREFIX_GRADE)

    if args.preamble or not all(args.has(p) for p in required):
        raise invalid_format(AddCommand.MESSAGE_USAGE)

    args.verify_no_duplicate_prefixes(*required)

    student = Student(
        student_id=parse_student_id(args.get_value(PREFIX_STUDENT_ID) or ""),
        name=parse_name(args.get_value(PREFIX_NAME) or ""),
        email=parse_email(args.get_value(PREFIX_EMAIL) or ""),
        grade=parse_grade(args.get_value(PREFIX_GRADE) or ""),
        groups=parse_groups(args.get_all_values(PREFIX_GROUP)),
    )

    return AddCommand(student)


def parse_edit(arguments: str) -> EditCommand:
    args = tokenize(
        arguments, PREFIX_STUDENT_ID, PREFIX_NAME, PREFIX_EMAIL, PREFIX_GRADE, PREFIX_GROUP
    )

    if not args.preamble:
        raise invalid_format(EditCommand.MESSAGE_USAGE)

    student_id = parse_student_id(args.preamble)

    args.verify_no_duplicate_prefixes(
        PREFIX_STUDENT_ID, PREFIX_NAME, PREFIX_EMAIL, PREFIX_GRADE
    )

    descriptor = EditStudentDescriptor()

    if args.has(PREFIX_STUDENT_ID):
        descriptor.student_id = parse_student_id(args.get_value(PREFIX_STUDENT_ID) or "")

    if args.has(PREFIX_NAME):
        descriptor.name = parse_name(args.get_value(PREFIX_NAME) or "")

    if args.has(PREFIX_EMAIL):
        descriptor.email = parse_email(args.get_value(PREFIX_EMAIL) or "")

    if args.has(PREFIX_GRADE):
        descriptor.grade = parse_grade(args.get_value(PREFIX_GRADE) or "")

    if args.has(PREFIX_GROUP):
        group_values = args.get_all_values(PREFIX_GROUP)
        # a single empty "g/" clears every group
        if group_values == [""]:
            descriptor.groups = frozenset()
        else:
            descriptor.groups = frozenset(parse_groups(group_values))

    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

    return EditCommand(student_id, descriptor)


def parse_delete(arguments: str) -> DeleteCommand:
    ids = arguments.split()

    if not ids:
        raise invalid_format(DeleteCommand.MESSAGE_USAGE)

    return DeleteCommand(parse_student_ids(ids))


def parse_group_command(arguments: str) -> GroupCommand:
    args = tokenize(arguments, PREFIX_GROUP, PREFIX_STUDENT_ID)

    if (
        args.preamble
        or not args.has(PREFIX_GROUP)
        or not args.get_all_values(PREFIX_STUDENT_ID)
    ):
        raise invalid_format(GroupCommand.MESSAGE_USAGE)

    args.verify_no_duplicate_prefixes(PREFIX_GROUP)

    group = parse_group(args.get_value(PREFIX_GROUP) or "")
    student_ids = parse_student_ids(args.get_all_values(PREFIX_STUDENT_ID))

    return GroupCommand(group, student_ids)


def parse_remark(arguments: str) -> RemarkCommand:
    args = tokenize(arguments, PREFIX_REMARK)

    if not args.preamble or not args.has(PREFIX_REMARK):
        raise invalid_format(RemarkCommand.MESSAGE_USAGE)

    try:
        index = parse_index(args.preamble)
    except ParseError:
        raise invalid_format(RemarkCommand.MESSAGE_USAGE)

    args.verify_no_duplicate_prefixes(PREFIX_REMARK)

    return RemarkCommand(index, args.get_value(PREFIX_REMARK) or "")


def parse_single_id(arguments: str, usage: str) -> str:
    ids = arguments.split()

    if len(ids) != 1:
        raise invalid_format(usage)

    return parse_student_id(ids[0])


def parse_find(arguments: str) -> FindCommand:
    keywords = arguments.split()

    if not keywords:
        raise invalid_format(FindCommand.MESSAGE_USAGE)

    return FindCommand(NameContainsKeywordsPredicate(keywords))


def parse_config(arguments: str) -> ConfigCommand:
    args = tokenize(arguments, PREFIX_GRADE)

    if args.preamble or not args.has(PREFIX_GRADE):
        raise invalid_format(ConfigCommand.MESSAGE_USAGE)

    args.verify_no_duplicate_prefixes(PREFIX_GRADE)

    return ConfigCommand(parse_grade(args.get_value(PREFIX_GRADE) or ""))


def parse_command(user_input: str) -> Command:
    """
    Parses a full line of user input into a Command.

    Args:
        user_input (str): The raw line typed by the user.

    Returns:
        The Command described by the input, ready to be executed.

    Raises:
        ParseError: If the command word is unknown or its arguments are malformed.

    Notes:
        - Commands that take no arguments ignore any trailing text.
    """
    parts = user_input.strip().split(maxsplit=1)

    if not parts:
        raise invalid_format(HelpCommand.MESSAGE_USAGE)

    command_word = parts[0]
    arguments = " " + parts[1] if len(parts) > 1 else ""

    match command_word:
        case AddCommand.COMMAND_WORD:
            return parse_add(arguments)
        case EditCommand.COMMAND_WORD:
            return parse_edit(arguments)
        case DeleteCommand.COMMAND_WORD:
            return parse_delete(arguments)
        case GroupCommand.COMMAND_WORD:
            return parse_group_command(arguments)
        case RemarkCommand.COMMAND_WORD:
            return parse_remark(arguments)
        case ArchiveCommand.COMMAND_WORD:
            return ArchiveCommand(parse_single_id(arguments, ArchiveCommand.MESSAGE_USAGE))
        case UnarchiveCommand.COMMAND_WORD:
            return UnarchiveCommand(
                parse_single_id(arguments, UnarchiveCommand.MESSAGE_USAGE)
            )
        case ListArchiveCommand.COMMAND_WORD:
            return ListArchiveCommand()
        case FindCommand.COMMAND_WORD:
            return parse_find(arguments)
        case ListCommand.COMMAND_WORD:
            return ListCommand()
        case WeakCommand.COMMAND_WORD:
            return WeakCommand()
        case FocusCommand.COMMAND_WORD:
            return FocusCommand(parse_single_id(arguments, FocusCommand.MESSAGE_USAGE))
        case SummaryCommand.COMMAND_WORD:
            return SummaryCommand()
        case ConfigCommand.COMMAND_WORD:
            return parse_config(arguments)
        case ClearCommand.COMMAND_WORD:
            return ClearCommand()
        case HelpCommand.COMMAND_WORD:
            return HelpCommand()
        case ExitCommand.COMMAND_WORD:
            return ExitCommand()
        case _:
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
