# tests/test_commands.py

from core.response import ErrorCode
from logic.commands.archive_commands import (
    ArchiveCommand,
    ListArchiveCommand,
    UnarchiveCommand,
)
from logic.commands.command_result import CommandResult
from logic.commands.student_commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditStudentDescriptor,
    GroupCommand,
    RemarkCommand,
)
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
from models.model import Model
from models.student import Grade
from typical_students import ALICE, BENSON, CARL, DANIEL, ELLE, typical_students

# === helpers ===


def assert_command_success(command, model, expected_message, expected_model):
    response = command.execute(model)

    assert response.success, response.detail
    assert response.detail == expected_message
    assert response.data["result"] == CommandResult(expected_message)
    assert model == expected_model


def assert_command_failure(command, model, expected_message):
    students = model.students
    archived = model.archived_students
    filtered = model.filtered_students

    response = command.execute(model)

    assert not response.success
    assert response.detail == expected_message
    assert model.students == students
    assert model.archived_students == archived
    assert model.filtered_students == filtered


def with_group(student, name):
    return student.copy_with(groups=set(student.groups) | {Group(name)})


# === group ===


def test_group_adds_single_student(model, expected_model):
    edited = with_group(ALICE, "Group 99")
    command = GroupCommand(Group("Group 99"), [ALICE.student_id])

    expected_model.set_student(ALICE, edited)

    assert_command_success(command, model, GroupCommand.MESSAGE_SUCCESS, expected_model)
    assert Group("Group 99") in model.get_student("A0000000A").data["record"].groups


def test_group_unions_with_existing_groups(model):
    command = GroupCommand(Group("Group 99"), [ALICE.student_id, BENSON.student_id])

    response = command.execute(model)

    assert response.success
    assert model.get_student("A0000000A").data["record"].groups == {
        Group("Group 1"),
        Group("Group 99"),
    }
    assert model.get_student("A0000001B").data["record"].groups == {
        Group("Group 1"),
        Group("Group 2"),
        Group("Group 99"),
    }


def test_group_existing_membership_is_unchanged(model, expected_model):
    command = GroupCommand(Group("Group 1"), [BENSON.student_id])

    assert_command_success(command, model, GroupCommand.MESSAGE_SUCCESS, expected_model)


def test_group_missing_id_fails_with_trailing_space(model):
    command = GroupCommand(Group("Group 99"), ["A9999999Z"])

    assert_command_failure(
        command, model, GroupCommand.MESSAGE_NOT_FOUND + "A9999999Z "
    )


def test_group_lists_every_missing_id(model):
    command = GroupCommand(Group("Group 99"), ["A9999999Z", "A8888888Y"])

    response = command.execute(model)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.detail == GroupCommand.MESSAGE_NOT_FOUND + "A9999999Z A8888888Y "


def test_group_partial_failure_keeps_applied_edits(model):
    command = GroupCommand(
        Group("Group 99"), [ALICE.student_id, "A9999999Z", CARL.student_id]
    )

    response = command.execute(model)

    assert not response.success
    assert response.detail.endswith("A9999999Z ")
    assert model.get_student("A0000000A").data["record"] == with_group(ALICE, "Group 99")
    assert model.get_student("A0000002C").data["record"] == with_group(CARL, "Group 99")
    assert model.has_unsaved_changes


# === remark ===


def test_remark_on_first_student(model, expected_model):
    edited = ALICE.copy_with(remark="blahbalh")
    command = RemarkCommand(1, "blahbalh")

    expected_model.set_student(ALICE, edited)

    assert_command_success(
        command,
        model,
        RemarkCommand.MESSAGE_ADD_REMARK_SUCCESS.format(edited),
        expected_model,
    )


def test_empty_remark_clears_remark(model, expected_model):
    edited = BENSON.copy_with(remark="")
    command = RemarkCommand(2, "")

    expected_model.set_student(BENSON, edited)

    assert_command_success(
        command,
        model,
        RemarkCommand.MESSAGE_DELETE_REMARK_SUCCESS.format(edited),
        expected_model,
    )
    assert model.get_student("A0000001B").data["record"].remark == ""


def test_unicode_remark(model):
    response = RemarkCommand(3, "学生はよく頑張った 👍").execute(model)

    assert response.success
    assert model.get_student("A0000002C").data["record"].remark == "学生はよく頑張った 👍"


def test_remark_index_out_of_range_fails(model):
    assert_command_failure(
        RemarkCommand(5, "x"), model, "The student index provided is invalid."
    )


def test_remark_uses_filtered_list_index(model):
    FindCommand(NameContainsKeywordsPredicate(["carl"])).execute(model)

    assert not RemarkCommand(2, "x").execute(model).success

    response = RemarkCommand(1, "x").execute(model)
    assert response.success
    assert model.get_student("A0000002C").data["record"].remark == "x"


# === add ===


def test_add_new_student(model, expected_model):
    expected_model.add_student(ELLE)

    assert_command_success(
        AddCommand(ELLE),
        model,
        AddCommand.MESSAGE_SUCCESS.format(ELLE),
        expected_model,
    )
    assert model.has_id(ELLE)
    assert model.has_email(ELLE)


def test_add_duplicate_id_fails(model):
    assert_command_failure(
        AddCommand(ALICE.copy_with(email="new@example.com")),
        model,
        AddCommand.MESSAGE_DUPLICATE_ID,
    )


def test_add_duplicate_email_fails(model):
    assert_command_failure(
        AddCommand(ELLE.copy_with(email=ALICE.email)),
        model,
        AddCommand.MESSAGE_DUPLICATE_EMAIL,
    )


def test_add_id_already_archived_fails():
    model = Model([ALICE], [ELLE])

    assert_command_failure(
        AddCommand(ELLE.copy_with(email="new@example.com")),
        model,
        AddCommand.MESSAGE_DUPLICATE_ID,
    )


# === edit ===


def test_edit_name(model, expected_model):
    edited = ALICE.copy_with(name="Alicia Pauline")
    command = EditCommand(ALICE.student_id, EditStudentDescriptor(name="Alicia Pauline"))

    expected_model.set_student(ALICE, edited)

    assert_command_success(
        command, model, EditCommand.MESSAGE_SUCCESS.format(edited), expected_model
    )


def test_edit_all_fields(model):
    descriptor = EditStudentDescriptor(
        student_id="A0000009Z",
        name="Alicia Pauline",
        email="alicia@example.com",
        grade=Grade.B,
        groups=[Group("Group 5")],
    )

    response = EditCommand(ALICE.student_id, descriptor).execute(model)

    assert response.success
    assert not model.get_student("A0000000A").success

    edited = model.get_student("A0000009Z").data["record"]
    assert edited.email == "alicia@example.com"
    assert edited.grade is Grade.B
    assert edited.groups == {Group("Group 5")}
    assert model.students[-1] == edited


def test_edit_to_existing_id_fails(model):
    command = EditCommand(
        ALICE.student_id, EditStudentDescriptor(student_id=BENSON.student_id)
    )

    assert_command_failure(command, model, EditCommand.MESSAGE_DUPLICATE_ID)


def test_edit_to_existing_email_fails(model):
    command = EditCommand(ALICE.student_id, EditStudentDescriptor(email=BENSON.email))

    assert_command_failure(command, model, EditCommand.MESSAGE_DUPLICATE_EMAIL)


def test_edit_missing_student_fails(model):
    command = EditCommand("A9999999Z", EditStudentDescriptor(name="Nobody"))

    response = command.execute(model)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND


def test_edit_without_fields_fails(model):
    assert_command_failure(
        EditCommand(ALICE.student_id, EditStudentDescriptor()),
        model,
        EditCommand.MESSAGE_NOT_EDITED,
    )


# === delete ===


def test_delete_several_students(model):
    response = DeleteCommand([ALICE.student_id, CARL.student_id]).execute(model)

    assert response.success
    assert response.detail == DeleteCommand.MESSAGE_SUCCESS.format(
        "Alice Pauline (A0000000A) and Carl Kurz (A0000002C)"
    )
    assert model.students == [BENSON, DANIEL]


def test_delete_with_missing_id_deletes_nothing(model):
    assert_command_failure(
        DeleteCommand([ALICE.student_id, "A9999999Z"]),
        model,
        DeleteCommand.MESSAGE_NOT_FOUND + "A9999999Z ",
    )


# === archive ===


def test_archive_and_unarchive(model):
    response = ArchiveCommand(BENSON.student_id).execute(model)

    assert response.success
    assert response.detail == ArchiveCommand.MESSAGE_SUCCESS.format(BENSON)
    assert model.archived_students == [BENSON]
    assert BENSON not in model.students

    response = UnarchiveCommand(BENSON.student_id).execute(model)

    assert response.success
    assert model.students == typical_students()
    assert model.archived_students == []


def test_archive_missing_student_fails(model):
    response = ArchiveCommand("A9999999Z").execute(model)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND


def test_unarchive_student_not_in_archive_fails(model):
    response = UnarchiveCommand(ALICE.student_id).execute(model)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert model.has_student(ALICE)


def test_list_archive_sets_flag(model):
    response = ListArchiveCommand().execute(model)

    assert response.success
    assert response.data["result"].show_archived


# === views ===


def test_find_matches_whole_words_ignoring_case(model):
    response = FindCommand(NameContainsKeywordsPredicate(["MEIER"])).execute(model)

    assert response.detail == FindCommand.MESSAGE_SUCCESS.format(2)
    assert model.filtered_students == [BENSON, DANIEL]


def test_find_partial_word_does_not_match(model):
    FindCommand(NameContainsKeywordsPredicate(["Mei"])).execute(model)

    assert model.filtered_students == []


def test_list_shows_everyone(model):
    model.update_filtered_student_list(lambda s: False)

    response = ListCommand().execute(model)

    assert response.detail == ListCommand.MESSAGE_SUCCESS
    assert model.filtered_students == typical_students()


def test_weak_filters_by_threshold(model):
    response = WeakCommand().execute(model)

    assert response.detail == WeakCommand.MESSAGE_SUCCESS.format(2, "C")
    assert model.filtered_students == [BENSON, CARL]


def test_config_changes_weak_threshold(model):
    WeakCommand().execute(model)

    response = ConfigCommand(Grade.F).execute(model)

    assert response.success
    assert response.detail == "Weak threshold successfully updated to: F."
    assert model.weak_threshold is Grade.F
    assert model.filtered_students == [CARL]


def test_focus_shows_one_student(model):
    response = FocusCommand(CARL.student_id).execute(model)

    assert response.success
    assert model.filtered_students == [CARL]


def test_focus_missing_student_fails(model):
    assert not FocusCommand("A9999999Z").execute(model).success


def test_summary_attaches_distribution(model):
    response = SummaryCommand().execute(model)
    result = response.data["result"]

    assert response.detail == SummaryCommand.MESSAGE_SUCCESS.format(4)
    assert result.show_summary
    assert result.attachment[Grade.A] == 1
    assert sum(result.attachment.values()) == 4


def test_clear_empties_both_rosters(model):
    model.archive_student(ALICE)

    response = ClearCommand().execute(model)

    assert response.success
    assert model.students == []
    assert model.archived_students == []


def test_help_and_exit_set_flags(model):
    assert HelpCommand().execute(model).data["result"] == CommandResult(
        HelpCommand.SHOWING_HELP_MESSAGE, show_help=True
    )
    assert ExitCommand().execute(model).data["result"] == CommandResult(
        ExitCommand.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True
    )
