# tests/test_student.py

import pytest

from models.group import Group
from models.student import Grade, Student


def test_student_to_dict(sample_student):
    data = sample_student.to_dict()

    assert data["student_id"] == "A0000000A"
    assert data["name"] == "Alice Pauline"
    assert data["email"] == "alice@example.com"
    assert data["grade"] == "A"
    assert data["groups"] == ["Group 1"]
    assert data["remark"] == ""


def test_student_from_dict():
    student = Student.from_dict(
        {
            "student_id": "A0000000A",
            "name": "Alice Pauline",
            "email": "alice@example.com",
            "grade": "A",
            "groups": ["Group 1", "Group 2"],
            "remark": "Top of the class",
        }
    )

    assert student.student_id == "A0000000A"
    assert student.name == "Alice Pauline"
    assert student.email == "alice@example.com"
    assert student.grade is Grade.A
    assert student.groups == {Group("Group 1"), Group("Group 2")}
    assert student.remark == "Top of the class"


def test_student_from_dict_without_optional_fields():
    student = Student.from_dict(
        {
            "student_id": "A0000000A",
            "name": "Alice Pauline",
            "email": "alice@example.com",
            "grade": "A",
        }
    )

    assert student.groups == frozenset()
    assert student.remark == ""


def test_student_to_str(sample_student):
    assert str(sample_student) == (
        "STUDENT: name: Alice Pauline, id: A0000000A, email: alice@example.com, "
        "grade: A, groups: [Group 1]"
    )


def test_student_input_is_normalized():
    student = Student(" a0123456x ", "  John   Doe ", " JohnD@Example.COM ", "b+")

    assert student.student_id == "A0123456X"
    assert student.name == "John Doe"
    assert student.email == "johnd@example.com"
    assert student.grade is Grade.B_PLUS


@pytest.mark.parametrize("student_id", ["", "A012345X", "B0123456X", "A01234567X", "A0123456"])
def test_invalid_student_id_rejected(student_id):
    with pytest.raises(ValueError):
        Student(student_id, "John Doe", "johnd@example.com", "B")


@pytest.mark.parametrize("email", ["", "johnd", "johnd@example", "john d@example.com", "a@b@c.com"])
def test_invalid_email_rejected(email):
    with pytest.raises(ValueError):
        Student("A0123456X", "John Doe", email, "B")


def test_invalid_name_and_grade_rejected():
    with pytest.raises(ValueError):
        Student("A0123456X", "   ", "johnd@example.com", "B")

    with pytest.raises(ValueError):
        Student("A0123456X", "John*", "johnd@example.com", "B")

    with pytest.raises(ValueError):
        Student("A0123456X", "John Doe", "johnd@example.com", "E")


def test_any_string_is_a_valid_remark():
    for remark in ["", "   ", "Likes to swim.", "学生はよく頑張った 👍", "r/ n/ id/"]:
        student = Student("A0123456X", "John Doe", "johnd@example.com", "B", remark=remark)
        assert student.remark == remark


def test_copy_with_replaces_only_given_fields(sample_student):
    edited = sample_student.copy_with(name="Alicia Pauline", remark="")

    assert edited.name == "Alicia Pauline"
    assert edited.student_id == sample_student.student_id
    assert edited.email == sample_student.email
    assert edited.groups == sample_student.groups
    assert sample_student.name == "Alice Pauline"


def test_copy_with_empty_groups_clears_groups(sample_student):
    assert sample_student.copy_with(groups=[]).groups == frozenset()


def test_is_weak_against_threshold():
    student = Student("A0123456X", "John Doe", "johnd@example.com", "C")

    assert student.is_weak(Grade.C)
    assert student.is_weak(Grade.B)
    assert not student.is_weak(Grade.D)


def test_grade_rank_orders_best_to_worst():
    assert Grade.A_PLUS.rank == 0
    assert Grade.F.rank == len(Grade) - 1
    assert Grade.B_MINUS.rank < Grade.C_PLUS.rank


def test_equality_is_structural(sample_student):
    same = Student(
        "A0000000A", "Alice Pauline", "alice@example.com", "A", [Group("Group 1")]
    )

    assert same == sample_student
    assert hash(same) == hash(sample_student)
    assert sample_student.copy_with(remark="x") != sample_student
    assert sample_student.copy_with(remark="x").is_same_student(sample_student)
