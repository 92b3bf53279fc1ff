# cli/model_formatters.py

# anything that renders domain objects for the terminal
from textwrap import dedent

import core.formatters as formatters
from models.student import Grade, Student

# === student formatters ===


def format_groups(student: Student) -> str:
    return " ".join(str(g) for g in student.sorted_groups) or "[NO GROUPS]"


def format_student_oneline(student: Student, is_weak: bool = False, width: int = 80) -> str:
    weak = " [WEAK]" if is_weak else ""
    line = (
        f"{student.student_id} | {student.name:<20} | {student.grade.value:<2} | "
        f"{student.email} | {format_groups(student)}{weak}"
    )
    return formatters.truncate(line, width)


def format_student_multiline(student: Student, is_weak: bool = False) -> str:
    remark = student.remark if student.remark else "[NO REMARK]"
    weak = " [WEAK]" if is_weak else ""

    return dedent(
        f"""\
        Student {student.student_id}:
        ... Name: {student.name}
        ... Email: {student.email}
        ... Grade: {student.grade.value}{weak}
        ... Groups: {format_groups(student)}
        ... Remark: {remark}"""
    )


# === summary formatters ===


def format_grade_distribution(distribution: dict[Grade, int], width: int = 80) -> str:
    total = sum(distribution.values())
    bar_width = max(width - 15, 10)

    lines = [
        formatters.format_bar(grade.value, distribution.get(grade, 0), total, bar_width)
        for grade in Grade
    ]
    lines.append(formatters.format_divider(width))
    lines.append(f"Total: {total}")

    return "\n".join(lines)
