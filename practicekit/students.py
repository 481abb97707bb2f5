"""A small in-memory register of students."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence


@dataclass
class Student:
    """A student record."""

    name: str
    age: int
    student_id: int
    gpa: float


def format_students(students: Sequence[Student]) -> str:
    """Render the student list as text, numbering students from 1."""
    if not students:
        return "\nNo students to display.\n"
    lines = ["", "--- Current Student List ---"]
    for number, student in enumerate(students, start=1):
        lines.extend(
            [
                f"Student {number}:",
                f"  Name: {student.name}",
                f"  Age: {student.age}",
                f"  ID: {student.student_id}",
                f"  GPA: {student.gpa:.2f}",
            ]
        )
    return "\n".join(lines) + "\n"


def find_student_by_id(students: Iterable[Student], student_id: int) -> Student | None:
    """Return the first student with the given id, or None if there is none."""
    return next((s for s in students if s.student_id == student_id), None)


def read_student(read: Callable[[], str], write: Callable[[str], object]) -> Student:
    """Prompt for a student's details and build the record.

    Raises ValueError when the age, id or GPA is not a number.
    """
    write("Enter the name of the student: ")
    name = read()
    write("Enter the age of the student: ")
    age = int(read())
    write("Enter the StudentID: ")
    student_id = int(read())
    write("Enter the GPA of the student: ")
    gpa = float(read())
    return Student(name, age, student_id, gpa)


def main(argv: list[str] | None = None) -> int:
    students = [Student("Alice Smith", 20, 1001, 3.85)]
    print("Adding initial student (Alice) directly:")
    print(format_students(students), end="")

    print("\n--- Now adding a student from user input using add_student function ---")
    try:
        student = read_student(input, sys.stdout.write)
    except (ValueError, EOFError) as exc:
        print(f"\nInvalid student details: {exc}", file=sys.stderr)
        return 1
    students.append(student)
    print("New student added successfully!")

    print(format_students(students), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())