"""Merge two student record files, sort them and write grade statistics."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Sequence

from gradebook.records import Student, read_students, sort_by_grade, write_students

STATS_FILE = "estadisticas.csv"
MAX_STUDENTS = 100


class CombineError(Exception):
    """Raised when the records cannot be combined."""


class GradeCategory(Enum):
    """Grade bands, in the order they are reported."""

    M = "M"
    S = "S"
    N = "N"
    A = "A"
    F = "F"

    @classmethod
    def for_grade(cls, grade: int) -> "GradeCategory | None":
        """Return the band for a grade in 0..10, or None outside that range."""
        if not 0 <= grade <= 10:
            return None
        if grade == 10:
            return cls.M
        if grade == 9:
            return cls.S
        if grade >= 7:
            return cls.N
        if grade >= 5:
            return cls.A
        return cls.F


def merge_students(
    first: Iterable[Student], second: Iterable[Student], limit: int = MAX_STUDENTS
) -> list[Student]:
    """Concatenate two sequences, keeping the first student of each name."""
    merged: list[Student] = []
    seen: set[str] = set()
    for source in (first, second):
        for student in source:
            if student.name in seen:
                continue
            if len(merged) >= limit:
                raise CombineError("Error: Maximum student count reached")
            seen.add(student.name)
            merged.append(student)
    return merged


def categorize(students: Iterable[Student]) -> dict[GradeCategory, int]:
    """Count students per grade band; grades outside 0..10 are not counted."""
    counts = dict.fromkeys(GradeCategory, 0)
    for student in students:
        category = GradeCategory.for_grade(student.grade)
        if category is not None:
            counts[category] += 1
    return counts


def format_stats_line(letter: "GradeCategory | str", count: int, total: int) -> str:
    """Format one statistics line; the percentage is truncated to two decimals."""
    if total <= 0:
        raise ValueError("total must be positive")
    if isinstance(letter, GradeCategory):
        letter = letter.value
    hundredths = count * 10000 // total
    return f"{letter};{count};{hundredths // 100}.{hundredths % 100:02d}%\n"


def format_stats(students: Sequence[Student]) -> str:
    """Return the whole statistics text, empty when there are no students."""
    if not students:
        return ""
    total = len(students)
    return "".join(
        format_stats_line(category, count, total)
        for category, count in categorize(students).items()
    )


def combine(first_path, second_path, output_path, stats_path=STATS_FILE) -> list[Student]:
    """Merge two record files into a sorted output file and write statistics."""
    try:
        with open(output_path, "wb") as output, open(stats_path, "w", encoding="ascii") as stats:
            with open(first_path, "rb") as first, open(second_path, "rb") as second:
                merged = merge_students(read_students(first), read_students(second))
            ordered = sort_by_grade(merged)
            write_students(output, ordered)
            stats.write(format_stats(ordered))
    except OSError as exc:
        raise CombineError(str(exc)) from exc
    return ordered


def main(argv=None) -> int:
    """Command entry point: combine FILE1 FILE2 OUTPUT."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("usage: combine FILE1 FILE2 OUTPUT", file=sys.stderr)
        return 1
    try:
        combine(*args)
    except CombineError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0