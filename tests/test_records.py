import io

import pytest

from gradebook.records import (
    RECORD_SIZE,
    Student,
    read_students,
    sort_by_grade,
    write_students,
)


def test_round_trip_single_record():
    student = Student("Ana", 7, 2)
    assert Student.from_bytes(student.to_bytes()) == student


def test_record_size_matches_layout():
    assert len(Student("Ana", 7, 2).to_bytes()) == RECORD_SIZE
    assert RECORD_SIZE == 60


def test_name_is_nul_terminated():
    data = Student("Ana", 7, 2).to_bytes()
    assert data.startswith(b"Ana\x00")


def test_name_too_long_rejected():
    with pytest.raises(ValueError):
        Student("x" * 51, 5, 1).to_bytes()


def test_from_bytes_wrong_length_rejected():
    with pytest.raises(ValueError):
        Student.from_bytes(b"\x00" * (RECORD_SIZE - 1))


def test_stream_round_trip_ignores_partial_tail():
    students = [Student("Ana", 7, 1), Student("Luis", 3, 2)]
    buffer = io.BytesIO()
    write_students(buffer, students)
    buffer.write(b"\x01\x02\x03")
    buffer.seek(0)
    assert list(read_students(buffer)) == students


def test_read_empty_stream():
    assert list(read_students(io.BytesIO(b""))) == []


def test_sort_by_grade_orders_and_keeps_members():
    students = [Student("a", 9, 1), Student("b", 2, 1), Student("c", 5, 1), Student("d", 2, 1)]
    result = sort_by_grade(students)
    grades = [s.grade for s in result]
    assert grades == sorted(grades)
    assert sorted(result, key=lambda s: s.name) == sorted(students, key=lambda s: s.name)