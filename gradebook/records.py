"""Fixed-size binary student records."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator

NAME_SIZE = 50
_LAYOUT = struct.Struct("<50s2xii")
RECORD_SIZE = _LAYOUT.size


@dataclass(frozen=True)
class Student:
    """One student: name, grade and exam attempt number."""

    name: str
    grade: int
    attempt: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "Student":
        """Decode one record of exactly RECORD_SIZE bytes."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        raw_name, grade, attempt = _LAYOUT.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")
        return cls(name, grade, attempt)

    def to_bytes(self) -> bytes:
        """Encode this student as one record."""
        raw_name = self.name.encode("utf-8", "surrogateescape")
        if len(raw_name) > NAME_SIZE:
            raise ValueError(f"name longer than {NAME_SIZE} bytes: {self.name!r}")
        return _LAYOUT.pack(raw_name, self.grade, self.attempt)


def read_students(stream: BinaryIO) -> Iterator[Student]:
    """Yield records from a binary stream; a trailing partial record is ignored."""
    while True:
        chunk = stream.read(RECORD_SIZE)
        if len(chunk) != RECORD_SIZE:
            return
        yield Student.from_bytes(chunk)


def write_students(stream: BinaryIO, students: Iterable[Student]) -> None:
    """Write records to a binary stream."""
    stream.write(b"".join(student.to_bytes() for student in students))


def sort_by_grade(students: Iterable[Student]) -> list[Student]:
    """Return the students ordered by ascending grade."""
    return sorted(students, key=lambda student: student.grade)