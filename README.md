# gradebook

Tools for merging binary student record files, sorting them by grade and
writing grade statistics.

## Record format

Each record is 60 bytes with this layout:

| field     | size     | meaning                                  |
|-----------|----------|------------------------------------------|
| name      | 50 bytes | student name, UTF-8, NUL-padded          |
| (padding) | 2 bytes  | zero bytes                               |
| grade     | 4 bytes  | signed little-endian integer             |
| attempt   | 4 bytes  | exam sitting, signed little-endian int   |

A name longer than 50 bytes cannot be encoded and raises `ValueError`.

## Installation

```
pip install .
```

## Merging grade files

```
gradebook-combine first.bin second.bin merged.bin
```

This reads every complete record from both input files (a trailing partial
record is ignored) and keeps only the first record seen for each name. At
most 100 students are kept; going past that limit is an error. The merged
records are sorted by grade in ascending order, students with equal grades
keeping their order, and written to `merged.bin`. A file named
`estadisticas.csv` is written to the current directory with one line per
grade category:

```
M;1;10.00%
S;0;0.00%
N;3;30.00%
A;4;40.00%
F;2;20.00%
```

The categories are M (10), S (9), N (7–8), A (5–6) and F (0–4). Grades
outside 0–10 are not counted in any category but still count towards the
total. Percentages are truncated, not rounded, to two decimals. If no
students are read, the statistics file is left empty.

The command prints a usage message and exits with status 1 if it is not
given exactly three arguments, and prints the error and exits with status 1
if a file cannot be opened or the student limit is exceeded.

## From Python

```python
from gradebook.combine import combine

students = combine("first.bin", "second.bin", "merged.bin", "estadisticas.csv")
```

`combine` returns the sorted list of `Student` records it wrote and raises
`CombineError` on failure. The statistics path defaults to
`estadisticas.csv`.

Each step is also available on its own:

- `gradebook.combine`: `merge_students(first, second, limit=100)`,
  `categorize(students)` (a count per `GradeCategory`),
  `format_stats_line(letter, count, total)` and `format_stats(students)`.
- `gradebook.records`: the frozen dataclass `Student` (`name`, `grade`,
  `attempt`) with `Student.from_bytes` and `Student.to_bytes`, plus
  `read_students(stream)`, `write_students(stream, students)` and
  `sort_by_grade(students)`.

## What this package does not do

It does not create the input record files, and it has no command for
creating files with a given permission mode; record files can be built with
`write_students` from Python.

## Running the tests

```
pip install .[test]
pytest
```