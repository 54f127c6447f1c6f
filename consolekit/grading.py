"""Letter grades from the average of subject marks."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable

SUBJECT_COUNT = 5

# (lower bound inclusive, grade); the upper bound is the previous entry's lower bound.
_BANDS = (
    (91.0, "A1"),
    (81.0, "A2"),
    (71.0, "B1"),
    (61.0, "B2"),
    (51.0, "C1"),
    (41.0, "C2"),
    (33.0, "D"),
    (21.0, "E1"),
    (0.0, "E2"),
)

_MAX_MARK = 100.0


def grade_for_average(average: float) -> str:
    """Return the grade for an average mark in the range 0 to 100."""
    if math.isnan(average) or not 0.0 <= average <= _MAX_MARK:
        raise ValueError(f"average out of range: {average}")
    for lower, letter in _BANDS:
        if average >= lower:
            return letter
    raise ValueError(f"average out of range: {average}")


def grade(marks: Iterable[float]) -> str:
    """Return the grade for the average of the given marks."""
    values = [float(mark) for mark in marks]
    if not values:
        raise ValueError("no marks given")
    return grade_for_average(sum(values) / len(values))


def _read_marks(count: int) -> list[float]:
    marks: list[float] = []
    prompt = f"Enter Marks obtained in {count} Subjects: "
    while len(marks) < count:
        line = input(prompt)
        prompt = ""
        marks.extend(float(token) for token in line.split())
    return marks[:count]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Grade the marks of five subjects.")
    parser.add_argument("marks", nargs="*", type=float, help="marks of the subjects")
    args = parser.parse_args(argv)

    try:
        marks = args.marks if args.marks else _read_marks(SUBJECT_COUNT)
    except EOFError:
        print("Error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError:
        print("Error: invalid mark", file=sys.stderr)
        return 1

    try:
        letter = grade(marks)
    except ValueError:
        letter = "Invalid!"
    print(f"\nGrade = {letter}")
    return 0


if __name__ == "__main__":
    sys.exit(main())