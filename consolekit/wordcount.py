"""Count whitespace-separated words in a text file."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable


def count_words(lines: Iterable[str]) -> int:
    """Return the number of whitespace-separated words in the lines."""
    return sum(len(line.split()) for line in lines)


def count_words_in_file(path: str | os.PathLike[str]) -> int:
    """Return the number of words in the file at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return count_words(handle)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count the words in a file.")
    parser.add_argument("filename", nargs="?", help="file to read")
    args = parser.parse_args(argv)

    filename = args.filename
    if filename is None:
        try:
            filename = input("Enter the file name: ")
        except EOFError:
            filename = ""

    try:
        total = count_words_in_file(filename)
    except OSError:
        print(f"Could not open file: {filename}", file=sys.stderr)
        return 1

    print(f"Total word count: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())