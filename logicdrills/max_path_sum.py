"""Maximum top-to-bottom path sum through a number triangle."""

from __future__ import annotations

import json
import sys
from pathlib import Path

DEFAULT_DATA_FILE = "./find-max-sum-with-path/files/number.json"


def max_path_sum(data: list[list[int]]) -> int:
    """Return the largest sum of a path from the apex to the base of ``data``.

    Each step moves from a cell to one of the two cells directly beneath it.
    The input is left unchanged.
    """
    if not data or not data[0]:
        raise ValueError("triangle is empty")

    best = list(data[-1])
    for row in reversed(data[:-1]):
        if len(best) < len(row) + 1:
            raise ValueError(
                f"row of width {len(row)} needs a row of at least "
                f"{len(row) + 1} values beneath it, got {len(best)}"
            )
        best = [
            value + max(left, right)
            for value, left, right in zip(row, best, best[1:])
        ]
    return best[0]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def read_data_from_file(file_path: str | Path) -> list[list[int]]:
    """Load a triangle stored as a JSON array of integer arrays."""
    with open(file_path, encoding="utf-8") as handle:
        data = json.load(handle)

    if not isinstance(data, list) or not all(
        isinstance(row, list) and all(_is_int(value) for value in row)
        for row in data
    ):
        raise ValueError(f"{file_path}: expected a JSON array of integer arrays")
    return data


def main(argv: list[str] | None = None) -> int:
    """Print the maximum path sum of the triangle in the given (or default) file."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_DATA_FILE).resolve()
    print("Absolute:", path)

    try:
        data = read_data_from_file(path)
        result = max_path_sum(data)
    except OSError as exc:
        print(f"Failed to open file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Failed to parse JSON: {exc}", file=sys.stderr)
        return 1

    print("Maximum path sum:", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())