"""Decode an L/R/= pattern into a chain of number pairs and a digit string."""

from __future__ import annotations

import sys
from typing import NamedTuple

_FIRST_PAIRS = {
    "L": ((4, 2), 0),
    "R": ((2, 4), 1),
    "=": ((2, 2), 0),
}

_SHOWN_SIDE = {"L": 0, "R": 1, "=": 0}


class DecodedPattern(NamedTuple):
    pairs: list[tuple[int, int]]
    text: str


def decode_letter(letter: str, value: int) -> tuple[int, int]:
    """Return the (left, right) pair that ``letter`` produces from ``value``."""
    if letter == "L":
        return value, value - 1
    if letter == "R":
        return value - 1, value
    if letter == "=":
        return value, value
    return 0, 0


def decode_pattern(pattern: str) -> DecodedPattern:
    """Decode ``pattern`` into its pairs and the digits picked from them."""
    if not pattern:
        raise ValueError("pattern is empty")
    first = pattern[0]
    if first not in _FIRST_PAIRS:
        raise ValueError(f"pattern must start with 'L', 'R' or '=', got {first!r}")

    first_pair, side = _FIRST_PAIRS[first]
    pairs = [first_pair]
    digits = [str(first_pair[side])]

    for letter in pattern[1:]:
        pair = decode_letter(letter, pairs[-1][1])
        pairs.append(pair)
        if letter in _SHOWN_SIDE:
            digits.append(str(pair[_SHOWN_SIDE[letter]]))

    return DecodedPattern(pairs, "".join(digits))


def _format_pairs(pairs: list[tuple[int, int]]) -> str:
    return "[" + " ".join(f"[{left} {right}]" for left, right in pairs) + "]"


def main(argv: list[str] | None = None) -> int:
    """Decode the pattern given on the command line and print the result."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: left-right <pattern> (e.g., LRL=R)")
        return 0

    try:
        decoded = decode_pattern(args[0])
    except ValueError as exc:
        print(f"Invalid pattern: {exc}", file=sys.stderr)
        return 1

    print("Decoded value:", _format_pairs(decoded.pairs))
    print("Decoded string:", decoded.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())