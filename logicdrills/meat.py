"""Count the words of a text file, splitting on spaces, dots and commas."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

_SEPARATORS = re.compile(r"[.,\t\n\f\r ]+")


@dataclass(frozen=True)
class FileMeta:
    """Where a file lives and what kind it is."""

    file_name: str
    file_path: str
    file_type: str = ""

    @property
    def location(self) -> Path:
        return Path(self.file_path) / self.file_name


def split_words(paragraph: str) -> list[str]:
    """Split ``paragraph`` on whitespace, dots and commas, dropping empty pieces."""
    return [word for word in _SEPARATORS.split(paragraph) if word]


def count_words(words: Iterable[str]) -> dict[str, int]:
    """Return how often each word occurs."""
    return dict(Counter(words))


@dataclass
class ProcessFileService:
    """Reads the file described by ``meta`` and tallies its words."""

    meta: FileMeta

    def get_meat_list(self) -> dict[str, int]:
        """Return the count of every word in the file, read line by line."""
        totals: Counter[str] = Counter()
        with open(
            self.meta.location, encoding="utf-8", errors="surrogateescape"
        ) as handle:
            for line in handle:
                totals.update(split_words(line))
        return dict(totals)