"""Base dataclass for password criteria."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Criterion:
    """A single weighted check against a password."""

    name: str
    description: str
    weight: int  # points added to the score when satisfied
    predicate: Callable[[str], bool] = field(repr=False, compare=False)

    def check(self, password: str) -> bool:
        return bool(self.predicate(password))


def contains(pattern: str) -> Callable[[str], bool]:
    """Build a predicate that is true when ``pattern`` matches anywhere in the text."""
    compiled = re.compile(pattern)

    def _predicate(password: str) -> bool:
        return compiled.search(password) is not None

    return _predicate


def min_length(length: int) -> Callable[[str], bool]:
    """Build a predicate that is true when the text has at least ``length`` characters."""

    def _predicate(password: str) -> bool:
        return len(password) >= length

    return _predicate
