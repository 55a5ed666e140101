"""Password criteria definitions.

The default catalogue is ordered: results are always reported in this order,
and the weights sum to exactly 100.
"""

from __future__ import annotations

import re

from src.scorer.criteria.base import Criterion, contains, min_length

MIN_PASSWORD_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

MIN_LENGTH_CRITERION = Criterion(
    name="minLength",
    description=f"At least {MIN_PASSWORD_LENGTH} characters",
    weight=25,
    predicate=min_length(MIN_PASSWORD_LENGTH),
)
HAS_UPPER_CRITERION = Criterion(
    name="hasUpper",
    description="Contains uppercase letter",
    weight=25,
    predicate=contains(r"[A-Z]"),
)
HAS_LOWER_CRITERION = Criterion(
    name="hasLower",
    description="Contains lowercase letter",
    weight=25,
    predicate=contains(r"[a-z]"),
)
# ASCII digits only; ``\d`` would also accept other Unicode decimal digits.
HAS_DIGIT_CRITERION = Criterion(
    name="hasDigit",
    description="Contains number",
    weight=12,
    predicate=contains(r"[0-9]"),
)
HAS_SPECIAL_CRITERION = Criterion(
    name="hasSpecial",
    description="Contains special character",
    weight=13,
    predicate=contains(f"[{re.escape(SPECIAL_CHARACTERS)}]"),
)

DEFAULT_CRITERIA: tuple[Criterion, ...] = (
    MIN_LENGTH_CRITERION,
    HAS_UPPER_CRITERION,
    HAS_LOWER_CRITERION,
    HAS_DIGIT_CRITERION,
    HAS_SPECIAL_CRITERION,
)

CRITERION_NAMES: tuple[str, ...] = tuple(c.name for c in DEFAULT_CRITERIA)


__all__ = [
    "CRITERION_NAMES",
    "DEFAULT_CRITERIA",
    "HAS_DIGIT_CRITERION",
    "HAS_LOWER_CRITERION",
    "HAS_SPECIAL_CRITERION",
    "HAS_UPPER_CRITERION",
    "MIN_LENGTH_CRITERION",
    "MIN_PASSWORD_LENGTH",
    "SPECIAL_CHARACTERS",
    "Criterion",
    "contains",
    "min_length",
]
