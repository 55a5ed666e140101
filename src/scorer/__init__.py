"""Pydantic models for password scoring results."""

from __future__ import annotations

import colorsys
from enum import Enum

from pydantic import BaseModel, Field, computed_field

MAX_SCORE = 100

# Fraction of the hue wheel reached at full strength (0.0 red -> 0.3 green).
_HUE_SPAN = 0.3
_SATURATION = 0.7
_BRIGHTNESS = 0.9


class StrengthBand(str, Enum):
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    VERY_STRONG = "Very strong"


class CriterionResult(BaseModel):
    """Outcome of a single criterion for one password."""

    name: str
    description: str = ""
    satisfied: bool


class ScoreResult(BaseModel):
    """Complete scoring output for one password."""

    score: int = Field(ge=0, le=MAX_SCORE)
    band: StrengthBand
    criteria: list[CriterionResult]

    @property
    def fill(self) -> float:
        """Proportion of a strength bar to fill (0.0-1.0)."""
        return self.score / MAX_SCORE

    @property
    def label(self) -> str:
        return f"{self.band.value} password"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def color(self) -> str:
        """Bar colour, red at 0 shading to green at 100; included in JSON output."""
        r, g, b = colorsys.hsv_to_rgb(self.fill * _HUE_SPAN, _SATURATION, _BRIGHTNESS)
        return "#{:02X}{:02X}{:02X}".format(*(int(c * 255 + 0.5) for c in (r, g, b)))

    @property
    def satisfied(self) -> dict[str, bool]:
        return {c.name: c.satisfied for c in self.criteria}

    @property
    def met_count(self) -> int:
        return sum(1 for c in self.criteria if c.satisfied)
