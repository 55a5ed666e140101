"""Load and validate scoring configuration from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
    model_validator,
)

from src.scorer import StrengthBand
from src.scorer.criteria import CRITERION_NAMES, DEFAULT_CRITERIA
from src.scorer.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults" / "scoring_config.yaml"


class BandingScale(BaseModel):
    """Lowest score for each strength band above Weak."""

    model_config = ConfigDict(extra="forbid")

    moderate: StrictInt = Field(default=25, ge=0, le=100)
    strong: StrictInt = Field(default=50, ge=0, le=100)
    very_strong: StrictInt = Field(default=75, ge=0, le=100)

    @model_validator(mode="after")
    def _thresholds_increase(self) -> BandingScale:
        if not self.moderate < self.strong < self.very_strong:
            raise ValueError(
                "Banding thresholds must be strictly increasing: "
                f"moderate={self.moderate}, strong={self.strong}, very_strong={self.very_strong}"
            )
        return self

    def classify(self, score: int) -> StrengthBand:
        """Determine the strength band for a score."""
        if score >= self.very_strong:
            return StrengthBand.VERY_STRONG
        elif score >= self.strong:
            return StrengthBand.STRONG
        elif score >= self.moderate:
            return StrengthBand.MODERATE
        return StrengthBand.WEAK


def _default_weights() -> dict[str, int]:
    return {c.name: c.weight for c in DEFAULT_CRITERIA}


class ScoringConfig(BaseModel):
    """Criterion weight overrides plus banding thresholds."""

    model_config = ConfigDict(extra="forbid")

    weights: dict[str, StrictInt] = Field(default_factory=_default_weights)
    banding: BandingScale = BandingScale()

    @field_validator("weights")
    @classmethod
    def _known_non_negative(cls, weights: dict[str, int]) -> dict[str, int]:
        unknown = sorted(set(weights) - set(CRITERION_NAMES))
        if unknown:
            raise ValueError(f"Unknown criteria {unknown}; expected a subset of {list(CRITERION_NAMES)}")
        negative = sorted(name for name, weight in weights.items() if weight < 0)
        if negative:
            raise ValueError(f"Weights must be non-negative: {negative}")
        return weights

    @property
    def total_weight(self) -> int:
        """Sum of effective weights, defaults filled in for criteria not overridden."""
        return sum(self.weights.get(c.name, c.weight) for c in DEFAULT_CRITERIA)


def load_scoring_config(path: Path | None = None) -> ScoringConfig:
    """Load scoring config from a YAML file. Falls back to default.

    Args:
        path: Optional explicit path to a YAML config file. Unlike the
            bundled default, an explicit path must exist.

    Raises:
        ConfigurationError: If the file is missing, unreadable, or invalid.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return _default_config()
    elif not path.exists():
        raise ConfigurationError(f"Scoring config not found: {path}", context={"path": str(path)})

    try:
        with open(path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            f"Could not read scoring config {path}: {exc}",
            context={"path": str(path), "original_error": str(exc)},
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Scoring config {path} must be a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )

    try:
        config = ScoringConfig(**data.get("scoring", data))
    except (TypeError, ValidationError) as exc:
        raise ConfigurationError(
            f"Invalid scoring config {path}: {exc}",
            context={"path": str(path), "original_error": str(exc)},
        ) from exc

    logger.debug("Loaded scoring config from %s (total weight %d)", path, config.total_weight)
    return config


def _default_config() -> ScoringConfig:
    """Return hardcoded default configuration."""
    return ScoringConfig()
