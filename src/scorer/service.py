"""Password scoring service: evaluates a password against the weighted criteria.

Provides a ``PasswordScorer`` whose criteria are fixed at construction, plus
module-level ``evaluate`` and ``classify_score`` helpers backed by the
default configuration. Scoring is pure: it never raises and holds no state
between calls, so a single scorer can be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from src.config.scoring_config import BandingScale, ScoringConfig
from src.scorer import MAX_SCORE, CriterionResult, ScoreResult, StrengthBand
from src.scorer.criteria import DEFAULT_CRITERIA, Criterion

logger = logging.getLogger(__name__)


class PasswordScorer:
    """Scores passwords against an ordered, immutable tuple of criteria.

    Attributes:
        criteria: Criteria in declaration order, with configured weights applied.
        banding: Thresholds used to derive the strength band from the score.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        criteria: Sequence[Criterion] = DEFAULT_CRITERIA,
    ) -> None:
        config = config or ScoringConfig()
        self.criteria: tuple[Criterion, ...] = tuple(
            replace(c, weight=config.weights[c.name]) if c.name in config.weights else c
            for c in criteria
        )
        self.banding: BandingScale = config.banding

    def evaluate(self, password: str) -> ScoreResult:
        """Score a password.

        Args:
            password: Raw password text. Not trimmed or normalized; any
                string, including the empty string, is accepted.

        Returns:
            A ``ScoreResult`` with the capped score, the strength band, and
            one ``CriterionResult`` per criterion in declaration order.
        """
        results = [
            CriterionResult(name=c.name, description=c.description, satisfied=c.check(password))
            for c in self.criteria
        ]
        raw = sum(c.weight for c, r in zip(self.criteria, results) if r.satisfied)
        score = min(raw, MAX_SCORE)
        band = self.banding.classify(score)

        logger.debug(
            "Scored password of length %d: %d/%d (%s, raw=%d)",
            len(password), score, MAX_SCORE, band.value, raw,
        )
        return ScoreResult(score=score, band=band, criteria=results)

    def classify(self, score: int) -> StrengthBand:
        return self.banding.classify(score)


_DEFAULT_SCORER = PasswordScorer()


def evaluate(password: str) -> ScoreResult:
    """Score a password with the default criteria and weights."""
    return _DEFAULT_SCORER.evaluate(password)


def classify_score(score: int, scale: BandingScale | None = None) -> StrengthBand:
    """Map a numeric score to its strength band.

    Args:
        score: Score in the range 0-100.
        scale: Optional thresholds; defaults to 25 / 50 / 75.
    """
    return (scale or BandingScale()).classify(score)
