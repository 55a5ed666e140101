"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from src.config import get_settings
from src.config.scoring_config import ScoringConfig
from src.scorer import CriterionResult, ScoreResult, StrengthBand
from src.scorer.service import PasswordScorer


@pytest.fixture
def scorer() -> PasswordScorer:
    """Scorer with the default criteria and weights."""
    return PasswordScorer()


@pytest.fixture
def heavy_scorer() -> PasswordScorer:
    """Scorer whose weights sum well above 100."""
    return PasswordScorer(ScoringConfig(weights={"minLength": 60, "hasUpper": 60, "hasLower": 60}))


@pytest.fixture
def sample_moderate_result() -> ScoreResult:
    """Result for a short lowercase password."""
    return ScoreResult(
        score=25,
        band=StrengthBand.MODERATE,
        criteria=[
            CriterionResult(name="minLength", description="At least 8 characters", satisfied=False),
            CriterionResult(name="hasUpper", description="Contains uppercase letter", satisfied=False),
            CriterionResult(name="hasLower", description="Contains lowercase letter", satisfied=True),
            CriterionResult(name="hasDigit", description="Contains number", satisfied=False),
            CriterionResult(name="hasSpecial", description="Contains special character", satisfied=False),
        ],
    )


@pytest.fixture
def scoring_yaml(tmp_path):
    """Write a YAML scoring config and return its path."""

    def _write(content: str):
        path = tmp_path / "scoring.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
