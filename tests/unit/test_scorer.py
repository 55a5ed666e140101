"""Unit tests for the password scoring service."""

import logging

import pytest

from src.config.scoring_config import BandingScale, ScoringConfig
from src.scorer import StrengthBand
from src.scorer.criteria import CRITERION_NAMES
from src.scorer.service import PasswordScorer, classify_score, evaluate


class TestEvaluateFixtures:
    @pytest.mark.parametrize("password,expected", [
        ("", 0),
        ("short", 25),
        ("abcdefgh", 50),
        ("LONGENOUGH", 50),
        ("longenough1", 62),
        ("LongEnough1!", 100),
    ])
    def test_scores(self, password, expected):
        assert evaluate(password).score == expected

    def test_empty_password_satisfies_nothing(self):
        result = evaluate("")
        assert result.score == 0
        assert result.met_count == 0
        assert all(not c.satisfied for c in result.criteria)
        assert result.band == StrengthBand.WEAK

    def test_short_lowercase(self):
        assert evaluate("short").satisfied == {
            "minLength": False,
            "hasUpper": False,
            "hasLower": True,
            "hasDigit": False,
            "hasSpecial": False,
        }

    def test_longenough1(self):
        result = evaluate("longenough1")
        assert result.satisfied == {
            "minLength": True,
            "hasUpper": False,
            "hasLower": True,
            "hasDigit": True,
            "hasSpecial": False,
        }
        assert result.band == StrengthBand.STRONG

    def test_all_criteria(self):
        result = evaluate("LongEnough1!")
        assert result.met_count == 5
        assert result.band == StrengthBand.VERY_STRONG

    def test_digit_and_special_only(self):
        assert evaluate("1!").score == 25

    def test_no_trimming(self):
        assert evaluate("  abcd  ").satisfied["minLength"] is True

    def test_length_counts_code_points(self):
        assert evaluate("\U0001F512" * 4).satisfied["minLength"] is False
        assert evaluate("\U0001F512" * 8).satisfied["minLength"] is True

    def test_lone_surrogates_are_scored(self):
        assert evaluate("\ud800abcdefgh").score == 50


class TestEvaluateProperties:
    @pytest.mark.parametrize("password", [
        "",
        " ",
        "a",
        "Aa1!",
        "パスワード",
        "🔒🔑" * 10,
        "\x00\n\t",
        "A" * 10_000,
        "aA1!" * 2_500,
        "Pässwörd_2024",
    ])
    def test_score_within_bounds(self, password):
        result = evaluate(password)
        assert 0 <= result.score <= 100

    @pytest.mark.parametrize("password", ["", "short", "LongEnough1!", "ümlaut"])
    def test_criteria_order_is_fixed(self, password):
        assert [c.name for c in evaluate(password).criteria] == list(CRITERION_NAMES)

    def test_idempotent(self):
        assert evaluate("Tr0ub4dor&3") == evaluate("Tr0ub4dor&3")

    def test_scorer_instances_agree(self, scorer):
        assert scorer.evaluate("longenough1") == evaluate("longenough1")

    def test_band_matches_score(self, scorer):
        for password in ["", "short", "abcdefgh", "longenough1", "LongEnough1!"]:
            result = scorer.evaluate(password)
            assert result.band == classify_score(result.score)


class TestClamp:
    def test_score_is_capped(self, heavy_scorer):
        result = heavy_scorer.evaluate("LongEnough1!")
        assert result.score == 100
        assert result.band == StrengthBand.VERY_STRONG

    def test_below_cap_is_not_altered(self, heavy_scorer):
        assert heavy_scorer.evaluate("short").score == 60


class TestConfiguredScorer:
    def test_weight_override_applies(self):
        scorer = PasswordScorer(ScoringConfig(weights={"hasDigit": 0}))
        assert scorer.evaluate("longenough1").score == 50

    def test_unlisted_weights_keep_defaults(self):
        scorer = PasswordScorer(ScoringConfig(weights={"hasSpecial": 20}))
        assert [c.weight for c in scorer.criteria] == [25, 25, 25, 12, 20]

    def test_criteria_are_immutable_tuple(self, scorer):
        assert isinstance(scorer.criteria, tuple)

    def test_override_does_not_touch_defaults(self):
        PasswordScorer(ScoringConfig(weights={"minLength": 1}))
        assert PasswordScorer().criteria[0].weight == 25

    def test_custom_banding(self):
        scorer = PasswordScorer(ScoringConfig(banding=BandingScale(moderate=10, strong=60, very_strong=90)))
        assert scorer.evaluate("short").band == StrengthBand.MODERATE
        assert scorer.evaluate("abcdefgh").band == StrengthBand.MODERATE
        assert scorer.classify(90) == StrengthBand.VERY_STRONG


class TestClassifyScore:
    @pytest.mark.parametrize("score,band", [
        (0, StrengthBand.WEAK),
        (24, StrengthBand.WEAK),
        (25, StrengthBand.MODERATE),
        (49, StrengthBand.MODERATE),
        (50, StrengthBand.STRONG),
        (74, StrengthBand.STRONG),
        (75, StrengthBand.VERY_STRONG),
        (100, StrengthBand.VERY_STRONG),
    ])
    def test_band_boundaries(self, score, band):
        assert classify_score(score) == band

    def test_band_labels(self):
        assert classify_score(24).value == "Weak"
        assert classify_score(75).value == "Very strong"


class TestLogging:
    def test_password_text_is_never_logged(self, scorer, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.scorer.service"):
            scorer.evaluate("s3cret-Value")
        assert "s3cret-Value" not in caplog.text
        assert "length 12" in caplog.text
