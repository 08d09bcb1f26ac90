"""
Tests for rule constants and difficulty tiers.
"""

import pytest
from pokersettle.core.rules import (
    DifficultyConfig, DifficultyLevel, DIFFICULTY_CONFIG, DEFAULT_DIFFICULTY,
    DIFFICULTY_LABELS, DIFFICULTY_DESCRIPTIONS, DEFAULT_MIN_RAISE, TableState, get_difficulty_config,
)


class TestDifficultyConfig:
    """Tests for the difficulty table."""

    @pytest.mark.parametrize("level,thresholds,variance,pot_odds", [
        (DifficultyLevel.EASY, (3, 5, 7), (0.7, 0.4), 0.25),
        (DifficultyLevel.MEDIUM, (2, 4, 6), (0.8, 0.4), 0.3),
        (DifficultyLevel.HARD, (1, 3, 5), (0.85, 0.4), 0.35),
    ])
    def test_tiers(self, level, thresholds, variance, pot_odds):
        config = DIFFICULTY_CONFIG[level]
        assert (config.fold_threshold, config.call_threshold, config.raise_threshold) == thresholds
        assert (config.variance_min, config.variance_range) == variance
        assert config.pot_odds_threshold == pot_odds

    def test_every_tier_is_labelled(self):
        for level in DifficultyLevel:
            assert level in DIFFICULTY_CONFIG
            assert DIFFICULTY_LABELS[level]
            assert DIFFICULTY_DESCRIPTIONS[level]

    def test_default_is_medium(self):
        assert DEFAULT_DIFFICULTY == DifficultyLevel.MEDIUM

    def test_variance_max(self):
        assert DIFFICULTY_CONFIG[DifficultyLevel.MEDIUM].variance_max == pytest.approx(1.2)

    def test_thresholds_must_be_ordered(self):
        with pytest.raises(ValueError):
            DifficultyConfig(
                fold_threshold=5, call_threshold=4, raise_threshold=6,
                variance_min=1.0, variance_range=0.0, pot_odds_threshold=0.3,
            )

    def test_variance_must_be_non_negative(self):
        with pytest.raises(ValueError):
            DifficultyConfig(
                fold_threshold=1, call_threshold=2, raise_threshold=3,
                variance_min=1.0, variance_range=-0.1, pot_odds_threshold=0.3,
            )

    def test_to_dict(self):
        assert DIFFICULTY_CONFIG[DifficultyLevel.HARD].to_dict() == {
            "fold_threshold": 1,
            "call_threshold": 3,
            "raise_threshold": 5,
            "variance_min": 0.85,
            "variance_range": 0.4,
            "pot_odds_threshold": 0.35,
        }


class TestGetDifficultyConfig:
    """Tests for looking tiers up by name."""

    def test_by_name(self):
        assert get_difficulty_config("easy") is DIFFICULTY_CONFIG[DifficultyLevel.EASY]

    def test_by_level(self):
        assert get_difficulty_config(DifficultyLevel.HARD) is DIFFICULTY_CONFIG[DifficultyLevel.HARD]

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown difficulty"):
            get_difficulty_config("impossible")


class TestTableState:
    """Tests for the table state defaults."""

    def test_defaults(self):
        table = TableState()
        assert table.community_cards == []
        assert table.current_bet == 0
        assert table.pot == 0
        assert table.min_raise == DEFAULT_MIN_RAISE == 20
