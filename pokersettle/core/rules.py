"""
Texas Hold'em Settlement Rules and Constants.

This module holds the fixed rules the settlement core relies on and the
named AI difficulty tiers:

1. A hand is exactly 5 cards; the best hand is chosen from 6 cards (turn)
   or 7 cards (river).

2. Side pots: each distinct contribution level forms its own pot, won only
   by live players who reached that level.

3. Odd chips: when a pot does not split evenly, leftover chips go one at a
   time to the winners in ascending seat order.

4. AI raises are always the table's minimum raise.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from pokersettle.core.card import Card


# Hand evaluation
HAND_SIZE = 5  # Best 5-card hand
BEST_HAND_SOURCE_SIZES: Tuple[int, ...] = (6, 7)

# Cards per player and on the flop
HOLE_CARDS = 2
FLOP_CARDS = 3

# Table defaults
DEFAULT_MIN_RAISE = 20

# Pre-flop heuristic scale
MAX_HAND_STRENGTH = 10


class ActionType(Enum):
    """Betting actions the decision engine can choose."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    RAISE = "RAISE"


class GamePhase(Enum):
    """Betting phases, used only for advice text."""
    PREFLOP = "pre-flop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"


@dataclass
class TableState:
    """
    The slice of table state the decision engine reads.

    Attributes:
        community_cards: Board cards dealt so far (0, 3, 4 or 5)
        current_bet: Highest bet in the current betting round
        pot: Chips already in the pot
        min_raise: The table's minimum raise amount
    """
    community_cards: List[Card] = field(default_factory=list)
    current_bet: int = 0
    pot: int = 0
    min_raise: int = DEFAULT_MIN_RAISE


class DifficultyLevel(str, Enum):
    """Named AI difficulty tiers."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyConfig:
    """
    Decision thresholds for one difficulty tier.

    Thresholds are on the 0-10 hand-strength scale. The variance multiplier
    is drawn uniformly from [variance_min, variance_min + variance_range].
    """
    fold_threshold: float
    call_threshold: float
    raise_threshold: float
    variance_min: float
    variance_range: float
    pot_odds_threshold: float

    def __post_init__(self):
        if not self.fold_threshold <= self.call_threshold <= self.raise_threshold:
            raise ValueError(
                "Thresholds must satisfy fold <= call <= raise, got "
                f"{self.fold_threshold}/{self.call_threshold}/{self.raise_threshold}"
            )
        if self.variance_min < 0 or self.variance_range < 0:
            raise ValueError("Variance bounds must be non-negative")

    @property
    def variance_max(self) -> float:
        return self.variance_min + self.variance_range

    def to_dict(self) -> Dict[str, float]:
        return {
            "fold_threshold": self.fold_threshold,
            "call_threshold": self.call_threshold,
            "raise_threshold": self.raise_threshold,
            "variance_min": self.variance_min,
            "variance_range": self.variance_range,
            "pot_odds_threshold": self.pot_odds_threshold,
        }


DIFFICULTY_CONFIG: Dict[DifficultyLevel, DifficultyConfig] = {
    # Passive: folds often, raises only with trips or better
    DifficultyLevel.EASY: DifficultyConfig(
        fold_threshold=3,
        call_threshold=5,
        raise_threshold=7,
        variance_min=0.7,
        variance_range=0.4,
        pot_odds_threshold=0.25,
    ),
    DifficultyLevel.MEDIUM: DifficultyConfig(
        fold_threshold=2,
        call_threshold=4,
        raise_threshold=6,
        variance_min=0.8,
        variance_range=0.4,
        pot_odds_threshold=0.3,
    ),
    # Aggressive: rarely folds, least variance
    DifficultyLevel.HARD: DifficultyConfig(
        fold_threshold=1,
        call_threshold=3,
        raise_threshold=5,
        variance_min=0.85,
        variance_range=0.4,
        pot_odds_threshold=0.35,
    ),
}

DEFAULT_DIFFICULTY = DifficultyLevel.MEDIUM

DIFFICULTY_LABELS = {
    DifficultyLevel.EASY: "Easy",
    DifficultyLevel.MEDIUM: "Medium",
    DifficultyLevel.HARD: "Hard",
}

DIFFICULTY_DESCRIPTIONS = {
    DifficultyLevel.EASY: "AI opponents play cautiously and fold often. Good for learning the basics.",
    DifficultyLevel.MEDIUM: "AI opponents play with balanced strategy. Recommended for most players.",
    DifficultyLevel.HARD: "AI opponents play aggressively and bluff more. A real challenge!",
}


def get_difficulty_config(difficulty) -> DifficultyConfig:
    """
    Look up the configuration for a difficulty tier.

    Args:
        difficulty: A DifficultyLevel or its string value ("easy", ...)

    Raises:
        ValueError: If the difficulty name is unknown
    """
    try:
        level = DifficultyLevel(difficulty)
    except ValueError:
        valid = ", ".join(level.value for level in DifficultyLevel)
        raise ValueError(f"Unknown difficulty: {difficulty!r} (expected one of {valid})")
    return DIFFICULTY_CONFIG[level]
