"""
PokerSettle Core - Pure Python settlement logic

This module contains hand evaluation, pot calculation and distribution
without any network dependencies.
"""

from pokersettle.core.card import Card, Deck, Rank, Suit
from pokersettle.core.errors import (
    PokerSettleError, InvalidInputSizeError, InternalConsistencyError,
)
from pokersettle.core.player import Player, PlayerState
from pokersettle.core.hand import (
    HandClass, HandEvaluation, evaluate_hand, compare_hands,
    get_best_hand, get_best_five_card_hand, determine_winners,
)
from pokersettle.core.pots import Pot, PotResult, calculate_side_pots, distribute_pot
from pokersettle.core.showdown import ShowdownResult, handle_showdown, settle_hand
from pokersettle.core.strength import (
    classify_hand_strength, describe_hole_cards, get_strategic_advice,
)
from pokersettle.core.rules import (
    ActionType, TableState, DifficultyConfig, DifficultyLevel, get_difficulty_config,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "PokerSettleError",
    "InvalidInputSizeError",
    "InternalConsistencyError",
    "Player",
    "PlayerState",
    "HandClass",
    "HandEvaluation",
    "evaluate_hand",
    "compare_hands",
    "get_best_hand",
    "get_best_five_card_hand",
    "determine_winners",
    "Pot",
    "PotResult",
    "calculate_side_pots",
    "distribute_pot",
    "ShowdownResult",
    "handle_showdown",
    "settle_hand",
    "classify_hand_strength",
    "describe_hole_cards",
    "get_strategic_advice",
    "ActionType",
    "TableState",
    "DifficultyConfig",
    "DifficultyLevel",
    "get_difficulty_config",
]
