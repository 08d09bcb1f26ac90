"""
PokerSettle - Texas Hold'em Settlement Engine

Hand evaluation, side pots and pot distribution, plus a heuristic AI
opponent:
- Pure Python settlement core (no external poker dependencies)
- FastAPI JSON service exposing the core to a game client

Usage:
    from pokersettle.core import Card, Player, evaluate_hand, settle_hand
    from pokersettle.agents import HeuristicAgent
"""

__version__ = "0.2.0"

from pokersettle.core.card import Card, Deck
from pokersettle.core.player import Player
from pokersettle.core.hand import HandClass, HandEvaluation, evaluate_hand, get_best_hand
from pokersettle.core.showdown import handle_showdown, settle_hand

__all__ = [
    "Card",
    "Deck",
    "Player",
    "HandClass",
    "HandEvaluation",
    "evaluate_hand",
    "get_best_hand",
    "handle_showdown",
    "settle_hand",
    "__version__",
]
