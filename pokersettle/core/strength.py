"""
Hand strength descriptions and beginner advice.

Buckets a hand as weak, medium or strong and turns that into a short piece
of advice for the player whose turn it is.
"""

from __future__ import annotations
from typing import Optional, Sequence

from pokersettle.core.card import Card, Rank, RANK_CHARS
from pokersettle.core.errors import InvalidInputSizeError
from pokersettle.core.hand import HandClass, HandEvaluation, best_available_hand
from pokersettle.core.rules import GamePhase, FLOP_CARDS, HOLE_CARDS

WEAK = "weak"
MEDIUM = "medium"
STRONG = "strong"

HIGH_PAIR_RANKS = (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK)

BOARD_PHASES = {
    0: GamePhase.PREFLOP,
    3: GamePhase.FLOP,
    4: GamePhase.TURN,
    5: GamePhase.RIVER,
}


def classify_hand_strength(evaluation: HandEvaluation) -> str:
    """
    Bucket a made hand.

    Three of a kind or better is strong. Two pair, or a pair of Jacks or
    better, is medium. A low pair or high card is weak.
    """
    if evaluation.hand_class >= HandClass.THREE_OF_A_KIND:
        return STRONG

    if evaluation.hand_class == HandClass.TWO_PAIR:
        return MEDIUM

    if evaluation.hand_class == HandClass.PAIR:
        return MEDIUM if evaluation.values[0] in HIGH_PAIR_RANKS else WEAK

    return WEAK


def classify_hole_cards(hole_cards: Sequence[Card]) -> str:
    """Bucket a starting hand before the flop."""
    if len(hole_cards) != HOLE_CARDS:
        raise InvalidInputSizeError(
            f"Expected {HOLE_CARDS} hole cards, got {len(hole_cards)}",
            expected=HOLE_CARDS,
            actual=len(hole_cards),
        )

    card1, card2 = hole_cards
    if card1.rank == card2.rank:
        return STRONG if card1.rank >= Rank.TEN else MEDIUM

    has_high_card = any(c.rank >= Rank.QUEEN for c in hole_cards)
    suited = card1.suit == card2.suit
    return MEDIUM if has_high_card and suited else WEAK


def describe_hole_cards(cards: Sequence[Card]) -> str:
    """
    Describe two hole cards, e.g. "Pocket Aces" or "Ace-King suited".
    """
    if len(cards) != HOLE_CARDS:
        return ""

    card1, card2 = cards
    if card1.rank == card2.rank:
        return f"Pocket {_plural(card1.rank)}"

    high, low = sorted(cards, key=lambda c: c.rank, reverse=True)
    suited = " suited" if card1.suit == card2.suit else ""
    return f"{_name(high.rank)}-{_name(low.rank)}{suited}"


def get_strategic_advice(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    current_bet: int = 0,
    player_bet: int = 0,
    pot: int = 0,
    phase: Optional[GamePhase] = None,
) -> str:
    """
    Beginner-friendly advice for the current decision.

    Args:
        hole_cards: The player's hole cards
        community_cards: Board cards dealt so far
        current_bet: Highest bet in the round
        player_bet: What the player has already put in this round
        pot: Chips in the pot
        phase: Betting phase; inferred from the board size when omitted
    """
    if not hole_cards:
        return "Waiting for cards to be dealt..."

    if phase is None:
        phase = _phase_for_board(community_cards)

    if len(community_cards) >= FLOP_CARDS:
        evaluation = best_available_hand(list(hole_cards) + list(community_cards))
        strength = classify_hand_strength(evaluation)
        hand_description = evaluation.description
    else:
        strength = classify_hole_cards(hole_cards)
        hand_description = describe_hole_cards(hole_cards)

    amount_to_call = current_bet - player_bet
    pot_odds = 0
    if pot > 0 and amount_to_call > 0:
        pot_odds = round(amount_to_call / (pot + amount_to_call) * 100)

    advice = f"You have: {hand_description}\n"

    if phase == GamePhase.PREFLOP:
        if strength == STRONG:
            advice += "\nThis is a strong starting hand! Consider raising to build the pot."
        elif strength == MEDIUM:
            advice += "\nThis is a decent hand. Calling or raising are both reasonable options."
        else:
            advice += "\nThis is a weak starting hand. Consider folding if there's a bet."
        return advice

    if strength == STRONG:
        advice += "\nStrong hand! You should bet or raise to build the pot and protect your hand."
    elif strength == MEDIUM:
        if amount_to_call == 0:
            advice += "\nMedium strength. Checking is safe, but betting is also reasonable."
        elif 0 < pot_odds < 30:
            advice += f"\nMedium strength. You're getting good pot odds ({pot_odds}%). Calling is reasonable."
        else:
            advice += "\nMedium strength. Consider the bet size - fold if it's too large, call if it's small."
    else:
        if amount_to_call == 0:
            advice += "\nWeak hand. Checking is your best option here."
        elif 0 < pot_odds < 20:
            advice += f"\nWeak hand, but you're getting very good pot odds ({pot_odds}%). A call might be worth it."
        else:
            advice += "\nWeak hand. Folding is usually the right move when facing a bet."

    return advice


def _phase_for_board(community_cards: Sequence[Card]) -> GamePhase:
    return BOARD_PHASES.get(len(community_cards), GamePhase.PREFLOP)


def _name(rank: Rank) -> str:
    names = {Rank.ACE: "Ace", Rank.KING: "King", Rank.QUEEN: "Queen", Rank.JACK: "Jack"}
    return names.get(rank, RANK_CHARS[rank])


def _plural(rank: Rank) -> str:
    return f"{_name(rank)}s"
