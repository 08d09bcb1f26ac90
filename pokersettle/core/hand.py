"""
Hand Evaluation for Texas Hold'em.

A 5-card hand is classified into one of ten hand classes plus a tiebreak
tuple. Two evaluations compare by class first, then by tiebreak values
element by element, so ``(hand_class, values)`` is a total order over hand
strength. Suits never break ties.

Hand Classes (worst to best):
0. High Card
1. Pair
2. Two Pair
3. Three of a Kind
4. Straight
5. Flush
6. Full House
7. Four of a Kind
8. Straight Flush
9. Royal Flush

Note: Ace plays low in the A-2-3-4-5 straight (wheel), which is 5-high and
the lowest straight there is.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple, Optional
from itertools import combinations
from dataclasses import dataclass
from enum import IntEnum
from collections import Counter

from pokersettle.core.card import Card, Rank, RANK_CHARS
from pokersettle.core.errors import InvalidInputSizeError
from pokersettle.core.rules import HAND_SIZE, BEST_HAND_SOURCE_SIZES


class HandClass(IntEnum):
    """Hand classes from worst (lowest value) to best (highest value)."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


HAND_CLASS_NAMES = {
    HandClass.ROYAL_FLUSH: "Royal Flush",
    HandClass.STRAIGHT_FLUSH: "Straight Flush",
    HandClass.FOUR_OF_A_KIND: "Four of a Kind",
    HandClass.FULL_HOUSE: "Full House",
    HandClass.FLUSH: "Flush",
    HandClass.STRAIGHT: "Straight",
    HandClass.THREE_OF_A_KIND: "Three of a Kind",
    HandClass.TWO_PAIR: "Two Pair",
    HandClass.PAIR: "Pair",
    HandClass.HIGH_CARD: "High Card",
}

# Tiebreak value of a royal flush
ROYAL_FLUSH_VALUE = 10

WHEEL_VALUES = [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]


@dataclass(frozen=True)
class HandEvaluation:
    """
    The result of evaluating exactly five cards.

    Attributes:
        hand_class: The hand's class
        cards: The five cards, sorted by descending rank value
        values: Tiebreak values; length and meaning are fixed per class
        description: Human-readable description, e.g. "Pair of Jacks"
    """
    hand_class: HandClass
    cards: Tuple[Card, ...]
    values: Tuple[int, ...]
    description: str

    @property
    def key(self) -> Tuple[int, Tuple[int, ...]]:
        """Strength key: usable with max(), sorted() and ==."""
        return hand_key(self)

    @property
    def name(self) -> str:
        return HAND_CLASS_NAMES[self.hand_class]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "hand_class": self.hand_class.name,
            "hand_value": int(self.hand_class),
            "name": self.name,
            "cards": [card.to_dict() for card in self.cards],
            "values": list(self.values),
            "description": self.description,
        }


def evaluate_hand(cards: Sequence[Card]) -> HandEvaluation:
    """
    Evaluate exactly five cards.

    Args:
        cards: Five Card objects

    Returns:
        HandEvaluation with class, sorted cards, tiebreak values and description

    Raises:
        InvalidInputSizeError: If not exactly 5 cards are given
    """
    if len(cards) != HAND_SIZE:
        raise InvalidInputSizeError(
            f"Hand evaluation requires exactly {HAND_SIZE} cards, got {len(cards)}",
            expected=HAND_SIZE,
            actual=len(cards),
        )

    # Sort by rank descending
    sorted_cards = tuple(sorted(cards, key=lambda c: c.rank, reverse=True))
    ranks = [c.rank for c in sorted_cards]

    is_flush = len({c.suit for c in sorted_cards}) == 1
    straight_high = _straight_high(ranks)

    rank_counts = Counter(ranks)
    counts = sorted(rank_counts.values(), reverse=True)

    if straight_high is not None and is_flush:
        if straight_high == Rank.ACE:
            return _result(HandClass.ROYAL_FLUSH, sorted_cards, [ROYAL_FLUSH_VALUE],
                           "Royal Flush")
        return _result(HandClass.STRAIGHT_FLUSH, sorted_cards, [straight_high],
                       f"Straight Flush, {_label(straight_high)}-high")

    if counts == [4, 1]:
        quad = _ranks_with_count(rank_counts, 4)[0]
        kicker = _ranks_with_count(rank_counts, 1)[0]
        return _result(HandClass.FOUR_OF_A_KIND, sorted_cards, [quad, kicker],
                       f"Four of a Kind, {_plural(quad)}")

    if counts == [3, 2]:
        trips = _ranks_with_count(rank_counts, 3)[0]
        pair = _ranks_with_count(rank_counts, 2)[0]
        return _result(HandClass.FULL_HOUSE, sorted_cards, [trips, pair],
                       f"Full House, {_plural(trips)} over {_plural(pair)}")

    if is_flush:
        return _result(HandClass.FLUSH, sorted_cards, ranks,
                       f"Flush, {_label(ranks[0])}-high")

    if straight_high is not None:
        return _result(HandClass.STRAIGHT, sorted_cards, [straight_high],
                       f"Straight, {_label(straight_high)}-high")

    if counts == [3, 1, 1]:
        trips = _ranks_with_count(rank_counts, 3)[0]
        kickers = _ranks_with_count(rank_counts, 1)
        return _result(HandClass.THREE_OF_A_KIND, sorted_cards, [trips] + kickers,
                       f"Three of a Kind, {_plural(trips)}")

    if counts == [2, 2, 1]:
        high_pair, low_pair = _ranks_with_count(rank_counts, 2)
        kicker = _ranks_with_count(rank_counts, 1)[0]
        return _result(HandClass.TWO_PAIR, sorted_cards, [high_pair, low_pair, kicker],
                       f"Two Pair, {_plural(high_pair)} and {_plural(low_pair)}")

    if counts == [2, 1, 1, 1]:
        pair = _ranks_with_count(rank_counts, 2)[0]
        kickers = _ranks_with_count(rank_counts, 1)
        return _result(HandClass.PAIR, sorted_cards, [pair] + kickers,
                       f"Pair of {_plural(pair)}")

    return _result(HandClass.HIGH_CARD, sorted_cards, ranks,
                   f"High Card, {_label(ranks[0])}")


def _result(hand_class: HandClass, cards: Tuple[Card, ...], values: List[int],
            description: str) -> HandEvaluation:
    return HandEvaluation(
        hand_class=hand_class,
        cards=cards,
        values=tuple(int(v) for v in values),
        description=description,
    )


def _straight_high(ranks: List[Rank]) -> Optional[Rank]:
    """
    Return the high card of a straight formed by five sorted ranks.

    The wheel (A-2-3-4-5) returns FIVE, never ACE.
    """
    if len(set(ranks)) != HAND_SIZE:
        return None

    if ranks[0] - ranks[4] == 4:
        return ranks[0]

    if ranks == WHEEL_VALUES:
        return Rank.FIVE

    return None


def _ranks_with_count(rank_counts: Counter, count: int) -> List[Rank]:
    """Ranks appearing exactly ``count`` times, highest first."""
    return sorted((r for r, c in rank_counts.items() if c == count), reverse=True)


def _label(rank: int) -> str:
    return RANK_CHARS[Rank(rank)]


def _plural(rank: int) -> str:
    """Plural rank name: "Aces", "Kings", "10s", "7s"."""
    names = {
        Rank.ACE: "Aces", Rank.KING: "Kings",
        Rank.QUEEN: "Queens", Rank.JACK: "Jacks",
    }
    rank = Rank(rank)
    return names.get(rank, f"{RANK_CHARS[rank]}s")


def hand_key(evaluation: HandEvaluation) -> Tuple[int, Tuple[int, ...]]:
    """Return the (class, tiebreak values) tuple that orders hands."""
    return int(evaluation.hand_class), evaluation.values


def compare_hands(hand1: HandEvaluation, hand2: HandEvaluation) -> int:
    """
    Compare two evaluated hands.

    Returns:
        Positive if hand1 wins, negative if hand2 wins, 0 if tie
    """
    if hand1.hand_class != hand2.hand_class:
        return int(hand1.hand_class) - int(hand2.hand_class)

    for value1, value2 in zip(hand1.values, hand2.values):
        if value1 != value2:
            return value1 - value2

    return 0


def get_best_hand(cards: Sequence[Card]) -> HandEvaluation:
    """
    Find the best 5-card hand among 6 or 7 cards.

    Every 5-card combination is evaluated (6 for six cards, 21 for seven);
    among equally strong combinations the first one found is kept.

    Raises:
        InvalidInputSizeError: If not 6 or 7 cards are given
    """
    if len(cards) not in BEST_HAND_SOURCE_SIZES:
        raise InvalidInputSizeError(
            f"Best hand selection requires 6 or 7 cards, got {len(cards)}",
            expected=BEST_HAND_SOURCE_SIZES,
            actual=len(cards),
        )

    best: Optional[HandEvaluation] = None
    for combo in combinations(cards, HAND_SIZE):
        evaluation = evaluate_hand(combo)
        if best is None or compare_hands(evaluation, best) > 0:
            best = evaluation

    return best


def get_best_five_card_hand(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
) -> HandEvaluation:
    """Best hand from a player's hole cards plus the board (turn or river)."""
    return get_best_hand(list(hole_cards) + list(community_cards))


def best_available_hand(cards: Sequence[Card]) -> HandEvaluation:
    """Evaluate 5 cards directly, or pick the best 5 out of 6 or 7."""
    if len(cards) == HAND_SIZE:
        return evaluate_hand(cards)
    return get_best_hand(cards)


def determine_winners(evaluations: Sequence[HandEvaluation]) -> List[int]:
    """
    Find every evaluation tied for the best hand.

    Args:
        evaluations: Hand evaluations, index-aligned with the caller's contenders

    Returns:
        Indices of the winning evaluations (several on a tie, empty for no input)
    """
    if not evaluations:
        return []

    best_indices = [0]
    best = evaluations[0]

    for i in range(1, len(evaluations)):
        comparison = compare_hands(evaluations[i], best)
        if comparison > 0:
            best_indices = [i]
            best = evaluations[i]
        elif comparison == 0:
            best_indices.append(i)

    return best_indices
