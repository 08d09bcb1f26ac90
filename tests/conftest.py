"""
Pytest configuration and shared fixtures for PokerSettle tests.
"""

import random

import pytest
from pokersettle.core.card import Card, Deck, Rank, Suit
from pokersettle.core.player import Player, PlayerState


class FixedRandom:
    """Random source whose uniform() always returns the same multiplier."""

    def __init__(self, value: float):
        self.value = value
        self.calls = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def deck():
    """Create a fresh deck shuffled with a fixed seed."""
    return Deck(shuffle=True, rng=random.Random(42))


@pytest.fixture
def unshuffled_deck():
    """Create a fresh unshuffled deck."""
    return Deck(shuffle=False)


@pytest.fixture
def make_player():
    """Factory for players with a given total bet and state."""
    def _make(player_id, total_bet=0, chips=0, seat=0, folded=False, all_in=False, cards=None):
        if folded:
            state = PlayerState.FOLDED
        elif all_in:
            state = PlayerState.ALL_IN
        else:
            state = PlayerState.ACTIVE
        return Player(
            player_id=player_id,
            chips=chips,
            seat=seat,
            total_bet=total_bet,
            state=state,
            hole_cards=cards or [],
        )
    return _make


@pytest.fixture
def fixed_random():
    """Factory for a random source returning a fixed multiplier."""
    return FixedRandom


@pytest.fixture
def sample_hand():
    """Create a sample 5-card hand (pair of aces)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.QUEEN, Suit.CLUBS),
        Card(Rank.JACK, Suit.SPADES),
    ]


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]
