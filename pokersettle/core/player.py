"""
Player class for settlement.

Tracks the per-hand state the settlement core reads:
- Stack (chips), the only long-lived value the core mutates
- Hole cards
- Current bet in the round and total bet in the hand
- Player state (active, folded, all-in)
"""

from __future__ import annotations
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field
from enum import Enum, auto

from pokersettle.core.card import Card


class PlayerState(Enum):
    """Player states during a hand."""
    ACTIVE = auto()       # Still in the hand, can act
    FOLDED = auto()       # Has folded
    ALL_IN = auto()       # All-in, no more actions


@dataclass
class Player:
    """
    A player at the table.

    Attributes:
        player_id: Unique identifier for the player
        chips: Current chip count
        name: Display name (defaults to the id)
        seat: Seat position at the table (0-indexed), orders odd-chip payouts
        hole_cards: The player's private cards (2 cards)
        current_bet: Amount bet in the current betting round
        total_bet: Total amount bet in the current hand (basis of pot tiers)
        state: Current player state
    """
    player_id: str
    chips: int
    name: str = ""
    seat: int = 0
    hole_cards: List[Card] = field(default_factory=list)
    current_bet: int = 0
    total_bet: int = 0
    state: PlayerState = PlayerState.ACTIVE

    def __post_init__(self):
        if not self.name:
            self.name = self.player_id

    def bet(self, amount: int) -> int:
        """
        Move chips from the stack into this hand's contribution.

        Returns:
            Actual amount bet (less than requested if the player runs out)
        """
        if amount <= 0:
            return 0

        actual_amount = min(amount, self.chips)

        self.chips -= actual_amount
        self.current_bet += actual_amount
        self.total_bet += actual_amount

        if self.chips == 0:
            self.state = PlayerState.ALL_IN

        return actual_amount

    def fold(self) -> None:
        """Fold the hand. Chips already bet stay in the pot."""
        self.state = PlayerState.FOLDED

    @property
    def is_folded(self) -> bool:
        return self.state == PlayerState.FOLDED

    @property
    def is_all_in(self) -> bool:
        return self.state == PlayerState.ALL_IN

    @property
    def is_in_hand(self) -> bool:
        """Check if player can still win a pot."""
        return self.state in (PlayerState.ACTIVE, PlayerState.ALL_IN)

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "id": self.player_id,
            "name": self.name,
            "seat": self.seat,
            "chips": self.chips,
            "bet": self.current_bet,
            "total_bet": self.total_bet,
            "state": self.state.name,
        }

        if not hide_cards and self.hole_cards:
            result["cards"] = [card.to_dict() for card in self.hole_cards]

        return result

    def __repr__(self) -> str:
        return (
            f"Player({self.player_id}, chips={self.chips}, "
            f"total_bet={self.total_bet}, state={self.state.name})"
        )

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hole_cards) if self.hole_cards else "??"
        return f"Player {self.player_id} [{cards_str}] ${self.chips}"


def find_player(players: List[Player], player_id: str) -> Optional[Player]:
    """Get player by ID."""
    for player in players:
        if player.player_id == player_id:
            return player
    return None
