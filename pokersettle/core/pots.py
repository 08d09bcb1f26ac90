"""
Side pot calculation and pot distribution.

When players go all-in for different amounts, the chips in the middle are
split into one pot per contribution level:

    A: folded     (total_bet 10)
    B: all-in     (total_bet 20)
    C: all-in     (total_bet 50)
    D: called     (total_bet 50)

    Level 10:  10 x 4 = 40   eligible B, C, D  (A folded)
    Level 20:  10 x 3 = 30   eligible B, C, D
    Level 50:  30 x 2 = 60   eligible C, D

Each level is kept as its own pot; the first is the main pot, the rest are
side pots. Folded players fund every level they reached but win none.
"""

from __future__ import annotations
from typing import Dict, List, Sequence
from dataclasses import dataclass, field
import logging

from pokersettle.core.errors import InternalConsistencyError
from pokersettle.core.player import Player, find_player


logger = logging.getLogger(__name__)


@dataclass
class Pot:
    """Represents a pot (main pot or side pot)."""
    amount: int = 0
    eligible_player_ids: List[str] = field(default_factory=list)
    is_side_pot: bool = False

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "eligible_player_ids": list(self.eligible_player_ids),
            "is_side_pot": self.is_side_pot,
        }


@dataclass
class PotResult:
    """The settled outcome of one pot."""
    amount: int
    winner_ids: List[str]
    winner_names: List[str]
    is_side_pot: bool

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "winner_ids": list(self.winner_ids),
            "winner_names": list(self.winner_names),
            "is_side_pot": self.is_side_pot,
        }


def calculate_side_pots(players: Sequence[Player]) -> List[Pot]:
    """
    Split every player's total_bet into a main pot and side pots.

    Args:
        players: All players dealt into the hand, folded or not

    Returns:
        Pots ordered from main pot to the last side pot. Their amounts add up
        to the sum of all players' total_bet.
    """
    contributors = [p for p in players if p.total_bet > 0]
    if not contributors:
        return []

    levels = sorted({p.total_bet for p in contributors})

    pots: List[Pot] = []
    prev_level = 0

    for level in levels:
        funders = [p for p in contributors if p.total_bet >= level]
        amount = (level - prev_level) * len(funders)
        eligible = [p.player_id for p in funders if not p.is_folded]

        if not eligible and pots:
            # Only folded players reached this level; the chips stay with the
            # pot below so nothing is left unclaimed.
            pots[-1].amount += amount
            logger.debug(f"Merged {amount} folded-only chips at level {level} into previous pot")
        else:
            pots.append(Pot(amount=amount, eligible_player_ids=eligible, is_side_pot=bool(pots)))

        prev_level = level

    logger.debug(
        "Calculated pots: " + ", ".join(
            f"{'side' if pot.is_side_pot else 'main'}={pot.amount} {pot.eligible_player_ids}"
            for pot in pots
        )
    )
    return pots


def distribute_pot(
    pot: Pot,
    winner_ids: Sequence[str],
    players: Sequence[Player],
) -> Dict[str, int]:
    """
    Pay a pot out to its winners, adding to their chips in place.

    Each winner receives an equal share; the odd chips left over go one at a
    time to the winners in ascending seat order.

    Args:
        pot: The pot to distribute
        winner_ids: IDs of players who won this pot (more than one on a split)
        players: All players (winners' chips are modified)

    Returns:
        Mapping of winner id to chips awarded; values sum to pot.amount

    Raises:
        InternalConsistencyError: If there are no winners or a winner id is unknown
    """
    if not winner_ids:
        raise InternalConsistencyError(f"Cannot distribute pot of {pot.amount} with no winners")

    winners: List[Player] = []
    for winner_id in dict.fromkeys(winner_ids):
        player = find_player(list(players), winner_id)
        if player is None:
            raise InternalConsistencyError(f"Winner not found: {winner_id}")
        winners.append(player)

    share, remainder = divmod(pot.amount, len(winners))
    awards = {p.player_id: share for p in winners}

    for player in sorted(winners, key=lambda p: p.seat)[:remainder]:
        awards[player.player_id] += 1

    for player in winners:
        player.chips += awards[player.player_id]

    logger.debug(f"Distributed pot of {pot.amount}: {awards}")
    return awards
