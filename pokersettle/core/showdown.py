"""
Showdown settlement with side pot support.

Pots are calculated once, then each pot is awarded on its own: only the
live players eligible for that pot compete for it, so a short all-in
player can win the main pot while someone else takes a side pot.
"""

from __future__ import annotations
from typing import Dict, List, Sequence
from dataclasses import dataclass, field
import logging

from pokersettle.core.card import Card
from pokersettle.core.errors import InternalConsistencyError, InvalidInputSizeError
from pokersettle.core.hand import HandEvaluation, best_available_hand, determine_winners
from pokersettle.core.player import Player
from pokersettle.core.pots import Pot, PotResult, calculate_side_pots, distribute_pot


logger = logging.getLogger(__name__)


@dataclass
class ShowdownResult:
    """
    Outcome of a showdown.

    Attributes:
        winners: Players who won at least one pot, in table order
        pot_results: One record per awarded pot, main pot first
        skipped_pots: Pots nobody was eligible to win (should stay empty)
        evaluations: Hand evaluation per live player id, when known
    """
    winners: List[Player] = field(default_factory=list)
    pot_results: List[PotResult] = field(default_factory=list)
    skipped_pots: List[Pot] = field(default_factory=list)
    evaluations: Dict[str, HandEvaluation] = field(default_factory=dict)

    @property
    def winner_ids(self) -> List[str]:
        return [p.player_id for p in self.winners]

    @property
    def total_awarded(self) -> int:
        return sum(r.amount for r in self.pot_results)


def handle_showdown(
    players: Sequence[Player],
    hand_evaluations: Sequence[HandEvaluation],
    strict: bool = False,
) -> ShowdownResult:
    """
    Settle all pots of a hand and pay the winners.

    Args:
        players: All players in the hand; winners' chips are modified
        hand_evaluations: Evaluations for the non-folded players, in the same
            order as those players appear in ``players``
        strict: Raise instead of skipping a pot with no eligible player

    Returns:
        ShowdownResult with the winners and per-pot results

    Raises:
        InvalidInputSizeError: If the evaluations don't line up with the live players
        InternalConsistencyError: In strict mode, for a pot nobody can win
    """
    active_players = [p for p in players if p.is_in_hand]
    if len(hand_evaluations) != len(active_players):
        raise InvalidInputSizeError(
            f"Expected {len(active_players)} hand evaluations, got {len(hand_evaluations)}",
            expected=len(active_players),
            actual=len(hand_evaluations),
        )

    evaluation_by_id = {
        player.player_id: evaluation
        for player, evaluation in zip(active_players, hand_evaluations)
    }
    result = ShowdownResult(evaluations=evaluation_by_id)

    pots = calculate_side_pots(players)
    if not pots:
        return result

    all_winner_ids = set()

    for pot in pots:
        eligible_players = [p for p in active_players if p.player_id in pot.eligible_player_ids]

        if not eligible_players:
            message = f"Pot of {pot.amount} has no eligible players"
            if strict:
                raise InternalConsistencyError(message)
            logger.error(message + "; skipping")
            result.skipped_pots.append(pot)
            continue

        eligible_evaluations = [evaluation_by_id[p.player_id] for p in eligible_players]
        winner_indices = determine_winners(eligible_evaluations)
        pot_winners = [eligible_players[i] for i in winner_indices]

        distribute_pot(pot, [p.player_id for p in pot_winners], players)

        result.pot_results.append(PotResult(
            amount=pot.amount,
            winner_ids=[p.player_id for p in pot_winners],
            winner_names=[p.name for p in pot_winners],
            is_side_pot=pot.is_side_pot,
        ))
        all_winner_ids.update(p.player_id for p in pot_winners)

    result.winners = [p for p in players if p.player_id in all_winner_ids]

    logger.info(
        f"Showdown settled {len(result.pot_results)} pot(s) totalling "
        f"{result.total_awarded}; winners: {result.winner_ids}"
    )
    return result


def settle_hand(
    players: Sequence[Player],
    community_cards: Sequence[Card],
    strict: bool = False,
) -> ShowdownResult:
    """
    Evaluate every live player's hole cards against the board, then settle.

    The board must bring each live player to 5, 6 or 7 cards.
    """
    evaluations = [
        best_available_hand(list(p.hole_cards) + list(community_cards))
        for p in players
        if p.is_in_hand
    ]
    return handle_showdown(players, evaluations, strict=strict)
