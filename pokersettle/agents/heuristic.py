"""
Heuristic AI Decision Engine.

Scores the agent's hand on a 0-10 scale, scales the score by a random
variance multiplier, and compares it against the thresholds of a
difficulty tier:

- Pre-flop: pocket pairs score min(10, value / 2 + 3); other hands score
  the average rank value / 2.
- Post-flop: the hand class value (0-9) of the best hand available.

Raises are always the table's minimum raise.

The random source is injectable: anything with ``uniform(a, b)`` works, so a
seeded ``random.Random`` makes decisions reproducible.
"""

import logging
import random
from typing import Optional, Sequence

from pokersettle.agents.base import BaseAgent, Decision
from pokersettle.core.card import Card
from pokersettle.core.errors import InvalidInputSizeError
from pokersettle.core.hand import best_available_hand
from pokersettle.core.player import Player
from pokersettle.core.rules import (
    ActionType, DifficultyConfig, TableState,
    DEFAULT_DIFFICULTY, HOLE_CARDS, MAX_HAND_STRENGTH, get_difficulty_config,
)


logger = logging.getLogger(__name__)

_default_rng = random.Random()


def calculate_hand_strength(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
) -> float:
    """
    Score a hand from 0 (hopeless) to 10 (unbeatable).

    Args:
        hole_cards: The player's two hole cards (may be empty)
        community_cards: 0, 3, 4 or 5 board cards

    Returns:
        Hand strength on the 0-10 scale

    Raises:
        InvalidInputSizeError: If hole cards are given but not exactly two
    """
    if not hole_cards:
        return 0.0

    if len(hole_cards) != HOLE_CARDS:
        raise InvalidInputSizeError(
            f"Expected {HOLE_CARDS} hole cards, got {len(hole_cards)}",
            expected=HOLE_CARDS,
            actual=len(hole_cards),
        )

    if not community_cards:
        value1, value2 = hole_cards[0].value, hole_cards[1].value
        if value1 == value2:
            return min(MAX_HAND_STRENGTH, value1 / 2 + 3)
        return (value1 + value2) / 2 / 2

    evaluation = best_available_hand(list(hole_cards) + list(community_cards))
    return float(evaluation.hand_class)


def make_decision(
    player: Player,
    table_state: TableState,
    config: Optional[DifficultyConfig] = None,
    rng=None,
    hand_strength: Optional[float] = None,
) -> Decision:
    """
    Choose fold, check, call or raise for ``player``.

    Args:
        player: The deciding player (hole_cards, chips, current_bet)
        table_state: Board, current bet, pot and minimum raise
        config: Difficulty thresholds; medium when omitted
        rng: Random source with ``uniform(a, b)``
        hand_strength: Precomputed 0-10 strength, skips hand evaluation

    Returns:
        The Decision; RAISE always carries table_state.min_raise
    """
    config = config or get_difficulty_config(DEFAULT_DIFFICULTY)
    rng = rng or _default_rng

    if hand_strength is None:
        hand_strength = calculate_hand_strength(player.hole_cards, table_state.community_cards)

    multiplier = rng.uniform(config.variance_min, config.variance_max)
    adjusted_strength = hand_strength * multiplier

    amount_to_call = table_state.current_bet - player.current_bet
    can_call = player.chips >= amount_to_call
    can_raise = player.chips > amount_to_call
    pot_odds = 0.0
    if amount_to_call > 0 and table_state.pot > 0:
        pot_odds = amount_to_call / table_state.pot

    decision = _apply_thresholds(
        config, adjusted_strength, amount_to_call, can_call, can_raise, pot_odds,
        table_state.min_raise,
    )

    logger.debug(
        f"Player {player.player_id}: strength={hand_strength:.2f} "
        f"adjusted={adjusted_strength:.2f} to_call={amount_to_call} "
        f"pot_odds={pot_odds:.2f} -> {decision.action.value}"
    )
    return decision


def _apply_thresholds(
    config: DifficultyConfig,
    strength: float,
    amount_to_call: int,
    can_call: bool,
    can_raise: bool,
    pot_odds: float,
    min_raise: int,
) -> Decision:
    """The decision table."""
    if amount_to_call <= 0:
        if strength >= config.raise_threshold and can_raise:
            return Decision(ActionType.RAISE, min_raise)
        return Decision(ActionType.CHECK)

    if strength < config.fold_threshold:
        return Decision(ActionType.FOLD)

    if strength >= config.raise_threshold and can_raise:
        return Decision(ActionType.RAISE, min_raise)

    if strength >= config.call_threshold and can_call:
        return Decision(ActionType.CALL)

    # Weak hand: still call when the price is small relative to the pot
    if pot_odds < config.pot_odds_threshold and can_call:
        return Decision(ActionType.CALL)

    return Decision(ActionType.FOLD)


class HeuristicAgent(BaseAgent):
    """
    An agent that plays by the heuristic decision table.

    The agent is bound to one difficulty tier and one random source.
    """

    def __init__(
        self,
        player_id: str,
        name: Optional[str] = None,
        difficulty=DEFAULT_DIFFICULTY,
        rng=None,
    ):
        """
        Initialize the heuristic agent.

        Args:
            player_id: Id of the seat this agent plays
            name: Optional name
            difficulty: Difficulty tier name or a DifficultyConfig
            rng: Random source; a fresh random.Random when omitted
        """
        super().__init__(player_id, name or f"Bot-{player_id}")
        if isinstance(difficulty, DifficultyConfig):
            self.config = difficulty
        else:
            self.config = get_difficulty_config(difficulty)
        self.rng = rng or random.Random()

    def act(self, player: Player, table_state: TableState) -> Decision:
        """Decide using this agent's difficulty and random source."""
        return make_decision(player, table_state, self.config, self.rng)
