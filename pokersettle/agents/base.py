"""
Base Agent Interface for PokerSettle.

This module defines the abstract base class for computer opponents. The
table driving the game owns turn order; an agent is only asked for a
decision when it is its turn.

Usage:
    class MyAgent(BaseAgent):
        def act(self, player, table_state):
            return Decision(ActionType.CHECK)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pokersettle.core.player import Player
from pokersettle.core.rules import ActionType, TableState


@dataclass(frozen=True)
class Decision:
    """
    A betting decision.

    Attributes:
        action: The chosen action
        amount: Raise amount for RAISE, None otherwise
    """
    action: ActionType
    amount: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"action": self.action.value}
        if self.amount is not None:
            result["amount"] = self.amount
        return result


class BaseAgent(ABC):
    """
    Abstract base class for poker agents.

    Attributes:
        player_id: Id of the seat this agent plays
        name: Human-readable name
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        """
        Initialize the agent.

        Args:
            player_id: Id of the seat this agent plays
            name: Optional human-readable name
        """
        self.player_id = player_id
        self.name = name or f"Agent-{player_id}"

    @abstractmethod
    def act(self, player: Player, table_state: TableState) -> Decision:
        """
        Choose an action for ``player`` given the table.

        Args:
            player: The agent's own player record (hole cards, chips, bets)
            table_state: Board, current bet, pot and minimum raise

        Returns:
            The Decision to apply
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.player_id}, {self.name})"
