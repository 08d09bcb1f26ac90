"""
PokerSettle Agents - computer opponents

This module provides the base agent interface and the heuristic agent
driven by hand strength and difficulty thresholds.
"""

from pokersettle.agents.base import BaseAgent, Decision
from pokersettle.agents.heuristic import HeuristicAgent, calculate_hand_strength, make_decision

__all__ = ["BaseAgent", "Decision", "HeuristicAgent", "calculate_hand_strength", "make_decision"]
