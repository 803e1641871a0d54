"""
Agents - decision makers for computer-controlled seats.
"""

from holdem_engine.agents.base import BaseAgent, Decision
from holdem_engine.agents.heuristic_agent import HeuristicAgent

__all__ = ["BaseAgent", "Decision", "HeuristicAgent"]
