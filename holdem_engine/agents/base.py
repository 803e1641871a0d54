"""
Base Agent Interface.

This module defines the abstract base class for computer-controlled seats.
An agent looks at the table and returns a Decision; the engine applies it.

Usage:
    class MyAgent(BaseAgent):
        def act(self, state, player):
            return Decision(ActionType.CALL)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from holdem_engine.core.player import Player
from holdem_engine.core.rules import ActionType
from holdem_engine.core.state import GameState


@dataclass(frozen=True)
class Decision:
    """
    An action chosen by an agent.

    Attributes:
        action: Action type to take
        amount: Raise increment above the table bet (RAISE only)
    """
    action: ActionType
    amount: int = 0


class BaseAgent(ABC):
    """
    Abstract base class for poker agents.

    Agents never mutate the state they are shown; they only pick an action
    for ``player``, who is the seat about to act.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__

    @abstractmethod
    def act(self, state: GameState, player: Player) -> Decision:
        """
        Choose an action for ``player``.

        Args:
            state: Current table state (read only)
            player: The seat about to act

        Returns:
            The Decision to apply
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"
