"""Base agent class for Go Fish players."""

from abc import ABC, abstractmethod

from go_fish.cards import Rank
from go_fish.state import TurnView


class BaseAgent(ABC):
    """Abstract base class for anything that picks which rank to ask for."""

    def __init__(self, name: str = "Agent") -> None:
        self.name = name
        self.games_played = 0
        self.games_won = 0

    @abstractmethod
    def choose_rank(self, view: TurnView) -> Rank | None:
        """Decide which rank to request from the opponent.

        Args:
            view: What the acting player can see:
                - Own hand
                - Opponent card count
                - Cards left in the draw pile
                - Both scores

        Returns:
            The rank to ask for, or None to pass the turn without asking.
        """
        ...

    def notify_game_end(self, won: bool) -> None:
        """Called once a game is over."""
        self.games_played += 1
        if won:
            self.games_won += 1

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"
