"""Turn phases, seats and the read-only view handed to agents."""

from dataclasses import dataclass
from enum import Enum, auto

from go_fish.cards import Card, Rank


class GamePhase(Enum):
    """Lifecycle of a single game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    OVER = auto()


class Seat(Enum):
    """The two sides of the table."""

    HUMAN = auto()
    COMPUTER = auto()

    @property
    def opponent(self) -> "Seat":
        return Seat.COMPUTER if self is Seat.HUMAN else Seat.HUMAN

    def __str__(self) -> str:
        return self.name.title()


class CardSource(Enum):
    """Where the card gained on a turn came from."""

    OPPONENT = auto()  # The opponent held the requested rank
    DECK = auto()  # Go fish


class GameEndReason(Enum):
    """Why a game stopped."""

    DECK_EMPTY = auto()  # Went fishing in an empty deck
    HAND_EMPTY = auto()  # A player ran out of cards


@dataclass(frozen=True)
class TurnView:
    """What the acting player can see when choosing a rank."""

    seat: Seat
    hand: tuple[Card, ...]
    opponent_card_count: int
    deck_count: int
    score: int
    opponent_score: int

    @property
    def ranks(self) -> list[Rank]:
        """Distinct ranks in hand, ascending."""
        return sorted({card.rank for card in self.hand})
