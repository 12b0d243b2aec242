"""Card, Deck, Suit, and Rank definitions for Go Fish."""

from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence

if TYPE_CHECKING:
    from go_fish.player import Player


class Suit(IntEnum):
    """Card suits, ordered Spade < Heart < Club < Diamond."""

    SPADE = 0
    HEART = 1
    CLUB = 2
    DIAMOND = 3

    def __str__(self) -> str:
        return {0: "Spades", 1: "Hearts", 2: "Clubs", 3: "Diamonds"}[self.value]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "Jack", 12: "Queen", 13: "King", 14: "Ace"}[self.value]

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the bare number
        return format(str(self), format_spec)


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """A single playing card.

    Field order gives the comparison: rank first, suit breaks ties.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"


class Deck:
    """An ordered sequence of cards.

    The same type serves as the shared draw pile, a player's hand, a
    player's burn pile and the container handed back by ``extract_pairs``.
    The front of the sequence is the top of the deck.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)
        if len(set(self._cards)) != len(self._cards):
            raise ValueError("Deck cannot hold the same card twice")

    @classmethod
    def standard(cls) -> "Deck":
        """All 52 suit/rank combinations, sorted ascending."""
        return cls(Card(rank, suit) for rank in Rank for suit in Suit)

    @classmethod
    def empty(cls) -> "Deck":
        return cls()

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the cards, front first."""
        return tuple(self._cards)

    def count(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def shuffle(self, rng: Random) -> None:
        """Fisher-Yates shuffle in place.

        Walks ``i`` from the last index down to 1 and swaps it with a
        position drawn uniformly from ``[0, i]``. Decks of 0 or 1 cards
        are left as they are.
        """
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def sort(self) -> None:
        """Sort ascending by card order."""
        self._cards.sort()

    def draw_one(self) -> Card | None:
        """Remove and return the top card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def add_one(self, card: Card) -> None:
        """Put a card at the bottom of the deck."""
        self._cards.append(card)

    def add_many(self, other: "Deck") -> None:
        """Move every card of ``other`` to the bottom of this deck, emptying it."""
        self._cards.extend(other._cards)
        other._cards.clear()

    def extract_pairs(self) -> "Deck":
        """Remove matched pairs and return them as a new deck.

        Cards are stably sorted by rank, then adjacent cards are compared
        from the front; a matching pair is removed and the comparison
        restarts at the same position. Four of a kind therefore yields two
        pairs, three of a kind yields one pair and leaves the third card.
        The returned deck holds the pairs in the order they were removed.
        """
        self._cards.sort(key=lambda card: card.rank)

        pairs: list[Card] = []
        i = 1
        while i < len(self._cards):
            if self._cards[i].rank == self._cards[i - 1].rank:
                second = self._cards.pop(i)
                first = self._cards.pop(i - 1)
                pairs.extend((first, second))
                continue
            i += 1

        return Deck(pairs)

    def extract_rank(self, rank: Rank) -> Card | None:
        """Remove and return the first card of ``rank``, or None if absent."""
        for i, card in enumerate(self._cards):
            if card.rank == rank:
                return self._cards.pop(i)
        return None

    def deal(self, n_per_player: int, players: Sequence["Player"]) -> None:
        """Deal ``n_per_player`` cards to each player, one at a time in turn.

        Raises:
            ValueError: If the deck holds fewer cards than requested.
        """
        if n_per_player < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n_per_player}")

        total = n_per_player * len(players)
        if total > len(self._cards):
            raise ValueError(f"Cannot deal {total} cards, only {len(self._cards)} remaining")

        dealt = self._cards[:total]
        del self._cards[:total]
        for i, card in enumerate(dealt):
            players[i % len(players)].hand.add_one(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return "[" + ", ".join(str(card) for card in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Deck({self._cards!r})"
