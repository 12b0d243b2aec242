"""Player state for Go Fish."""

from dataclasses import dataclass, field

from go_fish.cards import Card, Deck


@dataclass
class Player:
    """A player: a hand and a burn pile of completed pairs."""

    name: str = ""
    hand: Deck = field(default_factory=Deck.empty)
    burn_pile: Deck = field(default_factory=Deck.empty)

    def burn(self) -> tuple[Card, ...]:
        """Move every pair out of the hand into the burn pile.

        Returns:
            The burned cards in extraction order; empty when the hand held
            no pairs.
        """
        pairs = self.hand.extract_pairs()
        burned = pairs.cards
        if burned:
            self.burn_pile.add_many(pairs)
        return burned

    def score(self) -> int:
        """Number of completed pairs."""
        return self.burn_pile.count() // 2

    def card_count(self) -> int:
        return self.hand.count()

    def __str__(self) -> str:
        return f"{self.name}: {self.hand.count()} cards, {self.score()} pairs"
