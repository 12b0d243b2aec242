"""Core Go Fish game engine."""

from go_fish.cards import Card, Deck, Rank, Suit
from go_fish.player import Player

__all__ = ["Card", "Deck", "Player", "Rank", "Suit"]
