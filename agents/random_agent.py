"""Random agent: the computer opponent."""

from random import Random

from agents.base import BaseAgent
from go_fish.cards import Rank
from go_fish.state import TurnView


class RandomAgent(BaseAgent):
    """Agent that asks for the rank of a uniformly chosen card in its hand."""

    def __init__(
        self,
        name: str = "Computer",
        rng: Random | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(name)
        self._rng = rng if rng is not None else Random(seed)

    def choose_rank(self, view: TurnView) -> Rank | None:
        hand = view.hand
        if not hand:
            return None

        # A single card is asked for without consulting the RNG
        if len(hand) == 1:
            return hand[0].rank

        return hand[self._rng.randrange(len(hand))].rank
