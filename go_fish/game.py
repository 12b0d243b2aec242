"""Go Fish game orchestration: one human seat against one computer seat."""

import logging
from dataclasses import dataclass
from random import Random
from typing import TYPE_CHECKING

from agents.random_agent import RandomAgent
from go_fish.cards import Card, Deck, Rank
from go_fish.player import Player
from go_fish.state import CardSource, GameEndReason, GamePhase, Seat, TurnView

if TYPE_CHECKING:
    from agents.base import BaseAgent

logger = logging.getLogger(__name__)

HAND_SIZE = 7


@dataclass(frozen=True)
class OpeningResult:
    """Pairs burned straight after the deal."""

    human_burned: tuple[Card, ...]
    computer_burned: tuple[Card, ...]


@dataclass(frozen=True)
class TurnResult:
    """Everything that happened during one turn."""

    seat: Seat
    requested: Rank | None  # None if the agent passed
    card: Card | None = None  # Card gained, if any
    source: CardSource | None = None
    burned: tuple[Card, ...] = ()
    end_reason: GameEndReason | None = None

    @property
    def passed(self) -> bool:
        return self.requested is None

    @property
    def game_over(self) -> bool:
        return self.end_reason is not None


@dataclass(frozen=True)
class GameOutcome:
    """Final scores. Ties go to the computer."""

    human_score: int
    computer_score: int
    end_reason: GameEndReason | None
    turns: int

    @property
    def winner(self) -> Seat:
        if self.human_score > self.computer_score:
            return Seat.HUMAN
        return Seat.COMPUTER

    @property
    def tie(self) -> bool:
        return self.human_score == self.computer_score


class GoFishGame:
    """Run a single two-player game of Go Fish.

    The game owns the draw pile, both players and the random source. The
    same RNG shuffles the deck and, unless another computer agent is
    supplied, drives the computer's choice of rank.
    """

    def __init__(
        self,
        human_agent: "BaseAgent",
        computer_agent: "BaseAgent | None" = None,
        rng: Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.rng = rng if rng is not None else Random(seed)

        self.deck = Deck.standard()
        self.human = Player(name=human_agent.name or "You")
        self.computer = Player(name="Computer")

        self.agents: dict[Seat, "BaseAgent"] = {
            Seat.HUMAN: human_agent,
            Seat.COMPUTER: computer_agent or RandomAgent(rng=self.rng),
        }

        self.phase = GamePhase.NOT_STARTED
        self.to_act = Seat.HUMAN
        self.end_reason: GameEndReason | None = None
        self.turns = 0
        self._outcome: GameOutcome | None = None

    def player(self, seat: Seat) -> Player:
        return self.human if seat is Seat.HUMAN else self.computer

    def view_for(self, seat: Seat) -> TurnView:
        """Build the view the player in ``seat`` is allowed to see."""
        me = self.player(seat)
        opponent = self.player(seat.opponent)
        return TurnView(
            seat=seat,
            hand=me.hand.cards,
            opponent_card_count=opponent.card_count(),
            deck_count=self.deck.count(),
            score=me.score(),
            opponent_score=opponent.score(),
        )

    def total_cards(self) -> int:
        """Cards across the draw pile, both hands and both burn piles."""
        return self.deck.count() + sum(
            p.hand.count() + p.burn_pile.count() for p in (self.human, self.computer)
        )

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.OVER

    def init(self) -> OpeningResult:
        """Shuffle, deal seven cards each (human first) and burn opening pairs."""
        if self.phase is not GamePhase.NOT_STARTED:
            raise RuntimeError(f"Game already started ({self.phase.name})")

        self.deck.shuffle(self.rng)
        self.deck.deal(HAND_SIZE, [self.human, self.computer])

        result = OpeningResult(
            human_burned=self.human.burn(),
            computer_burned=self.computer.burn(),
        )

        self.phase = GamePhase.IN_PROGRESS
        self.to_act = Seat.HUMAN
        logger.debug(
            "Dealt %d cards each, %d left in deck; opening burns human=%d computer=%d",
            HAND_SIZE,
            self.deck.count(),
            len(result.human_burned),
            len(result.computer_burned),
        )
        return result

    def human_turn(self) -> TurnResult:
        return self._take_turn(Seat.HUMAN)

    def computer_turn(self) -> TurnResult:
        return self._take_turn(Seat.COMPUTER)

    def play_turn(self) -> TurnResult:
        """Play whichever seat is due to act."""
        return self._take_turn(self.to_act)

    def _take_turn(self, seat: Seat) -> TurnResult:
        if self.phase is not GamePhase.IN_PROGRESS:
            raise RuntimeError(f"Cannot take a turn while game is {self.phase.name}")
        if seat is not self.to_act:
            raise RuntimeError(f"It is not the {seat} turn")

        self.turns += 1
        asker = self.player(seat)

        # The computer only asks for ranks it holds, so an empty hand ends the game.
        # The human may still ask with no cards.
        if seat is Seat.COMPUTER and asker.hand.is_empty():
            logger.info("%s starts turn %d with an empty hand", seat, self.turns)
            return self._finish(TurnResult(seat=seat, requested=None, end_reason=GameEndReason.HAND_EMPTY))

        rank = self.agents[seat].choose_rank(self.view_for(seat))
        if rank is None:
            logger.debug("%s passed on turn %d", seat, self.turns)
            return self._finish(TurnResult(seat=seat, requested=None))

        return self._finish(self._resolve_request(seat, rank))

    def _resolve_request(self, seat: Seat, rank: Rank) -> TurnResult:
        """Ask the opponent for ``rank``, going fish on a miss."""
        asker = self.player(seat)
        opponent = self.player(seat.opponent)

        card = opponent.hand.extract_rank(rank)
        source = CardSource.OPPONENT
        if card is None:
            card = self.deck.draw_one()
            source = CardSource.DECK
            if card is None:
                logger.info("%s went fishing for %s but the deck is empty", seat, rank)
                return TurnResult(seat=seat, requested=rank, end_reason=GameEndReason.DECK_EMPTY)

        asker.hand.add_one(card)
        burned = asker.burn()

        end_reason = None
        if asker.hand.is_empty():
            logger.info("%s emptied their hand", seat)
            end_reason = GameEndReason.HAND_EMPTY

        logger.debug("%s asked for %s, got %s from %s", seat, rank, card, source.name.lower())
        return TurnResult(
            seat=seat,
            requested=rank,
            card=card,
            source=source,
            burned=burned,
            end_reason=end_reason,
        )

    def _finish(self, result: TurnResult) -> TurnResult:
        """Hand the turn over, or close the game if the turn ended it."""
        if result.end_reason is not None:
            self.phase = GamePhase.OVER
            self.end_reason = result.end_reason
        else:
            self.to_act = result.seat.opponent
        return result

    def game_over(self) -> GameOutcome:
        """Score the game and close it."""
        if self.phase is GamePhase.NOT_STARTED:
            raise RuntimeError("Cannot score a game that never started")
        if self._outcome is not None:
            return self._outcome

        self.phase = GamePhase.OVER
        outcome = GameOutcome(
            human_score=self.human.score(),
            computer_score=self.computer.score(),
            end_reason=self.end_reason,
            turns=self.turns,
        )
        self._outcome = outcome

        self.agents[Seat.HUMAN].notify_game_end(outcome.winner is Seat.HUMAN)
        self.agents[Seat.COMPUTER].notify_game_end(outcome.winner is Seat.COMPUTER)

        logger.info(
            "Game over after %d turns: human=%d computer=%d winner=%s",
            outcome.turns,
            outcome.human_score,
            outcome.computer_score,
            outcome.winner,
        )
        return outcome
