"""Game runner for simulating Go Fish games between agents."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from random import Random

from tqdm import tqdm

from agents.base import BaseAgent
from agents.random_agent import RandomAgent
from go_fish.game import GoFishGame
from go_fish.state import GameEndReason, Seat

logger = logging.getLogger(__name__)

# Each turn moves at most one card; a game cannot legitimately outlast this
MAX_TURNS = 10_000


@dataclass
class GameRecord:
    """Result of one complete game."""

    human_score: int
    computer_score: int
    winner: Seat
    turns: int
    end_reason: GameEndReason | None

    @property
    def tie(self) -> bool:
        return self.human_score == self.computer_score

    @property
    def score_difference(self) -> int:
        """Human score minus computer score."""
        return self.human_score - self.computer_score


@dataclass
class BatchStats:
    """Aggregated statistics over many games."""

    records: list[GameRecord] = field(default_factory=list)

    @property
    def num_games(self) -> int:
        return len(self.records)

    @property
    def human_wins(self) -> int:
        return sum(1 for r in self.records if r.winner is Seat.HUMAN)

    @property
    def computer_wins(self) -> int:
        """Includes ties, which go to the computer."""
        return sum(1 for r in self.records if r.winner is Seat.COMPUTER)

    @property
    def ties(self) -> int:
        return sum(1 for r in self.records if r.tie)

    @property
    def avg_human_score(self) -> float:
        return sum(r.human_score for r in self.records) / self.num_games if self.num_games > 0 else 0.0

    @property
    def avg_computer_score(self) -> float:
        return sum(r.computer_score for r in self.records) / self.num_games if self.num_games > 0 else 0.0

    @property
    def avg_turns(self) -> float:
        return sum(r.turns for r in self.records) / self.num_games if self.num_games > 0 else 0.0

    @property
    def end_reasons(self) -> dict[str, int]:
        counts = Counter(r.end_reason.name.lower() if r.end_reason else "unfinished" for r in self.records)
        return dict(counts)

    def win_rate(self, seat: Seat) -> float:
        if self.num_games == 0:
            return 0.0
        wins = self.human_wins if seat is Seat.HUMAN else self.computer_wins
        return wins / self.num_games


class GameRunner:
    """Run headless Go Fish games between agents."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = Random(seed)

    def run_game(
        self,
        human_agent: BaseAgent,
        computer_agent: BaseAgent | None = None,
    ) -> GameRecord:
        """Play one game to completion.

        The game gets its own RNG seeded from the runner, so a seeded
        runner replays the same sequence of games.
        """
        game_rng = Random(self.rng.randint(0, 2**31))
        game = GoFishGame(human_agent, computer_agent, rng=game_rng)
        game.init()

        while not game.is_over:
            if game.turns >= MAX_TURNS:
                # Two agents that always pass never finish
                logger.warning("Stopping game after %d turns", game.turns)
                break
            game.play_turn()

        outcome = game.game_over()
        return GameRecord(
            human_score=outcome.human_score,
            computer_score=outcome.computer_score,
            winner=outcome.winner,
            turns=outcome.turns,
            end_reason=outcome.end_reason,
        )

    def run_batch(
        self,
        num_games: int,
        show_progress: bool = True,
    ) -> BatchStats:
        """Run many random-vs-random games and collect statistics.

        Args:
            num_games: Number of games to run
            show_progress: Show progress bar

        Returns:
            BatchStats over every game played
        """
        human = RandomAgent(name="Random_1", seed=self.rng.randint(0, 2**31))
        stats = BatchStats()

        iterator = range(num_games)
        if show_progress:
            iterator = tqdm(iterator, desc="Running games", unit="games")

        for _ in iterator:
            stats.records.append(self.run_game(human))

        logger.info(
            "Ran %d games: human=%d computer=%d ties=%d",
            stats.num_games,
            stats.human_wins,
            stats.computer_wins,
            stats.ties,
        )
        return stats
