"""Tests for agents and key parsing (agents/, ui/keys.py)."""

from io import StringIO

import pytest
from rich.console import Console

from agents.human_agent import HumanAgent
from agents.random_agent import RandomAgent
from go_fish.cards import Rank
from go_fish.state import Seat, TurnView
from tests.helpers.card_utils import make_cards_from_strings
from tests.helpers.fakes import FixedRandom
from ui.keys import RANK_KEYS, parse_rank_key, rank_key


def _view(cards: list[str], seat: Seat = Seat.COMPUTER) -> TurnView:
    return TurnView(
        seat=seat,
        hand=tuple(make_cards_from_strings(cards)),
        opponent_card_count=5,
        deck_count=20,
        score=1,
        opponent_score=2,
    )


class TestRankKeys:
    """Test single-key rank entry."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a", Rank.ACE),
            ("k", Rank.KING),
            ("q", Rank.QUEEN),
            ("j", Rank.JACK),
            ("2", Rank.TWO),
            ("9", Rank.NINE),
            ("1", Rank.TEN),
            ("kings please", Rank.KING),
        ],
    )
    def test_known_keys(self, text, expected):
        assert parse_rank_key(text) == expected

    @pytest.mark.parametrize("text", ["", None, "x", "0", "t", "K", " ", "?"])
    def test_unknown_keys(self, text):
        assert parse_rank_key(text) is None

    def test_every_rank_has_a_key(self):
        assert set(RANK_KEYS.values()) == set(Rank)
        for rank in Rank:
            assert parse_rank_key(rank_key(rank)) == rank


class TestRandomAgent:
    """Test the computer's rank choice."""

    def test_uses_drawn_card(self):
        rng = FixedRandom([2])
        agent = RandomAgent(rng=rng)
        assert agent.choose_rank(_view(["2s", "5h", "Kd"])) == Rank.KING
        assert rng.calls == [(0, 2)]

    def test_single_card_is_deterministic(self):
        rng = FixedRandom([])
        agent = RandomAgent(rng=rng)
        assert agent.choose_rank(_view(["7c"])) == Rank.SEVEN
        assert rng.calls == []

    def test_empty_hand_passes(self):
        assert RandomAgent(rng=FixedRandom([])).choose_rank(_view([])) is None

    def test_choice_is_from_hand(self):
        agent = RandomAgent(seed=11)
        view = _view(["2s", "5h", "Kd", "Kc"])
        for _ in range(50):
            assert agent.choose_rank(view) in {Rank.TWO, Rank.FIVE, Rank.KING}


class TestHumanAgent:
    """Test terminal rank entry."""

    @pytest.fixture
    def output(self) -> StringIO:
        return StringIO()

    @pytest.fixture
    def agent(self, output) -> HumanAgent:
        return HumanAgent(console=Console(file=output, width=120, color_system=None))

    def test_reads_rank(self, agent, output, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda *args: "q\n")
        assert agent.choose_rank(_view(["Qs", "3d"], seat=Seat.HUMAN)) == Rank.QUEEN

        text = output.getvalue()
        assert "YOUR TURN" in text
        assert "Queen of Spades" in text
        assert "Computer has 5 cards" in text

    def test_unrecognised_key_passes(self, agent, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda *args: "z")
        assert agent.choose_rank(_view(["Qs"], seat=Seat.HUMAN)) is None

    def test_end_of_input_passes(self, agent, monkeypatch):
        def closed(*args):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)
        assert agent.choose_rank(_view(["Qs"], seat=Seat.HUMAN)) is None


class TestAgentStats:
    """Test bookkeeping shared by all agents."""

    def test_notify_game_end(self):
        agent = RandomAgent(seed=0)
        agent.notify_game_end(won=True)
        agent.notify_game_end(won=False)
        assert agent.games_played == 2
        assert agent.games_won == 1
