"""Tests for player burning and scoring (go_fish/player.py)."""

from go_fish.player import Player
from tests.helpers.card_utils import make_card, make_cards_from_strings, make_deck


class TestBurn:
    """Test moving pairs to the burn pile."""

    def test_burn_moves_pairs(self):
        player = Player("You", hand=make_deck(["As", "Ah", "Kc"]))
        burned = player.burn()
        assert burned == tuple(make_cards_from_strings(["As", "Ah"]))
        assert player.hand.cards == (make_card("Kc"),)
        assert player.burn_pile.cards == burned

    def test_burn_without_pairs_reports_nothing(self):
        player = Player("You", hand=make_deck(["As", "Kc"]))
        assert player.burn() == ()
        assert player.burn_pile.is_empty()
        assert len(player.hand) == 2

    def test_burn_accumulates(self):
        player = Player("You", hand=make_deck(["As", "Ah"]))
        player.burn()
        player.hand.add_one(make_card("2c"))
        player.hand.add_one(make_card("2d"))
        player.burn()
        assert len(player.burn_pile) == 4
        assert player.hand.is_empty()


class TestScore:
    """Test scoring."""

    def test_new_player_scores_zero(self):
        player = Player("You")
        assert player.score() == 0
        assert player.card_count() == 0

    def test_score_counts_pairs(self):
        player = Player("You", hand=make_deck(["As", "Ah", "7c", "7d", "7s", "7h", "3d"]))
        player.burn()
        assert player.score() == 3

    def test_players_do_not_share_decks(self):
        a, b = Player("a"), Player("b")
        a.hand.add_one(make_card("As"))
        assert b.hand.is_empty()
