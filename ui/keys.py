"""Single-key rank entry."""

from go_fish.cards import Rank

# '1' stands for the ten, since "10" does not fit in one keystroke
RANK_KEYS: dict[str, Rank] = {
    "a": Rank.ACE,
    "k": Rank.KING,
    "q": Rank.QUEEN,
    "j": Rank.JACK,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "1": Rank.TEN,
}

_KEYS_BY_RANK = {rank: key for key, rank in RANK_KEYS.items()}


def parse_rank_key(text: str | None) -> Rank | None:
    """Map the first character of a line of input to a rank.

    Surrounding whitespace is ignored. Anything unrecognised, including
    an empty line or no input at all, gives None.
    """
    text = (text or "").strip()
    if not text:
        return None
    return RANK_KEYS.get(text[0])


def rank_key(rank: Rank) -> str:
    """The key that selects ``rank``."""
    return _KEYS_BY_RANK[rank]
