"""Human player agent for interactive terminal Go Fish."""

import logging

from rich.console import Console

from agents.base import BaseAgent
from go_fish.cards import Rank
from go_fish.state import TurnView
from ui.display import print_divider, print_lines, render_turn_header
from ui.keys import parse_rank_key

logger = logging.getLogger(__name__)


class HumanAgent(BaseAgent):
    """Agent that prompts a human player for a rank via terminal."""

    def __init__(
        self,
        name: str = "You",
        console: Console | None = None,
    ) -> None:
        super().__init__(name)
        self.console = console or Console()

    def choose_rank(self, view: TurnView) -> Rank | None:
        """Display the hand and read one key.

        An unrecognised key, or end of input, passes the turn.
        """
        print_divider(self.console)
        print_lines(self.console, render_turn_header(view))

        try:
            raw = self.console.input("[bold]> [/bold]")
        except EOFError:
            logger.debug("End of input while waiting for a rank")
            return None

        rank = parse_rank_key(raw)
        if rank is None:
            logger.debug("Ignoring unrecognised input %r", raw)
        return rank
