"""Display utilities for the terminal Go Fish UI."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from go_fish.cards import Card, Rank, Suit
from go_fish.game import GameOutcome, OpeningResult, TurnResult
from go_fish.state import CardSource, GameEndReason, Seat, TurnView
from ui.keys import rank_key


SUIT_COLORS = {
    Suit.HEART: "red",
    Suit.DIAMOND: "red",
    Suit.CLUB: "white",
    Suit.SPADE: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}]{card}[/{color}]"


def render_cards(cards: tuple[Card, ...] | list[Card]) -> str:
    """Render a list of cards as ``[a, b, c]``."""
    return "[" + ", ".join(render_card(card) for card in cards) + "]"


def render_burn(seat: Seat, burned: tuple[Card, ...]) -> str | None:
    """Describe a burn, or None if nothing was burned."""
    if not burned:
        return None
    if seat is Seat.HUMAN:
        return f"You burn {render_cards(burned)}"
    return f"Computer burns {len(burned) // 2} pairs."


def render_opening(result: OpeningResult) -> list[str]:
    """Lines describing the pairs burned right after the deal."""
    lines = [
        render_burn(Seat.HUMAN, result.human_burned),
        render_burn(Seat.COMPUTER, result.computer_burned),
    ]
    return [line for line in lines if line]


def render_turn_header(view: TurnView) -> list[str]:
    """Lines shown before a turn is played."""
    if view.seat is Seat.HUMAN:
        return [
            "[bold green]YOUR TURN[/bold green]",
            f"YOUR HAND - {render_cards(view.hand)}",
            f"Computer has {view.opponent_card_count} cards",
            "Which card will you ask for?",
        ]
    return [
        "[bold red]COMPUTER TURN[/bold red]",
        f"Computer has {len(view.hand)} cards.",
    ]


def render_turn_result(result: TurnResult) -> list[str]:
    """Lines describing what happened on a turn."""
    human = result.seat is Seat.HUMAN
    lines: list[str] = []

    if result.requested is None:
        if result.end_reason is GameEndReason.HAND_EMPTY:
            lines.append("You have no cards left!" if human else "Computer has no cards left!")
        else:
            lines.append("[dim]No card asked for.[/dim]")
        return lines

    asker = "You ask" if human else "Computer asks"
    lines.append(f"{asker} for a {result.requested}")

    if result.card is None:
        lines.append("[yellow]GO FISH![/yellow] No more cards in the deck!")
        return lines

    if result.source is CardSource.OPPONENT:
        if human:
            lines.append(f"You get the {render_card(result.card)}!")
        else:
            lines.append(f"You give the computer the {render_card(result.card)}")
    elif human:
        lines.append(f"[yellow]GO FISH![/yellow] You take the {render_card(result.card)} from the deck")
    else:
        lines.append("[yellow]GO FISH![/yellow] Computer takes a card from the deck")

    burn_line = render_burn(result.seat, result.burned)
    if burn_line:
        lines.append(burn_line)

    if result.end_reason is GameEndReason.HAND_EMPTY:
        lines.append("Your hand is empty!" if human else "Computer's hand is empty!")

    return lines


def render_outcome(outcome: GameOutcome) -> Panel:
    """Render the final scores and winner."""
    lines = [
        f"Your score: [bold]{outcome.human_score}[/bold]",
        f"Computer score: [bold]{outcome.computer_score}[/bold]",
        "",
    ]

    won = outcome.winner is Seat.HUMAN
    if won:
        lines.append("[bold green]YOU WIN![/bold green]")
    else:
        lines.append("[bold red]COMPUTER WINS![/bold red]")

    border = "green" if won else "red"
    return Panel("\n".join(lines), title="GAME OVER!!", border_style=border)


def render_key_legend() -> Table:
    """Table of the keys used to ask for each rank."""
    legend = Table(title="Keys", show_header=True)
    legend.add_column("Key", style="cyan")
    legend.add_column("Rank", style="white")
    for rank in Rank:
        legend.add_row(rank_key(rank), str(rank))
    return legend


def print_lines(console: Console, lines: list[str]) -> None:
    for line in lines:
        console.print(line)


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
