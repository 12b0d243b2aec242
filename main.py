"""Go Fish: play against a random computer opponent in the terminal."""

import logging
import time
from pathlib import Path
from random import Random
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from agents.human_agent import HumanAgent
from config.settings import Config, load_config, save_config
from go_fish.game import GameOutcome, GoFishGame
from go_fish.state import Seat
from simulation.runner import GameRunner
from ui.display import (
    print_divider,
    print_lines,
    render_cards,
    render_key_legend,
    render_opening,
    render_outcome,
    render_turn_header,
    render_turn_result,
)
from utils.logging_setup import setup_logging

app = typer.Typer(
    name="go-fish",
    help="Two-player Go Fish against a random computer opponent.",
)
console = Console()
logger = logging.getLogger(__name__)


def _load(config_path: Optional[Path]) -> Config:
    """Load the config file if given, otherwise defaults."""
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _pause(delay: float) -> None:
    if delay > 0:
        time.sleep(delay)
    console.print()


def _play_one_game(game: GoFishGame, delay: float, show_computer_hand: bool) -> GameOutcome:
    """Run a game from the deal to the final score."""
    print_lines(console, render_opening(game.init()))
    console.print()

    while True:
        result = game.human_turn()
        print_lines(console, render_turn_result(result))
        if result.game_over:
            break
        _pause(delay)

        print_divider(console)
        print_lines(console, render_turn_header(game.view_for(Seat.COMPUTER)))
        if show_computer_hand:
            console.print(f"[dim]Computer hand: {render_cards(game.computer.hand.cards)}[/dim]")
        result = game.computer_turn()
        print_lines(console, render_turn_result(result))
        if result.game_over:
            break
        _pause(delay)

    outcome = game.game_over()
    console.print()
    console.print(render_outcome(outcome))
    return outcome


@app.command()
def play(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    delay: Optional[float] = typer.Option(None, "--delay", "-d", help="Seconds to pause between turns"),
    show_computer_hand: bool = typer.Option(False, "--show-computer-hand", help="Debug: reveal the computer's hand"),
) -> None:
    """Play Go Fish against the computer."""
    config = _load(config_path)
    setup_logging(config.logging.level, config.logging.log_file)

    if seed is None:
        seed = config.play.seed
    if delay is None:
        delay = config.play.turn_delay
    show_computer_hand = show_computer_hand or config.play.show_computer_hand

    console.print("\n[bold blue]Go Fish[/bold blue]")
    console.print("=" * 50)
    console.print("[dim]Ask with a key: a k q j 2-9, and 1 for ten. Ctrl+C quits.[/dim]\n")

    # One RNG per game, each seeded from the session
    session_rng = Random(seed)
    human = HumanAgent(name="You", console=console)
    games_played = 0

    try:
        while True:
            game = GoFishGame(human, rng=Random(session_rng.randint(0, 2**31)))
            _play_one_game(game, delay, show_computer_hand)
            games_played += 1

            console.print("Play again? y/n")
            try:
                answer = console.input()
            except EOFError:
                break
            if answer.strip().startswith("n"):
                break
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted.[/yellow]")

    logger.info("Session finished after %d games, won %d", games_played, human.games_won)
    if games_played > 1:
        console.print(f"\nYou won {human.games_won} of {games_played} games.")


@app.command()
def simulate(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    games: Optional[int] = typer.Option(None, "--games", "-g", help="Number of games to simulate"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    plot: Optional[Path] = typer.Option(None, "--plot", "-p", help="Save score plots to this PNG file"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show progress bar"),
) -> None:
    """Simulate random-vs-random games and report statistics."""
    from simulation.statistics import plot_scores, summarize

    config = _load(config_path)
    setup_logging(config.logging.level, config.logging.log_file)

    games = games if games is not None else config.simulation.num_games
    seed = seed if seed is not None else config.simulation.seed
    plot_path = plot if plot is not None else config.simulation.plot_path

    if games < 1:
        console.print("[red]Need at least one game.[/red]")
        raise typer.Exit(1)

    console.print("\n[bold blue]Go Fish Simulation[/bold blue]")
    console.print("=" * 50)
    console.print(f"Simulating {games} games...\n")

    start = time.time()
    stats = GameRunner(seed=seed).run_batch(games, show_progress=progress)
    elapsed = time.time() - start
    summary = summarize(stats)

    table = Table(title=f"Results ({stats.num_games} games)")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Human wins", f"{summary['human_wins']} ({stats.win_rate(Seat.HUMAN):.1%})")
    table.add_row("Computer wins", f"{summary['computer_wins']} ({stats.win_rate(Seat.COMPUTER):.1%})")
    table.add_row("  of which ties", str(summary["ties"]))
    table.add_row("Avg human score", f"{summary['avg_human_score']:.2f}")
    table.add_row("Avg computer score", f"{summary['avg_computer_score']:.2f}")
    table.add_row("Turns per game", f"{summary['turns_mean']:.1f} ± {summary['turns_std']:.1f}")
    table.add_row("Turns min/max", f"{summary['turns_min']}/{summary['turns_max']}")
    for reason, count in sorted(summary["end_reasons"].items()):
        table.add_row(f"Ended by {reason.replace('_', ' ')}", str(count))

    console.print(table)
    console.print(f"\n[green]Completed in {elapsed:.2f}s[/green]")

    if plot_path:
        saved = plot_scores(stats, plot_path)
        console.print(f"Plots saved to: {saved}")


@app.command()
def info() -> None:
    """Show the rules and the rank keys."""
    console.print("\n[bold blue]Go Fish[/bold blue]")
    console.print("=" * 50)
    console.print("Each player is dealt 7 cards. Pairs are burned as soon as they form.")
    console.print("On your turn ask the computer for a rank. If it has one, you take it;")
    console.print("otherwise go fish from the deck. The game ends when someone fishes")
    console.print("in an empty deck or runs out of cards. Most pairs wins; ties go to")
    console.print("the computer.\n")
    console.print(render_key_legend())


@app.command(name="init-config")
def init_config(
    path: Path = typer.Argument(Path("go_fish.yaml"), help="Where to write the config"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite).[/yellow]")
        raise typer.Exit(1)
    save_config(Config(), path)
    console.print(f"[green]Default configuration written to {path}[/green]")


if __name__ == "__main__":
    app()
