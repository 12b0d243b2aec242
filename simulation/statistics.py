"""Statistics summaries and plots for simulated games."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from simulation.runner import BatchStats


def summarize(stats: BatchStats) -> dict:
    """Get summary statistics for a batch."""
    if stats.num_games == 0:
        return {}

    turns = np.array([r.turns for r in stats.records])
    diffs = np.array([r.score_difference for r in stats.records])

    return {
        "num_games": stats.num_games,
        "human_wins": stats.human_wins,
        "computer_wins": stats.computer_wins,
        "ties": stats.ties,
        "avg_human_score": stats.avg_human_score,
        "avg_computer_score": stats.avg_computer_score,
        "turns_min": int(turns.min()),
        "turns_max": int(turns.max()),
        "turns_mean": float(turns.mean()),
        "turns_std": float(turns.std()),
        "score_diff_mean": float(diffs.mean()),
        "score_diff_std": float(diffs.std()),
        "end_reasons": stats.end_reasons,
    }


def plot_scores(stats: BatchStats, save_path: str | Path) -> Path:
    """Plot the distribution of score differences and game lengths."""
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    diffs = [r.score_difference for r in stats.records]
    turns = [r.turns for r in stats.records]

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    # One bin per integer difference
    low, high = (min(diffs), max(diffs)) if diffs else (0, 0)
    axes[0].hist(diffs, bins=np.arange(low - 0.5, high + 1.5), color="steelblue")
    axes[0].axvline(x=0, color="black", linestyle="-", linewidth=0.5)
    axes[0].set_xlabel("Human score - Computer score")
    axes[0].set_ylabel("Games")
    axes[0].set_title("Score Difference")

    axes[1].hist(turns, bins=30, color="tab:orange")
    axes[1].set_xlabel("Turns")
    axes[1].set_ylabel("Games")
    axes[1].set_title("Game Length")

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path
