"""Simulation engine for running Go Fish games."""

from simulation.runner import BatchStats, GameRecord, GameRunner

__all__ = ["BatchStats", "GameRecord", "GameRunner"]
