"""Go Fish agents for choosing which rank to ask for."""

from agents.base import BaseAgent
from agents.random_agent import RandomAgent

__all__ = ["BaseAgent", "RandomAgent"]
