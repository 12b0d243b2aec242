"""Configuration settings for Go Fish."""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

import yaml


@dataclass
class PlayConfig:
    """Interactive play configuration."""

    turn_delay: float = 1.0  # Seconds to pause between turns
    seed: int | None = None
    show_computer_hand: bool = False  # Debug: print the computer's hand each turn


@dataclass
class SimulationConfig:
    """Batch simulation configuration."""

    num_games: int = 1000
    seed: int | None = None
    plot_path: str | None = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_file: str | None = None


@dataclass
class Config:
    """Complete configuration."""

    play: PlayConfig = field(default_factory=PlayConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    "play": PlayConfig,
    "simulation": SimulationConfig,
    "logging": LoggingConfig,
}


def _build_section(name: str, values: dict) -> object:
    section_cls = _SECTIONS[name]
    known = {f.name for f in fields(section_cls)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown keys in '{name}' section: {', '.join(sorted(unknown))}")
    return section_cls(**values)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    unknown = set(data) - set(_SECTIONS)
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(sorted(unknown))}")

    config = Config()

    if "play" in data:
        config.play = _build_section("play", data["play"] or {})
    if "simulation" in data:
        config.simulation = _build_section("simulation", data["simulation"] or {})
    if "logging" in data:
        config.logging = _build_section("logging", data["logging"] or {})

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "play": asdict(config.play),
        "simulation": asdict(config.simulation),
        "logging": asdict(config.logging),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

