"""Configuration management for board generation."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class BoardConfig:
    """Board generation configuration."""

    size: int = 5
    rounds: int = 5
    seed: int | None = None


@dataclass
class PageConfig:
    """Printed page geometry (A4 portrait by default)."""

    width_mm: float = 210.0
    height_mm: float = 297.0
    margin_mm: float = 4.32  # default printer margins
    dpi: int = 150
    board_width_mm: float = 105.0
    origin_x: int = 100  # px
    origin_y: int = 100  # px
    tile_alpha: int = 200


@dataclass
class OutputConfig:
    """Where and how the finished board is written."""

    path: str = "board.png"
    preview: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_file: str | None = None


@dataclass
class Config:
    """Complete generator configuration."""

    board: BoardConfig = field(default_factory=BoardConfig)
    page: PageConfig = field(default_factory=PageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            raw = yaml.safe_load(f)

        return cls.from_dict(raw or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary."""
        config = cls()

        if "board" in data:
            config.board = BoardConfig(**data["board"])

        if "page" in data:
            config.page = PageConfig(**data["page"])

        if "output" in data:
            config.output = OutputConfig(**data["output"])

        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "board": asdict(self.board),
            "page": asdict(self.page),
            "output": asdict(self.output),
            "logging": asdict(self.logging),
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_config(path: str | Path | None = None) -> Config:
    """
    Load configuration from file or return defaults.

    Args:
        path: Path to YAML config file. If None, returns default config.

    Returns:
        Configuration object.
    """
    if path is None:
        return Config()
    return Config.from_yaml(path)


def merge_configs(base: Config, overrides: dict[str, Any]) -> Config:
    """
    Merge override values into a base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.to_dict()

    for key, value in overrides.items():
        if isinstance(value, dict) and key in base_dict:
            base_dict[key].update(value)
        else:
            base_dict[key] = value

    return Config.from_dict(base_dict)
