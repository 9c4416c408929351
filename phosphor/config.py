"""
Phosphor Configuration

Settings for the sampling grid and the terminal demo.
Supports environment variables, JSON/YAML config files, and runtime overrides.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class GridConfig:
    """World-space area sampled each frame, and its resolution."""
    width: float = 24.0
    depth: float = 12.0
    columns: int = 64
    rows: int = 20


@dataclass
class DemoConfig:
    """Terminal demo playback."""
    fps: float = 20.0
    seconds: float = 8.0
    color: bool = True
    seed: int = 7


@dataclass
class PhosphorConfig:
    """Top-level Phosphor configuration."""
    grid: GridConfig = field(default_factory=GridConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "PhosphorConfig":
        """Load configuration from environment variables."""
        config = cls()

        # Grid
        if columns := os.getenv("PHOSPHOR_GRID_COLUMNS"):
            config.grid.columns = int(columns)
        if rows := os.getenv("PHOSPHOR_GRID_ROWS"):
            config.grid.rows = int(rows)

        # Demo
        if fps := os.getenv("PHOSPHOR_FPS"):
            config.demo.fps = float(fps)
        if os.getenv("NO_COLOR") is not None:
            config.demo.color = False

        config.debug = os.getenv("PHOSPHOR_DEBUG", "").lower() in ("1", "true", "yes")
        config.log_level = os.getenv("PHOSPHOR_LOG_LEVEL", "DEBUG" if config.debug else "INFO")

        return config

    @classmethod
    def from_file(cls, path: Path) -> "PhosphorConfig":
        """Load configuration from a JSON or YAML file.

        A missing file yields the defaults.

        Raises:
            ValueError: unsupported file suffix
        """
        path = Path(path)
        config = cls()

        if not path.exists():
            return config

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix == ".json":
                data = json.load(f)
            elif suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            else:
                raise ValueError(f"Unsupported config format: {path.suffix}")

        if "grid" in data:
            for k, v in data["grid"].items():
                setattr(config.grid, k, v)

        if "demo" in data:
            for k, v in data["demo"].items():
                setattr(config.demo, k, v)

        config.debug = data.get("debug", False)
        config.log_level = data.get("log_level", "INFO")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "grid": {
                "width": self.grid.width,
                "depth": self.grid.depth,
                "columns": self.grid.columns,
                "rows": self.grid.rows,
            },
            "demo": {
                "fps": self.demo.fps,
                "seconds": self.demo.seconds,
                "color": self.demo.color,
                "seed": self.demo.seed,
            },
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global config instance
_config: Optional[PhosphorConfig] = None


def get_config() -> PhosphorConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = PhosphorConfig.from_env()
    return _config


def set_config(config: PhosphorConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
