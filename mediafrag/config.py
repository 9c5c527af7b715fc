"""Player configuration — the seed the controller writes the start position to."""

import json
import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path

UNSET_START_POSITION = -1.0


@dataclass
class PlayerConfig:
    """Runtime options for one playback session."""

    start_position: float = UNSET_START_POSITION
    enable_media_fragments: bool = True
    time_update_interval: float = 0.25
    log_level: str = "INFO"


def load_config(path: str | Path) -> PlayerConfig:
    """Load and validate a PlayerConfig from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text())

    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")

    known = {f.name for f in fields(PlayerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    config = PlayerConfig(**data)
    if not isinstance(config.start_position, (int, float)) or not math.isfinite(config.start_position):
        raise ValueError("start_position must be a finite number")
    if (
        not isinstance(config.time_update_interval, (int, float))
        or not math.isfinite(config.time_update_interval)
        or config.time_update_interval <= 0
    ):
        raise ValueError("time_update_interval must be positive")
    if not isinstance(config.log_level, str) or not isinstance(
        logging.getLevelName(config.log_level.upper()), int
    ):
        raise ValueError(f"Unknown log level: {config.log_level}")
    return config


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure default logging if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
