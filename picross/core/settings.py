from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "PICROSS_SEED"
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class Settings:
    width: int = 10
    height: int = 10
    filled_count: int = 65
    tile_size: int = 50
    repository: str = "https://github.com/Kartonrealista/cosmic-ext-picross"


def _int_at_least(name: str, value: object, source: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{source}: '{name}' must be an integer")
    if value < minimum:
        raise ValueError(f"{source}: '{name}' must be at least {minimum}")
    return value


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read game defaults from a YAML file (the packaged one by default)."""
    settings_path = path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a YAML mapping")

    fallback = Settings()
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        raise ValueError(f"{settings_path.name}: 'defaults' must be a mapping")

    source = settings_path.name
    width = _int_at_least("width", defaults.get("width", fallback.width), source, 1)
    height = _int_at_least("height", defaults.get("height", fallback.height), source, 1)
    filled_count = _int_at_least(
        "filled_count", defaults.get("filled_count", fallback.filled_count), source, 0
    )
    if filled_count > width * height:
        raise ValueError(
            f"{source}: 'filled_count' {filled_count} does not fit a {width}x{height} board"
        )
    tile_size = _int_at_least("tile_size", raw.get("tile_size", fallback.tile_size), source, 1)

    repository = raw.get("repository", fallback.repository)
    if not isinstance(repository, str) or not repository.strip():
        raise ValueError(f"{source}: 'repository' must be a non-empty string")

    return Settings(
        width=width,
        height=height,
        filled_count=filled_count,
        tile_size=tile_size,
        repository=repository.strip(),
    )


def seed_from_environment() -> Optional[int]:
    """Return the board seed from ``PICROSS_SEED``, or None when unset or unusable."""
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", SEED_ENV_VAR, raw)
        return None
