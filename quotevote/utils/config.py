#!/usr/bin/env python
"""
config.py – highlight colour settings.

Defaults match the web client: full intensity at 100 votes, never fainter
than 0.1, green for agreement and red for disagreement.

Example ``config/highlight.yaml``::

    saturation_threshold: 100
    min_opacity: 0.1
    max_opacity: 1.0
    up_color: [0, 255, 0]
    down_color: "#ff0000"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from dotenv import load_dotenv

from quotevote.errors import ConfigError
from quotevote.utils.io_helpers import read_utf8
from quotevote.utils.logging_helper import get_logger
from quotevote.utils.paths import HIGHLIGHT_CONFIG_FILE

load_dotenv()  # QUOTEVOTE_CONFIG may live in .env

log = get_logger()

RGB = Tuple[int, int, int]

SATURATION_THRESHOLD = 100
MIN_OPACITY = 0.1
MAX_OPACITY = 1.0
GREEN: RGB = (0, 255, 0)
RED: RGB = (255, 0, 0)


@dataclass(frozen=True)
class HighlightConfig:
    saturation_threshold: int = SATURATION_THRESHOLD
    min_opacity: float = MIN_OPACITY
    max_opacity: float = MAX_OPACITY
    up_color: RGB = GREEN
    down_color: RGB = RED

    def __post_init__(self) -> None:
        if self.saturation_threshold <= 0:
            raise ConfigError(
                f"saturation_threshold must be positive, got {self.saturation_threshold}")
        if not 0.0 <= self.min_opacity <= self.max_opacity <= 1.0:
            raise ConfigError(
                f"need 0 <= min_opacity <= max_opacity <= 1, "
                f"got {self.min_opacity} / {self.max_opacity}")


DEFAULT_CONFIG = HighlightConfig()


def parse_color(value: Any) -> RGB:
    """Accept ``[r, g, b]`` or ``"#rrggbb"``."""
    if isinstance(value, str):
        hex_ = value.lstrip("#")
        if len(hex_) != 6:
            raise ConfigError(f"Bad colour {value!r}")
        try:
            return (int(hex_[0:2], 16), int(hex_[2:4], 16), int(hex_[4:6], 16))
        except ValueError as exc:
            raise ConfigError(f"Bad colour {value!r}") from exc
    if isinstance(value, (list, tuple)) and len(value) == 3:
        if all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            return (value[0], value[1], value[2])
    raise ConfigError(f"Bad colour {value!r}")


def _whole_number(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ConfigError(f"saturation_threshold must be a whole number, got {value!r}")


def config_from_mapping(data: Dict[str, Any]) -> HighlightConfig:
    known = {f.name for f in fields(HighlightConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        log.warning(f"Ignoring unknown highlight settings: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    if "saturation_threshold" in data:
        values["saturation_threshold"] = _whole_number(data["saturation_threshold"])
    try:
        if "min_opacity" in data:
            values["min_opacity"] = float(data["min_opacity"])
        if "max_opacity" in data:
            values["max_opacity"] = float(data["max_opacity"])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid highlight setting: {exc}") from exc
    for key in ("up_color", "down_color"):
        if key in data:
            values[key] = parse_color(data[key])
    return replace(DEFAULT_CONFIG, **values)


def load_config(path: Optional[Path] = None) -> HighlightConfig:
    """
    Load highlight settings from YAML.

    Without *path*: ``QUOTEVOTE_CONFIG``, then ``config/highlight.yaml`` in
    the project, then the built-in defaults.
    """
    if path is None:
        env_path = os.environ.get("QUOTEVOTE_CONFIG")
        if env_path:
            path = Path(env_path)
        elif HIGHLIGHT_CONFIG_FILE.exists():
            path = HIGHLIGHT_CONFIG_FILE
        else:
            return DEFAULT_CONFIG

    path = Path(path)
    if not path.exists():
        log.warning(f"Highlight config not found at {path}, using defaults")
        return DEFAULT_CONFIG

    try:
        data = yaml.safe_load(read_utf8(path)) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return config_from_mapping(data)
