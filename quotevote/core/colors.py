"""
colors.py - Turn a tally into a highlight colour

Intensity grows with the larger of the two counts and saturates at the
configured threshold (100 votes by default). Ties are drawn as a vertical
green-to-red gradient so neither side looks like it is winning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from quotevote.core.aggregation import PositionTally
from quotevote.utils.config import DEFAULT_CONFIG, RGB, HighlightConfig


class ColorKind(str, Enum):
    SOLID = "solid"
    GRADIENT = "gradient"


@dataclass(frozen=True)
class ColorWeight:
    kind: ColorKind
    opacity: float
    colors: Tuple[RGB, ...]

    @property
    def is_gradient(self) -> bool:
        return self.kind is ColorKind.GRADIENT

    def css(self) -> Dict[str, str]:
        """CSS properties in the form the web client emits."""
        if self.is_gradient:
            top, bottom = self.colors
            return {
                "background-image":
                    f"linear-gradient({rgba(top, self.opacity)}, {rgba(bottom, self.opacity)})",
            }
        return {"background-color": rgba(self.colors[0], self.opacity)}

    def to_style(self) -> str:
        return "; ".join(f"{k}: {v}" for k, v in self.css().items())


def rgba(color: RGB, opacity: float) -> str:
    r, g, b = color
    return f"rgba({r},{g},{b},{opacity:g})"


def opacity_for(count: int, config: HighlightConfig = DEFAULT_CONFIG) -> float:
    raw = count / config.saturation_threshold
    return min(max(raw, config.min_opacity), config.max_opacity)


def color_of(tally: PositionTally, config: Optional[HighlightConfig] = None) -> ColorWeight:
    """Colour for a covered position's tally.

    Uncovered text has no tally and must not be passed here.
    """
    config = config or DEFAULT_CONFIG
    opacity = opacity_for(tally.dominant, config)
    if tally.up == tally.down:
        return ColorWeight(ColorKind.GRADIENT, opacity, (config.up_color, config.down_color))
    if tally.up > tally.down:
        return ColorWeight(ColorKind.SOLID, opacity, (config.up_color,))
    return ColorWeight(ColorKind.SOLID, opacity, (config.down_color,))
