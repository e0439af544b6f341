"""
render.py - Rebuild a post as a list of styled text runs

``render(text, votes)`` is the entry point: aggregate the votes, cut the text
into spans, colour the covered ones. The segments it returns join back into
the original text exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from quotevote.core.aggregation import PositionTally, aggregate
from quotevote.core.colors import ColorKind, ColorWeight, color_of
from quotevote.core.spans import Span, build_spans
from quotevote.core.votes import Vote
from quotevote.utils.config import HighlightConfig, parse_color

FOCUS_COLOR = parse_color("#52b274")


@dataclass(frozen=True)
class StyledSegment:
    text: str
    style: Optional[ColorWeight]
    start: int = 0
    end: int = 0

    @property
    def highlighted(self) -> bool:
        return self.style is not None


def compose(text: str, spans: Iterable[Span],
            tallies: Mapping[int, PositionTally],
            config: Optional[HighlightConfig] = None) -> List[StyledSegment]:
    segments: List[StyledSegment] = []
    for span in spans:
        tally = tallies.get(span.start)
        style = color_of(tally, config) if tally is not None else None
        segments.append(StyledSegment(text[span.start:span.end], style, span.start, span.end))
    return segments


def render(text: str, votes: Iterable[Vote],
           config: Optional[HighlightConfig] = None) -> List[StyledSegment]:
    """Segment *text* by the net sentiment of *votes* covering each character.

    Args:
        text: Post text; offsets in the votes point into it.
        votes: Snapshot of the post's votes. Out-of-range votes are ignored.
        config: Colour settings; the web client's defaults when omitted.

    Returns:
        Segments in document order. ``[]`` for empty text.
    """
    if not text:
        return []
    tallies = aggregate(votes, len(text))
    spans = build_spans(tallies, len(text))
    return compose(text, spans, tallies, config)


def highlight_range(text: str, start: int, end: int) -> List[StyledSegment]:
    """Mark the single half-open range ``[start, end)`` in the focus colour.

    Used when one comment or quote is shown against its post. A selection
    that is empty or doesn't fit the text leaves the text unmarked.
    """
    if not text:
        return []
    if start < 0 or start >= end or end > len(text):
        return [StyledSegment(text, None, 0, len(text))]

    focus = ColorWeight(ColorKind.SOLID, 1.0, (FOCUS_COLOR,))
    pieces = [(0, start, None), (start, end, focus), (end, len(text), None)]
    return [StyledSegment(text[a:b], style, a, b) for a, b, style in pieces if a < b]
