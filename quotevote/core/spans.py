"""
spans.py - Collapse per-position tallies into contiguous runs

A span is a half-open ``[start, end)`` run whose positions all share the same
tally, or are all uncovered. The spans returned for a text partition it: they
are ascending, never overlap, and leave no gaps, so slicing the text by them
and joining the pieces gives the text back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

from quotevote.core.aggregation import PositionTally


@dataclass(frozen=True)
class Span:
    start: int
    end: int
    tally: Optional[PositionTally] = None

    @property
    def covered(self) -> bool:
        return self.tally is not None

    def __len__(self) -> int:
        return self.end - self.start


def build_spans(tallies: Mapping[int, PositionTally], text_length: int) -> List[Span]:
    """Walk ``0..text_length-1`` and cut a new span at every tally change.

    Two tallies with equal counts belong to the same span wherever they came
    from; a change between covered and uncovered always cuts.
    """
    spans: List[Span] = []
    if text_length <= 0:
        return spans

    start = 0
    current = tallies.get(0)
    for pos in range(1, text_length):
        tally = tallies.get(pos)
        if tally != current:
            spans.append(Span(start, pos, current))
            start, current = pos, tally
    spans.append(Span(start, text_length, current))
    return spans
