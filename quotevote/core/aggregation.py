"""
aggregation.py - Fold vote ranges into per-character tallies

Every valid vote adds one to the up or down count of each position in its
inclusive range. Votes that fall outside the text are dropped; nothing here
raises for a malformed vote.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from quotevote.core.votes import Vote, VoteDirection
from quotevote.utils.logging_helper import get_logger

log = get_logger()


@dataclass(frozen=True)
class PositionTally:
    """Up/down counts at one character position. Compared by value."""

    up: int = 0
    down: int = 0

    @property
    def total(self) -> int:
        return self.up + self.down

    @property
    def dominant(self) -> int:
        return max(self.up, self.down)

    def add(self, direction: object) -> "PositionTally":
        if direction is VoteDirection.UP:
            return PositionTally(self.up + 1, self.down)
        if direction is VoteDirection.DOWN:
            return PositionTally(self.up, self.down + 1)
        # covered, but counts toward neither side
        return self


def aggregate(votes: Iterable[Vote], text_length: int) -> Dict[int, PositionTally]:
    """Return ``{position: PositionTally}`` for every covered position.

    Args:
        votes: Vote snapshot; it is only read.
        text_length: Length of the text the votes point into.

    Returns:
        Mapping with an entry only for positions at least one valid vote covers.
    """
    tallies: Dict[int, PositionTally] = {}
    skipped = 0
    for vote in votes:
        if not _in_bounds(vote, text_length):
            skipped += 1
            continue
        for pos in range(vote.start_index, vote.end_index + 1):
            tallies[pos] = tallies.get(pos, PositionTally()).add(vote.direction)

    if skipped:
        log.debug(f"Dropped {skipped} vote(s) outside [0, {text_length})")
    return tallies


def _in_bounds(vote: Vote, text_length: int) -> bool:
    start = getattr(vote, "start_index", None)
    end = getattr(vote, "end_index", None)
    if not isinstance(start, int) or not isinstance(end, int):
        return False
    return vote.is_within(text_length)
