"""
Core module - vote highlighting for quotevote

- votes: Vote records, directions and tags; ingestion of stored records
- aggregation: per-character up/down tallies
- spans: contiguous runs of identical tallies
- colors: tally -> highlight colour
- render: the (text, votes) -> styled segments pipeline
- html_generation: HTML for rendered posts
- excerpts: activity-feed excerpts
"""

from quotevote.core.aggregation import PositionTally, aggregate
from quotevote.core.colors import ColorKind, ColorWeight, color_of
from quotevote.core.render import StyledSegment, compose, highlight_range, render
from quotevote.core.spans import Span, build_spans
from quotevote.core.votes import Vote, VoteDirection, VoteTag, parse_votes

__all__ = [
    "ColorKind", "ColorWeight", "PositionTally", "Span", "StyledSegment",
    "Vote", "VoteDirection", "VoteTag",
    "aggregate", "build_spans", "color_of", "compose", "highlight_range",
    "parse_votes", "render",
]
