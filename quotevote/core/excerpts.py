"""
excerpts.py - The slice of a post an activity refers to

Feeds show a voted, quoted or commented passage rather than the whole post.
Bounds on those records are used as a half-open ``[start, end)`` slice and
line breaks are dropped so the excerpt reads as one line. Mis-decoded
text (mojibake) is repaired; quotes, widths and ligatures are left as the
author wrote them.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from ftfy import TextFixerConfig, fix_text

_LINE_BREAKS = re.compile(r"\r\n|\n|\r")

_ENCODING_ONLY = TextFixerConfig(
    unescape_html=False,
    fix_latin_ligatures=False,
    fix_character_width=False,
    uncurl_quotes=False,
    fix_line_breaks=False,
    remove_control_chars=False,
    normalization=None,
)

_FULL_TEXT = {"POSTED", "LIKED"}
_RECORD_FOR = {
    "COMMENTED": "comment",
    "UPVOTED": "vote",
    "DOWNVOTED": "vote",
    "QUOTED": "quote",
}


def _slice(text: str, record: Optional[Mapping[str, Any]]) -> Optional[str]:
    if not record:
        return None
    start = record.get("startWordIndex", record.get("start_index"))
    end = record.get("endWordIndex", record.get("end_index"))
    if isinstance(start, bool) or isinstance(end, bool):
        return None
    if not isinstance(start, int) or not isinstance(end, int):
        return None
    # same clamping as String.prototype.substring
    start, end = (max(0, min(n, len(text))) for n in (start, end))
    if start > end:
        start, end = end, start
    return _LINE_BREAKS.sub("", text[start:end])


def activity_excerpt(activity_type: str, text: str,
                     vote: Optional[Mapping[str, Any]] = None,
                     quote: Optional[Mapping[str, Any]] = None,
                     comment: Optional[Mapping[str, Any]] = None) -> str:
    if not text:
        return ""

    kind = (activity_type or "").upper()
    if kind in _FULL_TEXT or kind not in _RECORD_FOR:
        return fix_text(text, _ENCODING_ONLY)

    record = {"vote": vote, "quote": quote, "comment": comment}[_RECORD_FOR[kind]]
    excerpt = _slice(text, record)
    return fix_text(text if excerpt is None else excerpt, _ENCODING_ONLY)
