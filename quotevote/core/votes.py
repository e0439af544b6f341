"""
votes.py - Vote records and their ingestion

This module handles:
- The closed Up/Down direction and the tag options offered with a vote
- Turning stored vote records (``startWordIndex``/``endWordIndex``/``type``)
  into immutable Vote values
- Dropping records that cannot be understood, with a warning

Indices are character offsets into the full post text, inclusive at both
ends, despite the ``WordIndex`` naming of the stored fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from quotevote.errors import VoteFormatError
from quotevote.utils.logging_helper import get_logger

log = get_logger()


class VoteDirection(str, Enum):
    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, value: Any) -> "VoteDirection":
        """Case-insensitive lookup; anything else is a VoteFormatError."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise VoteFormatError(f"Unknown vote direction: {value!r}")


class VoteTag(str, Enum):
    TRUE = "#true"
    AGREE = "#agree"
    LIKE = "#like"
    FALSE = "#false"
    DISAGREE = "#disagree"
    DISLIKE = "#dislike"

    @property
    def direction(self) -> VoteDirection:
        return VoteDirection.UP if self in _UP_TAGS else VoteDirection.DOWN


_UP_TAGS = frozenset({VoteTag.TRUE, VoteTag.AGREE, VoteTag.LIKE})


@dataclass(frozen=True)
class Vote:
    """One reader's verdict on the inclusive range [start_index, end_index]."""

    start_index: int
    end_index: int
    direction: VoteDirection
    tags: Tuple[VoteTag, ...] = ()

    def is_within(self, text_length: int) -> bool:
        return 0 <= self.start_index <= self.end_index < text_length

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Vote":
        """Build a Vote from a stored record.

        Both the stored camelCase keys and snake_case keys are accepted. A
        missing direction is inferred from the first recognised tag and
        otherwise defaults to up.
        """
        start = _index(record, "startWordIndex", "start_index")
        end = _index(record, "endWordIndex", "end_index")
        tags = _tags(record.get("tags"))

        raw_direction = record.get("type", record.get("direction"))
        if raw_direction is None or raw_direction == "":
            direction = tags[0].direction if tags else VoteDirection.UP
        else:
            direction = VoteDirection.parse(raw_direction)

        return cls(start_index=start, end_index=end, direction=direction, tags=tags)

    def to_record(self) -> Dict[str, Any]:
        return {
            "startWordIndex": self.start_index,
            "endWordIndex": self.end_index,
            "type": self.direction.value,
            "tags": [tag.value for tag in self.tags],
        }


def _index(record: Mapping[str, Any], *keys: str) -> int:
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        # bool is an int subclass; a True offset is never intended
        if isinstance(value, bool):
            break
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError as exc:
                raise VoteFormatError(f"Non-integer {keys[0]} {value!r} in vote record") from exc
        break
    raise VoteFormatError(f"Missing or non-integer {keys[0]} in vote record")


def _tags(raw: Optional[Iterable[Any]]) -> Tuple[VoteTag, ...]:
    if not raw:
        return ()
    if not isinstance(raw, (list, tuple)):
        raw = [raw]
    tags: List[VoteTag] = []
    for value in raw:
        try:
            tags.append(VoteTag(str(value).strip().lower()))
        except ValueError:
            log.debug(f"Dropping unknown vote tag {value!r}")
    return tuple(tags)


def parse_votes(records: Iterable[Mapping[str, Any]]) -> List[Vote]:
    """Ingest raw records, skipping (and logging) the ones that don't parse."""
    votes: List[Vote] = []
    for pos, record in enumerate(records):
        if not isinstance(record, Mapping):
            log.warning(f"Skipping vote {pos}: not a mapping")
            continue
        try:
            votes.append(Vote.from_record(record))
        except VoteFormatError as exc:
            log.warning(f"Skipping vote {record.get('_id', pos)}: {exc}")
    return votes
