#!/usr/bin/env python
"""
io_helpers.py – tiny utilities for BOM-safe UTF-8 reading / writing.

Vote ranges are character offsets into the stored post text, so nothing here
rewrites the text it reads: a BOM is stripped and that's all.
"""

import json
import sys, os
from pathlib import Path
from typing import Any, Dict, List

BOM = b"\xef\xbb\xbf"

# ── public API ─────────────────────────────────────────────────────────────
def read_utf8(path: Path) -> str:
    """
    Return file contents as str, decoded UTF-8, stripping BOM if present.
    Strict error-handling: a post that isn't valid UTF-8 would shift offsets.
    """
    raw = Path(path).read_bytes()
    if raw.startswith(BOM):
        raw = raw[len(BOM):]
    return raw.decode("utf-8")


def write_utf8(path: Path, text: str) -> None:
    """Write text to file using UTF-8 encoding, creating parent folders."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def load_vote_records(path: Path) -> List[Dict[str, Any]]:
    """
    Load raw vote records from JSON.

    Accepts either a bare list or an object with a ``votes`` list (the shape
    the post query returns).
    """
    data = json.loads(read_utf8(path))
    if isinstance(data, dict):
        data = data.get("votes", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of votes in {path}")
    return [rec for rec in data if isinstance(rec, dict)]


def ensure_utf8_windows() -> None:
    """Force UTF-8 on Windows terminals so Unicode output is readable."""
    if sys.platform == "win32":
        if sys.stdout.encoding != "utf-8":
            sys.stdout.reconfigure(encoding="utf-8")
        if sys.stderr.encoding != "utf-8":
            sys.stderr.reconfigure(encoding="utf-8")
        os.environ["PYTHONIOENCODING"] = "utf-8"
