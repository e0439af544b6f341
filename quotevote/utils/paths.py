#!/usr/bin/env python
"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

# Try to get root from environment variable first
ROOT = os.environ.get('QUOTEVOTE_ROOT')
if ROOT:
    ROOT = Path(ROOT).resolve()
else:
    # Fallback: look for a marker file (like .git or pyproject.toml) in parent directories
    current = Path(__file__).resolve()
    while current.parent != current:
        if any((current / marker).exists() for marker in ['.git', 'pyproject.toml']):
            ROOT = current
            break
        current = current.parent
    else:
        # installed outside a checkout: work relative to the caller
        ROOT = Path.cwd()

OUTPUT_DIR  = ROOT / "outputs"
CONFIG_DIR  = ROOT / "config"
LOG_DIR     = ROOT / "logs"

HIGHLIGHT_CONFIG_FILE = CONFIG_DIR / "highlight.yaml"


def votes_path_for(text_path: Path) -> Path:
    """Return the ``<id>.votes.json`` file that sits next to ``<id>.txt``."""
    text_path = Path(text_path)
    return text_path.with_name(f"{text_path.stem}.votes.json")
