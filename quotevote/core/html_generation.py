"""
html_generation.py - HTML output for rendered posts

This module handles:
- Converting styled segments into inline ``<span>`` runs
- Wrapping a rendered post in a standalone page
"""

import html
from datetime import datetime
from typing import Iterable, List, Optional

from quotevote.core.render import StyledSegment


def segments_to_html(segments: Iterable[StyledSegment]) -> str:
    """Inline HTML for a rendered post; text is escaped, styles are not."""
    parts: List[str] = []
    for seg in segments:
        text = html.escape(seg.text)
        if seg.style is None:
            parts.append(f"<span>{text}</span>")
        else:
            style = html.escape(seg.style.to_style(), quote=True)
            parts.append(f'<span style="{style}">{text}</span>')
    return "".join(parts)


def generate_html_page(title: str, segments: Iterable[StyledSegment],
                       summary: Optional[str] = None) -> str:
    """Standalone page for one post. Line breaks in the text are kept."""
    segments = list(segments)
    safe_title = html.escape(title)
    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{safe_title}</title>
    <style>
        body {{
            padding: 20px;
            max-width: 900px;
            margin: 0 auto;
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
        }}
        .voting-board {{
            white-space: pre-line;
            line-height: 1.6;
            font-size: 16px;
        }}
        .summary {{
            color: #555;
            margin-bottom: 20px;
        }}
        footer {{
            color: #999;
            font-size: 12px;
            margin-top: 30px;
        }}
    </style>
</head>
<body>
    <h1>{safe_title}</h1>
"""
    if summary:
        page += f'    <div class="summary">{html.escape(summary)}</div>\n'

    page += f'    <p class="voting-board">{segments_to_html(segments)}</p>\n'
    page += f"    <footer>Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}</footer>\n"
    page += """</body>
</html>
"""
    return page
