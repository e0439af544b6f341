#!/usr/bin/env python
"""
render_highlights.py – Render posts with their vote highlights as HTML.

Examples
────────
# 1) One post, votes next to it (post_42.votes.json) ➜ post_42.html
quotevote-render data/posts/post_42.txt

# 2) Explicit votes file and output, plus a segment table
quotevote-render post.txt --votes votes.json --out post.html --show-table

# 3) Every <id>.txt in a folder that has an <id>.votes.json
quotevote-render data/posts --dest outputs/highlights
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from quotevote.core.html_generation import generate_html_page
from quotevote.core.render import StyledSegment, render
from quotevote.core.votes import parse_votes
from quotevote.errors import QuoteVoteError
from quotevote.utils.config import HighlightConfig, load_config
from quotevote.utils.io_helpers import (ensure_utf8_windows, load_vote_records,
                                        read_utf8, write_utf8)
from quotevote.utils.logging_helper import get_logger
from quotevote.utils.paths import OUTPUT_DIR, votes_path_for

console = Console()
log = get_logger()


def render_post(text_path: Path, votes_path: Path,
                config: HighlightConfig) -> Tuple[str, List[StyledSegment]]:
    """Read one post and its votes; return (page html, segments)."""
    text = read_utf8(text_path)
    votes = parse_votes(load_vote_records(votes_path))
    segments = render(text, votes, config)

    covered = sum(len(s.text) for s in segments if s.highlighted)
    summary = (f"{len(votes)} votes · {len(segments)} segments · "
               f"{covered}/{len(text)} characters highlighted")
    log.info(f"{text_path.name}: {summary}")
    return generate_html_page(text_path.stem, segments, summary), segments


def segment_table(segments: Sequence[StyledSegment]) -> Table:
    table = Table(title="Segments", box=box.SIMPLE)
    table.add_column("Range", style="cyan", no_wrap=True)
    table.add_column("Style")
    table.add_column("Text")
    for seg in segments:
        style = seg.style.to_style() if seg.style else "—"
        preview = seg.text if len(seg.text) <= 40 else seg.text[:37] + "..."
        table.add_row(f"[{seg.start}, {seg.end})", style, escape(repr(preview)))
    return table


def iter_posts(folder: Path) -> List[Tuple[Path, Path]]:
    """Pairs of (post, votes) for posts that have a votes file."""
    pairs = []
    for text_path in sorted(folder.glob("*.txt")):
        votes_path = votes_path_for(text_path)
        if votes_path.exists():
            pairs.append((text_path, votes_path))
        else:
            log.warning(f"No votes file for {text_path.name}, skipping")
    return pairs


def render_folder(folder: Path, dest: Path, config: HighlightConfig) -> int:
    pairs = iter_posts(folder)
    if not pairs:
        console.print(f"[red]No posts with votes found in {folder}[/]")
        return 1

    failed: List[str] = []
    with Progress(TextColumn("{task.description}"), BarColumn(),
                  TaskProgressColumn(), console=console) as progress:
        task = progress.add_task("Rendering posts", total=len(pairs))
        for text_path, votes_path in pairs:
            try:
                page, _ = render_post(text_path, votes_path, config)
            except (ValueError, UnicodeDecodeError) as exc:
                log.warning(f"Could not render {text_path.name}: {exc}")
                failed.append(text_path.name)
            else:
                write_utf8(dest / f"{text_path.stem}.html", page)
            progress.advance(task)

    rendered = len(pairs) - len(failed)
    console.print(f"[bold green]✓ Rendered {rendered} posts to {dest}[/]")
    if failed:
        console.print(f"[red]Failed: {escape(', '.join(failed))}[/]")
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    ensure_utf8_windows()
    ap = argparse.ArgumentParser(
        description="Render post text shaded by the votes on each passage."
    )
    ap.add_argument("source", type=Path,
                    help="Post .txt file OR a folder of posts.")
    ap.add_argument("--votes", type=Path,
                    help="Votes JSON (default: <post>.votes.json next to the post).")
    ap.add_argument("--out", type=Path,
                    help="Output HTML for a single post (default: <post>.html in --dest).")
    ap.add_argument("--dest", type=Path, default=OUTPUT_DIR,
                    help=f"Output folder (default: {OUTPUT_DIR})")
    ap.add_argument("--config", type=Path,
                    help="Highlight YAML (default: $QUOTEVOTE_CONFIG, then config/highlight.yaml).")
    ap.add_argument("--show-table", action="store_true",
                    help="Print the segment table for a single post.")
    args = ap.parse_args(argv)

    try:
        config = load_config(args.config)
    except QuoteVoteError as exc:
        console.print(f"[red]Config error: {escape(str(exc))}[/]")
        return 2

    if args.source.is_dir():
        return render_folder(args.source, args.dest, config)

    if not args.source.exists():
        console.print(f"[red]Post not found: {args.source}[/]")
        return 1
    votes_path = args.votes or votes_path_for(args.source)
    if not votes_path.exists():
        console.print(f"[red]Votes file not found: {votes_path}[/]")
        return 1

    try:
        page, segments = render_post(args.source, votes_path, config)
    except (ValueError, UnicodeDecodeError) as exc:
        console.print(f"[red]Could not read {args.source.name}: {escape(str(exc))}[/]")
        return 1

    out = args.out or args.dest / f"{args.source.stem}.html"
    write_utf8(out, page)
    if args.show_table:
        console.print(segment_table(segments))
    console.print(f"[bold green]✓ Saved[/] {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
