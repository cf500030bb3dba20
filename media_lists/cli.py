"""
Command-line interface for Media Lists.

Uses Typer to provide three commands:
- scrape: collect a list from a supported site
- history: import a YouTube watch-history export
- merge: union several saved entry files
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .config import AppConfig, load_config
from .errors import InvalidListPage, MediaListsError
from .history.adapter import videos_to_entries
from .history.parser import parse_history_file
from .logging_utils import setup_logging
from .sources.registry import parse_list
from .storage import load_entries, merge_entries, save_entries, save_videos

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(config: Path | None, log_level: str | None) -> AppConfig:
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    setup_logging(cfg.logging, Path(cfg.output.directory))
    return cfg


@app.command()
def scrape(
    url: str = typer.Argument(..., help="URL of a list on a supported site."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    keep_partial: bool = typer.Option(
        False,
        "--keep-partial/--no-keep-partial",
        help="Save the entries collected before a page failed.",
    ),
):
    """Scrape every page of a list and save the titles as JSON."""
    cfg = _prepare(config, log_level)
    try:
        entries = parse_list(url, cfg.fetch)
    except InvalidListPage as exc:
        console.print(f"[red]Error:[/red] {exc}")
        if keep_partial and exc.partial:
            path = save_entries(exc.partial, output, cfg.output)
            console.print(f"Saved {len(exc.partial)} entries collected before the failure: {path}")
        raise typer.Exit(code=1)
    except MediaListsError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    path = save_entries(entries, output, cfg.output)
    console.print(f"Saved {len(entries)} entries: {path}")


@app.command()
def history(
    input: Path = typer.Argument(..., exists=True, readable=True, help="watch-history .html or .json"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file."),
    as_entries: bool = typer.Option(
        False,
        "--entries/--videos",
        help="Save as list entries (title with channel) instead of videos.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Import a YouTube watch-history export."""
    cfg = _prepare(config, log_level)
    try:
        videos = parse_history_file(input)
    except MediaListsError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    if as_entries:
        entries = videos_to_entries(videos)
        path = save_entries(entries, output, cfg.output)
        console.print(f"Saved {len(entries)} entries: {path}")
    else:
        path = save_videos(videos, output, cfg.output)
        console.print(f"Saved {len(videos)} videos: {path}")


@app.command()
def merge(
    inputs: list[Path] = typer.Argument(..., exists=True, readable=True, help="Entry JSON files."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Merge several saved entry files into one, deduplicated by link."""
    cfg = _prepare(config, log_level)
    merged = merge_entries(*(load_entries(path) for path in inputs))
    path = save_entries(merged, output, cfg.output)
    console.print(f"Saved {len(merged)} entries: {path}")


if __name__ == "__main__":
    app()
