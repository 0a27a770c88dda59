from __future__ import annotations

import json
from typing import Optional
import typer
from rich.console import Console
from rich.markup import escape

from .client.users import normalize_handle
from .config import Settings, load_settings
from .errors import TimelineError
from .export import export_posts
from .models import PostRecord
from .pipeline import TimelinePipeline


app = typer.Typer(add_completion=False, help="x-guest-timeline - read a public X profile's recent posts without logging in")
console = Console()
err_console = Console(stderr=True)

API_HINT = "X changes its internal API often; the endpoints, feature flags or bundle layout may be out of date."


def _make_pipeline(settings: Settings, quiet: bool = False) -> TimelinePipeline:
    return TimelinePipeline(timeout=settings.timeout, quiet=quiet)


def _resolve_handle(handle: Optional[str], settings: Settings) -> str:
    try:
        return normalize_handle(handle or settings.handle or "")
    except ValueError:
        raise typer.BadParameter("pass a HANDLE or set X_TIMELINE_HANDLE")


def _fail(e: TimelineError) -> typer.Exit:
    err_console.print(f"[red]Run failed:[/red] {escape(str(e))}")
    err_console.print(API_HINT)
    return typer.Exit(code=1)


def _print_posts(posts: list[PostRecord]) -> None:
    if not posts:
        console.print("No valid posts found in the response.")
        return
    for i, p in enumerate(posts, start=1):
        console.print(f"\n[bold][ Post {i} ][/bold]")
        console.print(f"  Created: {p.created_at}", markup=False)
        text = p.text.replace("\n", "\n           ")
        console.print(f"  Text:    {text}", markup=False)
        console.print(f"  Retweets: {p.retweet_count} | Likes: {p.favorite_count}")


@app.command()
def fetch(
    handle: Optional[str] = typer.Argument(None, help="Screen name, with or without @"),
    count: Optional[int] = typer.Option(None, min=1, help="Page size (default 20)"),
    as_json: bool = typer.Option(False, "--json", help="Print posts as a JSON array"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide progress output"),
    env_file: Optional[str] = typer.Option(None, help="Path to .env"),
):
    """Fetch one page of a user's posts and print them."""
    settings = load_settings(env_file)
    h = _resolve_handle(handle, settings)
    pipeline = _make_pipeline(settings, quiet=quiet)
    try:
        posts = pipeline.run(h, count=count if count is not None else settings.count)
    except TimelineError as e:
        raise _fail(e)

    if as_json:
        typer.echo(json.dumps([p.to_dict() for p in posts], ensure_ascii=False, indent=2))
    else:
        _print_posts(posts)


@app.command()
def export(
    handle: Optional[str] = typer.Argument(None, help="Screen name, with or without @"),
    out_dir: Optional[str] = typer.Option(None, help="Output directory"),
    count: Optional[int] = typer.Option(None, min=1, help="Page size (default 20)"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide progress output"),
    env_file: Optional[str] = typer.Option(None, help="Path to .env"),
):
    """Fetch posts and write them as JSON and CSV."""
    settings = load_settings(env_file)
    h = _resolve_handle(handle, settings)
    pipeline = _make_pipeline(settings, quiet=quiet)
    try:
        posts = pipeline.run(h, count=count if count is not None else settings.count)
    except TimelineError as e:
        raise _fail(e)

    jpath, cpath = export_posts(posts, h, out_dir=out_dir or settings.out_dir)
    console.print(f"Wrote {jpath}", markup=False)
    console.print(f"Wrote {cpath}", markup=False)


@app.command()
def probe(
    env_file: Optional[str] = typer.Option(None, help="Path to .env"),
):
    """Check that the bearer scrape and guest activation still work."""
    settings = load_settings(env_file)
    pipeline = _make_pipeline(settings)
    try:
        bearer = pipeline.bearer()
        pipeline.start_session(bearer)
    except TimelineError as e:
        raise _fail(e)
    console.print(f"[green]OK[/green] bearer {escape(bearer[:20])}... and guest activation both work")
