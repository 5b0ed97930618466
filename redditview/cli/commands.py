"""CLI commands for redditview."""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from redditview import __version__
from redditview.config.loader import load_config
from redditview.config.schema import Config
from redditview.errors import ConfigError, ThreadLoadError
from redditview.logging_setup import configure_logging
from redditview.thread.listing import load_index, load_thread, resolve_post_path
from redditview.thread.page import render_document, render_error, render_post

app = typer.Typer(
    name="redditview",
    help="Render archived Reddit threads to HTML.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"redditview v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
) -> None:
    """redditview - archived Reddit thread viewer."""


def _setup(config_path: Optional[Path]) -> Config:
    try:
        config = load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    configure_logging(config.logging)
    return config


def _write(html: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(html)
        return
    output.write_text(html, encoding="utf-8")
    logger.info(f"Wrote {output}")


@app.command()
def render(
    post: str = typer.Argument(..., help="Post id (looked up in the data dir) or path to a .json archive"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write HTML here instead of stdout"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", "-d", help="Archive directory"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """Render one archived thread as a standalone HTML page."""
    config = _setup(config_path)
    path = resolve_post_path(data_dir or Path(config.data.data_dir), post)

    try:
        thread = load_thread(path)
    except ThreadLoadError as e:
        logger.error(f"Failed to load post: {e}")
        page = render_document("Error", render_error(f"Failed to load post: {e}"), config.render, config.data)
        _write(page, output)
        raise typer.Exit(1)

    body = render_post(thread.post, thread.comments, config.render)
    _write(render_document(thread.post.title, body, config.render, config.data), output)


@app.command("list")
def list_posts(
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", "-d", help="Archive directory"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """List archived posts from index.json, newest first."""
    config = _setup(config_path)
    root = data_dir or Path(config.data.data_dir)

    try:
        entries = load_index(root)
    except ThreadLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not entries:
        typer.echo(f"No posts in {root}")
        return
    for entry in entries:
        label = entry.get("title") or entry.get("path") or entry.get("id") or "?"
        typer.echo(f"{entry.get('timestamp', '')}  {label}")
    typer.echo(f"{len(entries)} posts")


@app.command("config")
def show_config(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """Print the effective configuration."""
    config = _setup(config_path)
    typer.echo(config.model_dump_json(indent=2))
