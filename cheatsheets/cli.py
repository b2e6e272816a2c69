"""Cheatsheets CLI - list, show and render markdown cheatsheets."""

from __future__ import annotations

import json
from pathlib import Path

import click

from cheatsheets.config import Config, load_config
from cheatsheets.content.frontmatter import parse_frontmatter
from cheatsheets.content.loader import CheatsheetLoader
from cheatsheets.content.search import filter_cheatsheets
from cheatsheets.render.highlight import create_highlighter
from cheatsheets.render.renderer import MarkdownRenderer
from cheatsheets.utils import configure_logging


def _loader(config: Config) -> CheatsheetLoader:
    try:
        return CheatsheetLoader.from_config(config)
    except ValueError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file path (default: environment variables)",
)
@click.option("--content-dir", default=None, help="Content directory (overrides config)")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, content_dir: str | None):
    """Cheatsheets CLI - list, show and render markdown cheatsheets."""
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()

    if content_dir:
        config.content.content_dir = content_dir

    configure_logging(config.log_level)
    ctx.obj = config


@cli.command("list")
@click.option("--query", "-q", default="", help="Search title and description")
@click.option("--category", default=None, help="Only show this category")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_obj
def list_command(config: Config, query: str, category: str | None, as_json: bool):
    """List cheatsheets sorted by title."""
    sheets = filter_cheatsheets(_loader(config).list_cheatsheets(), query, category)

    if as_json:
        click.echo(json.dumps([sheet.to_dict() for sheet in sheets], indent=2))
        return

    if not sheets:
        click.echo("No cheatsheets found")
        return

    width = max(len(sheet.slug) for sheet in sheets)
    for sheet in sheets:
        click.echo(f"{sheet.slug:<{width}}  {sheet.title}  [{sheet.category}]")


@cli.command()
@click.argument("slug")
@click.option("--raw", is_flag=True, help="Print the markdown body instead of HTML")
@click.pass_obj
def show(config: Config, slug: str, raw: bool):
    """Print a rendered cheatsheet.

    Args:
        slug: Cheatsheet slug (filename without extension)
        raw: Print the markdown body
    """
    cheatsheet = _loader(config).get_cheatsheet(slug)
    if cheatsheet is None:
        click.echo(f"✗ Cheatsheet not found: {slug}", err=True)
        raise SystemExit(1)

    click.echo(cheatsheet.content if raw else cheatsheet.content_html)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--language", default=None, help="Default language for untagged code fences")
@click.pass_obj
def render(config: Config, path: Path, language: str | None):
    """Render a markdown file to HTML on stdout."""
    try:
        highlighter = create_highlighter(
            enabled=config.render.highlight,
            style=config.render.highlight_style,
        )
    except ValueError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()

    _, body = parse_frontmatter(path.read_text(encoding="utf-8"))
    renderer = MarkdownRenderer(
        highlighter=highlighter,
        default_language=language or config.render.default_language,
    )
    click.echo(renderer.render(body))


@cli.command()
@click.pass_obj
def validate(config: Config):
    """Validate configuration and report the corpus size."""
    content_path = config.content_path()
    sheets = _loader(config).list_cheatsheets()

    click.echo("✓ Configuration is valid")
    click.echo(f"  Content directory: {content_path}")
    click.echo(f"  Highlighting: {'on' if config.render.highlight else 'off'} ({config.render.highlight_style})")
    click.echo(f"  Default language: {config.render.default_language}")
    click.echo(f"  Cheatsheets: {len(sheets)}")
    if not content_path.is_dir():
        click.echo("  Warning: content directory does not exist", err=True)


def main():
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
