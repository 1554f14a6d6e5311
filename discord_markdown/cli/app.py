"""CLI application - main entry point."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from discord_markdown.core.exporting.format import RenderFormat

console = Console(stderr=True)

logger = logging.getLogger(__name__)


class RenderFormatParamType(click.ParamType):
    """Click parameter type for the render format."""

    name = "format"

    def convert(
        self, value: str | RenderFormat, param: click.Parameter | None, ctx: click.Context | None
    ) -> RenderFormat:
        if isinstance(value, RenderFormat):
            return value

        normalized = value.lower().replace("-", "").replace("_", "")
        for fmt in RenderFormat:
            if fmt.value == normalized:
                return fmt
            if fmt.name.lower().replace("_", "") == normalized:
                return fmt
        self.fail(
            f"Invalid format: {value!r}. Choose from: "
            + ", ".join(f.value for f in RenderFormat),
            param,
            ctx,
        )


RENDER_FORMAT = RenderFormatParamType()


@click.group()
@click.version_option(package_name="discord-markdown")
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostic output to stderr.")
def cli(verbose: bool) -> None:
    """Discord markdown - render chat markdown to HTML or plain text."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@cli.command()
@click.argument("text", required=False)
@click.option(
    "-f",
    "--format",
    "render_format",
    type=RENDER_FORMAT,
    default="html",
    help="Output format.",
)
@click.option(
    "-m",
    "--mentions",
    "mentions_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON file with users, channels and roles for resolving mentions.",
)
def render(text: str | None, render_format: RenderFormat, mentions_path: str | None) -> None:
    """Render TEXT (or standard input) as the chosen format."""
    from discord_markdown.core.discord.resolver import InMemoryMentionResolver
    from discord_markdown.core.exceptions import DiscordMarkdownError
    from discord_markdown.core.markdown.renderer import render_markdown

    try:
        resolver = (
            InMemoryMentionResolver.from_file(mentions_path)
            if mentions_path
            else InMemoryMentionResolver()
        )
    except DiscordMarkdownError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if text is None:
        text = click.get_text_stream("stdin").read()

    logger.debug("Rendering %d characters as %s", len(text), render_format.display_name)
    click.echo(render_markdown(text, resolver, render_format))
