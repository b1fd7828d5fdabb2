"""Typer entry-point wiring for the deckart CLI."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from ..cards import CardError
from ..logging_utils import DEFAULT_LEVEL, LogLevel, get_logger, setup_logging
from .render import RenderConfig, render_deck

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
logger = get_logger(__name__)


@app.command()
def show(
    condensed: bool = typer.Option(
        True,
        "--condensed/--no-condensed",
        help="Print the one-line-per-suit listing.",
    ),
    art: bool = typer.Option(
        True,
        "--art/--no-art",
        help="Print the ASCII art cards, one suit per row.",
    ),
    log_level: LogLevel = typer.Option(
        DEFAULT_LEVEL,
        case_sensitive=False,
        help="Log level for diagnostics on stderr.",
    ),
) -> None:
    """Generate a standard 52-card deck and print it."""

    setup_logging(log_level)
    config = RenderConfig(show_condensed=condensed, show_art=art)
    try:
        deck = render_deck(console, config)
    except CardError as exc:
        err_console.print(f"[red]Invalid card data:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    logger.debug("Printed %d cards", len(deck))


def main() -> None:
    """Entry-point for ``python -m deckart.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
