import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from typeahead.config import describe, load_config
from typeahead.domain.errors import FetchError
from typeahead.infrastructure import create_controller, create_fetcher
from typeahead.logger import get_logger, setup_logger

cli = typer.Typer(
    name="typeahead",
    help="Live search suggestions with debounced, latest-wins fetching",
    epilog="""
    Examples:
    $ typeahead run --provider static
    $ typeahead suggest "python asyncio"
    """,
    add_completion=False,
)

console = Console()


@cli.command()
def run(
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="Suggestion provider: youtube or static"),
    debounce_ms: Optional[int] = typer.Option(None, "--debounce-ms", help="Quiet interval before fetching"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Launch the interactive search field."""
    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")

    config = load_config(provider=provider, debounce_ms=debounce_ms)
    logger.info(f"Starting typeahead with config: {describe(config)}")

    # Imported here so `suggest` works without loading Textual
    from typeahead.presentation.tui import TypeaheadApp

    controller = create_controller(config)
    try:
        TypeaheadApp(controller).run()
    finally:
        controller.close()
        logger.info("Typeahead stopped")


@cli.command()
def suggest(
    query: str = typer.Argument(..., help="Query to fetch suggestions for"),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="Suggestion provider: youtube or static"),
):
    """Fetch suggestions for a single query and print them."""
    logger = get_logger("main")
    config = load_config(provider=provider)
    fetcher = create_fetcher(config)

    try:
        suggestions = asyncio.run(fetcher.fetch(query))
    except FetchError as e:
        logger.warning(str(e))
        console.print(f"✗ {e}", style="red", markup=False)
        raise typer.Exit(code=1)
    finally:
        release = getattr(fetcher, "close", None)
        if callable(release):
            release()

    if not suggestions:
        console.print(f"[dim]No suggestions for {query!r}[/]")
        return

    table = Table(title=f"Suggestions for {query!r}")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Suggestion")
    for index, suggestion in enumerate(suggestions):
        table.add_row(str(index), suggestion)
    console.print(table)


def run_cli():
    """Entry point for the typeahead command."""
    cli()


if __name__ == "__main__":
    run_cli()
