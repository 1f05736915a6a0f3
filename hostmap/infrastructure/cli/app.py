"""hostmap CLI - Main application entry point and app structure."""

from typing import Annotated

from rich.console import Console
import typer

from hostmap import __version__
from hostmap.config import get_logger, log_startup_info, setup_loguru_logger
from hostmap.infrastructure.cli import domain_commands
from hostmap.infrastructure.cli.ui import command_error_handler
from hostmap.infrastructure.persistence.database import init_db

console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"hostmap v{__version__} - hostname to site domain management",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

app.add_typer(
    domain_commands.app,
    name="domains",
    help="Manage hostname domains",
    rich_help_panel="Domains",
)


@app.command(name="version", rich_help_panel="System")
def version_command() -> None:
    """Show version information."""
    console.print(f"[bold bright_blue]hostmap[/bold bright_blue] [dim]v{__version__}[/dim]")


@app.command(name="init-db", rich_help_panel="System")
@command_error_handler
def init_db_command() -> None:
    """Create the database schema if it does not exist."""
    init_db()
    console.print("[green]✓[/green] Database schema ready")


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize hostmap CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    setup_loguru_logger(verbose)
    log_startup_info()


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
