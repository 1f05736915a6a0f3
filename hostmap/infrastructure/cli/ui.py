"""UI helpers for CLI interaction.

Keeps presentation logic separate from the service calls.
"""

from collections.abc import Callable
import functools

from rich.console import Console
from rich.table import Table
import typer

from hostmap.config import get_logger
from hostmap.domain.entities import Domain, EventMessages, EventMessageType

console = Console()
logger = get_logger(__name__)

_MESSAGE_STYLES = {
    EventMessageType.ERROR: "bold red",
    EventMessageType.WARNING: "yellow",
    EventMessageType.SUCCESS: "green",
    EventMessageType.INFO: "cyan",
    EventMessageType.DEFAULT: "white",
}


def command_error_handler[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Logs the failure with its traceback, prints a short message and exits with
    code 1. ``typer.Exit`` and ``typer.Abort`` pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def render_domains_table(domains: list[Domain], title: str = "Domains") -> Table:
    """Build a table of domains for display."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Content", justify="right")
    table.add_column("Language")
    table.add_column("Wildcard", justify="center")

    for domain in domains:
        table.add_row(
            str(domain.id),
            domain.domain_name,
            "" if domain.root_content_id is None else str(domain.root_content_id),
            domain.language_iso_code or "",
            "✓" if domain.is_wildcard else "",
        )
    return table


def print_event_messages(messages: EventMessages) -> None:
    """Print the messages observers attached to an operation."""
    for message in messages:
        style = _MESSAGE_STYLES.get(message.message_type, "white")
        console.print(f"[{style}]{message.category}: {message.message}[/{style}]")
