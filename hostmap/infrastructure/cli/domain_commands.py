"""Domain management commands for the hostmap CLI."""

from typing import Annotated

import typer

from hostmap.application.services import DomainService
from hostmap.config import get_logger
from hostmap.domain.entities import Domain
from hostmap.infrastructure.cli.ui import (
    command_error_handler,
    console,
    print_event_messages,
    render_domains_table,
)
from hostmap.infrastructure.context import create_domain_service

logger = get_logger(__name__)

app = typer.Typer(
    help="List, add and remove hostname domains",
    no_args_is_help=True,
)


def get_domain_service() -> DomainService:
    """Service used by every command; replaced in tests."""
    return create_domain_service()


@app.command(name="list")
@command_error_handler
def list_domains(
    include_wildcards: Annotated[
        bool,
        typer.Option(
            "--include-wildcards/--no-wildcards",
            help="Include wildcard domains",
        ),
    ] = False,
    content_id: Annotated[
        int | None,
        typer.Option("--content-id", "-c", help="Only domains bound to this node"),
    ] = None,
) -> None:
    """List stored domains."""
    service = get_domain_service()
    if content_id is None:
        domains = service.get_all(include_wildcards)
        title = "Domains"
    else:
        domains = service.get_assigned_domains(content_id, include_wildcards)
        title = f"Domains for content {content_id}"

    if not domains:
        console.print("[dim]No domains found[/dim]")
        return
    console.print(render_domains_table(domains, title=title))


@app.command(name="show")
@command_error_handler
def show_domain(
    name: Annotated[str, typer.Argument(help="Domain name")],
) -> None:
    """Show a single domain."""
    domain = get_domain_service().get_by_name(name)
    if domain is None:
        console.print(f"[yellow]Domain '{name}' not found[/yellow]")
        raise typer.Exit(code=1)
    console.print(render_domains_table([domain], title=domain.domain_name))


@app.command(name="exists")
@command_error_handler
def domain_exists(
    name: Annotated[str, typer.Argument(help="Domain name")],
) -> None:
    """Exit with code 0 when the domain exists, 1 otherwise."""
    if get_domain_service().exists(name):
        console.print(f"[green]✓[/green] {name}")
        return
    console.print(f"[red]✗[/red] {name}")
    raise typer.Exit(code=1)


@app.command(name="add")
@command_error_handler
def add_domain(
    name: Annotated[str, typer.Argument(help="Domain name, e.g. example.com/en")],
    content_id: Annotated[
        int | None,
        typer.Option("--content-id", "-c", help="Root content node"),
    ] = None,
    language_id: Annotated[
        int | None, typer.Option("--language-id", help="Language ID")
    ] = None,
    iso_code: Annotated[
        str | None, typer.Option("--iso", help="Language ISO code, e.g. en-US")
    ] = None,
) -> None:
    """Add a new domain."""
    attempt = get_domain_service().save(
        Domain(
            domain_name=name,
            root_content_id=content_id,
            language_id=language_id,
            language_iso_code=iso_code,
        )
    )
    print_event_messages(attempt.result.event_messages)
    if not attempt.success:
        console.print(f"[yellow]Saving '{name}' was cancelled[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] Added {name} (ID {attempt.result.entity.id})")


@app.command(name="remove")
@command_error_handler
def remove_domain(
    name: Annotated[str, typer.Argument(help="Domain name")],
) -> None:
    """Remove a domain by name."""
    service = get_domain_service()
    domain = service.get_by_name(name)
    if domain is None:
        console.print(f"[yellow]Domain '{name}' not found[/yellow]")
        raise typer.Exit(code=1)

    attempt = service.delete(domain)
    print_event_messages(attempt.result.event_messages)
    if not attempt.success:
        console.print(f"[yellow]Removing '{name}' was cancelled[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] Removed {name}")
