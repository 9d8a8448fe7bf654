"""Command-line interface for listkeeper."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from listkeeper.models.view import PageView
from listkeeper.session import ListDispatch, ListSession, require_dispatch
from listkeeper.settings import get_settings
from listkeeper.storage.slots import FileSlotStore

QUIT_COMMANDS = {":q", ":quit"}

console = Console()


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


app = typer.Typer(
    name="listkeeper",
    help="Keep a short paginated list of entries.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Keep a short paginated list of entries."""
    _setup_logging(verbose)


def _open_session() -> ListSession:
    """Open a session on the configured data directory."""
    settings = get_settings()
    return ListSession(FileSlotStore(settings.resolve_data_dir()), settings)


def _render_page(view: PageView) -> None:
    """Print one page of entries, with a page footer only if there are several pages."""
    if not view.visible_entries:
        console.print("[dim]No entries yet.[/dim]")
        return

    table = Table(show_header=True)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Entry")
    for entry in view.visible_entries:
        table.add_row(str(entry.id), escape(entry.content))
    console.print(table)

    if view.show_pagination:
        console.print(f"[dim]Page {view.current_page} of {view.page_count}[/dim]")


def _parse_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _run_shell_command(line: str, dispatch: ListDispatch | None) -> str | None:
    """Apply one line of shell input.

    Plain text adds an entry, ``:d ID`` deletes, ``:p N`` changes page.

    Returns:
        Message to show the user, or None if there is nothing to say.
    """
    handles = require_dispatch(dispatch, "shell")
    command, _, argument = line.strip().partition(" ")

    if command == ":d":
        entry_id = _parse_int(argument.strip())
        if entry_id is None:
            return f"[red]Not an entry id: {escape(argument.strip())}[/red]"
        if handles.delete_entry(entry_id):
            return f"[green]Deleted entry {entry_id}[/green]"
        return f"[yellow]No entry with id {entry_id}[/yellow]"

    if command == ":p":
        page = _parse_int(argument.strip())
        if page is None:
            return f"[red]Not a page number: {escape(argument.strip())}[/red]"
        handles.change_page(page)
        return None

    entry = handles.submit_new_entry(line)
    if entry is None:
        return None
    return f"[green]Added entry {entry.id}[/green]"


@app.command()
def add(
    text: Annotated[str, typer.Argument(help="Text of the entry to add.")],
) -> None:
    """Add an entry to the end of the list."""
    session = _open_session()
    entry = session.submit_new_entry(text)
    if entry is None:
        console.print("[yellow]Nothing to add: entry text is blank.[/yellow]")
        return
    console.print(f"[green]✓ Added entry {entry.id}[/green]: {escape(entry.content)}")


@app.command()
def delete(
    entry_id: Annotated[int, typer.Argument(help="Id of the entry to delete.")],
) -> None:
    """Delete an entry by id."""
    session = _open_session()
    if session.delete_entry(entry_id):
        console.print(f"[green]✓ Deleted entry {entry_id}[/green]")
    else:
        console.print(f"[yellow]No entry with id {entry_id}.[/yellow]")


@app.command()
def show(
    page: Annotated[
        int,
        typer.Option(
            "--page",
            "-p",
            help="Page to show. Out-of-range pages are clamped.",
        ),
    ] = 1,
) -> None:
    """Show one page of the list."""
    session = _open_session()
    session.change_page(page)
    _render_page(session.view())


@app.command()
def shell() -> None:
    """Interactive session that keeps the current page between commands."""
    session = _open_session()
    dispatch = session.dispatch

    console.print("[bold]listkeeper[/bold] - type text to add, :d ID to delete, :p N for page, :q to quit\n")

    while True:
        _render_page(session.view())
        try:
            line = Prompt.ask("[cyan]>[/cyan]", console=console)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip() in QUIT_COMMANDS:
            break

        message = _run_shell_command(line, dispatch)
        if message:
            console.print(message)


if __name__ == "__main__":
    app()
