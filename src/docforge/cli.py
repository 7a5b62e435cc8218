"""
docforge CLI - score proposals and walk draft history from the terminal.

Commands:
    docforge score FILE [--json] [--min-score N]   Score a markdown proposal
    docforge history save ID FILE                  Save FILE as a new draft
    docforge history back ID                       Step to the previous draft
    docforge history forward ID                    Step to the next draft
    docforge history show ID                       List drafts for ID
    docforge version                               Show docforge version
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import load_settings
from .history import (
    SaveReason,
    SqliteKeyValueStore,
    StorageError,
    VersionStore,
    VersionView,
    create_version_store,
    time_since,
)
from .scoring import validate_document
from .security.validators import ValidationError

app = typer.Typer(help="Proposal scoring and draft history for docforge tools")
history_app = typer.Typer(help="Save and navigate draft versions")
app.add_typer(history_app, name="history")
console = Console()


@app.callback()
def main():
    """Configure logging once for every command."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] cannot read {path}: {e.strerror or e}")
        raise typer.Exit(1)


def _score_style(score: int, max_score: int) -> str:
    ratio = score / max_score if max_score else 0
    if ratio >= 0.7:
        return "green"
    if ratio >= 0.4:
        return "yellow"
    return "red"


# =============================================================================
# SCORE
# =============================================================================


@app.command()
def score(
    path: Path = typer.Argument(..., help="Markdown proposal to score"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    min_score: int = typer.Option(0, "--min-score", help="Exit 1 if the total is lower"),
):
    """Score a strategic proposal against the four-dimension rubric."""
    settings = load_settings()
    report = validate_document(_read_file(path), max_chars=settings.max_document_chars)

    if json_output:
        console.print_json(data=report.to_dict())
    else:
        table = Table(title=f"Proposal Score: {path.name}")
        table.add_column("Dimension", style="bold")
        table.add_column("Score")
        table.add_column("Strengths")
        table.add_column("Issues")

        for name, result in report.dimensions.items():
            style = _score_style(result.score, result.max_score)
            table.add_row(
                name.replace("_", " ").title(),
                f"[{style}]{result.score}/{result.max_score}[/{style}]",
                "\n".join(result.strengths) or "-",
                "\n".join(result.issues) or "-",
            )

        slop = report.slop_detection
        if slop.deduction:
            table.add_row(
                "Slop Penalty",
                f"[red]-{slop.deduction}[/red]",
                "-",
                "\n".join(slop.issues),
            )

        console.print(table)
        if report.sections.missing:
            console.print(f"Missing sections: {', '.join(report.sections.missing)}")
        style = _score_style(report.total_score, 100)
        console.print(f"\n[bold {style}]Total: {report.total_score}/100[/bold {style}]")

    if report.total_score < min_score:
        raise typer.Exit(1)


# =============================================================================
# HISTORY
# =============================================================================


def _open_store(identifier: str) -> VersionStore:
    settings = load_settings()
    try:
        return create_version_store(identifier, backend=SqliteKeyValueStore(settings.db_path))
    except (ValidationError, StorageError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _print_view(view: VersionView) -> None:
    flags = []
    if view.can_go_back:
        flags.append("back")
    if view.can_go_forward:
        flags.append("forward")
    console.print(
        f"[bold]Version {view.version_number} of {view.total_versions}[/bold] "
        f"(saved {time_since(view.saved_at)}; can go: {', '.join(flags) or 'nowhere'})"
    )


@history_app.command("save")
def history_save(
    identifier: str = typer.Argument(..., help="Document identifier (e.g. project id)"),
    path: Path = typer.Argument(..., help="File whose contents become the new draft"),
):
    """Save a file as the next draft version."""
    store = _open_store(identifier)
    result = store.save_version(_read_file(path))
    if result.success:
        console.print(
            f"[green]Saved version {result.version_number} "
            f"({result.total_versions} total)[/green]"
        )
    elif result.reason == SaveReason.NO_CHANGE:
        console.print("[yellow]No changes since the current version[/yellow]")
    else:
        console.print(f"[bold red]Save failed:[/bold red] {result.reason}")
        raise typer.Exit(1)


@history_app.command("back")
def history_back(identifier: str = typer.Argument(..., help="Document identifier")):
    """Step to the previous draft."""
    view = _open_store(identifier).go_back()
    if view is None:
        console.print("[yellow]Already at the first version[/yellow]")
        return
    _print_view(view)


@history_app.command("forward")
def history_forward(identifier: str = typer.Argument(..., help="Document identifier")):
    """Step to the next draft."""
    view = _open_store(identifier).go_forward()
    if view is None:
        console.print("[yellow]Already at the latest version[/yellow]")
        return
    _print_view(view)


@history_app.command("show")
def history_show(
    identifier: str = typer.Argument(..., help="Document identifier"),
    content: bool = typer.Option(False, "--content", help="Print the current draft"),
):
    """List saved drafts and mark the current one."""
    store = _open_store(identifier)
    history = store.snapshot()
    if history.is_empty:
        console.print(f"[yellow]No versions saved for {identifier}[/yellow]")
        return

    table = Table(title=f"Draft History: {identifier}")
    table.add_column("", width=1)
    table.add_column("Version")
    table.add_column("Saved")
    table.add_column("Chars", justify="right")
    for i, entry in enumerate(history.entries):
        marker = "[bold cyan]>[/bold cyan]" if i == history.cursor else ""
        table.add_row(
            marker,
            str(entry.sequence_number),
            time_since(entry.saved_at),
            str(len(entry.content)),
        )
    console.print(table)

    if content:
        console.print(history.current.content, markup=False, highlight=False)


# =============================================================================
# VERSION
# =============================================================================


@app.command()
def version():
    """Show docforge version."""
    from docforge import __version__
    console.print(f"docforge v{__version__}")


if __name__ == "__main__":
    app()
