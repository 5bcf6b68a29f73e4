"""Rich terminal reporter for the run summary."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from commitvar.git.models import FileKind
from commitvar.results.models import RunSummary

_KIND_LABEL = {
    FileKind.MODEL: "Model (CML)",
    FileKind.SOURCE: "Source code (CCL)",
    FileKind.BUILD: "Build (CBL)",
}


def render(
    summary: RunSummary,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the run summary to the terminal using Rich."""
    console = console or Console(stderr=True)

    console.print()
    if summary.commits_analyzed == 0:
        console.print("[bold yellow]No commits analyzed.[/bold yellow]")
        if show_summary:
            _print_summary(console, summary)
        return

    table = Table(
        title="Commit Classification",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Element", style="cyan", min_width=20)
    table.add_column("Commits", justify="right", style="green")
    table.add_column("Artifact lines", justify="right")
    table.add_column("Variability lines", justify="right", style="magenta")

    table.add_row(
        "Artifact-specific only (CCAI)",
        str(summary.artifact_only_commits),
        str(summary.artifact_only_lines),
        "-",
    )
    table.add_row(
        "Variability only (CCVI)",
        str(summary.variability_only_commits),
        "-",
        str(summary.variability_only_lines),
    )
    table.add_row(
        "Both (CCAVI)",
        str(summary.mixed_commits),
        str(summary.mixed_artifact_lines),
        str(summary.mixed_variability_lines),
    )
    for kind, label in _KIND_LABEL.items():
        counts = summary.kind_lines[kind]
        table.add_row(label, "-", str(counts.artifact_lines), str(counts.variability_lines))

    console.print(table)

    if show_summary:
        _print_summary(console, summary)


def _print_summary(console: Console, summary: RunSummary) -> None:
    console.print()
    console.print(f"[dim]Commits available:[/dim]   {summary.commits_available}")
    console.print(f"[dim]Commits analyzed:[/dim]    {summary.commits_analyzed}")
    console.print(f"[dim]Commits unanalyzed:[/dim]  {summary.commits_unanalyzed}")
