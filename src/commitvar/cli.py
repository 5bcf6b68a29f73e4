"""commitvar CLI: Typer application with analyze, extract, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from commitvar import __version__

app = typer.Typer(
    name="commitvar",
    help="Count artifact-specific and variability changes in commit diffs.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _fail(label: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {exc}")
    return typer.Exit(code=2)


# ── analyze ───────────────────────────────────────────────────────────────────


@app.command()
def analyze(
    input_dir: Path = typer.Option(..., "--input", "-i", help="Directory containing <sha>.txt commit files"),
    output_dir: Path = typer.Option(..., "--output", "-o", help="Directory for the result files"),
    commit_list: Optional[Path] = typer.Option(None, "--commit-list", "-l", help="File with one commit SHA per line"),
    warnings: bool = typer.Option(False, "--warnings", "-w", help="Display additional warnings"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Display debug information"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .commitvar.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Summary format: terminal | json"),
) -> None:
    """Analyze every commit file in INPUT and write the results to OUTPUT."""
    from commitvar.analysis.dispatch import FileKindDispatcher
    from commitvar.analysis.engine import AnalysisError, CommitAnalyzer, collect_commit_files
    from commitvar.config.loader import ConfigError, load_config
    from commitvar.config.schema import OUTPUT_FORMATS
    from commitvar.logging import configure_logging
    from commitvar.output import json_report, terminal, tsv_report

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        raise _fail("Config error", exc) from exc

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    cfg.logging.warnings = cfg.logging.warnings or warnings
    cfg.logging.debug = cfg.logging.debug or debug

    configure_logging(warnings=cfg.logging.warnings, debug=cfg.logging.debug)

    # --- Validate paths ---
    if not input_dir.is_dir():
        console.print(f"[bold red]Error:[/bold red] input directory not found: {input_dir}")
        raise typer.Exit(code=2)
    if commit_list is not None and not commit_list.is_file():
        console.print(f"[bold red]Error:[/bold red] commit list not found: {commit_list}")
        raise typer.Exit(code=2)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise _fail("Error", exc) from exc

    # --- Collect commits ---
    logger.info("Collecting commits")
    try:
        commit_files = collect_commit_files(input_dir, commit_list)
    except AnalysisError as exc:
        raise _fail("Error", exc) from exc
    logger.info("%d commits found", len(commit_files))

    # --- Analyze ---
    logger.info("Analyzing commits")
    dispatcher = FileKindDispatcher(extension_blacklist=cfg.analysis.extension_blacklist)
    analyzer = CommitAnalyzer(dispatcher=dispatcher)
    collector = analyzer.analyze_all(commit_files)
    summary = collector.summary(commits_available=len(commit_files))
    logger.info("Commits analyzed")

    # --- Write result files ---
    results_path = output_dir / cfg.output.results_file
    summary_path = output_dir / cfg.output.summary_file
    unanalyzed_path = output_dir / cfg.output.unanalyzed_file
    try:
        results_path.write_text(tsv_report.render_results(collector.results), encoding="utf-8")
        summary_path.write_text(tsv_report.render_summary(summary), encoding="utf-8")
        if unanalyzed_path.exists():
            unanalyzed_path.unlink()
        if collector.unanalyzed:
            unanalyzed_path.write_text(
                tsv_report.render_unanalyzed(collector.unanalyzed), encoding="utf-8"
            )
    except OSError as exc:
        raise _fail("Error writing results", exc) from exc

    # --- Output ---
    if cfg.output.format == "json":
        print(json_report.render(summary))
    else:
        terminal.render(summary, show_summary=cfg.output.show_summary, console=console)
        console.print(f"[dim]Results written to {output_dir}[/dim]")

    raise typer.Exit(code=0)


# ── extract ───────────────────────────────────────────────────────────────────


@app.command()
def extract(
    repo: Path = typer.Argument(Path("."), help="Path inside the git repository"),
    rev_range: str = typer.Option(..., "--range", "-r", help="Revision range, e.g. v3.0..v3.1"),
    output_dir: Path = typer.Option(..., "--output", "-o", help="Directory for the <sha>.txt files"),
) -> None:
    """Write one commit file per commit of a revision range."""
    from commitvar.git.adapter import GitError, extract_commits, get_repo_root

    try:
        repo_root = get_repo_root(repo)
        written = extract_commits(repo_root, rev_range, output_dir)
    except GitError as exc:
        raise _fail("Git error", exc) from exc
    except OSError as exc:
        raise _fail("Error", exc) from exc

    console.print(f"[green]✓[/green] Extracted {len(written)} commit(s) to {output_dir}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .commitvar.toml in the current directory."""
    from commitvar.config.defaults import DEFAULT_TOML
    from commitvar.config.loader import CONFIG_FILE_NAME

    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILE_NAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"commitvar {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """commitvar: classify commit changes as artifact-specific or variability-related."""
