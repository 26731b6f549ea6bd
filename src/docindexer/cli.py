"""Command line interface for DocIndexer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from docindexer.config import DEFAULT_INDEX_NAME, AppConfig
from docindexer.errors import IndexServiceError
from docindexer.pipeline import RunResult, run_pipeline
from docindexer.watch import watch_and_reindex

console = Console()
app = typer.Typer(help="DocIndexer - push local PDF and DOCX text into Meilisearch")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s][%(threadName)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _report(result: RunResult) -> None:
    submission = result.submission
    if submission.submitted:
        console.print(f"Indexed {submission.submitted} documents!")
    else:
        console.print("No documents indexed.")
    if submission.dry_run:
        console.print(f"[yellow]Dry run: {len(result.batch)} documents prepared.[/yellow]")


def _run_and_report(config: AppConfig) -> None:
    _report(run_pipeline(config))


@app.callback()
def main() -> None:
    """Index PDF and DOCX files into a Meilisearch index."""


@app.command()
def index(
    inputdir: Path = typer.Option(
        ...,
        "--inputdir",
        "-i",
        help="Input directory to index.",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    watch: bool = typer.Option(False, "--watch", "-w", help="Re-index whenever files change."),
    noindex: bool = typer.Option(
        False, "--noindex", "-n", help="Prepare documents without submitting them."
    ),
    url: str = typer.Option(None, "--url", help="Meilisearch URL (default: $MEILI_URL)"),
    api_key: str = typer.Option(
        None, "--api-key", help="Meilisearch API key (default: $MEILI_MASTER_KEY)"
    ),
    index_name: str = typer.Option(DEFAULT_INDEX_NAME, "--index", help="Target index name"),
    wait: bool = typer.Option(False, "--wait", help="Wait for the index task to finish"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Index every supported document under a directory."""
    _setup_logging(verbose)
    config = AppConfig(
        input_dir=inputdir,
        no_index=noindex,
        watch=watch,
        wait=wait,
        meili_url=url,
        api_key=api_key,
        index_name=index_name,
    )

    if config.watch:
        def run_once() -> None:
            try:
                _run_and_report(config)
            except IndexServiceError as exc:
                console.print(f"[red]Indexing failed: {exc}[/red]")

        watch_and_reindex(config.input_dir, run_once, skip_dirs=config.skip_dirs)
        return

    try:
        _run_and_report(config)
    except IndexServiceError as exc:
        console.print(f"[red]Indexing failed: {exc}[/red]")
        raise typer.Exit(code=1)
