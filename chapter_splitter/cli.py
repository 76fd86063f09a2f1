"""
CLI entry point: split a PDF by its bookmarks from the shell.

    chapter-splitter split path/to/book.pdf             # one file per top-level bookmark
    chapter-splitter split path/to/book.pdf -d 2 -n     # dry run at depth 2
    chapter-splitter outline path/to/book.pdf           # show the bookmark tree
    chapter-splitter config show
"""

import logging
from pathlib import Path

import typer

from chapter_splitter.api import plan_pdf_split, split_pdf_by_outline, validate_pdf_path
from chapter_splitter.backends import REGISTRY, get_backend
from chapter_splitter.config import load_config
from chapter_splitter.models import SplitPlan, SplitterError, SplitterSettings
from chapter_splitter.tools import config_app

app = typer.Typer(
    name="chapter-splitter",
    help="Split PDF files into chapters (or sections) using their outline.",
)
app.add_typer(config_app, name="config")


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _resolve_defaults(depth: int | None, backend: str | None) -> tuple[SplitterSettings, int, str]:
    """Fill options left unset from the config file, then validate them."""
    settings = load_config()
    depth = depth if depth is not None else settings.depth
    backend = backend or settings.backend
    if depth < 1:
        _fail("Depth must be at least 1")
    if backend not in REGISTRY:
        _fail(f"unknown backend '{backend}'. Choose: {', '.join(REGISTRY)}")
    return settings, depth, backend


def _print_dry_run(plan: SplitPlan, output_dir: Path, verbose: bool) -> None:
    typer.echo("\n=== Dry Run Mode ===")
    typer.echo(f"The following files would be created in '{output_dir}/':")
    typer.echo(f"Split depth: {plan.depth}")
    typer.echo("")
    for segment in plan.segments:
        typer.echo(f"  {segment.filename} (pages {segment.start_page}-{segment.end_page})")
    if verbose and plan.notes:
        typer.echo("")
        for note in plan.notes:
            typer.echo(f"    [INFO] {note}")
    typer.echo(f"\nTotal files to create: {len(plan.segments)}")


@app.command("split")
def split(
    pdf: Path = typer.Argument(..., help="Path to the PDF file", path_type=Path),
    depth: int | None = typer.Option(
        None,
        "-d",
        "--depth",
        help="Split at this outline depth (default: from config, else 1)",
    ),
    dry_run: bool = typer.Option(False, "-n", "--dry-run", help="Show what would be done without doing it"),
    force: bool = typer.Option(False, "-f", "--force", help="Remove existing chapters directory if it exists"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show detailed progress"),
    complete: bool = typer.Option(
        False,
        "-c",
        "--complete",
        help="Include the page where the next segment starts in each segment",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "-o",
        "--output-dir",
        help="Where to create the chapters directory (default: the PDF's folder)",
        path_type=Path,
    ),
    backend: str | None = typer.Option(None, "--backend", "-b", help=f"Backend: {', '.join(REGISTRY)}"),
) -> None:
    """Split a PDF into one file per outline entry at the given depth."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    settings, depth, backend = _resolve_defaults(depth, backend)

    result = split_pdf_by_outline(
        pdf,
        depth,
        output_dir=output_dir,
        complete=complete or settings.complete,
        force=force,
        dry_run=dry_run,
        backend=backend,
        settings=settings,
    )
    if not result.success:
        _fail(result.errors[0] if result.errors else result.message)

    plan = result.plan
    if dry_run:
        _print_dry_run(plan, result.output_dir, verbose)
        return

    for err in result.errors:
        typer.echo(f"Warning: {err}", err=True)
    typer.echo(f"Found {len(plan.chapters)} segments at depth {plan.depth}")
    if not verbose:
        for path in result.output_paths:
            typer.echo(f"Created: {path.name}")
    typer.echo(result.message)


@app.command("outline")
def outline_cmd(
    pdf: Path = typer.Argument(..., help="Path to the PDF file", path_type=Path),
    depth: int | None = typer.Option(None, "--depth", "-d", help="Max depth to display"),
    backend: str = typer.Option("pymupdf", "--backend", "-b", help=f"Backend: {', '.join(REGISTRY)}"),
) -> None:
    """Show the PDF's outline (bookmarks) with levels and pages."""
    try:
        pdf = validate_pdf_path(pdf)
        document = get_backend(backend)().read_outline(pdf)
    except SplitterError as e:
        _fail(str(e))
    except KeyError:
        _fail(f"unknown backend '{backend}'. Choose: {', '.join(REGISTRY)}")

    if not document.entries:
        _fail("No outline found in the PDF file.")
    for entry in document.entries:
        if depth is not None and entry.level >= depth:
            continue
        page = entry.page if entry.page is not None else "unknown"
        typer.echo(f"{'  ' * entry.level}- {entry.title} (page {page})")
    typer.echo(f"\n{len(document.entries)} entries, {document.page_count} pages")


@app.command("plan")
def plan_cmd(
    pdf: Path = typer.Argument(..., help="Path to the PDF file", path_type=Path),
    depth: int | None = typer.Option(None, "--depth", "-d", help="Split depth (default: from config, else 1)"),
    complete: bool = typer.Option(False, "--complete", "-c"),
    backend: str | None = typer.Option(None, "--backend", "-b", help=f"Backend: {', '.join(REGISTRY)}"),
) -> None:
    """Print the split plan as JSON."""
    settings, depth, backend = _resolve_defaults(depth, backend)
    try:
        plan = plan_pdf_split(
            pdf,
            depth,
            complete=complete or settings.complete,
            backend=backend,
            settings=settings,
        )
    except (SplitterError, ValueError) as e:
        _fail(str(e))
    typer.echo(plan.model_dump_json(indent=2))


def main() -> None:
    """Entry point for the chapter-splitter console script."""
    app()


if __name__ == "__main__":
    main()
