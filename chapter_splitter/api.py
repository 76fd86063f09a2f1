"""
Public API: plan or run a split from code.

    from chapter_splitter import split_pdf_by_outline
    result = split_pdf_by_outline("book.pdf", depth=2)
"""

import logging
import shutil
from pathlib import Path

from chapter_splitter.backends import get_backend
from chapter_splitter.config import load_config
from chapter_splitter.models import (
    OutlineNotFoundError,
    OutputExistsError,
    SplitPlan,
    SplitResult,
    SplitterError,
    SplitterSettings,
)
from chapter_splitter.planner import build_plan

log = logging.getLogger(__name__)


def validate_pdf_path(pdf_path: str | Path) -> Path:
    """Raise SplitterError unless pdf_path is an existing .pdf file."""
    pdf_path = Path(pdf_path)
    if not pdf_path.is_file():
        raise SplitterError(f"File not found: {pdf_path}")
    if pdf_path.suffix.lower() != ".pdf":
        raise SplitterError("The file must be a PDF")
    return pdf_path


def prepare_output_directory(path: Path, force: bool = False) -> Path:
    """Create path. An existing directory is removed with force, else OutputExistsError."""
    path = Path(path)
    if path.exists():
        if not force:
            raise OutputExistsError(f"{path.name} directory already exists. Use --force to overwrite.")
        log.info("Removing existing %s directory...", path.name)
        shutil.rmtree(path)
    log.info("Creating %s directory...", path.name)
    path.mkdir(parents=True, exist_ok=True)
    return path


def plan_pdf_split(
    pdf_path: str | Path,
    depth: int = 1,
    *,
    complete: bool = False,
    backend: str = "pymupdf",
    settings: SplitterSettings | None = None,
) -> SplitPlan:
    """
    Read the PDF outline and plan the output files without writing anything.

    Raises:
        SplitterError: bad path, unreadable PDF (DocumentReadError) or no
            outline (OutlineNotFoundError).
        KeyError: unknown backend.
        ValueError: depth < 1.
    """
    if depth < 1:
        raise ValueError("Depth must be at least 1")
    pdf_path = validate_pdf_path(pdf_path)
    settings = settings or load_config()
    log.info("Processing PDF: %s", pdf_path)
    document = get_backend(backend)().read_outline(pdf_path)
    if not document.entries:
        raise OutlineNotFoundError()
    return build_plan(
        document.entries,
        document.page_count,
        depth,
        complete=complete,
        settings=settings,
        source_title=pdf_path.name,
    )


def split_pdf_by_outline(
    pdf_path: str | Path,
    depth: int = 1,
    *,
    output_dir: str | Path | None = None,
    complete: bool = False,
    force: bool = False,
    dry_run: bool = False,
    backend: str = "pymupdf",
    settings: SplitterSettings | None = None,
) -> SplitResult:
    """
    Split a PDF into one file per outline segment (library entry point).

    Files go to <output_dir>/<chapters_dir>/, output_dir defaulting to the
    PDF's folder.

    Args:
        pdf_path: Path to the PDF file.
        depth: Outline depth to split at (1 = top-level bookmarks).
        output_dir: Parent of the chapters directory.
        complete: End each segment on the page where the next one starts.
        force: Replace an existing chapters directory.
        dry_run: Plan only; nothing is written.
        backend: Backend name ('pymupdf' default).
        settings: Defaults; loaded from the config file if None.

    Returns:
        SplitResult; fatal problems give success=False with the error in errors.
    """
    settings = settings or load_config()
    pdf_path = Path(pdf_path)
    target_dir = Path(output_dir or pdf_path.parent) / settings.chapters_dir

    try:
        plan = plan_pdf_split(pdf_path, depth, complete=complete, backend=backend, settings=settings)
    except (SplitterError, KeyError, ValueError) as e:
        msg = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
        return SplitResult(success=False, output_dir=target_dir, errors=[msg], message=msg)

    if dry_run:
        return SplitResult(
            success=True,
            output_dir=target_dir,
            plan=plan,
            dry_run=True,
            message=f"Would create {len(plan.segments)} files in {target_dir}",
        )

    try:
        prepare_output_directory(target_dir, force=force)
    except OutputExistsError as e:
        return SplitResult(success=False, output_dir=target_dir, plan=plan, errors=[str(e)], message=str(e))
    except OSError as e:
        msg = f"Cannot prepare {target_dir}: {e}"
        log.warning(msg)
        return SplitResult(success=False, output_dir=target_dir, plan=plan, errors=[msg], message=msg)

    try:
        written, errors = get_backend(backend)().write_plan(pdf_path, plan, target_dir)
    except SplitterError as e:
        return SplitResult(success=False, output_dir=target_dir, plan=plan, errors=[str(e)], message="Split failed")
    msg = f"Created {len(written)} files in {target_dir}"
    if errors:
        msg += f" ({len(errors)} failed)"
    log.info("Done!")
    return SplitResult(
        success=True,
        output_dir=target_dir,
        plan=plan,
        output_paths=written,
        errors=errors,
        message=msg,
    )
