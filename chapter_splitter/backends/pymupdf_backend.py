"""PyMuPDF-based outline reading and page-range splitting."""

import logging
from pathlib import Path

import fitz  # PyMuPDF

from chapter_splitter.backends.base import SplitBackend
from chapter_splitter.models import (
    DocumentReadError,
    OutlineDocument,
    OutlineEntry,
    SplitPlan,
)
from chapter_splitter.naming import normalize_title

log = logging.getLogger(__name__)


def _open(pdf_path: Path) -> fitz.Document:
    try:
        return fitz.open(pdf_path)
    except Exception as e:
        raise DocumentReadError(f"Error reading PDF: {e}") from e


def _toc_to_entries(toc: list[list], page_count: int) -> list[OutlineEntry]:
    """
    Convert PyMuPDF's simple TOC ([level, title, page], level and page 1-based)
    into outline entries. Pages outside the document (PyMuPDF uses -1 for
    unresolvable destinations) become None.
    """
    entries: list[OutlineEntry] = []
    for item in toc:
        lvl, title, page = item[0], item[1], item[2]
        title = normalize_title(title)
        if not title:
            continue
        if not isinstance(page, int) or page < 1 or page > page_count:
            page = None
        level = max(0, lvl - 1)
        entries.append(OutlineEntry(title=title, page=page, level=level))
        log.info("%s- %s (page %s)", "  " * level, title, page if page is not None else "unknown")
    return entries


# Info dictionary keys that set_metadata() writes back
INFO_KEYS = ("title", "author", "subject", "keywords", "creator", "producer", "creationDate", "modDate")


def _metadata(doc: fitz.Document) -> dict[str, str]:
    """Non-empty values of the document info dictionary."""
    info = doc.metadata or {}
    return {k: info[k] for k in INFO_KEYS if isinstance(info.get(k), str) and info[k]}


class PyMuPDFBackend(SplitBackend):
    """Read bookmarks with get_toc() and write page ranges with insert_pdf()."""

    @property
    def name(self) -> str:
        return "pymupdf"

    def read_outline(self, pdf_path: Path) -> OutlineDocument:
        doc = _open(Path(pdf_path))
        try:
            page_count = doc.page_count
            toc = doc.get_toc(simple=True)
            return OutlineDocument(
                entries=_toc_to_entries(toc, page_count),
                page_count=page_count,
                metadata=_metadata(doc),
            )
        except DocumentReadError:
            raise
        except Exception as e:
            raise DocumentReadError(f"Error reading PDF: {e}") from e
        finally:
            doc.close()

    def write_range(self, source: fitz.Document, start_page: int, end_page: int, out_path: Path) -> Path:
        """Copy pages start_page..end_page (1-based, inclusive) of source into out_path."""
        new_doc = fitz.open()
        try:
            new_doc.insert_pdf(source, from_page=start_page - 1, to_page=end_page - 1)
            metadata = _metadata(source)
            if metadata:
                new_doc.set_metadata(metadata)
            new_doc.save(out_path)
        finally:
            new_doc.close()
        return out_path

    def write_plan(self, pdf_path: Path, plan: SplitPlan, output_dir: Path) -> tuple[list[Path], list[str]]:
        output_dir = Path(output_dir)
        written: list[Path] = []
        errors: list[str] = []
        source = _open(Path(pdf_path))
        try:
            for segment in plan.segments:
                out_path = output_dir / segment.filename
                log.info("Extracting: %s (pages %d-%d)...", segment.title, segment.start_page, segment.end_page)
                try:
                    self.write_range(source, segment.start_page, segment.end_page, out_path)
                except Exception as e:
                    log.warning("Failed to write %s: %s", segment.filename, e)
                    errors.append(f"{segment.filename}: {e}")
                    continue
                written.append(out_path)
                log.info("Created: %s (%d pages)", segment.filename, segment.page_count)
        finally:
            source.close()
        return written, errors
