"""Shared fixtures: outline builders and small PDFs generated with PyMuPDF."""

from pathlib import Path

import fitz
import pytest

from chapter_splitter.models import OutlineEntry
from tests.helpers import BOOK_ROWS, make_entries


@pytest.fixture
def book_entries() -> list[OutlineEntry]:
    return make_entries(BOOK_ROWS)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> Path:
    """Point the config lookup at a per-test file so a developer's config never leaks in."""
    path = tmp_path / "config" / ".chapter_splitter.json"
    monkeypatch.setenv("CHAPTER_SPLITTER_CONFIG", str(path))
    return path


@pytest.fixture
def make_pdf(tmp_path):
    """Factory: make_pdf(name, pages, toc=None, metadata=None) -> Path. toc uses PyMuPDF's [level, title, page]."""

    def _make(name: str = "book.pdf", pages: int = 10, toc=None, metadata=None) -> Path:
        doc = fitz.open()
        for i in range(pages):
            page = doc.new_page()
            page.insert_text((72, 72), f"Page {i + 1}")
        if toc:
            doc.set_toc(toc)
        if metadata:
            doc.set_metadata(metadata)
        path = tmp_path / name
        doc.save(path)
        doc.close()
        return path

    return _make


@pytest.fixture
def book_pdf(make_pdf) -> Path:
    """30-page PDF with the BOOK_ROWS outline and some metadata."""
    toc = [[level + 1, title, page] for title, level, page in BOOK_ROWS]
    return make_pdf(
        "book.pdf",
        pages=30,
        toc=toc,
        metadata={"title": "Sample Book", "author": "Jane Doe"},
    )
