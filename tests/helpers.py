"""Outline builders shared by the tests."""

from chapter_splitter.models import OutlineEntry

# (title, level, page) rows for a three-level, 30-page book
BOOK_ROWS = [
    ("Ch1", 0, 1),
    ("Sec1.1", 1, 5),
    ("Sub1.1.1", 2, 7),
    ("Sec1.2", 1, 10),
    ("Ch2", 0, 15),
    ("Ch3", 0, 25),
]


def make_entries(rows) -> list[OutlineEntry]:
    return [OutlineEntry(title=title, level=level, page=page) for title, level, page in rows]
