"""Title cleanup and output file names."""

import re

# Characters not allowed in file names on common filesystems
INVALID_FILENAME_CHARS = re.compile(r'[/:*?"<>|]')

FRONT_MATTER_NUMBER = 0
APPENDIX_NUMBER = 99


def normalize_title(title: str | None) -> str:
    """Strip BOM and surrounding whitespace; full-width spaces become ASCII spaces."""
    if not title:
        return ""
    title = title.replace("\ufeff", "")
    title = title.replace("\u3000", " ")
    return title.strip()


def sanitize_filename(title: str) -> str:
    """Replace characters that are invalid in file names with '_'."""
    return INVALID_FILENAME_CHARS.sub("_", title)


def segment_filename(number: int, title: str, parent_title: str | None = None) -> str:
    """
    File name for one output segment.

    '01_Chapter 1_ Introduction.pdf', or with a parent title
    '03_Chapter 2_Section 2.1.pdf'.
    """
    prefix = f"{number:02d}"
    clean_title = sanitize_filename(title)
    if parent_title:
        return f"{prefix}_{sanitize_filename(parent_title)}_{clean_title}.pdf"
    return f"{prefix}_{clean_title}.pdf"
