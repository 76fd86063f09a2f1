"""
Chapter Splitter: split PDF files into chapters or sections using their outline.

Use as a library:

    from chapter_splitter import split_pdf_by_outline
    result = split_pdf_by_outline("path/to/book.pdf", depth=2)

Or run the CLI:

    chapter-splitter split path/to/book.pdf -d 2
"""

from chapter_splitter.api import plan_pdf_split, split_pdf_by_outline
from chapter_splitter.models import (
    OutlineEntry,
    PlannedSegment,
    SplitPlan,
    SplitResult,
    SplitterSettings,
)
from chapter_splitter.planner import build_plan

__all__ = [
    "split_pdf_by_outline",
    "plan_pdf_split",
    "build_plan",
    "OutlineEntry",
    "PlannedSegment",
    "SplitPlan",
    "SplitResult",
    "SplitterSettings",
]
