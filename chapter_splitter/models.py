"""Data models for outline entries, split plans, settings and results."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class SplitterError(Exception):
    """Base class for errors raised while planning or writing a split."""


class OutlineNotFoundError(SplitterError):
    """Raised when the PDF has no outline (bookmarks) to split on."""

    def __init__(self, message: str = "No outline found in the PDF file."):
        super().__init__(message)


class DocumentReadError(SplitterError):
    """Raised when the backend cannot open or parse the source PDF."""


class OutputExistsError(SplitterError):
    """Raised when the output directory exists and overwriting was not requested."""


class OutlineEntry(BaseModel):
    """One bookmark from the document outline, in pre-order."""

    title: str = Field(description="Bookmark title (normalized)")
    page: int | None = Field(
        default=None,
        ge=1,
        description="Destination page (1-based), None when the destination could not be resolved",
    )
    level: int = Field(ge=0, description="Depth in the outline tree (0 = top level)")

    model_config = {"frozen": True}

    @property
    def start_page(self) -> int:
        """Page the entry starts on; unresolved destinations start at page 1."""
        return self.page or 1


class AugmentedEntry(OutlineEntry):
    """Outline entry with its position in the flat list and its ancestor indices."""

    original_index: int = Field(ge=0, description="Position in the pre-order outline list")
    parent_chain: tuple[int, ...] = Field(
        default=(),
        description="Ancestor indices, nearest first, ending at a level-0 ancestor",
    )


class OutlineDocument(BaseModel):
    """What a backend reader returns for one PDF."""

    entries: list[OutlineEntry] = Field(default_factory=list, description="Flat pre-order outline")
    page_count: int = Field(ge=0, description="Number of pages in the PDF")
    metadata: dict[str, str] = Field(default_factory=dict, description="Document info dictionary")


class PlannedSegment(BaseModel):
    """One output file: a contiguous page range of the source PDF."""

    number: int = Field(description="Output ordinal (0 for front matter, 99 for appendix)")
    title: str = Field(description="Segment title")
    level: int = Field(default=0, description="Outline level of the source entry")
    start_page: int = Field(ge=1, description="First page (1-based, inclusive)")
    end_page: int = Field(ge=1, description="Last page (1-based, inclusive)")
    parent_title: str | None = Field(default=None, description="Nearest ancestor title when depth > 1")
    filename: str = Field(description="Output file name")
    original_index: int | None = Field(default=None, description="Index of the source outline entry")
    kind: Literal["segment", "front_matter", "appendix"] = Field(default="segment")

    @property
    def page_count(self) -> int:
        return self.end_page - self.start_page + 1


class SplitPlan(BaseModel):
    """Ordered list of output files for one PDF and how it was derived."""

    source_title: str | None = Field(default=None, description="Source PDF name, for display")
    total_pages: int = Field(ge=0, description="Pages in the source PDF")
    requested_depth: int = Field(description="Depth asked for by the caller")
    depth: int = Field(description="Depth actually used (clamped to the outline depth)")
    complete: bool = Field(default=False, description="End pages include the next segment's start page")
    segments: list[PlannedSegment] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list, description="Informational messages for verbose output")

    @property
    def chapters(self) -> list[PlannedSegment]:
        """Segments that come from outline entries (no front matter or appendix)."""
        return [s for s in self.segments if s.kind == "segment"]


class SplitterSettings(BaseModel):
    """Defaults loaded from .chapter_splitter.json; CLI options override them."""

    depth: int = Field(default=1, ge=1, description="Default split depth")
    complete: bool = Field(default=False, description="Default for --complete")
    chapters_dir: str = Field(default="chapters", description="Output folder name under the output dir")
    front_matter_name: str = Field(default="Front Matter", description="Title used for pages before the first segment")
    appendix_name: str = Field(default="Appendix", description="Title used for pages after the last segment")
    backend: str = Field(default="pymupdf", description="Reader/writer backend")


class SplitResult(BaseModel):
    """Result of a split run."""

    success: bool = Field(description="Whether the split completed without fatal errors")
    output_dir: Path | None = Field(default=None, description="Directory the files were written to")
    plan: SplitPlan | None = Field(default=None, description="The plan that was executed")
    output_paths: list[Path] = Field(default_factory=list, description="Written PDF files")
    dry_run: bool = Field(default=False)
    errors: list[str] = Field(default_factory=list, description="Non-fatal errors or warnings")
    message: str = Field(default="", description="Human-readable summary")

    model_config = {"arbitrary_types_allowed": True}
