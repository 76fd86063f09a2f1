"""Abstract interface for outline reading and page-range writing backends."""

from abc import ABC, abstractmethod
from pathlib import Path

from chapter_splitter.models import OutlineDocument, SplitPlan


class SplitBackend(ABC):
    """Interface that each PDF backend must implement."""

    @abstractmethod
    def read_outline(self, pdf_path: Path) -> OutlineDocument:
        """
        Read the outline of the PDF at pdf_path.

        - Entries are one pre-order walk of the bookmark tree, level 0 at the top
        - Destinations that cannot be resolved to a page get page=None
        - Raises DocumentReadError if the file cannot be opened
        """
        ...

    @abstractmethod
    def write_plan(self, pdf_path: Path, plan: SplitPlan, output_dir: Path) -> tuple[list[Path], list[str]]:
        """
        Write one PDF per planned segment into output_dir.

        Returns (written paths, non-fatal errors). Source metadata is copied to
        every output file.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier (e.g. 'pymupdf')."""
        ...
