"""PDF backends: each reads the outline and writes page ranges to new files."""

from chapter_splitter.backends.base import SplitBackend
from chapter_splitter.backends.pymupdf_backend import PyMuPDFBackend

__all__ = ["SplitBackend", "PyMuPDFBackend"]

REGISTRY: dict[str, type[SplitBackend]] = {
    "pymupdf": PyMuPDFBackend,
}


def get_backend(name: str) -> type[SplitBackend]:
    """Return backend class for the given name. Raises KeyError if unknown."""
    if name not in REGISTRY:
        raise KeyError(f"Unknown backend: {name}. Available: {list(REGISTRY)}")
    return REGISTRY[name]
