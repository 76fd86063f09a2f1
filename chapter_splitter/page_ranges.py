"""
Page-range resolution for selected segments.

A segment ends where the next entry at the same or a shallower level starts.
The lookup always runs over the full outline, not just the selected segments,
since the boundary can be an entry that was filtered out.
"""

from typing import Sequence

from chapter_splitter.models import AugmentedEntry, OutlineEntry


def find_entry_index(entry: OutlineEntry, all_entries: Sequence[AugmentedEntry]) -> int | None:
    """Index of the first entry with the same title and page, or None."""
    for candidate in all_entries:
        if candidate.title == entry.title and candidate.page == entry.page:
            return candidate.original_index
    return None


def _next_at_or_above(all_entries: Sequence[AugmentedEntry], after: int, level: int) -> AugmentedEntry | None:
    """First entry after index `after` whose level is <= `level`."""
    for candidate in all_entries:
        if candidate.original_index > after and candidate.level <= level:
            return candidate
    return None


def _end_before(next_page: int, start_page: int, complete: bool) -> int:
    # Same start page collapses to a single page; an earlier page can only come
    # from an out-of-order outline and collapses the same way.
    if next_page <= start_page:
        return start_page
    if complete:
        return next_page
    return next_page - 1


def resolve_end_page(
    segment: AugmentedEntry | OutlineEntry,
    all_entries: Sequence[AugmentedEntry],
    total_pages: int,
    complete: bool = False,
) -> int:
    """
    Last page (1-based, inclusive) of `segment`.

    With `complete`, the range runs through the page where the next segment
    starts instead of stopping on the page before it. A segment with no
    following sibling inherits the boundary of its nearest ancestor that has
    one; failing that it runs to the end of the document.
    """
    start_page = segment.start_page
    by_index = {e.original_index: e for e in all_entries}
    current_index = getattr(segment, "original_index", None)
    if current_index is None:
        current_index = find_entry_index(segment, all_entries)
        if current_index is None:
            return total_pages
    if current_index in by_index:
        parent_chain = by_index[current_index].parent_chain
    else:
        parent_chain = getattr(segment, "parent_chain", ())

    next_entry = _next_at_or_above(all_entries, current_index, segment.level)
    if next_entry is not None and next_entry.page is not None:
        return _end_before(next_entry.page, start_page, complete)

    for ancestor_index in parent_chain:
        ancestor = by_index.get(ancestor_index)
        if ancestor is None:
            continue
        ancestor_next = _next_at_or_above(all_entries, ancestor.original_index, ancestor.level)
        if ancestor_next is not None and ancestor_next.page is not None:
            return _end_before(ancestor_next.page, start_page, complete)

    return total_pages


def resolve_page_range(
    segment: AugmentedEntry,
    all_entries: Sequence[AugmentedEntry],
    total_pages: int,
    complete: bool = False,
) -> tuple[int, int]:
    """(start_page, end_page) for a segment."""
    return segment.start_page, resolve_end_page(segment, all_entries, total_pages, complete)
