"""
Split planner: outline entries + page count + depth -> ordered list of output files.

Runs the outline pipeline (relationships, depth selection, ordering, page ranges)
and adds the pages outside every segment as front matter and an appendix.
"""

import logging
from typing import Sequence

from chapter_splitter.models import (
    AugmentedEntry,
    OutlineEntry,
    PlannedSegment,
    SplitPlan,
    SplitterSettings,
)
from chapter_splitter.naming import (
    APPENDIX_NUMBER,
    FRONT_MATTER_NUMBER,
    segment_filename,
)
from chapter_splitter.outline import (
    build_relationships,
    clamp_depth,
    entries_with_descendants,
    order_segments,
    select_by_depth,
)
from chapter_splitter.page_ranges import resolve_end_page

log = logging.getLogger(__name__)


def parent_title_for(segment: AugmentedEntry, all_entries: Sequence[AugmentedEntry], depth: int) -> str | None:
    """Title of the nearest ancestor when splitting below the top level, else None."""
    if depth <= 1 or not segment.parent_chain:
        return None
    return all_entries[segment.parent_chain[0]].title


def _segment_notes(
    segment: AugmentedEntry,
    all_entries: Sequence[AugmentedEntry],
    depth: int,
    has_children: set[int],
) -> list[str]:
    notes: list[str] = []
    if segment.parent_chain:
        parent = all_entries[segment.parent_chain[0]]
        if parent.page is not None and parent.page == segment.page:
            notes.append(f"{parent.title} and {segment.title} start on the same page ({segment.page})")
    if segment.level < depth - 1 and segment.original_index not in has_children:
        notes.append(f"{segment.title} has no sub-sections at depth {depth}; the whole branch is output")
    return notes


def build_plan(
    entries: Sequence[OutlineEntry],
    total_pages: int,
    depth: int,
    complete: bool = False,
    settings: SplitterSettings | None = None,
    source_title: str | None = None,
) -> SplitPlan:
    """
    Plan the output files for a document.

    Args:
        entries: Flat pre-order outline from the reader.
        total_pages: Page count of the source PDF.
        depth: Requested split depth (1 = top-level entries). Clamped to the
            outline's depth.
        complete: End each segment on the page where the next one starts.
        settings: Names for front matter / appendix (defaults if None).
        source_title: Shown in dry-run output.

    Returns:
        SplitPlan with segments in output order.
    """
    if depth < 1:
        raise ValueError(f"Depth must be at least 1, got {depth}")
    settings = settings or SplitterSettings()
    plan = SplitPlan(
        source_title=source_title,
        total_pages=total_pages,
        requested_depth=depth,
        depth=depth,
        complete=complete,
    )
    if not entries:
        return plan

    actual_depth = clamp_depth(depth, entries)
    plan.depth = actual_depth
    if actual_depth != depth:
        plan.notes.append(
            f"Requested depth {depth} exceeds the outline's maximum depth {actual_depth}; splitting at depth {actual_depth}"
        )

    augmented = build_relationships(entries)
    has_children = entries_with_descendants(augmented)
    selected = order_segments(select_by_depth(augmented, actual_depth))
    log.info("Found %d segments at depth %d", len(selected), actual_depth)

    planned: list[PlannedSegment] = []
    for segment in selected:
        if segment.start_page > total_pages:
            log.warning("Skipping %r: starts on page %d of %d", segment.title, segment.start_page, total_pages)
            continue
        number = len(planned) + 1
        end_page = min(resolve_end_page(segment, augmented, total_pages, complete), total_pages)
        parent_title = parent_title_for(segment, augmented, actual_depth)
        planned.append(
            PlannedSegment(
                number=number,
                title=segment.title,
                level=segment.level,
                start_page=segment.start_page,
                end_page=end_page,
                parent_title=parent_title,
                filename=segment_filename(number, segment.title, parent_title),
                original_index=segment.original_index,
            )
        )
        plan.notes.extend(_segment_notes(segment, augmented, actual_depth, has_children))
        log.debug("  %s (pages %d-%d)", segment.title, segment.start_page, end_page)

    if not planned:
        return plan

    first_page = planned[0].start_page
    if first_page > 1:
        plan.segments.append(
            PlannedSegment(
                number=FRONT_MATTER_NUMBER,
                title=settings.front_matter_name,
                start_page=1,
                end_page=first_page - 1,
                filename=segment_filename(FRONT_MATTER_NUMBER, settings.front_matter_name),
                kind="front_matter",
            )
        )
    plan.segments.extend(planned)

    # max() keeps the first segment among equal start pages
    last = max(planned, key=lambda s: s.start_page)
    if last.end_page < total_pages:
        plan.segments.append(
            PlannedSegment(
                number=APPENDIX_NUMBER,
                title=settings.appendix_name,
                start_page=last.end_page + 1,
                end_page=total_pages,
                filename=segment_filename(APPENDIX_NUMBER, settings.appendix_name),
                kind="appendix",
            )
        )
    return plan
