"""
Outline tree helpers: turn the flat bookmark list into split segments.

Pipeline:
  1. build_relationships: assign original_index and the ancestor chain of every entry
  2. select_by_depth: pick entries at the target level, whole branches that never
     reach it, and the ancestors above the target level ("intermediate" segments)
  3. order_segments: sort by start page, ties by outline order

The outline is an arena: a flat pre-order list where entries refer to each other
by index. Nothing is mutated after build_relationships.
"""

import logging
from typing import Iterable, Sequence

from chapter_splitter.models import AugmentedEntry, OutlineEntry

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Relationship builder
# ---------------------------------------------------------------------------

def _ancestor_chain(entries: Sequence[OutlineEntry], idx: int) -> tuple[int, ...]:
    """
    Indices of the ancestors of entries[idx], nearest first.

    Walks backward keeping a strictly decreasing level, so each ancestor level
    contributes exactly one index. Stops after a level-0 ancestor.
    """
    level = entries[idx].level
    chain: list[int] = []
    for j in range(idx - 1, -1, -1):
        if level == 0:
            break
        if entries[j].level < level:
            chain.append(j)
            level = entries[j].level
    return tuple(chain)


def build_relationships(entries: Sequence[OutlineEntry]) -> list[AugmentedEntry]:
    """Return entries augmented with original_index and parent_chain."""
    augmented: list[AugmentedEntry] = []
    for idx, entry in enumerate(entries):
        augmented.append(
            AugmentedEntry(
                title=entry.title,
                page=entry.page,
                level=entry.level,
                original_index=idx,
                parent_chain=_ancestor_chain(entries, idx),
            )
        )
    return augmented


# ---------------------------------------------------------------------------
# Depth selector
# ---------------------------------------------------------------------------

def max_depth(entries: Iterable[OutlineEntry]) -> int:
    """Deepest outline depth, 1-based (max level + 1). 0 for an empty outline."""
    levels = [e.level for e in entries]
    return max(levels) + 1 if levels else 0


def clamp_depth(requested: int, entries: Sequence[OutlineEntry]) -> int:
    """Clamp a requested split depth to what the outline actually has."""
    deepest = max_depth(entries)
    if deepest and requested > deepest:
        log.info("Requested depth %d exceeds outline depth %d; using %d", requested, deepest, deepest)
        return deepest
    return requested


def entries_with_descendants(entries: Sequence[AugmentedEntry]) -> set[int]:
    """Indices that appear in at least one parent_chain."""
    has_children: set[int] = set()
    for entry in entries:
        has_children.update(entry.parent_chain)
    return has_children


def _check_depth(depth: int) -> int:
    if depth < 1:
        raise ValueError(f"Depth must be at least 1, got {depth}")
    return depth - 1


def select_primary(entries: Sequence[AugmentedEntry], depth: int) -> list[AugmentedEntry]:
    """
    Entries at level depth-1, plus shallower entries that have no descendants
    (branches that never reach the target level are output whole).
    """
    target = _check_depth(depth)
    has_children = entries_with_descendants(entries)
    selected = []
    for entry in entries:
        if entry.level == target:
            selected.append(entry)
        elif entry.level < target and entry.original_index not in has_children:
            selected.append(entry)
    return selected


def collect_intermediates(entries: Sequence[AugmentedEntry], depth: int) -> list[AugmentedEntry]:
    """Entries above the target level that have descendants. Empty at depth 1."""
    target = _check_depth(depth)
    if depth == 1:
        return []
    has_children = entries_with_descendants(entries)
    return [e for e in entries if e.level < target and e.original_index in has_children]


def select_by_depth(entries: Sequence[AugmentedEntry], depth: int) -> list[AugmentedEntry]:
    """
    Pick the entries that become output segments at the given depth.

    Result keeps outline order. Entries sharing (title, page) are merged; the
    first one in outline order is kept. The caller clamps depth to max_depth().
    """
    if not entries:
        return []
    picked = select_primary(entries, depth) + collect_intermediates(entries, depth)
    picked.sort(key=lambda e: e.original_index)

    seen: set[tuple[str, int | None]] = set()
    selected: list[AugmentedEntry] = []
    for entry in picked:
        key = (entry.title, entry.page)
        if key in seen:
            log.debug("Dropping duplicate segment %r (page %s)", entry.title, entry.page)
            continue
        seen.add(key)
        selected.append(entry)
    return selected


# ---------------------------------------------------------------------------
# Segment orderer
# ---------------------------------------------------------------------------

def order_segments(segments: Iterable[AugmentedEntry]) -> list[AugmentedEntry]:
    """Sort by start page (unresolved first), ties by outline order."""
    return sorted(segments, key=lambda e: (e.page or 0, e.original_index))
