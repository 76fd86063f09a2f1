"""Tests for split planning (segments, front matter, appendix, names)."""

import pytest

from chapter_splitter.models import SplitterSettings
from chapter_splitter.planner import build_plan
from tests.helpers import make_entries


def _ranges(plan):
    return [(s.filename, s.start_page, s.end_page) for s in plan.segments]


def test_depth_one_plan(book_entries):
    plan = build_plan(book_entries, 30, 1)

    assert plan.depth == 1
    assert _ranges(plan) == [
        ("01_Ch1.pdf", 1, 14),
        ("02_Ch2.pdf", 15, 24),
        ("03_Ch3.pdf", 25, 30),
    ]
    assert [s.page_count for s in plan.segments] == [14, 10, 6]
    assert all(s.parent_title is None for s in plan.segments)


def test_depth_two_plan_uses_nearest_parent_in_names(book_entries):
    plan = build_plan(book_entries, 30, 2)

    assert _ranges(plan) == [
        ("01_Ch1.pdf", 1, 14),
        ("02_Ch1_Sec1.1.pdf", 5, 9),
        ("03_Ch1_Sec1.2.pdf", 10, 14),
        ("04_Ch2.pdf", 15, 24),
        ("05_Ch3.pdf", 25, 30),
    ]
    assert [s.parent_title for s in plan.segments] == [None, "Ch1", "Ch1", None, None]


def test_depth_three_parent_is_the_section(book_entries):
    plan = build_plan(book_entries, 30, 3)
    sub = next(s for s in plan.segments if s.title == "Sub1.1.1")

    assert sub.parent_title == "Sec1.1"
    assert (sub.start_page, sub.end_page) == (7, 9)


def test_depth_beyond_outline_is_clamped(book_entries):
    clamped = build_plan(book_entries, 30, 10)
    direct = build_plan(book_entries, 30, 3)

    assert clamped.requested_depth == 10
    assert clamped.depth == 3
    assert clamped.segments == direct.segments
    assert any("exceeds" in note for note in clamped.notes)


def test_front_matter_before_first_segment():
    entries = make_entries([("Ch1", 0, 4), ("Ch2", 0, 8)])
    plan = build_plan(entries, 12, 1)

    front = plan.segments[0]
    assert front.kind == "front_matter"
    assert (front.filename, front.start_page, front.end_page) == ("00_Front Matter.pdf", 1, 3)
    assert [s.title for s in plan.chapters] == ["Ch1", "Ch2"]


def test_appendix_after_last_segment():
    # Outline order differs from page order: Ch2 (page 8) is followed by Ch3 (page 5)
    entries = make_entries([("Ch1", 0, 1), ("Ch2", 0, 8), ("Ch3", 0, 5)])
    plan = build_plan(entries, 10, 1)

    assert _ranges(plan) == [
        ("01_Ch1.pdf", 1, 7),
        ("02_Ch3.pdf", 5, 10),
        ("03_Ch2.pdf", 8, 8),
        ("99_Appendix.pdf", 9, 10),
    ]
    assert plan.segments[-1].kind == "appendix"


def test_custom_front_matter_and_appendix_names():
    settings = SplitterSettings(front_matter_name="Preface", appendix_name="Back")
    entries = make_entries([("Ch1", 0, 3)])
    plan = build_plan(entries, 5, 1, settings=settings)

    assert plan.segments[0].filename == "00_Preface.pdf"


def test_complete_mode_plan(book_entries):
    plan = build_plan(book_entries, 30, 1, complete=True)

    assert [(s.start_page, s.end_page) for s in plan.segments] == [(1, 15), (15, 25), (25, 30)]
    assert plan.complete is True


def test_filenames_are_sanitized():
    entries = make_entries([("Chapter 1: Introduction", 0, 1), ("Q/A?", 0, 3)])
    plan = build_plan(entries, 4, 1)

    assert [s.filename for s in plan.segments] == [
        "01_Chapter 1_ Introduction.pdf",
        "02_Q_A_.pdf",
    ]


def test_notes_for_same_page_parent_and_whole_branch():
    entries = make_entries([
        ("Part I", 0, 2),
        ("Chapter 1", 1, 2),
        ("Chapter 2", 1, 6),
        ("Part II", 0, 9),
    ])
    plan = build_plan(entries, 12, 2)

    assert any("Part I and Chapter 1 start on the same page (2)" in n for n in plan.notes)
    assert any(n.startswith("Part II has no sub-sections") for n in plan.notes)


def test_segments_past_the_last_page_are_skipped():
    entries = make_entries([("Ch1", 0, 1), ("Ch2", 0, 5), ("Ch3", 0, 40)])
    plan = build_plan(entries, 10, 1)

    assert _ranges(plan) == [("01_Ch1.pdf", 1, 4), ("02_Ch2.pdf", 5, 10)]


def test_empty_outline_gives_empty_plan():
    plan = build_plan([], 10, 2)
    assert plan.segments == []


def test_invalid_depth():
    with pytest.raises(ValueError):
        build_plan(make_entries([("Ch1", 0, 1)]), 10, 0)
