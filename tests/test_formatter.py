"""
Tests for note segmentation and Markdown formatting.
"""

import re

import pytest

from slidenotes.errors import EmptyInputError, NoValidSlidesError
from slidenotes.formatter import (
    format_notes,
    join_notes,
    render_blocks,
    segment_notes,
    split_notes,
)
from slidenotes.models import NoteBlock


def test_format_two_slides():
    assert format_notes("Point one.\n---\nPoint two.") == (
        "## Slide 1\n\nPoint one.\n\n---\n\n## Slide 2\n\nPoint two."
    )


def test_no_delimiter_is_one_slide():
    raw = "  Welcome everyone.\nToday we cover three topics.  \n"
    assert format_notes(raw) == "## Slide 1\n\nWelcome everyone.\nToday we cover three topics."


@pytest.mark.parametrize("raw", ["", "   ", "\n\n\t "])
def test_empty_input(raw):
    with pytest.raises(EmptyInputError):
        segment_notes(raw)


@pytest.mark.parametrize("raw", ["---", "---\n---\n---", "\n---\n---\n", " \n---\n  \n---"])
def test_only_delimiters(raw):
    with pytest.raises(NoValidSlidesError):
        segment_notes(raw)


def test_empty_segments_are_dropped_and_numbering_is_contiguous():
    raw = "A\n---\n\n---\n   \n---\nB\n---\nC"
    blocks = segment_notes(raw)
    assert [b.index for b in blocks] == [1, 2, 3]
    assert [b.text for b in blocks] == ["A", "B", "C"]


def test_heading_count_matches_segments():
    raw = "\n---\n".join(f"Note {i}" for i in range(1, 8))
    headings = re.findall(r"^## Slide (\d+)$", format_notes(raw), re.MULTILINE)
    assert headings == [str(i) for i in range(1, 8)]


def test_order_and_duplicates_preserved():
    assert split_notes("same\n---\nother\n---\nsame") == ["same", "other", "same"]


def test_hyphens_inside_a_line_are_not_delimiters():
    assert split_notes("a --- b\n----\nc") == ["a --- b\n----\nc"]


def test_crlf_and_trailing_spaces_on_delimiter():
    assert split_notes("One\r\n---  \r\nTwo") == ["One", "Two"]


def test_delimiter_at_start_and_end():
    assert split_notes("---\nOnly slide\n---") == ["Only slide"]


def test_render_blocks():
    blocks = [NoteBlock(index=1, text="x"), NoteBlock(index=2, text="y")]
    assert render_blocks(blocks) == "## Slide 1\n\nx\n\n---\n\n## Slide 2\n\ny"


def test_join_notes_reads_back():
    notes = ["First slide", "Second slide"]
    assert split_notes(join_notes(notes)) == notes
