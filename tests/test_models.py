"""
Tests for SlideNotes data models.
"""

import pytest
from pydantic import ValidationError

from slidenotes.models import (
    DiffKind,
    DiffSegment,
    NoteBlock,
    RevisionOutcome,
    ScriptKind,
    ScriptParams,
)


def test_note_block_validation():
    """Test NoteBlock validation."""
    block = NoteBlock(index=1, text="Intro")
    assert block.index == 1
    assert block.text == "Intro"

    # Index is 1-based
    with pytest.raises(ValidationError):
        NoteBlock(index=0, text="Intro")

    # Empty text is never a block
    with pytest.raises(ValidationError):
        NoteBlock(index=1, text="")


def test_note_block_is_immutable():
    block = NoteBlock(index=1, text="Intro")
    with pytest.raises(ValidationError):
        block.text = "Changed"


def test_diff_segment_rejects_empty_text():
    with pytest.raises(ValidationError):
        DiffSegment(kind=DiffKind.INSERTED, text="")


def test_diff_segment_serialization():
    seg = DiffSegment(kind=DiffKind.REMOVED, text="old")
    assert seg.model_dump(mode="json") == {"kind": "removed", "text": "old"}


def test_script_kind_entry_points():
    assert ScriptKind.EXTRACT.entry_point == "getSpeakerNotes"
    assert ScriptKind.BULK_UPDATE.entry_point == "updateSpeakerNotes"
    assert ScriptKind.CLEAR.entry_point == "clearSpeakerNotes"
    assert {kind.value for kind in ScriptKind} == {"extract", "bulk_update", "clear"}


def test_script_params_defaults():
    params = ScriptParams(presentation_id="abc123")
    assert params.font_family is None
    assert params.font_size is None
    assert params.notes is None


def test_revision_outcome_ok():
    assert RevisionOutcome(request_id=1, document="d", revised="r").ok
    assert not RevisionOutcome(request_id=1, document="d", error="boom").ok
    assert not RevisionOutcome(request_id=1, document="d", revised="r", stale=True).ok
