"""
Core data models for SlideNotes.

All models are immutable values created per operation.
"""

from enum import Enum
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class NoteBlock(BaseModel):
    """One slide's worth of notes, in original order."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1, description="1-based slide position")
    text: str = Field(..., min_length=1, description="Trimmed note content")


class DiffKind(str, Enum):
    """Classification of a diff run."""
    UNCHANGED = "unchanged"
    INSERTED = "inserted"
    REMOVED = "removed"


class DiffSegment(BaseModel):
    """A run of text with a single classification."""

    model_config = ConfigDict(frozen=True)

    kind: DiffKind
    text: str = Field(..., min_length=1)


class ScriptKind(str, Enum):
    """The closed set of Apps Script skeletons."""
    EXTRACT = "extract"
    BULK_UPDATE = "bulk_update"
    CLEAR = "clear"

    @property
    def entry_point(self) -> str:
        """Function the user must select in the Apps Script editor."""
        return ENTRY_POINTS[self]


ENTRY_POINTS: Dict[ScriptKind, str] = {
    ScriptKind.EXTRACT: "getSpeakerNotes",
    ScriptKind.BULK_UPDATE: "updateSpeakerNotes",
    ScriptKind.CLEAR: "clearSpeakerNotes",
}


class ScriptParams(BaseModel):
    """Values substituted into a script skeleton."""

    model_config = ConfigDict(frozen=True)

    presentation_id: str
    font_family: Optional[str] = None
    font_size: Optional[int] = None  # Points
    notes: Optional[str] = None


class GeneratedScript(BaseModel):
    """Script text paired with its entry point."""

    kind: ScriptKind
    entry_point: str
    code: str


class ModelReply(BaseModel):
    """
    Narrow view of a provider response.

    Only the extracted text flows into the rest of the system; the raw
    payload is kept for diagnostics.
    """

    text: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict)


class RevisionOutcome(BaseModel):
    """Result of one revision request as seen by the session."""

    request_id: int
    document: str
    revised: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None  # Exception class name
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.revised is not None and not self.stale
