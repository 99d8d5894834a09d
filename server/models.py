"""
Pydantic models for API requests/responses.
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from slidenotes.models import DiffSegment, ScriptKind


class FormatRequest(BaseModel):
    """Raw notes pasted by the user."""
    notes: str = Field(default="", description="Notes with slides separated by '---' lines")


class FormatResponse(BaseModel):
    markdown: str
    slide_count: int


class ReviseResponse(BaseModel):
    """Result of a revision request."""
    request_id: int
    revised: str


class SessionState(BaseModel):
    """What the UI currently shows."""
    markdown: Optional[str] = None
    revised: Optional[str] = None
    error: Optional[str] = None
    revising: bool = False


class DiffRequest(BaseModel):
    """Texts to compare. When both are omitted the session's notes are used."""
    original: Optional[str] = None
    revised: Optional[str] = None


class DiffResponse(BaseModel):
    segments: List[DiffSegment]
    stats: Dict[str, int]


class ScriptRequest(BaseModel):
    """Values for an Apps Script skeleton."""
    presentation: str = Field(..., description="Google Slides URL or presentation ID")
    font_family: Optional[str] = Field(default=None, description="Font family for updated notes")
    font_size: Optional[int] = Field(default=None, description="Font size in points")
    notes: Optional[str] = Field(default=None, description="Notes to write (bulk update only)")

    model_config = {
        "json_schema_extra": {
            "example": {
                "presentation": "https://docs.google.com/presentation/d/1AbC_dEf-123/edit",
                "font_family": "Roboto",
                "font_size": 14,
                "notes": "First slide notes\n---\nSecond slide notes",
            }
        }
    }


class ScriptResponse(BaseModel):
    kind: ScriptKind
    entry_point: str
    code: str
