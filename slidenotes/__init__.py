"""
SlideNotes: Turn Google Slides speaker notes into Markdown and polish them with AI.

Formats pasted notes per slide, revises them with Gemini or Claude,
diffs the revision against the original, and generates Apps Script
helpers to pull notes out of and push notes back into a presentation.
"""

__version__ = "0.1.0"
__author__ = "SlideNotes Team"

from slidenotes.models import NoteBlock, DiffSegment, DiffKind, ScriptKind, ScriptParams
from slidenotes.formatter import format_notes, segment_notes, split_notes
from slidenotes.diff import diff_text
from slidenotes.scripts import generate_script
from slidenotes.session import NotesSession

__all__ = [
    "NoteBlock",
    "DiffSegment",
    "DiffKind",
    "ScriptKind",
    "ScriptParams",
    "format_notes",
    "segment_notes",
    "split_notes",
    "diff_text",
    "generate_script",
    "NotesSession",
]
