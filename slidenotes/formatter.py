"""
Split raw speaker notes into slides and render them as Markdown.

The delimiter is a line holding exactly three hyphens. The same splitting
rule is shared by the bulk-update script generator.
"""

import re
import sys
from typing import Iterable, List

from slidenotes.errors import EmptyInputError, NoValidSlidesError
from slidenotes.models import NoteBlock

DELIMITER = "---"
DELIMITER_PATTERN = re.compile(r"^---[ \t]*$", re.MULTILINE)

HEADING_TEMPLATE = "## Slide {index}\n\n{text}"
BLOCK_SEPARATOR = "\n\n---\n\n"


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_notes(raw: str) -> List[str]:
    """
    Split text on delimiter lines.

    Pieces are trimmed and empty ones dropped. Order is kept and duplicates
    are not removed.
    """
    pieces = DELIMITER_PATTERN.split(_normalize_newlines(raw))
    return [piece.strip() for piece in pieces if piece.strip()]


def segment_notes(raw: str) -> List[NoteBlock]:
    """
    Segment raw notes into numbered blocks.

    Raises:
        EmptyInputError: input is empty or whitespace only
        NoValidSlidesError: input holds nothing but delimiters
    """
    if not raw or not raw.strip():
        raise EmptyInputError()

    pieces = split_notes(raw)
    if not pieces:
        raise NoValidSlidesError()

    return [NoteBlock(index=i, text=text) for i, text in enumerate(pieces, 1)]


def render_blocks(blocks: Iterable[NoteBlock]) -> str:
    return BLOCK_SEPARATOR.join(
        HEADING_TEMPLATE.format(index=block.index, text=block.text)
        for block in blocks
    )


def format_notes(raw: str) -> str:
    """Convert raw notes into the formatted Markdown document."""
    blocks = segment_notes(raw)
    print(f"[Format] {len(blocks)} slide(s) formatted", file=sys.stderr)
    return render_blocks(blocks)


def join_notes(notes: Iterable[str]) -> str:
    """Join per-slide notes into raw text that `split_notes` can read back."""
    return f"\n{DELIMITER}\n".join(note.strip() for note in notes)
