"""
Read speaker notes from a local PPTX file.
"""

import sys
from pathlib import Path
from typing import List

from pptx import Presentation

from slidenotes.formatter import join_notes


def read_pptx_notes(pptx_path: Path) -> List[str]:
    """
    Return each slide's speaker notes in slide order.

    Slides without notes yield an empty string.
    """
    pptx_path = Path(pptx_path)
    if not pptx_path.exists():
        raise FileNotFoundError(f"PPTX not found: {pptx_path}")

    prs = Presentation(str(pptx_path))
    notes = []
    for slide in prs.slides:
        text = ""
        if slide.has_notes_slide:
            frame = slide.notes_slide.notes_text_frame
            if frame is not None:
                text = frame.text.strip()
        notes.append(text)

    with_notes = sum(1 for n in notes if n)
    print(f"[PPTX] {len(notes)} slides, {with_notes} with notes", file=sys.stderr)
    return notes


def pptx_to_raw_notes(pptx_path: Path) -> str:
    """Notes of a PPTX joined with delimiter lines, ready for formatting."""
    return join_notes(read_pptx_notes(pptx_path))
