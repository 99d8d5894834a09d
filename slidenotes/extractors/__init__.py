"""
Local readers for speaker notes.

- PPTX (python-pptx)
"""

from slidenotes.extractors.pptx_notes import read_pptx_notes, pptx_to_raw_notes

__all__ = ["read_pptx_notes", "pptx_to_raw_notes"]
