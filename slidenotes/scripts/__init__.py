"""
Copy-paste Apps Script generators for Google Slides.

Three fixed skeletons:
- extract: collect all speaker notes
- bulk_update: write notes back, one segment per slide
- clear: remove all speaker notes
"""

from slidenotes.scripts.generator import (
    FONT_FAMILIES,
    extract_presentation_id,
    generate_script,
)

__all__ = ["FONT_FAMILIES", "extract_presentation_id", "generate_script"]
