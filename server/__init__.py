"""
FastAPI backend for the SlideNotes web UI.

Provides REST endpoints for:
- Formatting notes
- AI revision with single-flight requests
- Character diffs
- Apps Script generation
"""

__version__ = "0.1.0"
