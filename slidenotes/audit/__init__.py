"""
HTML diff report for reviewing AI revisions.

Highlights inserted and removed characters between the formatted notes
and the revised notes.
"""

from slidenotes.audit.html_generator import DiffHTMLGenerator

__all__ = ["DiffHTMLGenerator"]
