"""
Interactive session state: the current notes, their revision, and the
rules for applying revision results.

Only one revision may be outstanding at a time, and a result is applied
only if it belongs to the latest request for the document still on
display. Anything else is dropped as stale.
"""

import sys
from typing import List, Optional

from slidenotes.diff import diff_text
from slidenotes.errors import (
    EmptyInputError,
    RevisionInProgressError,
    SlideNotesError,
)
from slidenotes.formatter import format_notes
from slidenotes.models import DiffSegment, RevisionOutcome
from slidenotes.reviser import BaseReviser


class NotesSession:
    """
    Holds the text a single user is working on.

    Usage:
        session = NotesSession(reviser)
        session.convert(raw_notes)
        outcome = await session.revise()
        segments = session.diff()
    """

    def __init__(self, reviser: Optional[BaseReviser] = None):
        self.reviser = reviser
        self.document: Optional[str] = None
        self.revised: Optional[str] = None
        self.error: Optional[str] = None
        self._latest_request = 0
        self._in_flight: Optional[int] = None

    @property
    def revising(self) -> bool:
        return self._in_flight is not None

    def convert(self, raw_notes: str) -> str:
        """
        Format raw notes and make them the current document.

        On failure the previous document stays in place.
        """
        document = format_notes(raw_notes)
        self.document = document
        self.revised = None
        self.error = None
        return document

    async def revise(self) -> RevisionOutcome:
        """
        Revise the current document.

        Raises:
            EmptyInputError: nothing has been converted yet
            RevisionInProgressError: another revision is outstanding
        """
        if self.reviser is None:
            raise RuntimeError("No reviser configured for this session")
        if not self.document:
            raise EmptyInputError("Convert the notes to Markdown first.")
        if self._in_flight is not None:
            raise RevisionInProgressError()

        self._latest_request += 1
        request_id = self._latest_request
        document = self.document
        self._in_flight = request_id
        print(f"[Session] Revision #{request_id} started", file=sys.stderr)

        revised = None
        error = None
        error_kind = None
        try:
            revised = await self.reviser.revise(document)
        except SlideNotesError as e:
            error = e.message
            error_kind = type(e).__name__
        finally:
            if self._in_flight == request_id:
                self._in_flight = None

        stale = request_id != self._latest_request or document != self.document
        outcome = RevisionOutcome(
            request_id=request_id,
            document=document,
            revised=revised,
            error=error,
            error_kind=error_kind,
            stale=stale,
        )

        if stale:
            print(f"[Session] Revision #{request_id} is stale, dropped", file=sys.stderr)
            return outcome

        if error is not None:
            # Earlier outputs stay visible
            self.error = error
            print(f"[Session] Revision #{request_id} failed: {error}", file=sys.stderr)
        else:
            self.revised = revised
            self.error = None
            print(f"[Session] Revision #{request_id} applied", file=sys.stderr)

        return outcome

    def diff(self) -> List[DiffSegment]:
        """Diff of the current document against its revision."""
        if self.document is None or self.revised is None:
            return []
        return diff_text(self.document, self.revised)

    def reset(self) -> None:
        self.document = None
        self.revised = None
        self.error = None
