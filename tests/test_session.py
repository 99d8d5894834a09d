"""
Tests for the session: single-flight revisions and stale results.
"""

import asyncio

import pytest

from slidenotes.errors import (
    EmptyInputError,
    NoValidSlidesError,
    RevisionInProgressError,
)
from slidenotes.models import DiffKind
from slidenotes.session import NotesSession

from tests.fakes import FakeAPIError, FakeReviser


def test_convert_then_revise(fake_reviser):
    session = NotesSession(fake_reviser)
    document = session.convert("Point one.\n---\nPoint two.")

    outcome = asyncio.run(session.revise())

    assert outcome.ok
    assert outcome.document == document
    assert session.revised == "Revised notes"
    assert fake_reviser.calls == [(document, fake_reviser.instruction)]


def test_revise_requires_document(fake_reviser):
    with pytest.raises(EmptyInputError):
        asyncio.run(NotesSession(fake_reviser).revise())


def test_failed_convert_keeps_previous_document(fake_reviser):
    session = NotesSession(fake_reviser)
    document = session.convert("Kept")

    with pytest.raises(NoValidSlidesError):
        session.convert("---\n---")

    assert session.document == document


def test_credential_failure_keeps_document_and_previous_revision(config):
    reviser = FakeReviser(config, reply="First revision")
    session = NotesSession(reviser)
    document = session.convert("Notes")
    asyncio.run(session.revise())

    reviser.error = FakeAPIError(400, "API key not valid. Please pass a valid API key.")
    outcome = asyncio.run(session.revise())

    assert not outcome.ok
    assert outcome.error_kind == "InvalidCredentialsError"
    assert outcome.error == session.error
    assert session.document == document
    assert session.revised == "First revision"


def test_service_failure_is_reported_separately(config):
    session = NotesSession(FakeReviser(config, error=FakeAPIError(503, "UNAVAILABLE")))
    session.convert("Notes")

    outcome = asyncio.run(session.revise())

    assert outcome.error_kind == "ServiceUnavailableError"
    assert session.revised is None


def test_second_revision_while_outstanding_is_refused(config):
    async def scenario():
        gate = asyncio.Event()
        session = NotesSession(FakeReviser(config, gate=gate))
        session.convert("Notes")

        first = asyncio.create_task(session.revise())
        await asyncio.sleep(0)
        assert session.revising

        with pytest.raises(RevisionInProgressError):
            await session.revise()

        gate.set()
        outcome = await first
        assert outcome.ok
        assert not session.revising

    asyncio.run(scenario())


def test_result_for_replaced_document_is_dropped(config):
    async def scenario():
        gate = asyncio.Event()
        session = NotesSession(FakeReviser(config, gate=gate))
        session.convert("Old notes")

        pending = asyncio.create_task(session.revise())
        await asyncio.sleep(0)

        new_document = session.convert("New notes")
        gate.set()
        outcome = await pending

        assert outcome.stale
        assert not outcome.ok
        assert session.document == new_document
        assert session.revised is None

    asyncio.run(scenario())


def test_diff_of_document_and_revision(config):
    session = NotesSession(FakeReviser(config, reply="## Slide 1\n\nHello there"))
    assert session.diff() == []

    session.convert("Hello")
    asyncio.run(session.revise())

    segments = session.diff()
    assert segments[0].kind == DiffKind.UNCHANGED
    assert segments[-1].kind == DiffKind.INSERTED
    assert segments[-1].text == " there"


def test_reset(fake_reviser):
    session = NotesSession(fake_reviser)
    session.convert("Notes")
    session.reset()
    assert session.document is None
    assert session.revised is None
