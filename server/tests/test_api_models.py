import pytest
from pydantic import ValidationError

from server.models import DiffRequest, FormatRequest, ScriptRequest, SessionState


def test_format_request_model():
    request = FormatRequest()
    assert request.notes == ""


def test_script_request_model():
    request = ScriptRequest(presentation="abc", font_size=14)
    assert request.presentation == "abc"
    assert request.font_family is None
    assert request.notes is None

    with pytest.raises(ValidationError):
        ScriptRequest()


def test_diff_request_defaults():
    request = DiffRequest()
    assert request.original is None
    assert request.revised is None


def test_session_state_model():
    state = SessionState()
    assert state.markdown is None
    assert state.revising is False
