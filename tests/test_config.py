"""
Tests for startup configuration.
"""

import pytest

from slidenotes.config import DEFAULT_INSTRUCTION, KEY_VARIABLES, load_config
from slidenotes.errors import EmptyInstructionError, MissingCredentialsError

ENV_NAMES = [name for names in KEY_VARIABLES.values() for name in names] + [
    "SLIDENOTES_PROVIDER",
    "SLIDENOTES_MODEL",
    "SLIDENOTES_INSTRUCTION_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_missing_key_fails(monkeypatch):
    with pytest.raises(MissingCredentialsError):
        load_config(dotenv=False)


def test_gemini_defaults(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key-123456789")
    config = load_config(dotenv=False)
    assert config.provider == "gemini"
    assert config.api_key == "gem-key-123456789"
    assert config.model == "gemini-2.5-flash"
    assert config.instruction == DEFAULT_INSTRUCTION


def test_legacy_key_name(monkeypatch):
    monkeypatch.setenv("API_KEY", "legacy-key-12345")
    assert load_config(dotenv=False).api_key == "legacy-key-12345"


def test_anthropic_provider_and_model_override(monkeypatch):
    monkeypatch.setenv("SLIDENOTES_PROVIDER", "anthropic")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-123456789")
    monkeypatch.setenv("SLIDENOTES_MODEL", "claude-custom")
    config = load_config(dotenv=False)
    assert config.provider == "anthropic"
    assert config.model == "claude-custom"


def test_anthropic_without_its_key_fails(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key-123456789")
    with pytest.raises(MissingCredentialsError):
        load_config(provider="anthropic", dotenv=False)


def test_unknown_provider(monkeypatch):
    with pytest.raises(ValueError):
        load_config(provider="other", dotenv=False)


def test_instruction_file(monkeypatch, tmp_path):
    path = tmp_path / "instruction.txt"
    path.write_text("Summarize in one line per slide.\n", encoding="utf-8")
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key-123456789")
    monkeypatch.setenv("SLIDENOTES_INSTRUCTION_FILE", str(path))
    assert load_config(dotenv=False).instruction == "Summarize in one line per slide."


def test_empty_instruction_file(monkeypatch, tmp_path):
    path = tmp_path / "instruction.txt"
    path.write_text("  \n", encoding="utf-8")
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key-123456789")
    monkeypatch.setenv("SLIDENOTES_INSTRUCTION_FILE", str(path))
    with pytest.raises(EmptyInstructionError):
        load_config(dotenv=False)


def test_key_is_masked(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key-123456789")
    config = load_config(dotenv=False)
    assert "gem-key" not in repr(config)
    assert config.masked_key == "****6789"
