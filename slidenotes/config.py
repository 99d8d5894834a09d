"""
Startup configuration for the reviser.

Built once from the environment (a `.env` file is honoured) and passed
explicitly to whatever needs it.
"""

import os
import sys
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from slidenotes.errors import EmptyInstructionError, MissingCredentialsError

Provider = Literal["gemini", "anthropic"]

DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "anthropic": "claude-3-5-sonnet-20241022",
}

# Checked in order; API_KEY is the name older deployments used.
KEY_VARIABLES = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
    "anthropic": ("ANTHROPIC_API_KEY",),
}

DEFAULT_INSTRUCTION = """You are an excellent presentation assistant.
Analyze the following speaker notes, which are separated per slide in Markdown format.
Your task is to summarize the key points and reformat them into a more polished, concise version.
For each slide, provide a short summary and bullet points that highlight the main ideas.
Maintain a professional and clear tone."""


class ReviserConfig(BaseModel):
    """Credentials and model choice for the text-generation service."""

    model_config = ConfigDict(frozen=True)

    provider: Provider = "gemini"
    api_key: str = Field(..., min_length=1, repr=False)
    model: str = DEFAULT_MODELS["gemini"]
    instruction: str = DEFAULT_INSTRUCTION

    @property
    def masked_key(self) -> str:
        return "****" + self.api_key[-4:] if len(self.api_key) > 8 else "****"


def load_instruction(path: Optional[Path]) -> str:
    """Read the revision instruction from a text file, or use the default."""
    if path is None:
        return DEFAULT_INSTRUCTION

    instruction = Path(path).read_text(encoding="utf-8").strip()
    if not instruction:
        raise EmptyInstructionError(f"Instruction file is empty: {path}")
    return instruction


def load_config(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    dotenv: bool = True,
) -> ReviserConfig:
    """
    Build the reviser configuration from the environment.

    Args:
        provider: "gemini" or "anthropic" (default: $SLIDENOTES_PROVIDER or gemini)
        model: Model override (default: $SLIDENOTES_MODEL or the provider default)
        dotenv: Load a .env file first

    Raises:
        MissingCredentialsError: no API key for the selected provider
    """
    if dotenv:
        load_dotenv()

    provider = (provider or os.getenv("SLIDENOTES_PROVIDER") or "gemini").lower()
    if provider not in KEY_VARIABLES:
        raise ValueError(f"Unknown provider: {provider}")

    api_key = None
    for name in KEY_VARIABLES[provider]:
        api_key = os.getenv(name)
        if api_key:
            break

    if not api_key:
        raise MissingCredentialsError(
            f"{provider} API key required. Set {KEY_VARIABLES[provider][0]} "
            f"in the environment or a .env file."
        )

    instruction_file = os.getenv("SLIDENOTES_INSTRUCTION_FILE")
    instruction = load_instruction(Path(instruction_file) if instruction_file else None)

    config = ReviserConfig(
        provider=provider,
        api_key=api_key,
        model=model or os.getenv("SLIDENOTES_MODEL") or DEFAULT_MODELS[provider],
        instruction=instruction,
    )
    print(f"[Config] Provider: {config.provider}, model: {config.model}", file=sys.stderr)
    return config
