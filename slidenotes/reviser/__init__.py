"""
Revision of formatted notes by a remote text-generation service.

Supports two backends:
- Gemini (default)
- Claude (Anthropic)
"""

from typing import Any, Optional

from slidenotes.config import ReviserConfig
from slidenotes.reviser.base import BaseReviser, is_credential_error
from slidenotes.reviser.gemini import GeminiReviser
from slidenotes.reviser.claude import ClaudeReviser

REVISERS = {
    "gemini": GeminiReviser,
    "anthropic": ClaudeReviser,
}


def create_reviser(config: ReviserConfig, client: Optional[Any] = None) -> BaseReviser:
    """Build the reviser for `config.provider`. Pass `client` to reuse or fake the SDK client."""
    try:
        reviser_cls = REVISERS[config.provider]
    except KeyError:
        raise ValueError(f"Unknown provider: {config.provider}")
    return reviser_cls(config, client=client)


__all__ = [
    "BaseReviser",
    "GeminiReviser",
    "ClaudeReviser",
    "create_reviser",
    "is_credential_error",
]
