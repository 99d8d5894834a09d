"""
Claude backend for the reviser.
"""

import anthropic
import httpx
from anthropic import AsyncAnthropic

from slidenotes.models import ModelReply
from slidenotes.reviser.base import BaseReviser


class ClaudeReviser(BaseReviser):
    """Revises notes with the Anthropic Messages API."""

    max_tokens = 4096
    provider_errors = (anthropic.APIError, httpx.HTTPError)

    def _create_client(self) -> AsyncAnthropic:
        return AsyncAnthropic(api_key=self.config.api_key)

    async def _generate(self, document: str, instruction: str) -> ModelReply:
        response = await self.client.messages.create(
            model=self.config.model,
            max_tokens=self.max_tokens,
            system=instruction,
            messages=[{"role": "user", "content": document}],
        )
        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        raw = response.model_dump(mode="json") if hasattr(response, "model_dump") else {}
        return ModelReply(text=text, raw=raw)
