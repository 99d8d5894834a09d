"""
Gemini backend for the reviser.
"""

import httpx
from google import genai
from google.genai import errors, types

from slidenotes.models import ModelReply
from slidenotes.reviser.base import BaseReviser


class GeminiReviser(BaseReviser):
    """Revises notes with the Gemini API (google-genai async client)."""

    provider_errors = (errors.APIError, httpx.HTTPError)

    def _create_client(self) -> genai.Client:
        return genai.Client(api_key=self.config.api_key)

    async def _generate(self, document: str, instruction: str) -> ModelReply:
        response = await self.client.aio.models.generate_content(
            model=self.config.model,
            contents=document,
            config=types.GenerateContentConfig(
                system_instruction=instruction,
            ),
        )
        raw = response.model_dump(mode="json", exclude_none=True) if hasattr(response, "model_dump") else {}
        return ModelReply(text=response.text or "", raw=raw)
