"""
Base reviser interface and provider error translation.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Type

from slidenotes.config import ReviserConfig
from slidenotes.errors import (
    EmptyInputError,
    EmptyInstructionError,
    InvalidCredentialsError,
    ReviserError,
    ServiceUnavailableError,
)
from slidenotes.models import ModelReply

CREDENTIAL_MARKERS = (
    "api key not valid",
    "api_key_invalid",
    "invalid x-api-key",
    "invalid api key",
    "authentication_error",
)


def is_credential_error(exc: BaseException) -> bool:
    """True if a provider exception means the API key was rejected."""
    status = getattr(exc, "code", None) or getattr(exc, "status_code", None)
    if status in (401, 403):
        return True
    message = str(exc).lower()
    return any(marker in message for marker in CREDENTIAL_MARKERS)


def translate_error(exc: BaseException) -> ReviserError:
    if is_credential_error(exc):
        return InvalidCredentialsError()
    return ServiceUnavailableError()


class BaseReviser(ABC):
    """Abstract base class for text-generation backends."""

    # Exceptions the provider SDK raises for failed requests. Anything else
    # is a bug and propagates unchanged.
    provider_errors: Tuple[Type[BaseException], ...] = ()

    def __init__(self, config: ReviserConfig, client: Optional[Any] = None):
        self.config = config
        self.instruction = config.instruction
        self.client = client if client is not None else self._create_client()
        self.name = self.__class__.__name__.replace("Reviser", "").lower()

    @abstractmethod
    def _create_client(self) -> Any:
        """Build the provider SDK client from the config."""
        pass

    @abstractmethod
    async def _generate(self, document: str, instruction: str) -> ModelReply:
        """
        Make one call to the provider.

        Args:
            document: Formatted notes
            instruction: System instruction

        Returns:
            ModelReply with the generated text and the raw payload
        """
        pass

    async def revise(self, document: str) -> str:
        """
        Revise a formatted document.

        Exactly one request is made; failures are not retried.

        Raises:
            EmptyInputError: document is empty
            EmptyInstructionError: instruction is empty
            InvalidCredentialsError: the service rejected the API key
            ServiceUnavailableError: any other service failure
        """
        if not document or not document.strip():
            raise EmptyInputError("The notes are empty.")
        if not self.instruction or not self.instruction.strip():
            raise EmptyInstructionError()

        print(f"[LLM] Revising {len(document)} chars with {self.config.model}", file=sys.stderr)

        try:
            reply = await self._generate(document, self.instruction)
        except self.provider_errors as e:
            print(f"[LLM] Error revising notes with {self.name}: {e}", file=sys.stderr)
            raise translate_error(e) from e

        if not reply.text or not reply.text.strip():
            print(f"[LLM] Empty reply: {str(reply.raw)[:500]}", file=sys.stderr)
            raise ServiceUnavailableError("The AI returned an empty response.")

        print(f"[LLM] Received {len(reply.text)} chars", file=sys.stderr)
        return reply.text
