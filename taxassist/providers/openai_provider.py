"""
openai_provider.py — OpenAI chat-completions adapter.

Uses the official async SDK (AsyncOpenAI). Error mapping:
  AuthenticationError / code=invalid_api_key   → invalid_credential
  code=insufficient_quota                      → quota_exceeded
  anything else                                → unknown(message)
"""
from __future__ import annotations

from typing import Optional

from openai import AsyncOpenAI, AuthenticationError

from taxassist.config import settings
from taxassist.providers.base import BaseProvider
from taxassist.providers.schemas import ProviderError, ProviderErrorKind, ProviderId

VALIDATION_MAX_TOKENS = 5


class OpenAIProvider(BaseProvider):
    provider_id = ProviderId.openai
    display_name = "OpenAI"

    def _build_client(self, secret: str) -> AsyncOpenAI:
        return AsyncOpenAI(api_key=secret)

    async def _complete(
        self, client: AsyncOpenAI, message: str, system_context: str,
    ) -> Optional[str]:
        completion = await client.chat.completions.create(
            model=settings.openai_model,
            messages=[
                {"role": "system", "content": system_context},
                {"role": "user", "content": message},
            ],
            max_tokens=settings.openai_max_tokens,
            temperature=settings.openai_temperature,
        )
        if not completion.choices:
            return None
        return completion.choices[0].message.content

    async def _validation_request(self, client: AsyncOpenAI) -> bool:
        response = await client.chat.completions.create(
            model=settings.openai_model,
            messages=[{"role": "user", "content": "Hi"}],
            max_tokens=VALIDATION_MAX_TOKENS,
        )
        return len(response.choices) > 0

    def _classify_error(self, exc: Exception) -> ProviderError:
        code = getattr(exc, "code", None)
        if isinstance(exc, AuthenticationError) or code == "invalid_api_key":
            return ProviderError(
                kind=ProviderErrorKind.invalid_credential,
                message="Invalid API key. Please check your OpenAI API key.",
            )
        if code == "insufficient_quota":
            return ProviderError(
                kind=ProviderErrorKind.quota_exceeded,
                message="OpenAI quota exceeded. Please check your billing.",
            )
        return ProviderError(
            kind=ProviderErrorKind.unknown,
            message=str(exc) or "Failed to get response from OpenAI",
        )
