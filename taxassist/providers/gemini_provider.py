"""
gemini_provider.py — Google Gemini adapter (google-generativeai SDK).

The SDK keeps its API key in process-global configuration, so the key is
(re)applied with genai.configure() immediately before a model first talks to
the API. A GenerativeModel binds its transport client on its first request and
keeps it afterwards, so a later configure() for a throwaway validation key does
not leak into the cached model.

Error mapping (Google API error messages carry the reason code):
  API_KEY_INVALID / Unauthenticated / PermissionDenied → invalid_credential
  QUOTA_EXCEEDED / ResourceExhausted                  → quota_exceeded
  anything else                                       → unknown(message)
"""
from __future__ import annotations

from typing import Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from taxassist.config import settings
from taxassist.providers.base import BaseProvider
from taxassist.providers.schemas import ProviderError, ProviderErrorKind, ProviderId


class GeminiProvider(BaseProvider):
    provider_id = ProviderId.gemini
    display_name = "Gemini"

    def _build_client(self, secret: str) -> genai.GenerativeModel:
        genai.configure(api_key=secret)
        return genai.GenerativeModel(settings.gemini_model)

    async def _complete(
        self, client: genai.GenerativeModel, message: str, system_context: str,
    ) -> Optional[str]:
        genai.configure(api_key=self._client_secret)
        response = await client.generate_content_async(f"{system_context}\n\nUser: {message}")
        return response.text

    async def _validation_request(self, client: genai.GenerativeModel) -> bool:
        response = await client.generate_content_async("Hi")
        return len(response.text) > 0

    def _classify_error(self, exc: Exception) -> ProviderError:
        message = str(exc)
        if "API_KEY_INVALID" in message or isinstance(
            exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied),
        ):
            return ProviderError(
                kind=ProviderErrorKind.invalid_credential,
                message="Invalid API key. Please check your Gemini API key.",
            )
        if "QUOTA_EXCEEDED" in message or isinstance(exc, google_exceptions.ResourceExhausted):
            return ProviderError(
                kind=ProviderErrorKind.quota_exceeded,
                message="Gemini quota exceeded. Please check your billing.",
            )
        return ProviderError(
            kind=ProviderErrorKind.unknown,
            message=message or "Failed to get response from Gemini",
        )
