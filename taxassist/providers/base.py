"""
base.py — Shared adapter behaviour for LLM providers.

Every adapter exposes the same surface:
  validate_credential(secret) -> bool            (never raises)
  complete(message, system_context) -> ProviderResult   (never raises)
  save_credential / get_credential / clear_credential   (credential store)

Subclasses only implement the SDK-specific parts: building a client, the
completion call, the validation request and error classification.

The SDK client is built lazily on first use after a credential is saved or
loaded, reused while the stored secret is unchanged, and dropped on clear.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from taxassist.credentials import CredentialStore
from taxassist.providers.schemas import (
    ProviderError,
    ProviderErrorKind,
    ProviderId,
    ProviderResult,
)

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    provider_id: ProviderId
    display_name: str

    def __init__(self, store: CredentialStore):
        self.store = store
        self._client: Any = None
        self._client_secret: Optional[str] = None

    # ------------------------------------------------------------------
    # Credential management
    # ------------------------------------------------------------------

    async def save_credential(self, secret: str) -> None:
        await self.store.set(self.provider_id.value, secret)
        # Rebuilt for the new secret on next use
        self._client = None
        self._client_secret = None
        logger.info("%s API key saved", self.display_name)

    async def get_credential(self) -> Optional[str]:
        return await self.store.get(self.provider_id.value)

    async def clear_credential(self) -> None:
        await self.store.delete(self.provider_id.value)
        self._client = None
        self._client_secret = None

    def _client_for(self, secret: str) -> Any:
        if self._client is None or self._client_secret != secret:
            self._client = self._build_client(secret)
            self._client_secret = secret
        return self._client

    # ------------------------------------------------------------------
    # Provider operations
    # ------------------------------------------------------------------

    async def validate_credential(self, secret: str) -> bool:
        """
        Issue a minimal completion with a throwaway client.
        True iff the provider returned a non-empty response; any exception → False.
        """
        logger.info("Testing %s API key", self.display_name)
        try:
            return await self._validation_request(self._build_client(secret))
        except Exception as exc:
            logger.warning(
                "%s API key test failed: %s", self.display_name, type(exc).__name__,
            )
            return False

    async def complete(self, message: str, system_context: str) -> ProviderResult:
        """
        One chat completion using the stored credential.
        Failures are normalised into ProviderResult.error — nothing is raised.
        """
        try:
            secret = await self.get_credential()
        except Exception as exc:
            logger.warning(
                "%s credential lookup failed: %s", self.display_name, type(exc).__name__,
            )
            return ProviderResult.failure(
                ProviderErrorKind.unavailable,
                f"{self.display_name} API key could not be read",
            )
        if not secret:
            return ProviderResult.failure(
                ProviderErrorKind.unavailable,
                f"{self.display_name} API key not found",
            )

        logger.info("Making request to %s API", self.display_name)
        try:
            client = self._client_for(secret)
            text = await self._complete(client, message, system_context)
        except Exception as exc:
            error = self._classify_error(exc)
            logger.warning(
                "%s request failed kind=%s", self.display_name, error.kind.value,
            )
            return ProviderResult(error=error)

        if not text:
            return ProviderResult.failure(
                ProviderErrorKind.unknown, f"No response from {self.display_name}",
            )
        logger.info("%s response received answer_len=%d", self.display_name, len(text))
        return ProviderResult.success(text)

    # ------------------------------------------------------------------
    # SDK-specific hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _build_client(self, secret: str) -> Any:
        """Construct the SDK client for this secret."""

    @abstractmethod
    async def _complete(self, client: Any, message: str, system_context: str) -> Optional[str]:
        """Return the completion text (None / empty when the provider sent nothing)."""

    @abstractmethod
    async def _validation_request(self, client: Any) -> bool:
        """Cheapest request that proves the secret works."""

    @abstractmethod
    def _classify_error(self, exc: Exception) -> ProviderError:
        """Map an SDK exception onto the ProviderErrorKind taxonomy."""
